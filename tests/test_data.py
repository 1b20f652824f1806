import pytest

from char_rnn import CorpusError, load_corpus


def _write(tmp_path, content, name="statements.csv"):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_rows_are_joined_with_single_spaces_and_lowercased(tmp_path):
    path = _write(tmp_path, "id,text\n1,Hello World\n2,Second LINE\n")
    assert load_corpus(path) == "hello world second line"


def test_custom_column_and_delimiter(tmp_path):
    path = _write(tmp_path, "statement;author\nAb;x\nCd;y\n")
    assert load_corpus(path, column="statement", delimiter=";") == "ab cd"


def test_bundled_sample_loads():
    text = load_corpus()
    assert text
    assert text == text.lower()


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_corpus(tmp_path / "nope.csv")


def test_missing_column_raises(tmp_path):
    path = _write(tmp_path, "id,body\n1,hello\n")
    with pytest.raises(CorpusError):
        load_corpus(path)


def test_empty_corpus_raises(tmp_path):
    path = _write(tmp_path, "id,text\n")
    with pytest.raises(CorpusError):
        load_corpus(path)


def test_blank_text_cells_raise(tmp_path):
    path = _write(tmp_path, "id,text\n1,\n2,\n3,\n")
    with pytest.raises(CorpusError):
        load_corpus(path)
