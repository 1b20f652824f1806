import pytest
import torch

from char_rnn import Vocabulary, WindowDataset, encode_windows, make_windows, window_offsets


def test_window_count_matches_formula():
    for N in range(0, 25):
        for W in range(1, 8):
            for S in range(1, 5):
                expected = (N - W - 1) // S + 1 if N > W else 0
                assert len(window_offsets(N, W, S)) == expected


def test_exact_enumeration():
    windows = make_windows("ab ab ab", 2, 1)
    assert windows == [
        ("ab", " "),
        ("b ", "a"),
        (" a", "b"),
        ("ab", " "),
        ("b ", "a"),
        (" a", "b"),
    ]


def test_stride_skips_offsets_and_drops_partial_window():
    windows = make_windows("abcdefghij", 4, 3)
    assert windows == [("abcd", "e"), ("defg", "h")]


def test_short_text_has_no_windows():
    assert make_windows("abc", 3, 1) == []
    assert make_windows("ab", 3, 1) == []


def test_encoded_rows_are_one_hot():
    text = "ab ab ab"
    vocab = Vocabulary.build_from_text(text)
    batch = encode_windows(make_windows(text, 2, 1), vocab)
    assert batch.inputs.shape == (6, 2, vocab.size)
    assert batch.targets.shape == (6, vocab.size)
    assert torch.equal(batch.inputs.sum(dim=-1), torch.ones(6, 2))
    assert torch.equal(batch.targets.sum(dim=-1), torch.ones(6))
    assert vocab.decode(batch.inputs[1].argmax(dim=-1).tolist()) == "b "
    assert vocab.id_to_char(int(batch.targets[1].argmax())) == "a"


def test_encoding_is_deterministic():
    text = "hello there, hello again"
    vocab = Vocabulary.build_from_text(text)
    a = encode_windows(make_windows(text, 5, 3), vocab)
    b = encode_windows(make_windows(text, 5, 3), vocab)
    assert torch.equal(a.inputs, b.inputs)
    assert torch.equal(a.targets, b.targets)


def test_no_windows_to_encode_raises():
    with pytest.raises(ValueError):
        encode_windows([], Vocabulary.build_from_text("abc"))


def test_dataset_yields_input_target_pairs():
    text = "abcabcabc"
    vocab = Vocabulary.build_from_text(text)
    batch = encode_windows(make_windows(text, 3, 2), vocab)
    dataset = WindowDataset(batch)
    assert len(dataset) == len(batch) == 3
    x, y = dataset[2]
    assert x.shape == (3, vocab.size)
    assert y.shape == (vocab.size,)
