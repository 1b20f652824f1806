import pytest
import torch

from char_rnn import Vocabulary, VocabularyError


def test_characters_are_sorted_and_indexed_densely():
    vocab = Vocabulary.build_from_text("cab ba")
    assert vocab.characters == (" ", "a", "b", "c")
    assert [vocab.char_to_id(ch) for ch in vocab.characters] == [0, 1, 2, 3]


def test_encode_decode_is_a_bijection():
    text = "the quick brown fox, jumps! over 2 dogs."
    vocab = Vocabulary.build_from_text(text)
    for ch in set(text):
        assert vocab.id_to_char(vocab.char_to_id(ch)) == ch
    assert vocab.decode(vocab.encode(text)) == text


def test_unknown_character_raises():
    vocab = Vocabulary.build_from_text("abc")
    with pytest.raises(VocabularyError):
        vocab.char_to_id("z")
    with pytest.raises(VocabularyError):
        vocab.id_to_char(3)


def test_one_hot_rows_sum_to_one():
    vocab = Vocabulary.build_from_text("hello world")
    encoded = vocab.one_hot("low")
    assert encoded.shape == (3, vocab.size)
    assert torch.equal(encoded.sum(dim=1), torch.ones(3))
    assert encoded.argmax(dim=1).tolist() == vocab.encode("low")
