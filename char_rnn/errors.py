"""Exceptions raised while building the dataset or sampling text."""


class CharRNNError(Exception):
    """Base class for all failures of a training run."""


class CorpusError(CharRNNError, ValueError):
    """The corpus file is unusable: missing column, empty, or too short."""


class VocabularyError(CharRNNError, KeyError):
    """A character or index lies outside the fitted vocabulary."""

    def __str__(self) -> str:
        # KeyError quotes its argument otherwise.
        return str(self.args[0]) if self.args else ""


class DegenerateDistributionError(CharRNNError, ValueError):
    """A probability vector cannot be sampled from."""
