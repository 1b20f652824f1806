"""Character-level recurrent text generator.

This package trains a small recurrent network on a corpus of short
statements and samples text from it at several temperatures.
"""

from .config import LayerSpec, ModelConfig, RunConfig
from .data import load_corpus
from .errors import CharRNNError, CorpusError, DegenerateDistributionError, VocabularyError
from .model import CharRNN, build_model
from .pipeline import GenerationReport, RunContext, build_context, run
from .sampling import GenerationBuffer, generate_text, sample_next, temperature_distribution
from .trainer import ModelAdapter
from .vocabulary import Vocabulary
from .windows import EncodedBatch, WindowDataset, encode_window, encode_windows, make_windows, window_offsets

__all__ = [
    "LayerSpec",
    "ModelConfig",
    "RunConfig",
    "load_corpus",
    "CharRNNError",
    "CorpusError",
    "DegenerateDistributionError",
    "VocabularyError",
    "CharRNN",
    "build_model",
    "GenerationReport",
    "RunContext",
    "build_context",
    "run",
    "GenerationBuffer",
    "generate_text",
    "sample_next",
    "temperature_distribution",
    "ModelAdapter",
    "Vocabulary",
    "EncodedBatch",
    "WindowDataset",
    "encode_window",
    "encode_windows",
    "make_windows",
    "window_offsets",
]
