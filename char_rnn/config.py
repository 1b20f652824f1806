"""Model and run configuration for the character-level generator."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

RECURRENT_KINDS = ("lstm", "gru", "rnn")


@dataclass(frozen=True)
class LayerSpec:
    """Description of a single layer in the model stack.

    Attributes:
        kind: One of ``lstm``, ``gru``, ``rnn`` or ``dense``.
        width: Number of output units of the layer.
        activation: Output activation name, or ``None`` for a linear output.
    """

    kind: str
    width: int
    activation: Optional[str] = None


@dataclass
class ModelConfig:
    """Configuration of the recurrent next-character classifier.

    Attributes:
        vocab_size: Number of distinct characters in the corpus.
        window_size: Length of every input snippet.
        hidden_units: Width of the recurrent layer.
        learning_rate: Optimizer learning rate.
        cell: Recurrent cell type (``lstm``, ``gru`` or ``rnn``).
    """

    vocab_size: int
    window_size: int = 60
    hidden_units: int = 128
    learning_rate: float = 0.01
    cell: str = "lstm"

    def layers(self) -> List[LayerSpec]:
        return [
            LayerSpec(kind=self.cell, width=self.hidden_units, activation="tanh"),
            LayerSpec(kind="dense", width=self.vocab_size, activation="softmax"),
        ]

    def validate(self) -> None:
        """Validate the configuration values."""
        if self.vocab_size <= 0:
            raise ValueError("vocab_size must be positive")
        if self.window_size <= 0:
            raise ValueError("window_size must be positive")
        if self.hidden_units <= 0:
            raise ValueError("hidden_units must be positive")
        if self.learning_rate <= 0:
            raise ValueError("learning_rate must be positive")
        if self.cell not in RECURRENT_KINDS:
            raise ValueError(f"Unsupported cell: {self.cell}")


@dataclass
class RunConfig:
    corpus_path: Optional[Path] = None
    text_column: str = "text"
    encoding: str = "utf-8"
    delimiter: str = ","
    window_size: int = 60
    stride: int = 3
    epochs: int = 30
    batch_size: int = 128
    hidden_units: int = 128
    learning_rate: float = 0.01
    cell: str = "lstm"
    report_epochs: Tuple[int, ...] = (1, 5, 10, 20, 30)
    temperatures: Tuple[float, ...] = (0.2, 0.5, 1.0, 1.2)
    generate_length: int = 150
    seed: int = 42
    device: str = "auto"

    def model_config(self, vocab_size: int) -> ModelConfig:
        return ModelConfig(
            vocab_size=vocab_size,
            window_size=self.window_size,
            hidden_units=self.hidden_units,
            learning_rate=self.learning_rate,
            cell=self.cell,
        )

    def validate(self) -> None:
        if self.window_size <= 0:
            raise ValueError("window_size must be positive")
        if self.stride <= 0:
            raise ValueError("stride must be positive")
        if self.epochs <= 0:
            raise ValueError("epochs must be positive")
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")
        if self.generate_length < 0:
            raise ValueError("generate_length must not be negative")
        if any(not math.isfinite(t) or t <= 0 for t in self.temperatures):
            raise ValueError("temperatures must be positive and finite")
        if any(e < 1 or e > self.epochs for e in self.report_epochs):
            raise ValueError("report_epochs must lie within 1..epochs")
