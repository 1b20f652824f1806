"""Recurrent next-character classifier."""

from __future__ import annotations

from typing import Sequence

import torch
from torch import nn
import torch.nn.functional as F

from .config import RECURRENT_KINDS, LayerSpec, ModelConfig

_RECURRENT_MODULES = {"lstm": nn.LSTM, "gru": nn.GRU, "rnn": nn.RNN}


class CharRNN(nn.Module):
    """One recurrent layer followed by a dense classification layer.

    Consumes one-hot windows of shape ``(B, W, V)`` and scores the character
    following each window.
    """

    def __init__(self, input_size: int, layers: Sequence[LayerSpec]) -> None:
        super().__init__()
        if len(layers) != 2:
            raise ValueError("Expected exactly one recurrent and one dense layer")
        recurrent, dense = layers
        if recurrent.kind not in RECURRENT_KINDS:
            raise ValueError(f"Unsupported recurrent layer: {recurrent.kind}")
        if dense.kind != "dense":
            raise ValueError(f"Unsupported output layer: {dense.kind}")
        if dense.activation != "softmax":
            raise ValueError(f"Unsupported output activation: {dense.activation}")

        self.layers = tuple(layers)
        self.rnn = _RECURRENT_MODULES[recurrent.kind](
            input_size=input_size,
            hidden_size=recurrent.width,
            batch_first=True,
        )
        self.head = nn.Linear(recurrent.width, dense.width)

    def forward(self, x: torch.Tensor) -> torch.Tensor:
        out, _ = self.rnn(x)          # [B, W, H]
        return self.head(out[:, -1])  # [B, V]

    @torch.no_grad()
    def predict_proba(self, x: torch.Tensor) -> torch.Tensor:
        return F.softmax(self(x), dim=-1)


def build_model(config: ModelConfig) -> CharRNN:
    config.validate()
    return CharRNN(input_size=config.vocab_size, layers=config.layers())
