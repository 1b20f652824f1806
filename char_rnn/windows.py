"""Fixed-width windowing of the corpus and one-hot encoding of the windows.

Windows start at offsets ``0, stride, 2 * stride, ...``. Each window of
``window_size`` characters is paired with the character that follows it, so a
window is only emitted while that next character exists; a trailing partial
window is dropped rather than padded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import torch
from torch.utils.data import Dataset

from .vocabulary import Vocabulary


@dataclass(frozen=True)
class EncodedBatch:
    """One-hot inputs ``(n, W, V)`` and one-hot targets ``(n, V)``."""

    inputs: torch.Tensor
    targets: torch.Tensor

    def __len__(self) -> int:
        return self.inputs.size(0)


def window_offsets(length: int, window_size: int, stride: int) -> range:
    if window_size <= 0 or stride <= 0:
        raise ValueError("window_size and stride must be positive")
    return range(0, max(length - window_size, 0), stride)


def make_windows(text: str, window_size: int, stride: int) -> List[Tuple[str, str]]:
    """Slice ``text`` into ``(snippet, next_char)`` pairs."""
    return [
        (text[o : o + window_size], text[o + window_size])
        for o in window_offsets(len(text), window_size, stride)
    ]


def encode_window(snippet: str, vocabulary: Vocabulary) -> torch.Tensor:
    return vocabulary.one_hot(snippet)


def encode_windows(windows: List[Tuple[str, str]], vocabulary: Vocabulary) -> EncodedBatch:
    """One-hot encode every snippet and its target."""
    if not windows:
        raise ValueError("No windows to encode")
    window_size = len(windows[0][0])
    V = vocabulary.size
    inputs = torch.zeros(len(windows), window_size, V, dtype=torch.float32)
    targets = torch.zeros(len(windows), V, dtype=torch.float32)
    positions = torch.arange(window_size)
    for i, (snippet, target) in enumerate(windows):
        if len(snippet) != window_size:
            raise ValueError("All snippets must have the same length")
        ids = torch.tensor(vocabulary.encode(snippet), dtype=torch.long)
        inputs[i, positions, ids] = 1.0
        targets[i, vocabulary.char_to_id(target)] = 1.0
    return EncodedBatch(inputs=inputs, targets=targets)


class WindowDataset(Dataset[Tuple[torch.Tensor, torch.Tensor]]):
    """Expose an :class:`EncodedBatch` to a ``DataLoader``."""

    def __init__(self, batch: EncodedBatch) -> None:
        super().__init__()
        if batch.inputs.ndim != 3 or batch.targets.ndim != 2:
            raise ValueError("inputs must be 3D and targets 2D")
        if batch.inputs.size(0) != batch.targets.size(0):
            raise ValueError("inputs and targets must have the same length")
        self.batch = batch

    def __len__(self) -> int:
        return len(self.batch)

    def __getitem__(self, idx: int) -> Tuple[torch.Tensor, torch.Tensor]:
        return self.batch.inputs[idx], self.batch.targets[idx]
