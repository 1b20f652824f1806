"""Temperature-scaled sampling of the next character."""

from __future__ import annotations

import math
from collections import deque
from typing import Optional, Protocol

import torch

from .errors import DegenerateDistributionError
from .vocabulary import Vocabulary
from .windows import encode_window


class Predictor(Protocol):
    def predict(self, window: torch.Tensor) -> torch.Tensor: ...


def temperature_distribution(probs: torch.Tensor, temperature: float) -> torch.Tensor:
    """Reshape ``probs`` as ``exp(log(p) / temperature)``, renormalized.

    Temperatures below 1 sharpen the distribution, above 1 flatten it.
    Characters with probability 0 keep probability 0.
    """
    if not math.isfinite(temperature) or temperature <= 0:
        raise ValueError("temperature must be positive and finite")
    probs = torch.as_tensor(probs, dtype=torch.float64).flatten()
    if probs.numel() == 0 or not torch.isfinite(probs).all():
        raise DegenerateDistributionError("Probabilities must be finite")
    if (probs < 0).any():
        raise DegenerateDistributionError("Probabilities must not be negative")
    if probs.sum() <= 0:
        raise DegenerateDistributionError("Probabilities sum to zero")

    log_probs = torch.log(probs)
    # Shift before dividing so the most likely entry stays exactly 0.
    scaled = torch.exp((log_probs - log_probs.max()) / temperature)
    dist = scaled / scaled.sum()
    if not torch.isfinite(dist).all():
        raise DegenerateDistributionError("Temperature-scaled probabilities are not finite")
    return dist


def sample_next(
    probs: torch.Tensor,
    temperature: float,
    generator: Optional[torch.Generator] = None,
) -> int:
    """Draw one index from the temperature-adjusted distribution."""
    dist = temperature_distribution(probs, temperature)
    return int(torch.multinomial(dist, num_samples=1, generator=generator).item())


class GenerationBuffer:
    """Fixed-size sliding window of the most recent characters."""

    def __init__(self, seed_text: str) -> None:
        if not seed_text:
            raise ValueError("seed_text must not be empty")
        self._chars = deque(seed_text, maxlen=len(seed_text))

    @property
    def capacity(self) -> int:
        return self._chars.maxlen

    def push(self, ch: str) -> None:
        self._chars.append(ch)

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)


def generate_text(
    predictor: Predictor,
    vocabulary: Vocabulary,
    seed_text: str,
    temperature: float,
    *,
    length: int = 150,
    generator: Optional[torch.Generator] = None,
) -> str:
    """Extend ``seed_text`` by ``length`` characters, one prediction at a time.

    Only the generated characters are returned.
    """
    buffer = GenerationBuffer(seed_text)
    generated = []
    for _ in range(length):
        window = encode_window(buffer.text, vocabulary)
        idx = sample_next(predictor.predict(window), temperature, generator)
        ch = vocabulary.id_to_char(idx)
        generated.append(ch)
        buffer.push(ch)
    return "".join(generated)
