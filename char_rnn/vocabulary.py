"""Character vocabulary mapping corpus characters to dense indices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

import torch

from .errors import VocabularyError


@dataclass(frozen=True)
class VocabularyState:
    stoi: Dict[str, int]
    itos: Tuple[str, ...]


class Vocabulary:
    """Bijective character <-> index mapping fitted on a corpus."""

    def __init__(self, state: VocabularyState) -> None:
        self._state = state

    @classmethod
    def build_from_text(cls, text: str) -> "Vocabulary":
        """Create a vocabulary from the distinct characters of ``text``."""
        # Ensure deterministic order by sorting.
        itos = tuple(sorted(set(text)))
        stoi = {ch: idx for idx, ch in enumerate(itos)}
        return cls(VocabularyState(stoi=stoi, itos=itos))

    @property
    def size(self) -> int:
        return len(self._state.itos)

    def __len__(self) -> int:
        return self.size

    def __contains__(self, ch: object) -> bool:
        return ch in self._state.stoi

    @property
    def characters(self) -> Tuple[str, ...]:
        return self._state.itos

    def char_to_id(self, ch: str) -> int:
        try:
            return self._state.stoi[ch]
        except KeyError:
            raise VocabularyError(f"Character {ch!r} is not in the vocabulary") from None

    def id_to_char(self, idx: int) -> str:
        idx = int(idx)
        if not 0 <= idx < self.size:
            raise VocabularyError(f"Index {idx} is outside the vocabulary of size {self.size}")
        return self._state.itos[idx]

    def encode(self, text: Iterable[str]) -> List[int]:
        return [self.char_to_id(ch) for ch in text]

    def decode(self, ids: Sequence[int]) -> str:
        return "".join(self.id_to_char(idx) for idx in ids)

    def one_hot(self, text: str) -> torch.Tensor:
        """Encode ``text`` into a ``(len(text), size)`` one-hot float matrix."""
        ids = torch.tensor(self.encode(text), dtype=torch.long)
        out = torch.zeros(len(ids), self.size, dtype=torch.float32)
        if len(ids):
            out[torch.arange(len(ids)), ids] = 1.0
        return out
