"""Training adapter around the recurrent classifier."""

from __future__ import annotations

import torch
from torch import nn
from torch.utils.data import DataLoader

from .config import ModelConfig
from .model import build_model
from .windows import EncodedBatch, WindowDataset


class ModelAdapter:
    """Owns the model, its optimizer and loss, and exposes fit/predict."""

    def __init__(
        self,
        config: ModelConfig,
        *,
        device: str = "auto",
        generator: torch.Generator | None = None,
    ) -> None:
        self.config = config
        self.device = self._resolve_device(device)
        self.model = build_model(config).to(self.device)
        self.optimizer = torch.optim.RMSprop(self.model.parameters(), lr=config.learning_rate)
        # Targets are one-hot probability vectors.
        self.loss_fn = nn.CrossEntropyLoss()
        self.generator = generator

    @staticmethod
    def _resolve_device(device: str) -> torch.device:
        if device == "auto":
            if torch.cuda.is_available():
                return torch.device("cuda")
            if torch.backends.mps.is_available():
                return torch.device("mps")
            return torch.device("cpu")
        return torch.device(device)

    def fit_one_epoch(self, batch: EncodedBatch, batch_size: int) -> float:
        """Run one shuffled pass over ``batch`` and return the mean loss."""
        loader = DataLoader(
            WindowDataset(batch),
            batch_size=batch_size,
            shuffle=True,
            generator=self.generator,
        )
        self.model.train()
        total = 0.0
        count = 0
        for x, y in loader:
            x = x.to(self.device)
            y = y.to(self.device)
            self.optimizer.zero_grad()
            loss = self.loss_fn(self.model(x), y)
            loss.backward()
            self.optimizer.step()
            total += loss.item() * y.size(0)
            count += y.size(0)
        return total / max(count, 1)

    def predict(self, window: torch.Tensor) -> torch.Tensor:
        """Next-character distribution for one ``(W, V)`` window."""
        if window.ndim != 2:
            raise ValueError("window must be 2D (window_size, vocab_size)")
        self.model.eval()
        probs = self.model.predict_proba(window.unsqueeze(0).to(self.device))
        return probs[0].to("cpu", dtype=torch.float64)
