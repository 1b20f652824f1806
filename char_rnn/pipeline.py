"""End-to-end run: load, encode, train, and sample after reporting epochs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List

import torch

from .config import RunConfig
from .data import load_corpus
from .errors import CorpusError
from .sampling import generate_text
from .trainer import ModelAdapter
from .vocabulary import Vocabulary
from .windows import EncodedBatch, encode_windows, make_windows


@dataclass(frozen=True)
class RunContext:
    """Immutable state shared by training and sampling."""

    config: RunConfig
    corpus: str
    vocabulary: Vocabulary
    batch: EncodedBatch


@dataclass(frozen=True)
class GenerationReport:
    epoch: int
    temperature: float
    seed_text: str
    text: str


def build_context(config: RunConfig, corpus: str | None = None) -> RunContext:
    """Load the corpus (unless given), fit the vocabulary and encode windows."""
    config.validate()
    if corpus is None:
        corpus = load_corpus(
            config.corpus_path,
            column=config.text_column,
            encoding=config.encoding,
            delimiter=config.delimiter,
        )
    if len(corpus) <= config.window_size:
        raise CorpusError(
            f"Corpus of {len(corpus)} characters is too short for window size {config.window_size}"
        )
    vocabulary = Vocabulary.build_from_text(corpus)
    windows = make_windows(corpus, config.window_size, config.stride)
    batch = encode_windows(windows, vocabulary)
    return RunContext(config=config, corpus=corpus, vocabulary=vocabulary, batch=batch)


def _draw_seed(context: RunContext, generator: torch.Generator) -> str:
    W = context.config.window_size
    start = int(torch.randint(0, len(context.corpus) - W + 1, (1,), generator=generator).item())
    return context.corpus[start : start + W]


def run(
    config: RunConfig,
    *,
    corpus: str | None = None,
    emit: Callable[[str], None] = print,
) -> List[GenerationReport]:
    """Train for ``config.epochs`` epochs, sampling text at reporting epochs."""
    torch.manual_seed(config.seed)
    generator = torch.Generator().manual_seed(config.seed)

    context = build_context(config, corpus)
    emit(
        f"Corpus length: {len(context.corpus)} | vocabulary: {context.vocabulary.size} "
        f"| windows: {len(context.batch)}"
    )

    adapter = ModelAdapter(
        config.model_config(context.vocabulary.size),
        device=config.device,
        generator=generator,
    )

    reports: List[GenerationReport] = []
    report_epochs = set(config.report_epochs)
    for epoch in range(1, config.epochs + 1):
        loss = adapter.fit_one_epoch(context.batch, config.batch_size)
        emit(f"epoch {epoch} end: loss={loss:.4f}")
        if epoch not in report_epochs:
            continue

        seed_text = _draw_seed(context, generator)
        emit(f"----- Generating with seed: {seed_text!r} (epoch {epoch})")
        for temperature in config.temperatures:
            text = generate_text(
                adapter,
                context.vocabulary,
                seed_text,
                temperature,
                length=config.generate_length,
                generator=generator,
            )
            emit(f"----- temperature: {temperature}")
            emit(seed_text + text)
            reports.append(
                GenerationReport(epoch=epoch, temperature=temperature, seed_text=seed_text, text=text)
            )

    emit("Training complete.")
    return reports
