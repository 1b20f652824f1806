"""Utility helpers to load the statement corpus."""

from __future__ import annotations

import csv
from pathlib import Path

from .errors import CorpusError

_DEFAULT_CORPUS = Path(__file__).resolve().parent / "resources" / "statements.csv"


def load_corpus(
    path: str | Path | None = None,
    *,
    column: str = "text",
    encoding: str = "utf-8",
    delimiter: str = ",",
) -> str:
    """Load every row's text column and join them into one lowercase string.

    Rows are separated by a single space. The bundled sample is used when no
    path is given.
    """
    corpus_path = Path(path) if path is not None else _DEFAULT_CORPUS
    if not corpus_path.exists():
        raise FileNotFoundError(f"Corpus file not found: {corpus_path}")
    with corpus_path.open(newline="", encoding=encoding) as handle:
        reader = csv.DictReader(handle, delimiter=delimiter)
        if reader.fieldnames is None or column not in reader.fieldnames:
            raise CorpusError(f"Column {column!r} not found in {corpus_path}")
        rows = [row[column] or "" for row in reader]
    text = " ".join(rows).lower()
    if not text.strip():
        raise CorpusError(f"Corpus is empty: {corpus_path}")
    return text
