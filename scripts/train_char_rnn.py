"""CLI entry point to train the character-level generator and sample text."""

from __future__ import annotations

import argparse
from pathlib import Path

from char_rnn import RunConfig, run


def parse_args() -> argparse.Namespace:
    defaults = RunConfig()
    parser = argparse.ArgumentParser(description="Train a character-level recurrent text generator")
    parser.add_argument("--corpus", type=Path, help="Path to a delimited statements file", default=None)
    parser.add_argument("--column", type=str, default=defaults.text_column, help="Name of the text column")
    parser.add_argument("--encoding", type=str, default=defaults.encoding)
    parser.add_argument("--delimiter", type=str, default=defaults.delimiter)
    parser.add_argument("--window-size", type=int, default=defaults.window_size)
    parser.add_argument("--stride", type=int, default=defaults.stride)
    parser.add_argument("--epochs", type=int, default=defaults.epochs)
    parser.add_argument("--batch-size", type=int, default=defaults.batch_size)
    parser.add_argument("--hidden-units", type=int, default=defaults.hidden_units)
    parser.add_argument("--learning-rate", type=float, default=defaults.learning_rate)
    parser.add_argument("--cell", choices=["lstm", "gru", "rnn"], default=defaults.cell)
    parser.add_argument(
        "--report-epochs",
        type=int,
        nargs="+",
        default=list(defaults.report_epochs),
        help="Epochs after which text is generated",
    )
    parser.add_argument(
        "--temperatures",
        type=float,
        nargs="+",
        default=list(defaults.temperatures),
    )
    parser.add_argument("--length", type=int, default=defaults.generate_length, help="Characters per sample")
    parser.add_argument("--seed-value", type=int, default=defaults.seed, help="Random seed")
    parser.add_argument(
        "--device",
        type=str,
        default=defaults.device,
        help="Computation device (cpu, cuda, mps, or auto)",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    config = RunConfig(
        corpus_path=args.corpus,
        text_column=args.column,
        encoding=args.encoding,
        delimiter=args.delimiter,
        window_size=args.window_size,
        stride=args.stride,
        epochs=args.epochs,
        batch_size=args.batch_size,
        hidden_units=args.hidden_units,
        learning_rate=args.learning_rate,
        cell=args.cell,
        report_epochs=tuple(args.report_epochs),
        temperatures=tuple(args.temperatures),
        generate_length=args.length,
        seed=args.seed_value,
        device=args.device,
    )
    print("Training on", args.corpus or "statements.csv")
    run(config)


if __name__ == "__main__":
    main()
