"""hicupp command-line interface."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from hicupp.engine.parameters import Algorithm, evaluation_budget
from hicupp.utils.config import load_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="hicupp axis maximizer CLI")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("algorithms", help="List the available algorithms")

    budget_parser = subparsers.add_parser(
        "budget",
        help="Estimate the evaluation budget of a config file",
    )
    budget_parser.add_argument("config", help="Path to YAML/JSON config file")
    budget_parser.add_argument(
        "--dimensions",
        type=int,
        required=True,
        help="Number of arguments of the objective",
    )
    budget_parser.add_argument(
        "--seconds-per-evaluation",
        type=float,
        default=None,
        help="Measured cost of one evaluation; adds a time estimate",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "algorithms":
        return _list_algorithms()
    elif args.command == "budget":
        return _print_budget(Path(args.config), args.dimensions, args.seconds_per_evaluation)

    parser.print_help()
    return 0


def _list_algorithms() -> int:
    for algorithm in Algorithm:
        print(f"{algorithm.value}\t{algorithm.name.lower()}\t{algorithm.display_name}")
    return 0


def _print_budget(path: Path, dimensions: int, seconds_per_evaluation: float | None) -> int:
    config = load_config(path)
    budget = evaluation_budget(config.resolved_parameters(), dimensions)
    summary: dict[str, object] = {
        "config": config.as_dict(),
        "dimensions": dimensions,
        "min_evaluations": budget.minimum,
        "max_evaluations": budget.maximum,
    }
    if seconds_per_evaluation is not None:
        min_time, max_time = budget.duration(seconds_per_evaluation)
        summary["min_seconds"] = min_time
        summary["max_seconds"] = max_time
    print(json.dumps(summary, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
