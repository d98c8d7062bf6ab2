"""simple-trace — print how a bundled SIMPLE program evaluates.

Also reachable as ``python -m simple_core``.
"""

from __future__ import annotations

import argparse
import itertools
import logging
import sys
from typing import IO

from pydantic import ValidationError

from .big_step import evaluate
from .config import Settings
from .environment import Environment
from .errors import SimpleCoreError
from .model import Node
from .programs import PROGRAMS
from .small_step import trace

logger = logging.getLogger("simple_core.cli")


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def _fmt_state(node: Node, env: Environment) -> str:
    """One trace line, ``node | env``."""
    return f"{node} | {env}"


def _show_programs(dest: IO[str]) -> None:
    width = max(len(name) for name in PROGRAMS)
    for name, factory in PROGRAMS.items():
        node, _ = factory()
        print(f"  {name:<{width}}  {node}", file=dest)


def _print_trace(node: Node, env: Environment, max_steps: int, dest: IO[str]) -> None:
    """Print at most *max_steps* reductions, plus the starting state."""
    states = trace(node, env)
    for state in itertools.islice(states, max_steps + 1):
        print(_fmt_state(*state), file=dest)
    if next(states, None) is not None:
        print(f"... stopped after {max_steps} steps", file=dest)


def _print_result(node: Node, env: Environment, dest: IO[str]) -> None:
    print(str(evaluate(node, env)), file=dest)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more, got {value}")
    return value


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simple-trace",
        description="Evaluate a bundled SIMPLE program step by step",
    )
    parser.add_argument("program", nargs="?", default="sum_to_100", help="program name (see --list)")
    parser.add_argument("--big-step", action="store_true", help="print only the big-step result")
    parser.add_argument(
        "--max-steps",
        type=_non_negative,
        default=settings.max_steps,
        help=f"stop small-step traces after N reductions (default {settings.max_steps})",
    )
    parser.add_argument("--list", action="store_true", help="list the bundled programs")
    parser.add_argument("-v", action="count", default=0, help="increase log verbosity")
    return parser


def main(argv: list[str] | None = None, dest: IO[str] | None = None) -> int:
    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        return 1
    args = _build_parser(settings).parse_args(argv)
    dest = dest or sys.stdout

    level = logging.DEBUG if args.v else settings.log_level
    logging.basicConfig(level=level, format="%(asctime)s [%(name)s] %(message)s")

    if args.list:
        _show_programs(dest)
        return 0

    factory = PROGRAMS.get(args.program)
    if factory is None:
        print(f"Error: unknown program '{args.program}'", file=sys.stderr)
        return 1

    node, env = factory()
    logger.info("running %s with the %s engine", args.program, "big-step" if args.big_step else "small-step")
    try:
        if args.big_step:
            _print_result(node, env, dest)
        else:
            _print_trace(node, env, args.max_steps, dest)
    except SimpleCoreError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
