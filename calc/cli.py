"""Command line interface for calc."""

from __future__ import annotations

import argparse
import sys

from .core.config import get_settings
from .core.logging import get_logger, setup_logging
from .parser import EvalError, Tokenizer, evaluate, format_number

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calc",
        description="Evaluate arithmetic expressions. Without an expression, start an interactive loop.",
    )
    parser.add_argument(
        "expression",
        nargs="*",
        help="Expression to evaluate once (words are joined with spaces).",
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Print the tokens of the expression instead of evaluating it.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override the configured log level (e.g. DEBUG).",
    )
    return parser


def _evaluate_line(line: str) -> bool:
    try:
        value = evaluate(line)
    except EvalError as exc:
        print(exc, file=sys.stderr)
        return False

    print(f"= {format_number(value)}")
    return True


def dump_tokens(source: str) -> int:
    """Print each token of source on its own line, stopping at the first error."""
    try:
        for token in Tokenizer(source):
            print(token.value if isinstance(token.value, str) else format_number(token.value))
    except EvalError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


def repl(prompt: str) -> int:
    """Read, evaluate and print lines until end of input."""
    while True:
        try:
            line = input(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            return 0
        _evaluate_line(line)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings, level=args.log_level)
    logger.debug(f"{settings.APP_NAME} {settings.APP_VERSION} started")

    source = " ".join(args.expression)

    if args.tokens:
        return dump_tokens(source)

    if not args.expression:
        return repl(settings.PROMPT)

    return 0 if _evaluate_line(source) else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
