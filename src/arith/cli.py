"""Command-line entry point: run files, expressions, or an interactive shell."""

from __future__ import annotations

import argparse
import logging
import sys

from arith.common.errors import ArithError
from arith.driver import RunConfig, Strategy, run_source
from arith.shell import Shell
from arith.surface.diagnostics import report

logger = logging.getLogger(__name__)

RECURSION_LIMIT = 10_000


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arith",
        description="Evaluate typed or untyped arithmetic lambda calculus programs.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="program to run ('-' for stdin); without it, start a shell",
    )
    parser.add_argument("-e", "--expr", help="evaluate EXPR instead of a file")
    parser.add_argument(
        "--untyped", action="store_true", help="use the untyped language"
    )
    parser.add_argument(
        "--no-typecheck",
        dest="typecheck",
        action="store_false",
        help="skip type checking in typed mode",
    )
    parser.add_argument(
        "--full",
        action="store_true",
        help="reduce under binders instead of call-by-value",
    )
    parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="colorize diagnostics (default: when stderr is a terminal)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="print only the evaluated result of each expression",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="-v for progress, -vv for every reduction step",
    )
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _read_source(args: argparse.Namespace) -> tuple[str, str] | None:
    """Return ``(name, text)`` of the program to run, or ``None`` for the shell."""
    if args.expr is not None:
        return "<expr>", args.expr
    if args.file == "-" or (args.file is None and not sys.stdin.isatty()):
        return "<stdin>", sys.stdin.read()
    if args.file is None:
        return None
    with open(args.file, encoding="utf-8") as fh:
        return args.file, fh.read()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    sys.setrecursionlimit(max(sys.getrecursionlimit(), RECURSION_LIMIT))

    color = sys.stderr.isatty() if args.color is None else args.color
    config = RunConfig(
        typed=not args.untyped,
        typecheck=args.typecheck,
        strategy=Strategy.FULL if args.full else Strategy.CALL_BY_VALUE,
    )

    try:
        source = _read_source(args)
    except OSError as exc:
        print(f"error: cannot read {args.file}: {exc.strerror}", file=sys.stderr)
        return 1
    if source is None:
        Shell(config, color=color).cmdloop()
        return 0

    name, text = source
    logger.info("running %s", name)
    try:
        outcomes = run_source(text, config)
    except ArithError as exc:
        report(exc, color=color)
        return 1
    except RecursionError:
        print("error: maximum recursion depth exceeded", file=sys.stderr)
        return 1

    for outcome in outcomes:
        if args.quiet:
            print(outcome)
        else:
            print(outcome.before)
            print(f"=> {outcome}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
