"""Human-readable rendering of ``ArithError`` against its source text."""

from __future__ import annotations

import sys
from typing import TextIO

from termcolor import colored

from arith.common.errors import ArithError

ERROR = "red"


def _paint(text: str, color: bool, fg: str | None = None) -> str:
    if not color:
        return text
    return colored(text, fg, attrs=["bold"], force_color=True)


def _locate(source: str, offset: int) -> tuple[int, int]:
    """Zero-based (line, column) of ``offset``."""
    line = source.count("\n", 0, offset)
    line_start = source.rfind("\n", 0, offset) + 1
    return line, offset - line_start


def render(error: ArithError, source: str | None = None, color: bool = False) -> str:
    """Format ``error`` with the offending source lines and a caret marker.

    ``source`` defaults to the text attached to the error. Without any source
    only the header and message are produced.
    """
    source = source if source is not None else error.source
    kind = _paint(f"{error.kind} error", color, ERROR)
    if source is None:
        return f"{kind}: {error.message}"

    lines = source.split("\n")
    span = error.span
    if span.start >= len(source) and source:
        last = source.rstrip("\n").split("\n")
        line_no, col = len(last) - 1, len(last[-1])
        header = f"{kind} at {line_no + 1}:{col + 1}"
        marker = " " * col + _paint("^", color, ERROR)
        return f"{header}\n{last[-1]}\n{marker} {error.message}"

    start_line, start_col = _locate(source, span.start)
    end_line, _ = _locate(source, max(span.start, span.end - 1))
    header = f"{kind} at {start_line + 1}:{start_col + 1}"

    if start_line != end_line:
        body = "\n".join(lines[start_line : end_line + 1])
        return f"{header}\n{body}\n {error.message}"

    width = max(span.end - span.start, 1)
    marker = " " * start_col + _paint("^" * width, color, ERROR)
    return f"{header}\n{lines[start_line]}\n{marker} {error.message}"


def report(
    error: ArithError,
    source: str | None = None,
    *,
    color: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Write ``render(error, ...)`` to ``stream`` (stderr by default)."""
    print(render(error, source, color), file=stream or sys.stderr)


__all__ = ["render", "report"]
