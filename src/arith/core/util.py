from __future__ import annotations

from arith.common.span import DUMMY_SPAN, Span
from arith.core.ast import Succ, Term, Zero


def numeral(n: int, span: Span = DUMMY_SPAN) -> Term:
    """Build ``succ^n 0``. Every node carries ``span``."""
    if n < 0:
        raise ValueError("Numerals must be non-negative")
    term: Term = Zero(span=span)
    for _ in range(n):
        term = Succ(term, span=span)
    return term


__all__ = ["numeral"]
