"""Classification of terms into numerals, values and abstractions."""

from __future__ import annotations

from arith._compat import TypeIs
from arith.core.ast import Abs, Fls, Fun, Succ, Term, Tru, Zero


def is_numeric(term: Term) -> bool:
    """Return ``True`` if *term* is ``succ (succ ... 0)``."""

    while isinstance(term, Succ):
        term = term.arg
    return isinstance(term, Zero)


def is_abstraction(term: Term) -> TypeIs[Fun | Abs]:
    """Return ``True`` if *term* is a typed or untyped abstraction."""

    return isinstance(term, (Fun, Abs))


def is_value(term: Term) -> bool:
    """Return ``True`` if no reduction can or needs to happen at *term*."""

    return isinstance(term, (Tru, Fls)) or is_numeric(term) or is_abstraction(term)


__all__ = ["is_numeric", "is_abstraction", "is_value"]
