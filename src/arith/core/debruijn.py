"""Shifting and substitution over de Bruijn-indexed terms."""

from __future__ import annotations

from typing import Callable

from .ast import IsZero, Pred, Succ, Term, Tru, Fls, Var, Zero

VarMapper = Callable[[Var, int], Term]


def map_vars(term: Term, on_var: VarMapper, depth: int = 0) -> Term:
    """Rebuild ``term`` with ``on_var(var, depth)`` applied at every variable.

    ``depth`` counts the binders entered since the walk started. Along the
    way the walk folds ``pred 0``, ``pred (succ n)``, ``iszero 0`` and
    ``iszero (succ n)``. Unchanged subtrees are returned as-is.
    """

    match term:
        case Var():
            return on_var(term, depth)
        case Pred(Zero()):
            return Zero(span=term.span)
        case Pred(Succ(n)):
            return map_vars(n, on_var, depth)
        case IsZero(Zero()):
            return Tru(span=term.span)
        case IsZero(Succ()):
            return Fls(span=term.span)
    return term.map_children(lambda child, k: map_vars(child, on_var, depth + k))


def shift_above(term: Term, cutoff: int, distance: int) -> Term:
    """Add ``distance`` to every variable free above ``cutoff``.

    ``ctx_len`` moves for every variable, bound or free, since the number of
    binders around each of them changes by ``distance``.
    """

    def on_var(var: Var, depth: int) -> Term:
        index = var.index + distance if var.index >= depth else var.index
        return Var(index, var.ctx_len + distance, span=var.span)

    return map_vars(term, on_var, cutoff)


def shift(term: Term, distance: int) -> Term:
    return shift_above(term, 0, distance)


def subst(term: Term, target: int, replacement: Term) -> Term:
    """Replace ``Var(target)`` in ``term`` with ``replacement``.

    Under ``depth`` binders the target reads ``target + depth`` and the
    replacement is shifted by ``depth``. Other variables are left alone.
    """

    def on_var(var: Var, depth: int) -> Term:
        if var.index == target + depth:
            return shift(replacement, depth)
        return var

    return map_vars(term, on_var)


def subst_top(body: Term, value: Term) -> Term:
    """Contract a redex: substitute ``value`` for the binder of ``body``."""
    return shift(subst(body, 0, shift(value, 1)), -1)


__all__ = ["map_vars", "shift_above", "shift", "subst", "subst_top"]
