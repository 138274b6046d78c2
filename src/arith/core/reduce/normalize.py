"""Full normalization: contract redexes anywhere, including under binders."""

from __future__ import annotations

import logging

from ..ast import Abs, App, Call, Fls, Fun, If, IsZero, Pred, Succ, Term, Tru, Zero
from ..debruijn import subst_top
from ..predicates import is_numeric

logger = logging.getLogger(__name__)


def head_step(term: Term) -> Term:
    """Contract ``term`` itself if it is a redex; arguments need not be values."""

    match term:
        case Call(Fun(_, _, body), arg) | App(Abs(_, body), arg):
            return subst_top(body, arg)
        case If(Tru(), then_branch, _):
            return then_branch
        case If(Fls(), _, else_branch):
            return else_branch
        case Pred(Zero()):
            return Zero(span=term.span)
        case Pred(Succ(nv)) if is_numeric(nv):
            return nv
        case IsZero(Zero()):
            return Tru(span=term.span)
        case IsZero(Succ(nv)) if is_numeric(nv):
            return Fls(span=term.span)
    return term


def normalize_step(term: Term) -> Term:
    """One reduction at the leftmost-outermost redex, or ``term`` itself."""

    if is_numeric(term):
        return term
    reduced = head_step(term)
    if reduced is not term:
        return reduced

    done = False

    def step_first(child: Term, _binders: int) -> Term:
        nonlocal done
        if done:
            return child
        stepped = normalize_step(child)
        done = stepped is not child
        return stepped

    return term.map_children(step_first)


def normalize(term: Term) -> Term:
    """Reduce until no redex remains anywhere. May not terminate."""

    while True:
        reduced = normalize_step(term)
        if reduced is term:
            return term
        logger.debug("normalize: %s", reduced)
        term = reduced


__all__ = ["head_step", "normalize_step", "normalize"]
