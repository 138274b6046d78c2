"""Call-by-value small-step evaluation."""

from __future__ import annotations

import logging

from ..ast import Abs, App, Call, Fls, Fun, If, IsZero, Pred, Succ, Term, Tru, Zero
from ..debruijn import subst_top
from ..predicates import is_numeric, is_value

logger = logging.getLogger(__name__)


def _step_under(outer: Term, inner: Term, rebuild) -> Term:
    stepped = eval_step(inner)
    if stepped is inner:
        return outer
    return rebuild(stepped)


def eval_step(term: Term) -> Term:
    """One call-by-value step.

    Returns ``term`` itself (the same object) when no rule applies, which is
    how callers detect values and stuck terms alike.
    """

    match term:
        case If(Tru(), then_branch, _):
            return then_branch
        case If(Fls(), _, else_branch):
            return else_branch
        case If(cond, then_branch, else_branch) if not is_value(cond):
            return _step_under(
                term, cond, lambda c: If(c, then_branch, else_branch, span=term.span)
            )

        case Call(Fun(_, _, body), arg) | App(Abs(_, body), arg) if is_value(arg):
            return subst_top(body, arg)
        case Call(callee, arg) if is_value(callee):
            return _step_under(term, arg, lambda a: Call(callee, a, span=term.span))
        case Call(callee, arg):
            return _step_under(term, callee, lambda f: Call(f, arg, span=term.span))
        case App(target, val) if is_value(target):
            return _step_under(term, val, lambda v: App(target, v, span=term.span))
        case App(target, val):
            return _step_under(term, target, lambda f: App(f, val, span=term.span))

        case Succ() if is_numeric(term):
            return term
        case Succ(arg):
            return _step_under(term, arg, lambda a: Succ(a, span=term.span))

        case Pred(arg) if not is_value(arg):
            return _step_under(term, arg, lambda a: Pred(a, span=term.span))
        case Pred(Zero()):
            return Zero(span=term.span)
        case Pred(Succ(nv)) if is_numeric(nv):
            return nv

        case IsZero(arg) if not is_value(arg):
            return _step_under(term, arg, lambda a: IsZero(a, span=term.span))
        case IsZero(Zero()):
            return Tru(span=term.span)
        case IsZero(Succ(nv)) if is_numeric(nv):
            return Fls(span=term.span)

    return term


def evaluate(term: Term) -> Term:
    """Step ``term`` until no rule applies.

    The result is a value or a stuck term; nothing is raised for stuck terms.
    Divergent terms loop forever.
    """

    steps = 0
    while True:
        reduced = eval_step(term)
        if reduced is term:
            logger.debug("normal form after %d step(s): %s", steps, term)
            return term
        steps += 1
        logger.debug("step %d: %s", steps, reduced)
        term = reduced


__all__ = ["eval_step", "evaluate"]
