"""Rendering terms back to surface syntax."""

from __future__ import annotations

from .ast import Abs, App, Call, Fls, Fun, If, IsZero, Pred, Succ, Term, Tru, Var, Zero
from .context import Context

BAD_INDEX = "[bad index]"
PREFIXES = {Succ: "succ ", Pred: "pred ", IsZero: "iszero "}


def print_term(term: Term, ctx: Context, buf: list[str]) -> None:
    """Append the surface form of ``term`` to ``buf``.

    ``ctx`` names the binders enclosing ``term``. A variable whose recorded
    ``ctx_len`` disagrees with ``ctx`` prints as ``[bad index]``.
    """

    match term:
        case Tru():
            buf.append("true")
        case Fls():
            buf.append("false")
        case Zero():
            buf.append("0")
        case Succ() | Pred() | IsZero():
            while isinstance(term, (Succ, Pred, IsZero)):
                buf.append(PREFIXES[type(term)])
                term = term.arg
            print_term(term, ctx, buf)
        case If(cond, then_branch, else_branch):
            buf.append("if ")
            print_term(cond, ctx, buf)
            buf.append(" { ")
            print_term(then_branch, ctx, buf)
            buf.append(" } else { ")
            print_term(else_branch, ctx, buf)
            buf.append(" }")
        case Fun(name, _, body) | Abs(name, body):
            inner, fresh = ctx.pick_fresh_name(name)
            buf.append(f"(lambda {fresh}. ")
            print_term(body, inner, buf)
            buf.append(")")
        case Call(fn, arg) | App(fn, arg):
            buf.append("(")
            print_term(fn, ctx, buf)
            buf.append(" ")
            print_term(arg, ctx, buf)
            buf.append(")")
        case Var(index, ctx_len):
            if len(ctx) == ctx_len and 0 <= index < len(ctx):
                buf.append(ctx.index_to_name(index))
            else:
                buf.append(BAD_INDEX)
        case _:
            raise TypeError(f"Cannot pretty-print unknown term: {term!r}")


def pretty(term: Term, ctx: Context | None = None) -> str:
    """Return the surface form of ``term``."""

    buf: list[str] = []
    print_term(term, ctx or Context(), buf)
    return "".join(buf)


__all__ = ["BAD_INDEX", "print_term", "pretty"]
