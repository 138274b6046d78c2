"""Type checking for the simply typed fragment."""

from __future__ import annotations

from arith.common.errors import TypeCheckError, TypeErrorKind
from .ast import Abs, App, Call, Fls, Fun, If, IsZero, Pred, Succ, Term, Tru, Var, Zero
from .context import Context
from .types import BOOL, NAT, Arrow, Ty


def _expect_nat(arg: Term, ctx: Context) -> None:
    if type_of(arg, ctx) != NAT:
        raise TypeCheckError(
            "argument must be a Nat", arg.span, reason=TypeErrorKind.EXPECTED_NAT
        )


def type_of(term: Term, ctx: Context | None = None) -> Ty:
    """Infer the type of ``term`` under ``ctx``.

    Raises:
        TypeCheckError: with a ``reason`` naming the rule that failed.
    """

    ctx = ctx or Context()
    match term:
        case Tru() | Fls():
            return BOOL
        case Zero():
            return NAT
        case Succ() | Pred():
            # Numerals nest deeply; walk the chain instead of recursing.
            inner = term
            while isinstance(inner, (Succ, Pred)):
                inner = inner.arg
            _expect_nat(inner, ctx)
            return NAT
        case IsZero(arg):
            _expect_nat(arg, ctx)
            return BOOL
        case If(cond, then_branch, else_branch):
            if type_of(cond, ctx) != BOOL:
                raise TypeCheckError(
                    "Guard of conditional must be a boolean",
                    cond.span,
                    reason=TypeErrorKind.GUARD_NOT_BOOL,
                )
            then_ty = type_of(then_branch, ctx)
            else_ty = type_of(else_branch, ctx)
            if then_ty != else_ty:
                raise TypeCheckError(
                    f"Arms of Conditionals have different types: {then_ty} and {else_ty}",
                    term.span,
                    reason=TypeErrorKind.BRANCH_MISMATCH,
                )
            return then_ty
        case Var(index):
            return ctx.get_type(index, term.span)
        case Fun(name, param_ty, body):
            return Arrow(param_ty, type_of(body, ctx.add_var(name, param_ty)))
        case Call(callee, arg):
            callee_ty = type_of(callee, ctx)
            arg_ty = type_of(arg, ctx)
            if not isinstance(callee_ty, Arrow):
                raise TypeCheckError(
                    f"Arrow type expected, found {callee_ty}",
                    callee.span,
                    reason=TypeErrorKind.NOT_A_FUNCTION,
                )
            if callee_ty.from_ty != arg_ty:
                raise TypeCheckError(
                    f"Parameter type mismatch: expected {callee_ty.from_ty}, actual {arg_ty}",
                    term.span,
                    reason=TypeErrorKind.ARG_TYPE_MISMATCH,
                )
            return callee_ty.to_ty
        case Abs() | App():
            raise TypeCheckError(
                "Untyped terms cannot be type checked",
                term.span,
                reason=TypeErrorKind.UNTYPED_TERM,
            )
    raise TypeError(f"Unexpected term in type_of: {term!r}")


__all__ = ["type_of"]
