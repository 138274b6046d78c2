"""Name resolution: surface syntax to de Bruijn-indexed core terms."""

from __future__ import annotations

from dataclasses import dataclass

from arith.common.errors import ParseError, TypeCheckError, TypeErrorKind
from arith.core.ast import (
    Abs,
    App,
    Call,
    Fls,
    Fun,
    If,
    IsZero,
    Pred,
    Succ,
    Term,
    Tru,
    Var,
)
from arith.core.types import TYPE_NAMES, Arrow, Ty
from arith.core.util import numeral
from arith.surface.sast import (
    SApp,
    SFalse,
    SIf,
    SIsZero,
    SLam,
    SNum,
    SPred,
    SSucc,
    STrue,
    STyArrow,
    STyName,
    SurfaceTerm,
    SurfaceType,
    SVar,
)


@dataclass
class NameEnv:
    locals: list[str]

    @staticmethod
    def empty() -> NameEnv:
        return NameEnv([])

    def push(self, name: str) -> None:
        self.locals.insert(0, name)

    def pop(self) -> None:
        self.locals.pop(0)

    def lookup(self, name: str) -> int | None:
        try:
            return self.locals.index(name)
        except ValueError:
            return None

    def __len__(self) -> int:
        return len(self.locals)


def resolve_type(ty: SurfaceType) -> Ty:
    if isinstance(ty, STyName):
        resolved = TYPE_NAMES.get(ty.name)
        if resolved is None:
            raise TypeCheckError(
                f"Unknown type {ty.name!r}", ty.span, reason=TypeErrorKind.UNKNOWN_TYPE
            )
        return resolved
    if isinstance(ty, STyArrow):
        return Arrow(resolve_type(ty.from_ty), resolve_type(ty.to_ty))
    raise ParseError("Unsupported surface type", ty.span)


def resolve_term(
    term: SurfaceTerm, names: NameEnv | None = None, *, typed: bool = True
) -> Term:
    """Resolve ``term`` against ``names`` (innermost binder first).

    Typed mode builds ``Fun``/``Call`` and requires binder annotations;
    untyped mode builds ``Abs``/``App`` and rejects them.
    """
    if names is None:
        names = NameEnv.empty()
    span = term.span
    if isinstance(term, STrue):
        return Tru(span=span)
    if isinstance(term, SFalse):
        return Fls(span=span)
    if isinstance(term, SNum):
        return numeral(term.value, span)
    if isinstance(term, SVar):
        idx = names.lookup(term.name)
        if idx is None:
            raise ParseError(f"Unknown identifier {term.name}", span)
        return Var(idx, len(names), span=span)
    if isinstance(term, SSucc):
        return Succ(resolve_term(term.arg, names, typed=typed), span=span)
    if isinstance(term, SPred):
        return Pred(resolve_term(term.arg, names, typed=typed), span=span)
    if isinstance(term, SIsZero):
        return IsZero(resolve_term(term.arg, names, typed=typed), span=span)
    if isinstance(term, SIf):
        return If(
            resolve_term(term.cond, names, typed=typed),
            resolve_term(term.then_branch, names, typed=typed),
            resolve_term(term.else_branch, names, typed=typed),
            span=span,
        )
    if isinstance(term, SLam):
        return _resolve_lam(term, names, typed)
    if isinstance(term, SApp):
        fn = resolve_term(term.fn, names, typed=typed)
        arg = resolve_term(term.arg, names, typed=typed)
        return Call(fn, arg, span=span) if typed else App(fn, arg, span=span)
    raise ParseError("Unsupported surface term", span)


def _resolve_lam(term: SLam, names: NameEnv, typed: bool) -> Term:
    if typed and term.ty is None:
        raise ParseError(f"Missing type annotation for {term.name}", term.span)
    if not typed and term.ty is not None:
        raise ParseError("Type annotations need typed mode", term.ty.span)
    param_ty = resolve_type(term.ty) if term.ty is not None else None
    names.push(term.name)
    try:
        body = resolve_term(term.body, names, typed=typed)
    finally:
        names.pop()
    if param_ty is not None:
        return Fun(term.name, param_ty, body, span=term.span)
    return Abs(term.name, body, span=term.span)


__all__ = ["NameEnv", "resolve_term", "resolve_type"]
