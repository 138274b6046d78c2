"""Surface syntax tree produced by the parser, before name resolution."""

from __future__ import annotations

from dataclasses import dataclass

from arith.common.span import Span


@dataclass(frozen=True)
class SurfaceTerm:
    span: Span


@dataclass(frozen=True)
class STrue(SurfaceTerm):
    pass


@dataclass(frozen=True)
class SFalse(SurfaceTerm):
    pass


@dataclass(frozen=True)
class SNum(SurfaceTerm):
    """Integer literal; ``0`` included."""

    value: int


@dataclass(frozen=True)
class SVar(SurfaceTerm):
    name: str


@dataclass(frozen=True)
class SSucc(SurfaceTerm):
    arg: SurfaceTerm


@dataclass(frozen=True)
class SPred(SurfaceTerm):
    arg: SurfaceTerm


@dataclass(frozen=True)
class SIsZero(SurfaceTerm):
    arg: SurfaceTerm


@dataclass(frozen=True)
class SIf(SurfaceTerm):
    cond: SurfaceTerm
    then_branch: SurfaceTerm
    else_branch: SurfaceTerm


@dataclass(frozen=True)
class SLam(SurfaceTerm):
    """``lambda name [: ty]. body``; ``ty`` is ``None`` when unannotated."""

    name: str
    ty: SurfaceType | None
    body: SurfaceTerm


@dataclass(frozen=True)
class SApp(SurfaceTerm):
    fn: SurfaceTerm
    arg: SurfaceTerm


@dataclass(frozen=True)
class SurfaceType:
    span: Span


@dataclass(frozen=True)
class STyName(SurfaceType):
    name: str


@dataclass(frozen=True)
class STyArrow(SurfaceType):
    from_ty: SurfaceType
    to_ty: SurfaceType


__all__ = [
    "SurfaceTerm",
    "STrue",
    "SFalse",
    "SNum",
    "SVar",
    "SSucc",
    "SPred",
    "SIsZero",
    "SIf",
    "SLam",
    "SApp",
    "SurfaceType",
    "STyName",
    "STyArrow",
]
