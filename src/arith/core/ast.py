"""Term nodes for the typed and untyped arithmetic lambda calculi."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace, Field
from functools import cache
from typing import Any, Callable, ClassVar, Iterator

from arith.common.span import DUMMY_SPAN, Span
from arith.core.types import Ty


@dataclass(frozen=True, kw_only=True)
class TermFieldMeta:
    binder_count: int = 0


def meta(f: Field) -> TermFieldMeta:
    return f.metadata.get("") or TermFieldMeta()


def binds(count: int = 1) -> Any:
    """Field declaring a child that sits under ``count`` new binders."""
    return field(metadata={"": TermFieldMeta(binder_count=count)})


@dataclass(frozen=True)
class Term:
    """Base class for all terms.

    Nodes are immutable and may be shared between trees. ``span`` is a
    source location for diagnostics and is ignored by equality.
    """

    span: Span = field(default=DUMMY_SPAN, compare=False, repr=False, kw_only=True)

    is_terminal: ClassVar[bool] = False

    @classmethod
    @cache
    def _term_fields(cls) -> tuple[Field, ...]:
        if cls.is_terminal:
            return ()
        return tuple(
            f for f in fields(cls) if f.name != "span" and f.type in ("Term", Term)
        )

    def children(self) -> Iterator[tuple[Term, int]]:
        """Yield ``(child, binder_count)`` for each child, left to right."""
        for f in self._term_fields():
            yield getattr(self, f.name), meta(f).binder_count

    def map_children(self, mapper: Callable[[Term, int], Term]) -> Term:
        """Rebuild this node with ``mapper`` applied to every child.

        ``mapper`` receives the child and the number of binders between this
        node and the child. Returns ``self`` when no child changed.
        """
        updates = {}
        for f in self._term_fields():
            child = getattr(self, f.name)
            new = mapper(child, meta(f).binder_count)
            if new is not child:
                updates[f.name] = new
        # noinspection PyArgumentList
        return replace(self, **updates) if updates else self

    def __str__(self) -> str:
        # pretty imports this module.
        from .pretty import pretty

        return pretty(self)


@dataclass(frozen=True)
class Tru(Term):
    is_terminal: ClassVar[bool] = True


@dataclass(frozen=True)
class Fls(Term):
    is_terminal: ClassVar[bool] = True


@dataclass(frozen=True)
class Zero(Term):
    is_terminal: ClassVar[bool] = True


@dataclass(frozen=True)
class Succ(Term):
    arg: Term


@dataclass(frozen=True)
class Pred(Term):
    arg: Term


@dataclass(frozen=True)
class IsZero(Term):
    arg: Term


@dataclass(frozen=True)
class If(Term):
    cond: Term
    then_branch: Term
    else_branch: Term


@dataclass(frozen=True)
class Var(Term):
    """De Bruijn variable.

    ``index`` counts binders outward from the use site. ``ctx_len`` records
    how many binders enclosed the variable when it was built; the printer
    uses it to detect terms that drifted out of sync with their context.
    """

    index: int
    ctx_len: int
    is_terminal: ClassVar[bool] = True


@dataclass(frozen=True)
class Fun(Term):
    """Typed abstraction. ``name`` is only used for display."""

    name: str
    param_ty: Ty
    body: Term = binds(1)


@dataclass(frozen=True)
class Call(Term):
    """Typed application."""

    callee: Term
    arg: Term


@dataclass(frozen=True)
class Abs(Term):
    """Untyped abstraction."""

    name: str
    body: Term = binds(1)


@dataclass(frozen=True)
class App(Term):
    """Untyped application."""

    target: Term
    val: Term


__all__ = [
    "Term",
    "TermFieldMeta",
    "Tru",
    "Fls",
    "Zero",
    "Succ",
    "Pred",
    "IsZero",
    "If",
    "Var",
    "Fun",
    "Call",
    "Abs",
    "App",
]
