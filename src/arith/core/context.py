"""Naming context mapping de Bruijn indices to display names and types."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from arith.common.errors import TypeCheckError, TypeErrorKind
from arith.common.span import DUMMY_SPAN, Span
from arith.core.types import Ty


@dataclass(frozen=True)
class Binding:
    pass


@dataclass(frozen=True)
class NameBind(Binding):
    """A binder known only by name (printing, untyped terms)."""


@dataclass(frozen=True)
class VarBind(Binding):
    """A binder whose variable has type ``ty``."""

    ty: Ty


@dataclass(frozen=True)
class ContextEntry:
    name: str
    binding: Binding


@dataclass(frozen=True)
class Context:
    """
    Binders currently in scope.

    Representation:
        Entries are stored innermost first: index 0 is the most recently
        entered binder, so ``Var(k)`` refers to ``ctx[k]`` directly.

    Extension discipline:
        ``add_binding`` returns a new, longer context and never touches the
        receiver. A context handed to one subtree therefore cannot leak
        binders into a sibling subtree.
    """

    entries: tuple[ContextEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ContextEntry]:
        return iter(self.entries)

    def __getitem__(self, idx: int) -> ContextEntry:
        return self.entries[idx]

    def add_binding(self, name: str, binding: Binding) -> Context:
        """Push a new binder at index 0."""
        return Context((ContextEntry(name, binding),) + self.entries)

    def add_name(self, name: str) -> Context:
        return self.add_binding(name, NameBind())

    def add_var(self, name: str, ty: Ty) -> Context:
        return self.add_binding(name, VarBind(ty))

    def is_name_bound(self, name: str) -> bool:
        return any(e.name == name for e in self.entries)

    def pick_fresh_name(self, name: str) -> tuple[Context, str]:
        """Priming ``name`` until it is unused, then bind it.

        Returns the extended context and the name actually chosen.
        """
        while self.is_name_bound(name):
            name += "'"
        return self.add_name(name), name

    def index_to_name(self, index: int) -> str:
        if index < 0 or index >= len(self.entries):
            raise IndexError(f"Unbound variable {index}")
        return self.entries[index].name

    def get_binding(self, index: int) -> Binding:
        if index < 0 or index >= len(self.entries):
            raise IndexError(f"Unbound variable {index}")
        return self.entries[index].binding

    def get_type(self, index: int, span: Span = DUMMY_SPAN) -> Ty:
        """Type of ``Var(index)``; fails unless the entry is a ``VarBind``."""
        if index < 0 or index >= len(self.entries):
            raise TypeCheckError(
                f"Unbound variable {index}",
                span,
                reason=TypeErrorKind.UNBOUND_OR_WRONG_BINDING,
            )
        entry = self.entries[index]
        if not isinstance(entry.binding, VarBind):
            raise TypeCheckError(
                f"Wrong kind of binding for variable: {entry.name}",
                span,
                reason=TypeErrorKind.UNBOUND_OR_WRONG_BINDING,
            )
        return entry.binding.ty

    def __str__(self) -> str:
        inner = ", ".join(f"{i}:{e.name}" for i, e in enumerate(self))
        return f"Context[{inner}]"


__all__ = ["Binding", "NameBind", "VarBind", "ContextEntry", "Context"]
