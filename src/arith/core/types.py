"""Simple types: booleans, naturals and arrows."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Ty:
    """Base class for types. Equality is structural."""

    def __str__(self) -> str:
        return pretty_type(self)


@dataclass(frozen=True)
class BoolTy(Ty):
    pass


@dataclass(frozen=True)
class NatTy(Ty):
    pass


@dataclass(frozen=True)
class Arrow(Ty):
    from_ty: Ty
    to_ty: Ty


# Shared instances; any other instance compares equal to these.
BOOL = BoolTy()
NAT = NatTy()

TYPE_NAMES: dict[str, Ty] = {
    "bool": BOOL,
    "Bool": BOOL,
    "nat": NAT,
    "Nat": NAT,
}


def pretty_type(ty: Ty) -> str:
    match ty:
        case BoolTy():
            return "Bool"
        case NatTy():
            return "Nat"
        case Arrow(Arrow() as from_ty, to_ty):
            return f"({pretty_type(from_ty)}) -> {pretty_type(to_ty)}"
        case Arrow(from_ty, to_ty):
            return f"{pretty_type(from_ty)} -> {pretty_type(to_ty)}"
    raise TypeError(f"Cannot pretty-print unknown type: {ty!r}")


__all__ = ["Ty", "BoolTy", "NatTy", "Arrow", "BOOL", "NAT", "TYPE_NAMES"]
