"""Error types raised by the lexer, parser, resolver and type checker."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import ClassVar, Self

from arith.common.span import Span


@dataclass
class ArithError(Exception):
    message: str
    span: Span
    source: str | None = None

    kind: ClassVar[str] = "internal"

    def with_source(self, source: str) -> Self:
        if self.source is not None:
            return self
        return replace(self, source=source)

    def __str__(self) -> str:
        if self.source is None:
            return f"{self.message} @ {self.span.start}:{self.span.end}"
        snippet = self.span.extract(self.source)
        return f"{self.message} @ {self.span.start}:{self.span.end}: {snippet!r}"


@dataclass
class LexError(ArithError):
    kind: ClassVar[str] = "lexical"


@dataclass
class ParseError(ArithError):
    kind: ClassVar[str] = "syntax"


class TypeErrorKind(Enum):
    GUARD_NOT_BOOL = "guard-not-bool"
    BRANCH_MISMATCH = "branch-mismatch"
    EXPECTED_NAT = "expected-nat"
    NOT_A_FUNCTION = "not-a-function"
    ARG_TYPE_MISMATCH = "arg-type-mismatch"
    UNBOUND_OR_WRONG_BINDING = "unbound-or-wrong-binding"
    UNKNOWN_TYPE = "unknown-type"
    UNTYPED_TERM = "untyped-term"


@dataclass
class TypeCheckError(ArithError):
    reason: TypeErrorKind = field(
        default=TypeErrorKind.UNBOUND_OR_WRONG_BINDING, kw_only=True
    )

    kind: ClassVar[str] = "type"


__all__ = [
    "ArithError",
    "LexError",
    "ParseError",
    "TypeCheckError",
    "TypeErrorKind",
]
