"""Source span type shared across layers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    start: int
    end: int

    @staticmethod
    def dummy() -> Span:
        return Span(0, 0)

    def to(self, other: Span) -> Span:
        """Smallest span covering both ``self`` and ``other``."""
        return Span(min(self.start, other.start), max(self.end, other.end))

    def extract(self, source: str) -> str:
        return source[self.start : self.end]


DUMMY_SPAN = Span.dummy()
