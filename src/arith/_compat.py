"""Typing aliases that differ between supported interpreters.

``TypeIs`` arrived in Python 3.13; on 3.12 ``TypeGuard`` is used instead so
the term predicates still narrow for type checkers.
"""

from __future__ import annotations

try:  # pragma: no cover - exercised only on Python < 3.13
    from typing import TypeIs  # type: ignore[attr-defined]
except ImportError:  # pragma: no cover - exercised only on Python < 3.13
    from typing import TypeGuard as TypeIs  # type: ignore[assignment]

__all__ = ["TypeIs"]
