"""Run programs end to end: parse, resolve, check, evaluate, print."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from arith.common.errors import ArithError, ParseError
from arith.common.span import Span
from arith.core.ast import Term
from arith.core.predicates import is_value
from arith.core.pretty import pretty
from arith.core.reduce import evaluate, normalize
from arith.core.types import Ty
from arith.core.typing import type_of
from arith.surface.parse import parse_program
from arith.surface.resolve import NameEnv, resolve_term
from arith.surface.sast import SurfaceTerm

logger = logging.getLogger(__name__)


class Strategy(Enum):
    CALL_BY_VALUE = "cbv"
    FULL = "full"


@dataclass(frozen=True)
class RunConfig:
    typed: bool = True
    typecheck: bool = True
    strategy: Strategy = Strategy.CALL_BY_VALUE


@dataclass(frozen=True)
class Outcome:
    """Result of running one top-level expression."""

    term: Term
    ty: Ty | None
    before: str
    result: Term
    after: str

    @property
    def stuck(self) -> bool:
        """True when evaluation stopped at a term that is not a value."""
        return not is_value(self.result)

    def __str__(self) -> str:
        if self.ty is None:
            return self.after
        return f"{self.after} : {self.ty}"


def _run_one(sterm: SurfaceTerm, config: RunConfig) -> Outcome:
    term = resolve_term(sterm, NameEnv.empty(), typed=config.typed)
    ty = type_of(term) if config.typed and config.typecheck else None
    before = pretty(term)
    logger.debug("evaluating %s", before)
    if config.strategy is Strategy.FULL:
        result = normalize(term)
    else:
        result = evaluate(term)
    after = pretty(result)
    outcome = Outcome(term=term, ty=ty, before=before, result=result, after=after)
    if outcome.stuck:
        logger.warning("evaluation stuck at %s", after)
    return outcome


def run_source(source: str, config: RunConfig | None = None) -> list[Outcome]:
    """Run every ``;``-separated expression in ``source``.

    Raises:
        ArithError: the first lexical, syntax or type error, with ``source``
            attached for rendering.
    """
    config = config or RunConfig()
    try:
        return [_run_one(sterm, config) for sterm in parse_program(source)]
    except ArithError as exc:
        raise exc.with_source(source) from None


def run_expression(source: str, config: RunConfig | None = None) -> Outcome:
    """Run ``source``, which must hold exactly one expression."""
    outcomes = run_source(source, config)
    if len(outcomes) != 1:
        raise ParseError(
            f"Expected a single expression, found {len(outcomes)}",
            Span(0, len(source)),
            source,
        )
    return outcomes[0]


__all__ = ["Strategy", "RunConfig", "Outcome", "run_source", "run_expression"]
