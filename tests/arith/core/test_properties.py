"""Property tests over randomly generated well-typed terms."""

from hypothesis import HealthCheck, assume, given, settings
from hypothesis import strategies as st

from arith.core.ast import (
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
    Zero,
)
from arith.core.context import Context
from arith.core.debruijn import shift, subst_top
from arith.core.predicates import is_value
from arith.core.reduce import eval_step, evaluate, normalize
from arith.core.types import BOOL, NAT, Arrow, Ty
from arith.core.typing import type_of

GROUND = st.sampled_from([BOOL, NAT])
TYPES = st.sampled_from([BOOL, NAT, Arrow(BOOL, NAT), Arrow(NAT, NAT)])

PROPERTY_SETTINGS = settings(
    max_examples=60,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.filter_too_much],
)


@st.composite
def well_typed(draw, ty: Ty, env: tuple[Ty, ...] = (), depth: int = 3) -> Term:
    """A term of type ``ty`` whose free variables are typed by ``env``."""
    if isinstance(ty, Arrow):
        body = draw(well_typed(ty.to_ty, (ty.from_ty, *env), max(depth - 1, 0)))
        return Fun("x", ty.from_ty, body)

    variables = [Var(i, len(env)) for i, t in enumerate(env) if t == ty]
    leaves: list[Term] = [Tru(), Fls()] if ty == BOOL else [Zero(), Succ(Zero())]
    if depth <= 0:
        return draw(st.sampled_from(leaves + variables))

    sub = depth - 1
    choice = draw(st.integers(min_value=0, max_value=4))
    if choice == 0:
        return draw(st.sampled_from(leaves + variables))
    if choice == 1:
        cond = draw(well_typed(BOOL, env, sub))
        return If(cond, draw(well_typed(ty, env, sub)), draw(well_typed(ty, env, sub)))
    if choice == 2:
        arg_ty = draw(GROUND)
        fn = draw(well_typed(Arrow(arg_ty, ty), env, sub))
        return Call(fn, draw(well_typed(arg_ty, env, sub)))
    nat = draw(well_typed(NAT, env, sub))
    if ty == BOOL:
        return IsZero(nat)
    return Succ(nat) if choice == 3 else Pred(nat)


@st.composite
def typed_pairs(draw) -> tuple[Term, Ty]:
    ty = draw(TYPES)
    return draw(well_typed(ty)), ty


def _has_fold(term: Term) -> bool:
    if isinstance(term, (Pred, IsZero)) and isinstance(term.arg, (Zero, Succ)):
        return True
    return any(_has_fold(child) for child, _ in term.children())


@PROPERTY_SETTINGS
@given(typed_pairs())
def test_generated_terms_have_requested_type(pair: tuple[Term, Ty]) -> None:
    term, ty = pair
    assert type_of(term) == ty


@PROPERTY_SETTINGS
@given(typed_pairs())
def test_progress(pair: tuple[Term, Ty]) -> None:
    term, _ = pair
    assert is_value(term) or eval_step(term) is not term


@PROPERTY_SETTINGS
@given(typed_pairs())
def test_preservation(pair: tuple[Term, Ty]) -> None:
    term, ty = pair
    assert type_of(eval_step(term)) == ty


@PROPERTY_SETTINGS
@given(typed_pairs())
def test_evaluation_reaches_a_fixed_point_value(pair: tuple[Term, Ty]) -> None:
    term, ty = pair
    result = evaluate(term)
    assert is_value(result)
    assert type_of(result) == ty
    assert eval_step(result) is result
    assert evaluate(result) is result


@PROPERTY_SETTINGS
@given(typed_pairs())
def test_evaluation_is_deterministic(pair: tuple[Term, Ty]) -> None:
    term, _ = pair
    assert evaluate(term) == evaluate(term)


@PROPERTY_SETTINGS
@given(GROUND.flatmap(lambda ty: well_typed(ty)))
def test_full_normalization_agrees_on_ground_terms(term: Term) -> None:
    assert normalize(term) == evaluate(term)


@PROPERTY_SETTINGS
@given(
    GROUND.flatmap(lambda ty: well_typed(ty, (BOOL, NAT), 2)),
    st.integers(min_value=1, max_value=4),
)
def test_shift_round_trip(term: Term, distance: int) -> None:
    """Shifting up then down restores any term without foldable redexes."""
    assume(not _has_fold(term))
    assert shift(shift(term, distance), -distance) == term


@PROPERTY_SETTINGS
@given(
    GROUND.flatmap(lambda ty: well_typed(ty, (BOOL, NAT), 2)),
    st.integers(min_value=1, max_value=4),
)
def test_shift_down_then_up_round_trip(term: Term, distance: int) -> None:
    """Shifting down first only round-trips when every free index is >= distance.

    Lifting a generated term by ``distance`` gives exactly such a term.
    """
    assume(not _has_fold(term))
    lifted = shift(term, distance)
    assert shift(shift(lifted, -distance), distance) == lifted


@PROPERTY_SETTINGS
@given(st.data())
def test_beta_step_is_subst_top(data: st.DataObject) -> None:
    arg_ty = data.draw(GROUND)
    result_ty = data.draw(GROUND)
    body = data.draw(well_typed(result_ty, (arg_ty,), 2))
    value = evaluate(data.draw(well_typed(arg_ty)))
    redex = Call(Fun("x", arg_ty, body), value)
    assert eval_step(redex) == subst_top(body, value)
    assert type_of(subst_top(body, value)) == type_of(body, Context().add_var("x", arg_ty))
