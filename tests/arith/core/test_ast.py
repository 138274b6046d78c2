import pytest

from arith.common.span import Span
from arith.core.ast import Call, Fun, If, IsZero, Succ, Tru, Var, Zero
from arith.core.types import BOOL
from arith.core.util import numeral


def test_span_does_not_affect_equality() -> None:
    assert Succ(Zero(), span=Span(0, 6)) == Succ(Zero(), span=Span(3, 9))


def test_var_equality_includes_ctx_len() -> None:
    assert Var(0, 1) != Var(0, 2)


def test_children_report_binder_counts() -> None:
    fn = Fun("x", BOOL, Var(0, 1))
    assert list(fn.children()) == [(Var(0, 1), 1)]
    call = Call(fn, Tru())
    assert [k for _, k in call.children()] == [0, 0]


def test_map_children_shares_unchanged_node() -> None:
    term = If(Tru(), Zero(), Succ(Zero()))
    assert term.map_children(lambda child, _: child) is term


def test_map_children_rebuilds_changed_child_only() -> None:
    then_branch = Succ(Zero())
    term = If(Tru(), then_branch, Zero())
    rebuilt = term.map_children(lambda child, _: Zero() if child == Tru() else child)
    assert rebuilt == If(Zero(), then_branch, Zero())
    assert rebuilt.then_branch is then_branch


def test_str_uses_surface_syntax() -> None:
    assert str(IsZero(Succ(Zero()))) == "iszero succ 0"


def test_numeral() -> None:
    assert numeral(2) == Succ(Succ(Zero()))
    assert numeral(0) == Zero()
    with pytest.raises(ValueError, match="non-negative"):
        numeral(-1)
