import pytest

from arith.core.ast import (
    Abs,
    App,
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
from arith.core.pretty import print_term, pretty
from arith.core.types import BOOL, NAT, Arrow
from arith.core.util import numeral


@pytest.mark.parametrize(
    ("term", "expected"),
    [
        (Tru(), "true"),
        (Fls(), "false"),
        (Zero(), "0"),
        (Succ(Succ(Zero())), "succ succ 0"),
        (Pred(Zero()), "pred 0"),
        (IsZero(Zero()), "iszero 0"),
        (If(Tru(), Zero(), Succ(Zero())), "if true { 0 } else { succ 0 }"),
        (Fun("x", BOOL, Var(0, 1)), "(lambda x. x)"),
        (Abs("x", Var(0, 1)), "(lambda x. x)"),
        (Call(Fun("x", NAT, Var(0, 1)), Zero()), "((lambda x. x) 0)"),
        (App(Abs("f", Var(0, 1)), Tru()), "((lambda f. f) true)"),
    ],
)
def test_pretty_forms(term: Term, expected: str) -> None:
    assert pretty(term) == expected


def test_nested_binders_resolve_names() -> None:
    term = Fun("a", BOOL, Call(Fun("b", BOOL, Var(1, 2)), Var(0, 1)))
    assert pretty(term) == "(lambda a. ((lambda b. a) a))"


def test_shadowed_binder_gets_primed() -> None:
    term = Fun("x", BOOL, Fun("x", BOOL, Var(1, 2)))
    assert pretty(term) == "(lambda x. (lambda x'. x))"


def test_sibling_binders_do_not_leak() -> None:
    term = Call(Abs("x", Var(0, 1)), Abs("x", Var(0, 1)))
    assert pretty(term) == "((lambda x. x) (lambda x. x))"


def test_var_with_mismatched_ctx_len_is_bad_index() -> None:
    assert pretty(Var(0, 2), Context().add_name("a")) == "[bad index]"
    assert pretty(Var(0, 1)) == "[bad index]"


def test_var_index_out_of_range_is_bad_index() -> None:
    assert pretty(Var(4, 1), Context().add_name("a")) == "[bad index]"


def test_free_var_prints_context_name() -> None:
    assert pretty(Succ(Var(1, 2)), Context().add_name("n").add_name("b")) == "succ n"


def test_print_term_appends_to_buffer() -> None:
    buf = ["> "]
    print_term(Tru(), Context(), buf)
    assert "".join(buf) == "> true"


def test_type_rendering() -> None:
    assert str(BOOL) == "Bool"
    assert str(Arrow(BOOL, Arrow(NAT, NAT))) == "Bool -> Nat -> Nat"
    assert str(Arrow(Arrow(BOOL, NAT), NAT)) == "(Bool -> Nat) -> Nat"


def test_long_prefix_chain_prints_iteratively() -> None:
    assert pretty(Pred(numeral(50_000))) == "pred " + "succ " * 50_000 + "0"
    assert pretty(IsZero(Pred(Succ(Zero())))) == "iszero pred succ 0"
