"""Lexer and LALR parser for the surface language."""

from __future__ import annotations

from typing import cast

import ply.lex as lex  # type: ignore[import-untyped]
import ply.yacc as yacc  # type: ignore[import-untyped]

from arith.common.errors import LexError, ParseError
from arith.common.span import Span
from arith.surface.sast import (
    SApp,
    SFalse,
    SIf,
    SIsZero,
    SLam,
    SNum,
    SPred,
    SSucc,
    STrue,
    STyArrow,
    STyName,
    SurfaceTerm,
    SurfaceType,
    SVar,
)

_SOURCE: str = ""

reserved = {
    "true": "TRUE",
    "false": "FALSE",
    "if": "IF",
    "else": "ELSE",
    "succ": "SUCC",
    "pred": "PRED",
    "iszero": "ISZERO",
    "lambda": "LAMBDA",
}

tokens = (
    "IDENT",
    "INT",
    "ARROW",
    "COLON",
    "DOT",
    "SEMI",
    "LPAREN",
    "RPAREN",
    "LBRACE",
    "RBRACE",
    *dict.fromkeys(reserved.values()),
)

t_ARROW = r"->"
t_COLON = r":"
t_DOT = r"\."
t_SEMI = r";"
t_LPAREN = r"\("
t_RPAREN = r"\)"
t_LBRACE = r"\{"
t_RBRACE = r"\}"

t_ignore = " \t\r"
t_ignore_COMMENT = r"\#[^\n]*"


def t_newline(t: lex.LexToken) -> None:
    r"\n+"
    t.lexer.lineno += len(t.value)


def t_LAMBDA(t: lex.LexToken) -> lex.LexToken:
    r"\\|λ"
    t.end = t.lexpos + len(t.value)
    return t


def t_INT(t: lex.LexToken) -> lex.LexToken:
    r"\d+"
    t.end = t.lexpos + len(t.value)
    t.value = int(t.value)
    return t


def t_IDENT(t: lex.LexToken) -> lex.LexToken:
    r"[A-Za-z_][A-Za-z0-9_']*"
    t.type = reserved.get(t.value, "IDENT")
    t.end = t.lexpos + len(t.value)
    return t


def t_error(t: lex.LexToken) -> None:
    span = Span(t.lexpos, t.lexpos + 1)
    raise LexError(f"Unexpected character {t.value[0]!r}", span, _SOURCE)


def _tok_span(tok: lex.LexToken) -> Span:
    end = getattr(tok, "end", tok.lexpos + len(str(tok.value)))
    return Span(tok.lexpos, end)


def _item_span(p: yacc.YaccProduction, index: int) -> Span:
    value = p[index]
    if isinstance(value, (SurfaceTerm, SurfaceType)):
        return value.span
    tok = cast(lex.LexToken, p.slice[index])
    return _tok_span(tok)


def _span(p: yacc.YaccProduction, start: int, end: int) -> Span:
    return _item_span(p, start).to(_item_span(p, end))


def p_program(p: yacc.YaccProduction) -> None:
    """program : terms
    | terms SEMI"""
    p[0] = p[1]


def p_program_empty(p: yacc.YaccProduction) -> None:
    "program :"
    p[0] = []


def p_terms_many(p: yacc.YaccProduction) -> None:
    "terms : terms SEMI term"
    p[0] = [*p[1], p[3]]


def p_terms_one(p: yacc.YaccProduction) -> None:
    "terms : term"
    p[0] = [p[1]]


def p_term_if(p: yacc.YaccProduction) -> None:
    "term : IF term LBRACE term RBRACE ELSE LBRACE term RBRACE"
    p[0] = SIf(span=_span(p, 1, 9), cond=p[2], then_branch=p[4], else_branch=p[8])


def p_term_lambda_typed(p: yacc.YaccProduction) -> None:
    "term : LAMBDA IDENT COLON type DOT term"
    p[0] = SLam(span=_span(p, 1, 6), name=p[2], ty=p[4], body=p[6])


def p_term_lambda(p: yacc.YaccProduction) -> None:
    "term : LAMBDA IDENT DOT term"
    p[0] = SLam(span=_span(p, 1, 4), name=p[2], ty=None, body=p[4])


def p_term_succ(p: yacc.YaccProduction) -> None:
    "term : SUCC term"
    p[0] = SSucc(span=_span(p, 1, 2), arg=p[2])


def p_term_pred(p: yacc.YaccProduction) -> None:
    "term : PRED term"
    p[0] = SPred(span=_span(p, 1, 2), arg=p[2])


def p_term_iszero(p: yacc.YaccProduction) -> None:
    "term : ISZERO term"
    p[0] = SIsZero(span=_span(p, 1, 2), arg=p[2])


def p_term_app(p: yacc.YaccProduction) -> None:
    "term : app"
    p[0] = p[1]


def p_app(p: yacc.YaccProduction) -> None:
    "app : app atom"
    p[0] = SApp(span=_span(p, 1, 2), fn=p[1], arg=p[2])


def p_app_atom(p: yacc.YaccProduction) -> None:
    "app : atom"
    p[0] = p[1]


def p_atom_true(p: yacc.YaccProduction) -> None:
    "atom : TRUE"
    p[0] = STrue(span=_span(p, 1, 1))


def p_atom_false(p: yacc.YaccProduction) -> None:
    "atom : FALSE"
    p[0] = SFalse(span=_span(p, 1, 1))


def p_atom_int(p: yacc.YaccProduction) -> None:
    "atom : INT"
    p[0] = SNum(span=_span(p, 1, 1), value=p[1])


def p_atom_var(p: yacc.YaccProduction) -> None:
    "atom : IDENT"
    p[0] = SVar(span=_span(p, 1, 1), name=p[1])


def p_atom_paren(p: yacc.YaccProduction) -> None:
    "atom : LPAREN term RPAREN"
    p[0] = p[2]


def p_type_arrow(p: yacc.YaccProduction) -> None:
    "type : type_atom ARROW type"
    p[0] = STyArrow(span=_span(p, 1, 3), from_ty=p[1], to_ty=p[3])


def p_type_atom(p: yacc.YaccProduction) -> None:
    "type : type_atom"
    p[0] = p[1]


def p_type_atom_name(p: yacc.YaccProduction) -> None:
    "type_atom : IDENT"
    p[0] = STyName(span=_span(p, 1, 1), name=p[1])


def p_type_atom_paren(p: yacc.YaccProduction) -> None:
    "type_atom : LPAREN type RPAREN"
    p[0] = p[2]


def p_error(p: lex.LexToken | None) -> None:
    if p is None:
        span = Span(len(_SOURCE), len(_SOURCE))
        raise ParseError("Unexpected end of input", span, _SOURCE)
    span = _tok_span(cast(lex.LexToken, p))
    raise ParseError(f"Unexpected token {p.value!r}", span, _SOURCE)


_PARSER = None


def parse_program(source: str) -> list[SurfaceTerm]:
    """Parse ``;``-separated top-level terms. Empty input yields ``[]``."""
    global _SOURCE, _PARSER
    _SOURCE = source
    lexer = lex.lex()
    if _PARSER is None:
        _PARSER = yacc.yacc(
            start="program",
            debug=False,
            write_tables=False,
            errorlog=yacc.NullLogger(),
        )
    return cast(list[SurfaceTerm], _PARSER.parse(source, lexer=lexer))


def parse_term(source: str) -> SurfaceTerm:
    """Parse exactly one term."""
    terms = parse_program(source)
    if not terms:
        span = Span(len(source), len(source))
        raise ParseError("Unexpected end of input", span, source)
    if len(terms) > 1:
        raise ParseError("Expected a single expression", terms[1].span, source)
    return terms[0]


__all__ = ["parse_program", "parse_term", "reserved", "tokens"]
