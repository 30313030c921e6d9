# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

"""
Parser for arithmetic expressions over unary numerals.

Integer literals are turned into numerals, the binary operators `+`, `-`, `*`,
and `/` as well as the functions `neg`, `incr`, `decr`, and `halve` are turned
into expression sequences as defined in :mod:`unary.semantics.judgements`.
"""

from __future__ import annotations

from ..core import terms
from ..data import numerals
from ..utils import parser

from . import judgements


class TokenType(parser.TokenTypeEnum):
    LEFT_PAR = r"\("
    RIGHT_PAR = r"\)"

    ADD = r"\+"
    SUB = r"-"
    MUL = r"\*"
    DIV = r"/"

    INTEGER = r"[0-9]+"
    NAME = r"[A-Za-z_][A-Za-z0-9_]*"

    SPACE = r"\s+", True
    ERROR = r"."


tokenizer = parser.Tokenizer(TokenType)

_PRECEDENCE = {
    TokenType.MUL: 20,
    TokenType.DIV: 20,
    TokenType.ADD: 10,
    TokenType.SUB: 10,
}

_OPERATORS = {
    TokenType.ADD: judgements.ADD,
    TokenType.SUB: judgements.SUB,
    TokenType.MUL: judgements.MUL,
    TokenType.DIV: judgements.DIV,
}

_FUNCTIONS = {
    "neg": judgements.NEG,
    "incr": judgements.INCR,
    "decr": judgements.DECR,
    "halve": judgements.HALVE,
}


class ExpressionSyntaxError(Exception):
    pass


def _parse_name(
    stream: parser.TokenStream[TokenType], name: parser.Token[TokenType]
) -> terms.Term:
    if stream.accept(TokenType.LEFT_PAR):
        try:
            function = _FUNCTIONS[name.text]
        except KeyError:
            raise ExpressionSyntaxError(f"unknown function {name}") from None
        argument = _parse_binary(stream)
        stream.expect(TokenType.RIGHT_PAR)
        return judgements.apply(function, argument)
    try:
        return numerals.literal(name.text)
    except KeyError:
        raise ExpressionSyntaxError(f"unknown numeral literal {name}") from None


def _parse_atom(stream: parser.TokenStream[TokenType]) -> terms.Term:
    token = stream.token
    if token is None:
        raise ExpressionSyntaxError("expected expression but found end of input")
    if stream.accept(TokenType.LEFT_PAR):
        expression = _parse_binary(stream)
        stream.expect(TokenType.RIGHT_PAR)
        return expression
    elif stream.accept(TokenType.INTEGER):
        return numerals.create(int(token.text))
    elif stream.accept(TokenType.NAME):
        return _parse_name(stream, token)
    elif stream.accept(TokenType.SUB):
        # A minus directly in front of an integer is part of the literal.
        literal = stream.accept(TokenType.INTEGER)
        if literal is not None:
            return numerals.create(-int(literal.text))
        return judgements.apply(judgements.NEG, _parse_atom(stream))
    raise ExpressionSyntaxError(f"expected expression but found {token}")


def _parse_binary(
    stream: parser.TokenStream[TokenType], min_precedence: int = -1
) -> terms.Term:
    left = _parse_atom(stream)
    while stream.token and stream.token.typ in _PRECEDENCE:
        if _PRECEDENCE[stream.token.typ] < min_precedence:
            return left
        operator = stream.consume()
        right = _parse_binary(stream, _PRECEDENCE[operator.typ] + 1)
        left = judgements.apply(_OPERATORS[operator.typ], left, right)
    return left


def parse_expression(code: str) -> terms.Term:
    stream = tokenizer.create_stream(code)
    expression = _parse_binary(stream)
    stream.expect_end()
    return expression
