# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

"""
A small regular expression based tokenizer with a token stream for writing
recursive descent parsers.
"""

from __future__ import annotations

import dataclasses as d
import typing as t

import enum
import re


class TokenTypeEnum(enum.Enum):
    regex: str
    ignore: bool

    def __init__(self, regex: str, ignore: bool = False) -> None:
        self.regex = regex
        self.ignore = ignore


TokenType = t.TypeVar("TokenType", bound=TokenTypeEnum)


@d.dataclass(frozen=True)
class Token(t.Generic[TokenType]):
    typ: TokenType
    text: str
    column: int

    def __str__(self) -> str:
        return f"{self.text!r} at column {self.column}"


class UnexpectedTokenError(Exception):
    token: t.Optional[Token[t.Any]]

    def __init__(self, message: str, token: t.Optional[Token[t.Any]] = None) -> None:
        super().__init__(message)
        self.token = token


class Tokenizer(t.Generic[TokenType]):
    token_enum: t.Type[TokenType]

    _regex: re.Pattern[str]

    def __init__(self, token_enum: t.Type[TokenType]) -> None:
        self.token_enum = token_enum
        self._regex = re.compile(
            "|".join(fr"(?P<{typ.name}>{typ.regex})" for typ in self.token_enum)
        )

    def tokenize(self, code: str) -> t.Iterator[Token[TokenType]]:
        for match in self._regex.finditer(code):
            assert isinstance(match.lastgroup, str)
            typ = self.token_enum[match.lastgroup]
            if typ.ignore:
                continue
            yield Token(typ, match.group(0), match.start() + 1)

    def create_stream(self, code: str) -> TokenStream[TokenType]:
        return TokenStream(tuple(self.tokenize(code)))


@d.dataclass(eq=False)
class TokenStream(t.Generic[TokenType]):
    tokens: t.Sequence[Token[TokenType]]
    position: int = 0

    @property
    def token(self) -> t.Optional[Token[TokenType]]:
        try:
            return self.tokens[self.position]
        except IndexError:
            return None

    def consume(self) -> Token[TokenType]:
        token = self.tokens[self.position]
        self.position += 1
        return token

    def accept(self, typ: TokenType) -> t.Optional[Token[TokenType]]:
        if self.token is not None and self.token.typ is typ:
            return self.consume()
        return None

    def expect(self, typ: TokenType) -> Token[TokenType]:
        token = self.accept(typ)
        if token is None:
            raise UnexpectedTokenError(
                f"expected {typ.name} but found {self.token or 'end of input'}",
                self.token,
            )
        return token

    def expect_end(self) -> None:
        if self.token is not None:
            raise UnexpectedTokenError(
                f"expected end of input but found {self.token}", self.token
            )
