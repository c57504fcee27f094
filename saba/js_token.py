"""Lexer for the small JavaScript subset the browser understands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Union

RESERVED_WORDS = ("var", "function", "return")
PUNCTUATORS = frozenset("+-;=(){},.")
_WHITESPACE = frozenset(" \n")
_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DIGITS = frozenset("0123456789")
_IDENTIFIER_START = _ASCII_LETTERS | frozenset("_$")
_IDENTIFIER_PART = _ASCII_LETTERS | _DIGITS | frozenset("_$")


class JsLexError(ValueError):
    """Raised when the source holds a character the lexer does not support."""


class TokenKind(Enum):
    IDENTIFIER = "identifier"
    KEYWORD = "keyword"
    PUNCTUATOR = "punctuator"
    STRING_LITERAL = "string_literal"
    NUMBER = "number"


@dataclass(frozen=True)
class Token:
    """A lexical token; `value` is an int for numbers and a str otherwise."""

    kind: TokenKind
    value: Union[str, int]


class JsLexer:
    """Iterator producing tokens from JavaScript source text."""

    def __init__(self, source: str) -> None:
        self._input = source
        self._pos = 0

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        text = self._input
        while self._pos < len(text) and text[self._pos] in _WHITESPACE:
            self._pos += 1
        if self._pos >= len(text):
            raise StopIteration

        keyword = self._reserved_word()
        if keyword is not None:
            self._pos += len(keyword)
            return Token(TokenKind.KEYWORD, keyword)

        c = text[self._pos]
        if c in PUNCTUATORS:
            self._pos += 1
            return Token(TokenKind.PUNCTUATOR, c)
        if c == '"':
            return Token(TokenKind.STRING_LITERAL, self._consume_string())
        if c in _DIGITS:
            return Token(TokenKind.NUMBER, self._consume_number())
        if c in _IDENTIFIER_START:
            return Token(TokenKind.IDENTIFIER, self._consume_identifier())
        raise JsLexError(f"char {c!r} is not supported yet")

    def _reserved_word(self) -> str | None:
        for word in RESERVED_WORDS:
            if self._input.startswith(word, self._pos):
                return word
        return None

    def _consume_number(self) -> int:
        start = self._pos
        while self._pos < len(self._input) and self._input[self._pos] in _DIGITS:
            self._pos += 1
        return int(self._input[start:self._pos])

    def _consume_string(self) -> str:
        start = self._pos + 1
        end = self._input.find('"', start)
        if end == -1:
            self._pos = len(self._input)
            return self._input[start:]
        self._pos = end + 1
        return self._input[start:end]

    def _consume_identifier(self) -> str:
        start = self._pos
        while self._pos < len(self._input) and self._input[self._pos] in _IDENTIFIER_PART:
            self._pos += 1
        return self._input[start:self._pos]