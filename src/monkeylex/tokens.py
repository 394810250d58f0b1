"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    ILLEGAL = auto()  # any character outside every recognized class
    EOF = auto()

    # Identifiers and literals
    IDENTIFIER = auto()  # [A-Za-z_]+
    INTEGER = auto()  # [0-9]+

    # Operators
    ASSIGN = auto()  # =
    PLUS = auto()  # +
    MINUS = auto()  # -
    BANG = auto()  # !
    ASTERISK = auto()  # *
    SLASH = auto()  # /
    LT = auto()  # <
    GT = auto()  # >
    EQ = auto()  # ==
    NOT_EQ = auto()  # !=

    # Delimiters
    COMMA = auto()  # ,
    SEMICOLON = auto()  # ;
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACE = auto()  # {
    RBRACE = auto()  # }

    # Keywords
    FUNCTION = auto()  # fn
    LET = auto()  # let


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token with the exact source characters that produced it."""

    type: TokenType
    literal: str
    span: Span


KEYWORDS: dict[str, TokenType] = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
}


def lookup_ident(ident: str) -> TokenType:
    """Return the keyword type for *ident*, or IDENTIFIER if it is not a keyword.

    Matching is exact and case-sensitive: ``fnx`` and ``Let`` are identifiers.
    """
    return KEYWORDS.get(ident, TokenType.IDENTIFIER)


def is_letter(ch: str) -> bool:
    """Return True if ch is an ASCII letter or underscore."""
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return "0" <= ch <= "9"


def is_whitespace(ch: str) -> bool:
    """Return True if ch is a space, tab, newline, or carriage return."""
    return ch != "" and ch in " \t\n\r"
