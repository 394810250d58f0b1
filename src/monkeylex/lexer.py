"""Monkey lexer — converts source text into a stream of tokens, one per call."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from monkeylex.errors import LexError
from monkeylex.tokens import (
    Position,
    Span,
    Token,
    TokenType,
    is_digit,
    is_letter,
    is_whitespace,
    lookup_ident,
)

# End-of-input marker. Never a character from the input, so a literal "\0"
# in the source still lexes as ILLEGAL.
_EOF = ""

_SINGLE_CHAR: dict[str, TokenType] = {
    "=": TokenType.ASSIGN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "!": TokenType.BANG,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LT,
    ">": TokenType.GT,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

# First character -> (second character, two-character type)
_TWO_CHAR: dict[str, tuple[str, TokenType]] = {
    "=": ("=", TokenType.EQ),
    "!": ("=", TokenType.NOT_EQ),
}


class Lexer:
    """Pull-based scanner over an immutable source string.

    Each call to :meth:`next_token` returns the next token. Once the input is
    exhausted every further call returns an EOF token. A Lexer is owned by a
    single caller and is not safe to share between threads.
    """

    def __init__(self, source: str) -> None:
        self._input = source
        self._position = 0  # index of the current character
        self._read_position = 0  # index of the next unread character
        self._ch = _EOF
        self._line = 1
        self._column = 0
        self._read_char()

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == TokenType.EOF:
                return

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def _read_char(self) -> None:
        if self._ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1

        if self._read_position >= len(self._input):
            self._ch = _EOF
        else:
            self._ch = self._input[self._read_position]
        self._position = self._read_position
        self._read_position += 1

    def _peek_char(self) -> str:
        if self._read_position >= len(self._input):
            return _EOF
        return self._input[self._read_position]

    def _current_pos(self) -> Position:
        return Position(self._line, self._column, self._position)

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------

    def next_token(self) -> Token:
        """Scan and return the next token. Never raises."""
        self._skip_whitespace()
        start = self._current_pos()
        ch = self._ch

        if is_letter(ch):
            literal = self._read_identifier()
            return Token(lookup_ident(literal), literal, Span(start, self._current_pos()))

        if is_digit(ch):
            literal = self._read_number()
            return Token(TokenType.INTEGER, literal, Span(start, self._current_pos()))

        if ch == _EOF:
            # No advance: repeated calls keep returning EOF
            return Token(TokenType.EOF, "", Span(start, start))

        if ch in _TWO_CHAR and self._peek_char() == _TWO_CHAR[ch][0]:
            self._read_char()
            tt = _TWO_CHAR[ch][1]
            literal = ch + self._ch
        elif ch in _SINGLE_CHAR:
            tt = _SINGLE_CHAR[ch]
            literal = ch
        else:
            tt = TokenType.ILLEGAL
            literal = ch

        self._read_char()
        return Token(tt, literal, Span(start, self._current_pos()))

    def _skip_whitespace(self) -> None:
        while is_whitespace(self._ch):
            self._read_char()

    def _read_identifier(self) -> str:
        start = self._position
        while is_letter(self._ch):
            self._read_char()
        return self._input[start : self._position]

    def _read_number(self) -> str:
        start = self._position
        while is_digit(self._ch):
            self._read_char()
        return self._input[start : self._position]


def tokenize(source: str) -> list[Token]:
    """Convenience function: tokenize source text and return token list ending in EOF."""
    return list(Lexer(source))


def collect_errors(tokens: Iterable[Token], source: str) -> list[LexError]:
    """Return one LexError per ILLEGAL token, in source order."""
    return [
        LexError(f"illegal character {tok.literal!r}", tok.span.start, source)
        for tok in tokens
        if tok.type == TokenType.ILLEGAL
    ]
