"""Lexer for the Monkey programming language."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from monkeylex.tokens import Token

__version__ = "0.1.0"


def tokenize(source: str) -> list[Token]:
    """Tokenize Monkey source into a token list ending in EOF."""
    from monkeylex.lexer import tokenize as _tokenize

    return _tokenize(source)
