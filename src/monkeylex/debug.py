"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from monkeylex.tokens import Span, Token


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr) -> None:
    """Print an indexed, human-readable token table to *file*."""
    for idx, tok in enumerate(tokens):
        file.write(f"[{idx}] {tok.type.name:<10} {tok.literal!r:<12} {_format_span(tok.span)}\n")


def _format_span(span: Span) -> str:
    start, end = span.start, span.end
    return f"{start.line}:{start.column}-{end.line}:{end.column} ({start.offset},{end.offset})"
