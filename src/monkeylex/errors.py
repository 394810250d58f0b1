"""Error types with formatted source context."""

from __future__ import annotations

from monkeylex.tokens import Position


class LexError(Exception):
    """An illegal character, with position and source context.

    The lexer itself never raises this; consumers build one per ILLEGAL
    token (see :func:`monkeylex.lexer.collect_errors`) and decide whether
    to report, raise, or ignore it.
    """

    def __init__(self, message: str, position: Position, source: str) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "input.monkey") -> str:
        # Only "\n" ends a line, matching the lexer's line counting
        lines = self.source.split("\n")
        line_idx = self.position.line - 1
        col = self.position.column

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\r")
        else:
            source_line = ""

        pad = " " * (col - 1)

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )
