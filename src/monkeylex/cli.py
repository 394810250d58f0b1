"""Command-line interface for monkeylex."""

from __future__ import annotations

import argparse
import json
import sys
import time
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from monkeylex.errors import LexError
from monkeylex.tokens import Position, Token

FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None  # None reads stdin
    output_file: Path | None
    format: str
    positions: bool
    strict: bool
    watch: bool
    debug: bool


@dataclass(frozen=True, slots=True)
class LexResult:
    """Tokens for one source file plus the illegal-character errors found in it."""

    filename: str
    tokens: list[Token]
    errors: list[LexError]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="monkeylex",
        description="Tokenize Monkey source code",
    )
    p.add_argument("input", help="Input .monkey file, or - for stdin")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        default=None,
        help="Output format: text or json (default: text)",
    )
    p.add_argument(
        "--positions",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include source positions in the output (default: on)",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Exit with status 1 if the input contains illegal characters",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover monkeylex.toml)",
    )
    p.add_argument("--watch", action="store_true", help="Watch for changes and re-lex")
    p.add_argument("--debug", action="store_true", help="Dump token table to stderr")
    return p


def parse_format_arg(s: str) -> str:
    """Validate an output format name."""
    if s not in FORMATS:
        raise argparse.ArgumentTypeError(
            f"invalid format {s!r} (expected one of: {', '.join(FORMATS)})"
        )
    return s


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "monkeylex.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = None if args.input == "-" else Path(args.input)
    input_dir = input_file.parent if input_file is not None else Path(".")
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc

    # Output settings: config < CLI
    fmt = "text"
    positions = True
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if isinstance(cfg_format, str):
            fmt = cfg_format
        cfg_positions = cfg_output.get("positions")
        if isinstance(cfg_positions, bool):
            positions = cfg_positions
    if args.format is not None:
        fmt = args.format
    if args.positions is not None:
        positions = args.positions

    # Strict mode: config < CLI
    strict = False
    cfg_check = config.get("check")
    if isinstance(cfg_check, dict):
        cfg_strict = cfg_check.get("strict")
        if isinstance(cfg_strict, bool):
            strict = cfg_strict
    if args.strict is not None:
        strict = args.strict

    if args.watch and input_file is None:
        raise argparse.ArgumentTypeError("--watch needs an input file, not stdin")

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        format=parse_format_arg(fmt),
        positions=positions,
        strict=strict,
        watch=args.watch,
        debug=args.debug,
    )


def lex_file(options: CliOptions) -> LexResult:
    """Read and tokenize the input, collecting illegal-character errors."""
    from monkeylex.debug import dump_tokens
    from monkeylex.lexer import collect_errors, tokenize

    if options.input_file is None:
        filename = "<stdin>"
        source = sys.stdin.read()
    else:
        filename = str(options.input_file)
        source = options.input_file.read_text(encoding="utf-8")

    tokens = tokenize(source)

    if options.debug:
        dump_tokens(tokens, file=sys.stderr)

    return LexResult(filename, tokens, collect_errors(tokens, source))


def _position_dict(pos: Position) -> dict[str, int]:
    return {"line": pos.line, "column": pos.column, "offset": pos.offset}


def format_tokens(tokens: list[Token], fmt: str = "text", positions: bool = True) -> str:
    """Render a token list as text (one token per line) or a JSON array."""
    if fmt == "json":
        items: list[dict[str, Any]] = []
        for tok in tokens:
            item: dict[str, Any] = {"type": tok.type.name, "literal": tok.literal}
            if positions:
                item["start"] = _position_dict(tok.span.start)
                item["end"] = _position_dict(tok.span.end)
            items.append(item)
        return json.dumps(items, indent=2) + "\n"

    lines = []
    for tok in tokens:
        line = f"{tok.type.name} {tok.literal!r}"
        if positions:
            start = tok.span.start
            line = f"{start.line}:{start.column} {line}"
        lines.append(line)
    return "\n".join(lines) + "\n"


def _report(result: LexResult) -> None:
    for err in result.errors:
        print(err.format(result.filename), file=sys.stderr)


def _write_output(options: CliOptions, text: str) -> None:
    if options.output_file:
        options.output_file.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)
        sys.stdout.flush()


def watch_loop(options: CliOptions) -> None:
    """Poll input file for changes, re-lex on each modification."""
    assert options.input_file is not None
    last_mtime = 0.0
    print(f"Watching {options.input_file} for changes...", file=sys.stderr)
    try:
        while True:
            try:
                mtime = options.input_file.stat().st_mtime
            except OSError:
                time.sleep(0.5)
                continue
            if mtime != last_mtime:
                last_mtime = mtime
                try:
                    result = lex_file(options)
                except (OSError, UnicodeDecodeError) as exc:
                    print(f"error: {exc}", file=sys.stderr)
                else:
                    _report(result)
                    _write_output(
                        options, format_tokens(result.tokens, options.format, options.positions)
                    )
                    print(f"Lexed {options.input_file}", file=sys.stderr)
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.watch:
        watch_loop(options)
        return 0

    try:
        result = lex_file(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    _report(result)
    _write_output(options, format_tokens(result.tokens, options.format, options.positions))

    if options.strict and result.errors:
        return 1
    return 0
