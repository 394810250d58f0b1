"""Minimal LSP server for Monkey source — illegal-character diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from monkeylex import __version__
from monkeylex.lexer import collect_errors, tokenize

server = LanguageServer(
    "monkeylex-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _utf16_len(text: str) -> int:
    """Length of *text* in UTF-16 code units, the default LSP column unit."""
    return len(text.encode("utf-16-le")) // 2


def _validate(ls: LanguageServer, uri: str) -> None:
    """Lex the document and publish one diagnostic per illegal character."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    lines = source.split("\n")
    diagnostics: list[Diagnostic] = []

    for err in collect_errors(tokenize(source), source):
        line = err.position.line - 1
        text = lines[line]
        col = _utf16_len(text[: err.position.column - 1])
        width = _utf16_len(text[err.position.column - 1])
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=Position(line=line, character=col),
                    end=Position(line=line, character=col + width),
                ),
                message=err.message,
                severity=DiagnosticSeverity.Error,
                source="monkeylex",
            )
        )

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
