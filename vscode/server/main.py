"""
Lox Language Server entry point.

This server publishes diagnostics for Lox source files using `pygls`. It
reuses the interpreter's pipeline to scan and parse each document (without
evaluating it) and turns every reported error into an LSP diagnostic.
"""
from __future__ import annotations

import io
from typing import List

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DID_SAVE,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    DidSaveTextDocumentParams,
    Position,
    Range,
)

from lox.config import Config
from lox.diagnostics import Diagnostic as LoxDiagnostic, Reporter
from lox.pipeline import Pipeline, load_pipeline


def to_lsp_diagnostic(diagnostic: LoxDiagnostic, lines: List[str]) -> Diagnostic:
    """Convert a reported Lox error into an LSP diagnostic spanning its line."""
    line = diagnostic.line - 1 if diagnostic.line else 0
    length = len(lines[line]) if line < len(lines) else 0
    rng = Range(Position(line, 0), Position(line, length))
    return Diagnostic(
        range=rng,
        message=diagnostic.text,
        severity=DiagnosticSeverity.Error,
        source="lox",
    )


class LoxLanguageServer(LanguageServer):
    """Language server for Lox source files."""

    def __init__(self, pipeline: Pipeline | None = None) -> None:
        super().__init__("lox-ls", "v0.1")
        if pipeline is None:
            config = Config.from_env()
            pipeline = load_pipeline(config.pipeline) if config.pipeline else Pipeline()
        self.pipeline = pipeline

    def collect_diagnostics(self, text: str) -> List[Diagnostic]:
        """Scan and parse ``text`` and return its errors as LSP diagnostics."""
        reporter = Reporter(io.StringIO())
        self.pipeline.check(text, reporter)
        lines = text.splitlines()
        return [to_lsp_diagnostic(d, lines) for d in reporter.diagnostics]

    def validate(self, uri: str, text: str) -> None:
        """Publish diagnostics for the document at ``uri``."""
        self.publish_diagnostics(uri, self.collect_diagnostics(text))


lang_server = LoxLanguageServer()


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LoxLanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Check a document when it is opened."""
    ls.validate(params.text_document.uri, params.text_document.text)


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LoxLanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Re-check a document when it changes."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    ls.validate(doc.uri, doc.source)


@lang_server.feature(TEXT_DOCUMENT_DID_SAVE)
def did_save(ls: LoxLanguageServer, params: DidSaveTextDocumentParams) -> None:
    """Re-check a document when it is saved."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    ls.validate(doc.uri, doc.source)


def main() -> None:
    """Start the language server."""
    lang_server.start_io()


if __name__ == "__main__":
    main()
