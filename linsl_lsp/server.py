"""
A minimal pygls-based Language Server for Linsl.

Features:
- Text synchronization (documents are kept by the pygls workspace)
- Diagnostics: reader errors and malformed define/lambda/macro forms
- Hover: primitive and special-form signatures, locally defined symbols
- Completion: primitives, special forms, top-level definitions
- Signature Help: for primitives and special forms
- Document Symbols: from the indexer

Note: We never evaluate the buffer. We build a static index per document.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, List

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_SIGNATURE_HELP,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    ParameterInformation,
    Position,
    Range,
    SignatureHelp,
    SignatureHelpOptions,
    SignatureHelpParams,
    SignatureInformation,
    SymbolKind,
)

from linsl_lsp.indexer import build_index, BUILTIN_SIGNATURES, SPECIAL_FORM_SIGNATURES, DocumentIndex

SIGNATURES: Dict[str, str] = {**SPECIAL_FORM_SIGNATURES, **BUILTIN_SIGNATURES}

SYMBOL_KINDS = {
    "function": SymbolKind.Function,
    "macro": SymbolKind.Operator,
    "var": SymbolKind.Variable,
}


class LinslLanguageServer(LanguageServer):
    CMD_NAME = "linsl-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, "v0.1")
        self.indexes: Dict[str, DocumentIndex] = {}
        self._logger = logging.getLogger("LinslLanguageServer")

    def reindex(self, uri: str) -> DocumentIndex:
        text = self.workspace.get_text_document(uri).source
        idx = build_index(text)
        self.indexes[uri] = idx
        self._logger.debug("indexed %s: %d symbols, %d problems", uri, len(idx.symbols), len(idx.problems))
        self.publish_diagnostics(uri, diagnostics_for(idx))
        return idx


ls = LinslLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(params: DidOpenTextDocumentParams):
    ls.reindex(params.text_document.uri)


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: DidChangeTextDocumentParams):
    ls.reindex(params.text_document.uri)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.indexes.pop(uri, None)
    ls.publish_diagnostics(uri, [])


# --- Diagnostics ---
def _mk_range(line: int, col: int, length: int = 1) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + length))


def diagnostics_for(idx: DocumentIndex) -> List[Diagnostic]:
    return [
        Diagnostic(
            range=_mk_range(p.line, p.col),
            message=p.message,
            severity=DiagnosticSeverity.Error,
            source=LinslLanguageServer.CMD_NAME,
        )
        for p in idx.problems
    ]


# --- Hover ---
def hover_for(text: str, idx: DocumentIndex, pos: Position) -> Optional[Hover]:
    word = _extract_word_at(text, pos)
    if not word:
        return None

    if word in SIGNATURES:
        contents = SIGNATURES[word]
    elif word in idx.symbols:
        sdef = idx.symbols[word]
        contents = f"{word}: {sdef.kind} (defined at {sdef.line + 1}:{sdef.col + 1})"
    else:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(params: HoverParams) -> Optional[Hover]:
    uri = params.text_document.uri
    idx = ls.indexes.get(uri)
    if idx is None:
        return None
    return hover_for(ls.workspace.get_text_document(uri).source, idx, params.position)


# --- Completion ---
def completions_for(idx: Optional[DocumentIndex]) -> CompletionList:
    items: List[CompletionItem] = []
    for name, sig in SPECIAL_FORM_SIGNATURES.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Keyword, detail=sig))
    for name, sig in BUILTIN_SIGNATURES.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig))
    if idx is not None:
        for name, sdef in idx.symbols.items():
            kind = CompletionItemKind.Function if sdef.kind == "function" else CompletionItemKind.Variable
            items.append(CompletionItem(label=name, kind=kind))
    return CompletionList(is_incomplete=False, items=items)


@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["("]))
def on_completion(params: CompletionParams) -> CompletionList:
    return completions_for(ls.indexes.get(params.text_document.uri))


# --- Signature Help ---
def signature_help_for(text: str, pos: Position) -> Optional[SignatureHelp]:
    callee = _extract_callee_name(_get_line_prefix(text, pos))
    if not callee:
        return None
    sig = SIGNATURES.get(callee)
    if not sig:
        return None

    # "(name p1 p2)" -> parameters p1, p2
    params_list = sig.strip("()").split()[1:]
    parameters = [ParameterInformation(label=p) for p in params_list]
    return SignatureHelp(
        signatures=[SignatureInformation(label=sig, parameters=parameters)],
        active_signature=0,
        active_parameter=0,
    )


@ls.feature(TEXT_DOCUMENT_SIGNATURE_HELP, SignatureHelpOptions(trigger_characters=["(", " "]))
def on_signature_help(params: SignatureHelpParams) -> Optional[SignatureHelp]:
    text = ls.workspace.get_text_document(params.text_document.uri).source
    return signature_help_for(text, params.position)


# --- Document Symbols ---
def document_symbols_for(idx: DocumentIndex) -> List[DocumentSymbol]:
    symbols: List[DocumentSymbol] = []
    for name, sdef in idx.symbols.items():
        rng = _mk_range(sdef.line, sdef.col, len(name))
        symbols.append(
            DocumentSymbol(
                name=name,
                kind=SYMBOL_KINDS[sdef.kind],
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


@ls.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def on_document_symbols(params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    idx = ls.indexes.get(params.text_document.uri)
    if idx is None:
        return None
    return document_symbols_for(idx)


# --- Helpers ---

def _get_line_prefix(text: str, pos: Position) -> str:
    # Return the text from start of line up to pos
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return ""
    return lines[pos.line][: pos.character]


def _extract_word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    start = pos.character
    while start > 0 and line[start - 1] not in " \t()\n\r":
        start -= 1
    end = pos.character
    while end < len(line) and line[end] not in " \t()\n\r":
        end += 1
    return line[start:end] or None


def _extract_callee_name(prefix: str) -> Optional[str]:
    # first token after the last '('
    lp = prefix.rfind('(')
    if lp == -1:
        return None
    tail = prefix[lp + 1:].split()
    return tail[0] if tail else None


if __name__ == "__main__":
    # Run the language server over stdio
    ls.start_io()
