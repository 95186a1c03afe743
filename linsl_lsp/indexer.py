"""
Lightweight indexer for Linsl files without evaluating code.

We scan the token stream for:
- top-level definitions: (define name ...), classified by the form they bind
  ((lambda ...) -> function, (macro ...) -> macro, anything else -> var)
- shape problems in define/lambda/macro forms
- reader errors (unbalanced or stray parentheses)

The scan is tolerant: it works on partial buffers and never raises.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Tuple

from linsl.errors import LinslSyntaxError
from linsl.reader.parser import lex, parse_atom, read
from linsl.types.symbol import Symbol


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function" | "macro"
    line: int
    col: int


@dataclass
class Problem:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    problems: List[Problem] = field(default_factory=list)
    paren_balance: int = 0


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = list(lex(text))

    def problem(message: str, offset: int) -> None:
        line, col = _position_from_offset(text, max(offset, 0))
        idx.problems.append(Problem(message, line, col))

    depth = 0
    for i, (tok_type, tok, start) in enumerate(tokens):
        if tok_type == "rparen":
            depth -= 1
            idx.paren_balance -= 1
            continue
        if tok_type != "lparen":
            continue
        depth += 1
        idx.paren_balance += 1

        if i + 1 >= len(tokens) or tokens[i + 1][0] != "atom":
            continue
        head = tokens[i + 1][1]
        rest = tokens[i + 2:]

        if head == "define":
            if not rest or rest[0][0] != "atom" or not isinstance(parse_atom(rest[0][1]), Symbol):
                problem("define expects a symbol name", rest[0][2] if rest else start)
                continue
            if depth != 1:
                continue
            _, name, name_start = rest[0]
            kind = "var"
            if len(rest) > 2 and rest[1][0] == "lparen" and rest[2][0] == "atom":
                kind = {"lambda": "function", "macro": "macro"}.get(rest[2][1], "var")
            line, col = _position_from_offset(text, name_start)
            idx.symbols[name] = SymbolDef(name=name, kind=kind, line=line, col=col)

        elif head in ("lambda", "macro"):
            if not rest or rest[0][0] != "lparen":
                problem(f"{head} expects a parameter list", rest[0][2] if rest else start)
                continue
            # parameters must be plain atoms up to the closing ')'
            for p_type, p_tok, p_start in rest[1:]:
                if p_type == "rparen":
                    break
                if p_type == "lparen":
                    problem(f"{head} parameters must be symbols", p_start)
                    break

    try:
        read(text)
    except LinslSyntaxError as e:
        problem(str(e), e.position if e.position is not None else 0)

    return idx


# Signatures for hover/signature help without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    "+": "(+ nums...)",
    "neg": "(neg x)",
    "*": "(* nums...)",
    "inv": "(inv x)",
    "=": "(= a b)",
    ">": "(> a b)",
    "car": "(car xs)",
    "cdr": "(cdr xs)",
    "empty?": "(empty? x)",
}

SPECIAL_FORM_SIGNATURES: Dict[str, str] = {
    "define": "(define name expr)",
    "if": "(if cond then else)",
    "lambda": "(lambda (params...) body)",
    "macro": "(macro (params...) body)",
    "quote": "(quote expr)",
}
