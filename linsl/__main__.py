"""Command line entry point: run Linsl files, evaluate snippets, or start a REPL."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import Optional, Sequence, TextIO

from linsl.config import LOG_LEVELS, load_settings
from linsl.errors import LinslError
from linsl.interpreter import Interpreter
from linsl.printer import to_string
from linsl.reader import lex


def _needs_more_input(text: str) -> bool:
    # Keep reading lines while there are unclosed parentheses outside comments
    depth = 0
    for tok_type, _, _ in lex(text):
        if tok_type == "lparen":
            depth += 1
        elif tok_type == "rparen":
            depth -= 1
    return depth > 0


def repl(interp: Interpreter, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    """Read-eval-print loop. Errors are reported and the loop continues."""
    interactive = stdin.isatty()
    pending = ""
    while True:
        if interactive:
            stdout.write(interp.settings.prompt if not pending else "... ")
            stdout.flush()
        line = stdin.readline()
        if not line:
            break
        pending += line
        if _needs_more_input(pending):
            continue
        code, pending = pending, ""
        try:
            result = interp.eval(code)
        except (LinslError, RecursionError) as e:
            stdout.write(f"{type(e).__name__}: {e}\n")
            continue
        if result is not None:
            stdout.write(to_string(result) + "\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="linsl", description="Linsl interpreter")
    parser.add_argument("files", nargs="*", help="source files to run in order")
    parser.add_argument("-e", "--eval", dest="code", help="evaluate CODE and print the result")
    parser.add_argument("--serve", action="store_true", help="start the TCP REPL server")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="override LINSL_LOG_LEVEL")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    if args.log_level:
        settings = dataclasses.replace(settings, log_level=args.log_level)

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.serve:
        from linsl_lsp.repl_server import ReplServer
        ReplServer(settings=settings).serve_forever()
        return 0

    interp = Interpreter(settings)
    try:
        for path in args.files:
            interp.run_file(path)
        if args.code is not None:
            result = interp.eval(args.code)
            if result is not None:
                print(to_string(result))
    except (LinslError, OSError) as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1

    if args.files or args.code is not None:
        return 0
    return repl(interp)


if __name__ == "__main__":
    sys.exit(main())
