from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from linsl import Expression
from linsl.config import Settings, load_settings
from linsl.evaluation.evaluator import evaluate
from linsl.reader.parser import read
from linsl.types.environment import Environment


class Interpreter:
    """
    Orchestrates reading and evaluating Linsl code.
    Maintains one top-level Environment across calls, so definitions persist.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings: Settings = settings if settings is not None else load_settings()
        self.env: Environment = Environment()
        self._logger = logging.getLogger("Interpreter")

    def eval_expr(self, expr: Expression) -> Expression:
        """Evaluate one already-parsed expression in the top-level environment."""
        return evaluate(expr, self.env, self.settings.expand_macros)

    def eval(self, code: str) -> Optional[Expression]:
        """
        Read `code` and evaluate each top-level expression left to right.
        Returns the last result, or None if there was nothing to evaluate.
        An error aborts the remaining expressions; earlier defines persist.
        """
        result = None
        for expr in read(code):
            self._logger.debug("evaluating %r", expr)
            result = self.eval_expr(expr)
        return result

    def run_file(self, path: str | Path) -> Optional[Expression]:
        self._logger.info("running %s", path)
        return self.eval(Path(path).read_text(encoding="utf-8"))
