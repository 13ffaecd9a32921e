from __future__ import annotations
import sys
from typing import Iterator, TextIO

from sprig import SExpression, LispValue
from sprig.arena import Arena
from sprig.builtin.env_builtin import register
from sprig.config import trace_enabled
from sprig.evaluation.evaluator import evaluate
from sprig.printer import to_lisp_string
from sprig.reader.parser import parse
from sprig.reader.tokenizer import tokenize
from sprig.types.environment import Frame
from sprig.types.token import Token
from sprig.types.values import Void


class Interpreter:
    """
    Orchestrates tokenizing, parsing and evaluating Sprig code.
    Owns one Arena and one global Frame across calls; instances share nothing.
    """

    def __init__(self, arena: Arena | None = None, *, max_token_length: int | None = None):
        self.arena: Arena = arena if arena is not None else Arena()
        self.max_token_length = max_token_length
        self.global_frame: Frame = self.arena.frame()
        register(self.global_frame, self.arena)

    def tokenize(self, source: str | bytes | TextIO) -> list[Token]:
        return tokenize(source, self.arena, self.max_token_length)

    def parse(self, source: str | bytes | TextIO) -> list[SExpression]:
        return parse(self.tokenize(source), self.arena)

    def eval_forms(self, source: str | bytes | TextIO) -> Iterator[LispValue]:
        """Yield the value of each top-level expression in order.

        The whole source is parsed before anything is evaluated, so a syntax
        error anywhere means no expression runs. An evaluation error stops the
        iteration at the failing expression.
        """
        for expr in self.parse(source):
            if trace_enabled():
                print(f";; eval: {to_lisp_string(expr)}", file=sys.stderr)
            yield evaluate(expr, self.global_frame, self.arena)

    def eval(self, code: str | bytes | TextIO) -> LispValue:
        results = list(self.eval_forms(code))
        if not results:
            return Void
        if len(results) == 1:
            return results[0]
        return results

    def run(self, source: str | bytes | TextIO, out: TextIO | None = None) -> None:
        """Print each result as it is produced, one per line."""
        for result in self.eval_forms(source):
            print(to_lisp_string(result), file=out)

    def close(self) -> None:
        """Release the arena. Further use of this interpreter is an error."""
        self.arena.release()

    def __enter__(self) -> Interpreter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self.arena.released:
            self.close()
