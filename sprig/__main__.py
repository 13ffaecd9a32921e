"""Command-line driver: `python -m sprig [FILE]`.

Reads FILE, or standard input, and runs it in the SPRIG_MODE mode
(interpret, tokenize or parse). Exits 0 on success and 1 after printing a
single diagnostic on the first syntax or evaluation error.
"""

from __future__ import annotations
import sys

from sprig.config import get_max_token_length, get_mode
from sprig.errors import SprigSyntaxError, SprigEvaluationError
from sprig.interpreter import Interpreter
from sprig.printer import display_tokens, print_tree


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) > 1:
        print("usage: sprig [FILE]", file=sys.stderr)
        return 2

    try:
        mode = get_mode()
        max_token_length = get_max_token_length()
    except ValueError as e:
        print(f"sprig: {e}", file=sys.stderr)
        return 1

    if args:
        try:
            # The tokenizer decodes; invalid UTF-8 is a syntax error
            with open(args[0], "rb") as f:
                source = f.read()
        except OSError as e:
            print(f"sprig: cannot read {args[0]}: {e.strerror}", file=sys.stderr)
            return 1
    else:
        source = sys.stdin

    interp = Interpreter(max_token_length=max_token_length)
    try:
        if mode == "tokenize":
            display_tokens(interp.tokenize(source))
        elif mode == "parse":
            print_tree(interp.parse(source))
        else:
            interp.run(source)
    except SprigSyntaxError as e:
        print(f"Syntax error: {e}")
        return 1
    except SprigEvaluationError as e:
        print(f"Evaluation error: {e}")
        return 1
    except RecursionError:
        # No tail-call elimination: deep recursion exhausts the Python stack
        print("Evaluation error: maximum recursion depth exceeded")
        return 1
    finally:
        interp.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
