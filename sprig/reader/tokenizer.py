"""
  Sprig Lexer

Turns source text into an ordered stream of Tokens:

    (  )  }              -> OPEN, CLOSE, CLOSE_BRACE
    #t #f                -> BOOLEAN
    42 -7 3.5 .5 +1.     -> INTEGER / DOUBLE (a '.' makes it a double)
    "text"               -> STRING (no escape processing)
    foo set! + -         -> SYMBOL
    ; ...                -> comment to end of line

Every token is allocated through the arena passed in.
"""

from __future__ import annotations

import string
from typing import Iterator, TextIO

from sprig.arena import Arena
from sprig.config import get_max_token_length
from sprig.errors import SprigSyntaxError
from sprig.types.symbol import Symbol
from sprig.types.token import Token, TokenKind

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)
# Characters that may start a symbol besides letters
SYMBOL_INITIALS = frozenset("!$%&*/:<=>?~_^")
# Characters that may continue a symbol besides letters and digits
SYMBOL_SUBSEQUENTS = SYMBOL_INITIALS | frozenset("+-")

STRUCTURAL_TOKENS = {
    "(": TokenKind.OPEN,
    ")": TokenKind.CLOSE,
    "}": TokenKind.CLOSE_BRACE,
}


def _read_source(source: str | bytes | TextIO) -> str:
    try:
        if isinstance(source, str):
            return source
        if isinstance(source, bytes):
            return source.decode("utf-8")
        return source.read()
    except UnicodeDecodeError as e:
        raise SprigSyntaxError(
            f"Unrecognized character '\\x{e.object[e.start]:02x}'"
        ) from e


def lex(
    source: str | bytes | TextIO, arena: Arena, max_token_length: int | None = None
) -> Iterator[Token]:
    """Token generator over `source`: a string, UTF-8 bytes or a readable text stream."""
    text = _read_source(source)
    limit = max_token_length if max_token_length is not None else get_max_token_length()
    pos = 0
    n = len(text)

    def check_length(lexeme: str) -> None:
        if len(lexeme) > limit:
            raise SprigSyntaxError(
                f"Token exceeds maximum length of {limit} characters: {lexeme[:20]}..."
            )

    def scan_number(start: int) -> tuple[int, Token]:
        # Optional sign, then digits and dots
        end = start
        if text[end] in "+-":
            end += 1
        while end < n and (text[end] in DIGITS or text[end] == "."):
            end += 1
        lexeme = text[start:end]
        check_length(lexeme)
        dots = lexeme.count(".")
        if dots > 1:
            raise SprigSyntaxError(f"Malformed number {lexeme!r}")
        if dots == 1:
            return end, arena.token(TokenKind.DOUBLE, float(lexeme))
        return end, arena.token(TokenKind.INTEGER, int(lexeme))

    def starts_fraction(at: int) -> bool:
        return at + 1 < n and text[at] == "." and text[at + 1] in DIGITS

    while pos < n:
        ch = text[pos]

        if ch.isspace():
            pos += 1
            continue

        if ch in STRUCTURAL_TOKENS:
            yield arena.token(STRUCTURAL_TOKENS[ch])
            pos += 1
            continue

        # ----------------------
        # Booleans
        # ----------------------
        if ch == "#":
            nxt = text[pos + 1] if pos + 1 < n else ""
            if nxt == "t":
                yield arena.token(TokenKind.BOOLEAN, True)
            elif nxt == "f":
                yield arena.token(TokenKind.BOOLEAN, False)
            else:
                raise SprigSyntaxError(f"Invalid boolean literal #{nxt}")
            pos += 2
            continue

        # ----------------------
        # Numbers and the + / - symbols
        # ----------------------
        if ch in DIGITS:
            pos, token = scan_number(pos)
            yield token
            continue

        if ch == ".":
            if not starts_fraction(pos):
                raise SprigSyntaxError("'.' must be followed by a digit")
            pos, token = scan_number(pos)
            yield token
            continue

        if ch in "+-":
            nxt = text[pos + 1] if pos + 1 < n else ""
            if nxt in DIGITS or starts_fraction(pos + 1):
                pos, token = scan_number(pos)
                yield token
            elif nxt == "" or nxt.isspace() or nxt in ")}":
                yield arena.token(TokenKind.SYMBOL, Symbol(ch))
                pos += 1
            else:
                raise SprigSyntaxError(f"Unrecognized character {nxt!r} after {ch!r}")
            continue

        # ----------------------
        # Strings
        # ----------------------
        if ch == '"':
            end = text.find('"', pos + 1)
            if end == -1:
                raise SprigSyntaxError("Unterminated string")
            body = text[pos + 1:end]
            check_length(body)
            yield arena.token(TokenKind.STRING, body)
            pos = end + 1
            continue

        # ----------------------
        # Comments
        # ----------------------
        if ch == ";":
            end = text.find("\n", pos)
            pos = n if end == -1 else end + 1
            continue

        # ----------------------
        # Symbols
        # ----------------------
        if ch in LETTERS or ch in SYMBOL_INITIALS:
            end = pos + 1
            while end < n and (
                text[end] in LETTERS or text[end] in DIGITS or text[end] in SYMBOL_SUBSEQUENTS
            ):
                end += 1
            lexeme = text[pos:end]
            check_length(lexeme)
            yield arena.token(TokenKind.SYMBOL, Symbol(lexeme))
            pos = end
            continue

        raise SprigSyntaxError(f"Unrecognized character {ch!r}")


def tokenize(
    source: str | bytes | TextIO, arena: Arena, max_token_length: int | None = None
) -> list[Token]:
    """Read `source` to exhaustion and return its tokens in order."""
    return list(lex(source, arena, max_token_length))
