import io

import pytest

from sprig.errors import SprigSyntaxError
from sprig.reader.tokenizer import lex, tokenize
from sprig.types.symbol import Symbol
from sprig.types.token import Token, TokenKind

OPEN = Token(TokenKind.OPEN)
CLOSE = Token(TokenKind.CLOSE)
BRACE = Token(TokenKind.CLOSE_BRACE)


def sym(name):
    return Token(TokenKind.SYMBOL, Symbol(name))


def integer(n):
    return Token(TokenKind.INTEGER, n)


def double(x):
    return Token(TokenKind.DOUBLE, x)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [sym("a")]),
        ("(+ 1 2)", [OPEN, sym("+"), integer(1), integer(2), CLOSE]),
        ("(a b c)}", [OPEN, sym("a"), sym("b"), sym("c"), CLOSE, BRACE]),
        ("#t #f", [Token(TokenKind.BOOLEAN, True), Token(TokenKind.BOOLEAN, False)]),
        ('"hello world"', [Token(TokenKind.STRING, "hello world")]),
        ('"a ; (not) #x"', [Token(TokenKind.STRING, "a ; (not) #x")]),
        ('""', [Token(TokenKind.STRING, "")]),
        ("42 -7 +3", [integer(42), integer(-7), integer(3)]),
        ("3.25 -2.5 .5 +.5 3.", [double(3.25), double(-2.5), double(0.5), double(0.5), double(3.0)]),
        ("(- x)", [OPEN, sym("-"), sym("x"), CLOSE]),
        ("(+)", [OPEN, sym("+"), CLOSE]),
        ("(f -}", [OPEN, sym("f"), sym("-"), BRACE]),
        ("+", [sym("+")]),
        (" ; comment\n a b", [sym("a"), sym("b")]),
        ("a ; trailing comment", [sym("a")]),
        ("null? set-car! x->y <=? a1 *star* ^_^ ~:/", [
            sym("null?"), sym("set-car!"), sym("x->y"), sym("<=?"),
            sym("a1"), sym("*star*"), sym("^_^"), sym("~:/"),
        ]),
        ("12abc", [integer(12), sym("abc")]),
    ],
)
def test_lexer_basic(arena, source, expected):
    assert tokenize(source, arena) == expected


@pytest.mark.parametrize("source", ["", "    ", "; comment only", "\n\t\n"])
def test_lexer_empty_input(arena, source):
    assert tokenize(source, arena) == []


def test_integer_and_double_payload_types(arena):
    tokens = tokenize("1 1.0", arena)
    assert type(tokens[0].value) is int
    assert type(tokens[1].value) is float


def test_booleans_are_not_integers(arena):
    # Token equality is type-strict, so #t never matches the integer 1
    assert tokenize("#t", arena) != [integer(1)]


def test_lex_reads_text_stream(arena):
    assert tokenize(io.StringIO("(car x)"), arena) == [OPEN, sym("car"), sym("x"), CLOSE]


def test_lex_is_lazy(arena):
    tokens = lex("a b @", arena)
    assert next(tokens) == sym("a")
    assert next(tokens) == sym("b")
    with pytest.raises(SprigSyntaxError):
        next(tokens)


def test_tokens_are_allocated_from_the_arena(arena):
    tokens = tokenize("(a 1 \"s\")", arena)
    assert len(arena) == len(tokens) == 5


@pytest.mark.parametrize(
    "source,message",
    [
        ('"abc', "Unterminated string"),
        ("#x", "boolean"),
        ("#", "boolean"),
        (".x", "'.'"),
        (". 5", "'.'"),
        ("a.b", "'.'"),
        ("[a]", "Unrecognized character"),
        ("'a", "Unrecognized character"),
        ("+a", "Unrecognized character"),
        ("(-(x))", "Unrecognized character"),
        ("1.2.3", "Malformed number"),
    ],
)
def test_lexer_syntax_errors(arena, source, message):
    with pytest.raises(SprigSyntaxError, match=message):
        tokenize(source, arena)


def test_max_token_length_argument(arena):
    assert tokenize("abcde", arena, max_token_length=5) == [sym("abcde")]
    with pytest.raises(SprigSyntaxError, match="maximum length of 4"):
        tokenize("abcde", arena, max_token_length=4)


@pytest.mark.parametrize("source", ["123456", '"123456"', "-12345", "1234.5"])
def test_max_token_length_applies_to_every_literal(arena, source):
    with pytest.raises(SprigSyntaxError):
        tokenize(source, arena, max_token_length=5)


def test_max_token_length_from_environment(arena, monkeypatch):
    monkeypatch.setenv("SPRIG_MAX_TOKEN_LENGTH", "3")
    assert tokenize("abc", arena) == [sym("abc")]
    with pytest.raises(SprigSyntaxError):
        tokenize("abcd", arena)


def test_default_max_token_length(arena):
    assert tokenize("a" * 300, arena) == [sym("a" * 300)]
    with pytest.raises(SprigSyntaxError):
        tokenize("a" * 301, arena)
