import io

import pytest

from sprig.__main__ import main
from sprig.errors import SprigSyntaxError
from sprig.interpreter import Interpreter


@pytest.fixture
def source_file(tmp_path):
    def _write(text):
        path = tmp_path / "program.scm"
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


def test_main_interprets_file(source_file, capsys):
    path = source_file(
        """
        (define x 5)
        x
        (+ x 2.5)
        (map (lambda (n) (+ n 1)) (quote (1 2)))
        (if #f 1)
        """
    )
    assert main([path]) == 0
    assert capsys.readouterr().out == "\n5\n7.500000\n(2 3)\n#<unspecified>\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(cons 1 2)"))
    assert main([]) == 0
    assert capsys.readouterr().out == "(1 . 2)\n"


def test_main_evaluation_error_exits_1(source_file, capsys):
    path = source_file("(+ 1 1)\n(car (quote ()))\n(+ 2 2)\n")
    assert main([path]) == 1
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "2"
    assert out[1].startswith("Evaluation error")
    assert len(out) == 2


def test_main_syntax_error_exits_1(source_file, capsys):
    path = source_file("(+ 1 1) (+ 2 2")
    assert main([path]) == 1
    assert capsys.readouterr().out == "Syntax error: not enough close parentheses\n"


def test_main_unterminated_string(source_file, capsys):
    assert main([source_file('"abc')]) == 1
    assert capsys.readouterr().out == "Syntax error: Unterminated string\n"


def test_main_tokenize_mode(source_file, monkeypatch, capsys):
    monkeypatch.setenv("SPRIG_MODE", "tokenize")
    assert main([source_file("(f 1)")]) == 0
    assert capsys.readouterr().out == "(:open\nf:symbol\n1:integer\n):close\n\n"


def test_main_parse_mode(source_file, monkeypatch, capsys):
    monkeypatch.setenv("SPRIG_MODE", "parse")
    assert main([source_file("(a (b c}(d)")]) == 0
    assert capsys.readouterr().out == "(a (b c)) (d)\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.scm")]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_main_usage(capsys):
    assert main(["a", "b"]) == 2
    assert "usage" in capsys.readouterr().err


def test_trace_prints_trees_to_stderr(monkeypatch, capsys):
    monkeypatch.setenv("SPRIG_TRACE", "1")
    with Interpreter() as interp:
        interp.run("(+ 1 2)")
    captured = capsys.readouterr()
    assert captured.out == "3\n"
    assert captured.err == ";; eval: (+ 1 2)\n"


def test_interpreter_token_limit_override():
    with Interpreter(max_token_length=2) as interp:
        assert interp.eval("12") == 12
        with pytest.raises(SprigSyntaxError):
            interp.eval("123")


def test_main_deep_recursion_is_an_evaluation_error(source_file, capsys):
    path = source_file("(define f (lambda (x) (f x)))\n(f 1)\n")
    assert main([path]) == 1
    out = capsys.readouterr().out.splitlines()
    assert out == ["", "Evaluation error: maximum recursion depth exceeded"]


def test_main_invalid_utf8_file_is_a_syntax_error(tmp_path, capsys):
    path = tmp_path / "program.scm"
    path.write_bytes(b"(+ 1 \xff)")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == "Syntax error: Unrecognized character '\\xff'\n"
    assert captured.err == ""


def test_main_invalid_utf8_stdin_is_a_syntax_error(monkeypatch, capsys):
    stdin = io.TextIOWrapper(io.BytesIO(b"(+ 1 2)\n\xfe"), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", stdin)
    assert main([]) == 1
    assert capsys.readouterr().out == "Syntax error: Unrecognized character '\\xfe'\n"


def test_main_reads_crlf_source(tmp_path, capsys):
    path = tmp_path / "program.scm"
    path.write_bytes(b"(+ 1 2) ; sum\r\n(car (quote (a)))\r\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "3\na\n"


@pytest.mark.parametrize(
    "var,value",
    [
        ("SPRIG_MODE", "bogus"),
        ("SPRIG_MAX_TOKEN_LENGTH", "lots"),
        ("SPRIG_MAX_TOKEN_LENGTH", "0"),
    ],
)
def test_main_bad_configuration_exits_1(source_file, monkeypatch, capsys, var, value):
    monkeypatch.setenv(var, value)
    assert main([source_file("(+ 1 2)")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert len(captured.err.splitlines()) == 1
    assert captured.err.startswith(f"sprig: {var} must be")


def test_main_token_limit_from_environment(source_file, monkeypatch, capsys):
    monkeypatch.setenv("SPRIG_MAX_TOKEN_LENGTH", "3")
    assert main([source_file("(+ 100 1000)")]) == 1
    assert capsys.readouterr().out.startswith("Syntax error: Token exceeds maximum length of 3")


def test_interpreter_accepts_bytes(interp):
    assert interp.eval(b"(+ 1 2)") == 3
    with pytest.raises(SprigSyntaxError, match="Unrecognized character"):
        interp.eval(b"\x80")
