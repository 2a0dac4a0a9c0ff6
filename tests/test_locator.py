from funclog.analysis.extractor import extract_functions
from funclog.parsing.go_parser import parse_go
from funclog.parsing.ir import Position

from helpers import EARLY_RETURN, MIXED, SIMPLE, go


def _by_name(text):
    return {r.name: r for r in extract_functions(parse_go(text))}


def test_trailing_return_adds_no_synthetic_exit():
    hello = _by_name(SIMPLE)["Hello"]
    assert hello.entry == Position(6, 2)
    assert hello.exits == [Position(6, 2)]


def test_early_return_then_fall_through():
    a = _by_name(EARLY_RETURN)["A"]
    assert a.entry == Position(4, 2)
    # nested return, then the closing brace at the last statement's column
    assert a.exits == [Position(5, 3), Position(8, 2)]


def test_empty_body_uses_the_opening_brace():
    empty = _by_name(MIXED)["Empty"]
    assert empty.entry == Position(9, 14)
    assert empty.exits == [Position(10, 14)]


def test_every_return_counts_when_last_statement_returns():
    start = _by_name(MIXED)["Start"]
    assert start.entry == Position(13, 2)
    assert start.exits == [Position(14, 3), Position(17, 2)]


def test_comments_are_not_statements():
    loop = _by_name(MIXED)["Loop"]
    assert loop.entry == Position(22, 2)
    assert loop.exits == [Position(24, 4), Position(28, 2)]


def test_no_return_gets_one_exit_at_closing_brace():
    text = go(
        "package main",
        "",
        "func Greet(name string) {",
        "\tmsg := name",
        '\tfmt.Println("hello", msg)',
        "}",
    )
    greet = _by_name(text)["Greet"]
    assert greet.exits == [Position(6, 2)]


def test_exits_never_empty():
    for record in _by_name(MIXED).values():
        assert record.exits


def test_return_inside_function_literal_counts():
    text = go(
        "package main",
        "",
        "func Run() {",
        "\tf := func() int {",
        "\t\treturn 1",
        "\t}",
        "\tf()",
        "}",
    )
    run = _by_name(text)["Run"]
    assert run.entry == Position(4, 2)
    assert run.exits == [Position(5, 3), Position(8, 2)]
