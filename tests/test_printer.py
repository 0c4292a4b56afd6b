import pytest

from minischeme.builtin import BUILTINS
from minischeme.errors import SchemeInternalError
from minischeme.printer import render
from minischeme.reader.parser import parse
from minischeme.types.nil import Nil
from minischeme.types.pair import Pair, make_list
from minischeme.types.symbol import Symbol


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "0"),
        (-15, "-15"),
        (True, "#t"),
        (False, "#f"),
        (Symbol("list-ref"), "list-ref"),
        (Nil, "()"),
        (Pair(1), "(1)"),
        (Pair(1, 2), "(1 . 2)"),
        (Pair(1, Pair(2, 3)), "(1 2 . 3)"),
        (Pair(Pair(1), Pair(Pair(2, 3))), "((1) (2 . 3))"),
        (Pair(Nil, Nil), "(())"),
        (make_list([1, True, Symbol("x")]), "(1 #t x)"),
    ]
)
def test_render(value, expected):
    assert render(value) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(1 . (2 3))", "(1 2 3)"),
        ("(1 . (2 . 3))", "(1 2 . 3)"),
        ("( 1  2\n 3 )", "(1 2 3)"),
        ("'x", "(quote x)"),
    ]
)
def test_render_parsed(source, expected):
    assert render(parse(source)) == expected


def test_render_procedure_fails():
    with pytest.raises(SchemeInternalError):
        render(BUILTINS[Symbol("car")])
    with pytest.raises(SchemeInternalError):
        render(Pair(1, BUILTINS[Symbol("car")]))


def test_render_foreign_value_fails():
    with pytest.raises(SchemeInternalError):
        render(1.5)
