import pytest

from minischeme.errors import SchemeError, SchemeNameError, SchemeRuntimeError, SchemeSyntaxError


@pytest.mark.parametrize(
    "source,expected",
    [
        # literals
        ("42", "42"),
        ("-3", "-3"),
        ("#t", "#t"),
        ("x", "x"),
        # arithmetic
        ("(+ 1 2 3)", "6"),
        ("(+)", "0"),
        ("(*)", "1"),
        ("(* 2 3 4)", "24"),
        ("(- 10 3 2)", "5"),
        ("(- 5)", "5"),
        ("(/ 12 3)", "4"),
        ("(/ 7 2)", "3"),
        ("(/ -7 2)", "-3"),
        ("(/ 7 -2)", "-3"),
        ("(/ 100 5 2)", "10"),
        ("(min 3 1 2)", "1"),
        ("(max 3 1 2)", "3"),
        ("(max -4)", "-4"),
        ("(abs -5)", "5"),
        ("(abs 5)", "5"),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", "57"),
        ("(+ '1 2)", "3"),
        ("(+ 9223372036854775806 1)", "9223372036854775807"),
        # comparison
        ("(= 1 1 1)", "#t"),
        ("(= 1 2)", "#f"),
        ("(< 1 2 3)", "#t"),
        ("(< 1 2 2)", "#f"),
        ("(> 3 2 1)", "#t"),
        ("(<= 1 2 2)", "#t"),
        ("(>= 3 3 4)", "#f"),
        ("(<)", "#t"),
        ("(< 1)", "#t"),
        # predicates
        ("(number? 1)", "#t"),
        ("(number? #t)", "#f"),
        ("(number? 'a)", "#f"),
        ("(boolean? #f)", "#t"),
        ("(boolean? 0)", "#f"),
        ("(pair? '(1))", "#t"),
        ("(pair? (cons 1 2))", "#t"),
        ("(pair? '())", "#f"),
        ("(symbol? 'a)", "#t"),
        ("(symbol? a)", "#t"),
        ("(symbol? #t)", "#f"),
        ("(null? '())", "#t"),
        ("(null? '(1))", "#f"),
        ("(null? 0)", "#f"),
        ("(list? '())", "#t"),
        ("(list? (list 1 2 3))", "#t"),
        ("(list? (cons 1 2))", "#f"),
        ("(list? '(1 2 . 3))", "#f"),
        ("(list? 1)", "#f"),
        ("(not #f)", "#t"),
        ("(not #t)", "#f"),
        ("(not 0)", "#f"),
        ("(not '())", "#f"),
        # lists
        ("(cons 1 2)", "(1 . 2)"),
        ("(cons 1 '(2 3))", "(1 2 3)"),
        ("(cons '() '())", "(())"),
        ("(car '(1 2))", "1"),
        ("(car (cons 1 2))", "1"),
        ("(cdr '(1 2))", "(2)"),
        ("(cdr '(1))", "()"),
        ("(cdr (cons 1 2))", "2"),
        ("(cdr '(1 2 . 3))", "(2 . 3)"),
        ("(car '((1 2) 3))", "(1 2)"),
        ("(list)", "()"),
        ("(list 1 2 3)", "(1 2 3)"),
        ("(list (list 1) 2)", "((1) 2)"),
        ("(list (+ 1 1) 'a #f)", "(2 a #f)"),
        ("(list-ref '(10 20 30) 0)", "10"),
        ("(list-ref (list 10 20 30) 1)", "20"),
        ("(list-ref '((1 2) 3) 0)", "(1 2)"),
        ("(list-tail '(1 2 3) 0)", "(1 2 3)"),
        ("(list-tail '(1 2 3) 1)", "(2 3)"),
        ("(list-tail '(1 2 3) 3)", "()"),
        ("(list-tail '() 0)", "()"),
    ]
)
def test_builtins(interp, source, expected):
    assert interp.run(source) == expected


@pytest.mark.parametrize(
    "source",
    [
        "(+ 1 #t)",
        "(+ 1 'a)",
        "(* (list 1) 2)",
        "(-)",
        "(/)",
        "(min)",
        "(max)",
        "(/ 1 0)",
        "(/ 5 2 0)",
        "(+ 9223372036854775807 1)",
        "(- -9223372036854775808 1)",
        "(* 4611686018427387904 2)",
        "(/ -9223372036854775808 -1)",
        "(abs -9223372036854775808)",
        "(abs)",
        "(abs 1 2)",
        "(abs #t)",
        "(< 1 #t)",
        "(= 'a 'a)",
        "(number?)",
        "(number? 1 2)",
        "(boolean?)",
        "(pair? 1 2)",
        "(symbol?)",
        "(null?)",
        "(list? 1 2)",
        "(not)",
        "(not 1 2)",
        "(cons 1)",
        "(cons 1 2 3)",
        "(car '())",
        "(car 1)",
        "(car)",
        "(cdr '())",
        "(cdr 1 2)",
        "(list-ref (list 10 20 30) 3)",
        "(list-ref '(1 2) -1)",
        "(list-ref '(1 . 2) 0)",
        "(list-ref 1 0)",
        "(list-ref '(1 2) #t)",
        "(list-ref '(1 2))",
        "(list-tail '(1 2 3) 4)",
        "(list-tail '(1 2 3) -1)",
        "(list-tail '(1 . 2) 0)",
        "(list-tail '(1 2) 'a)",
    ]
)
def test_builtin_contract_violations(interp, source):
    with pytest.raises(SchemeRuntimeError):
        interp.run(source)


def test_unbound_symbol(interp):
    with pytest.raises(SchemeNameError):
        interp.run("(never-defined 1 2)")
    with pytest.raises(SchemeNameError):
        interp.run("(+ 1 (never-defined))")


@pytest.mark.parametrize("source", ["(+ 1 2", "(+ 1 2))", "9223372036854775808", "(1 . 2 3)"])
def test_run_syntax_errors(interp, source):
    with pytest.raises(SchemeSyntaxError):
        interp.run(source)


def test_errors_share_a_base(interp):
    for source in ["(", "(car 1)", "(nope)"]:
        with pytest.raises(SchemeError):
            interp.run(source)
