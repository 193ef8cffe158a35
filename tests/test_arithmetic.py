import pytest

from calclang.parser import parse
from calclang.runtime import evaluate
from calclang.tokenizer import tokenize
from calclang.value import Boolean, Null, Number, String, Value


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1", Number(1.0)),
        pytest.param("-1", Number(-1.0)),
        pytest.param("--1", Number(1.0)),
        pytest.param("1+2", Number(3.0)),
        pytest.param("(1+2)", Number(3.0)),
        pytest.param("-(1+2)", Number(-3.0)),
        pytest.param("(((1)))", Number(1.0)),
        pytest.param("1 * 4 + 5", Number(9.0)),
        pytest.param("1 + 4 * 5", Number(21.0)),
        pytest.param("2 + 3 * 4", Number(14.0)),
        pytest.param("(2 + 3) * 4", Number(20.0)),
        pytest.param("-2 * -3", Number(6.0)),
        pytest.param("10 - 4 - 3", Number(3.0)),
        pytest.param("10 / 5 / 2 / 2", Number(0.5)),
        pytest.param("10 + 2 * (5 + 3 - 1)", Number(24.0)),
        pytest.param("1.5 * 2", Number(3.0)),
        pytest.param("0.1 + 0.2", Number(0.1 + 0.2)),
        # strings
        pytest.param('"ab" + "cd"', String("abcd")),
        pytest.param('"a" + "b" + "c"', String("abc")),
        pytest.param('""', String("")),
        # booleans and equality
        pytest.param("true", Boolean(True)),
        pytest.param("false", Boolean(False)),
        pytest.param("1 == 1", Boolean(True)),
        pytest.param("1 != 1", Boolean(False)),
        pytest.param("1 + 1 == 2", Boolean(True)),
        pytest.param('"a" != "b"', Boolean(True)),
        pytest.param('"abc" == "ab" + "c"', Boolean(True)),
        pytest.param('"A" == "a"', Boolean(False)),
        pytest.param("true == false", Boolean(False)),
        pytest.param("true != false", Boolean(True)),
        pytest.param("1 == 1 == true", Boolean(True)),
        pytest.param("0 == -0", Boolean(True)),
        # variables
        pytest.param("a = 1; a", Number(1.0)),
        pytest.param("a = 1 a", Number(1.0)),
        pytest.param("a = 1; b = 2; a + b", Number(3.0)),
        pytest.param("a = 1; b = 2; c = a + b", Null()),
        pytest.param('s = "x"; s + s', String("xx")),
        pytest.param("flag = 1 == 2; flag", Boolean(False)),
        pytest.param("snake_case_2 = 4; snake_case_2 * 2", Number(8.0)),
    ],
)
def test_eval_arithmetic(code: str, expected_ret_val: Value) -> None:
    tokens = tokenize(code)
    ast = parse(tokens)
    results = evaluate(ast, variables={})
    assert results[-1] == expected_ret_val


def test_assignment_binds_variable() -> None:
    variables: dict[str, Value] = {}
    evaluate(parse(tokenize("x = 5; y = x * 2; x = 10")), variables)
    assert variables == {"x": Number(10.0), "y": Number(10.0)}


def test_every_statement_has_a_result() -> None:
    results = evaluate(parse(tokenize("1 2; x = 3; x")), variables={})
    assert results == [Number(1.0), Number(2.0), Null(), Number(3.0)]
