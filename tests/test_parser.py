import pytest

from calclang.parser import (
    Assignment,
    BinaryOperation,
    BinaryOperator,
    ExpressionStatement,
    NumberLiteral,
    Statement,
    StringLiteral,
    UnaryOperation,
    UnaryOperator,
    Variable,
    parse,
)
from calclang.tokenizer import Token, TokenType, tokenize

# tokens are excluded from node comparison, any token will do
T = Token(type=TokenType.EXPR_END, lexeme="", pos=0)


def num(v: float) -> NumberLiteral:
    return NumberLiteral(v, token=T)


def var(name: str) -> Variable:
    return Variable(name, token=T)


def binop(operator: BinaryOperator, left, right) -> BinaryOperation:
    return BinaryOperation(operator=operator, left=left, right=right, token=T)


@pytest.mark.parametrize(
    "code, expected",
    [
        pytest.param("", []),
        pytest.param(";;", []),
        pytest.param("1", [ExpressionStatement(num(1), token=T)]),
        pytest.param(
            "1 - 2 - 3",
            [
                ExpressionStatement(
                    binop(BinaryOperator.SUB, binop(BinaryOperator.SUB, num(1), num(2)), num(3)),
                    token=T,
                )
            ],
        ),
        pytest.param(
            "1 + 2 * 3",
            [
                ExpressionStatement(
                    binop(BinaryOperator.ADD, num(1), binop(BinaryOperator.MUL, num(2), num(3))),
                    token=T,
                )
            ],
        ),
        pytest.param(
            "a + 1 == b",
            [
                ExpressionStatement(
                    binop(BinaryOperator.EQ, binop(BinaryOperator.ADD, var("a"), num(1)), var("b")),
                    token=T,
                )
            ],
        ),
        pytest.param(
            "--x",
            [
                ExpressionStatement(
                    UnaryOperation(
                        UnaryOperator.NEG,
                        UnaryOperation(UnaryOperator.NEG, var("x"), token=T),
                        token=T,
                    ),
                    token=T,
                )
            ],
        ),
        pytest.param(
            'x = "s" != "t"',
            [
                Assignment(
                    target=var("x"),
                    value=binop(BinaryOperator.NE, StringLiteral("s", token=T), StringLiteral("t", token=T)),
                    token=T,
                )
            ],
        ),
        pytest.param(
            "(x) = 1; 2",
            [
                Assignment(target=var("x"), value=num(1), token=T),
                ExpressionStatement(num(2), token=T),
            ],
        ),
    ],
)
def test_parse(code: str, expected: list[Statement]) -> None:
    assert parse(tokenize(code)) == expected


def test_nodes_keep_introducing_token() -> None:
    [statement] = parse(tokenize("x = 1 * y"))
    assert isinstance(statement, Assignment)
    assert statement.token.type is TokenType.EQUAL
    assert statement.token.pos == 3
    assert isinstance(statement.value, BinaryOperation)
    assert statement.value.token.type is TokenType.STAR
    assert statement.value.right.token.pos == 9
