from dataclasses import dataclass, field
from typing import Union

from calclang.errors import CalcError
from calclang.tokenizer import Token, TokenType
from calclang.utils import PrintableEnum


class ParserError(CalcError):
    pass


class BinaryOperator(PrintableEnum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    EQ = "=="
    NE = "!="

    @property
    def symbol(self) -> str:
        return self.value


class UnaryOperator(PrintableEnum):
    NEG = "-"

    @property
    def symbol(self) -> str:
        return self.value


# token is kept on every node only to report error columns
@dataclass
class BinaryOperation:
    operator: BinaryOperator
    left: "Expression"
    right: "Expression"
    token: Token = field(repr=False, compare=False)


@dataclass
class UnaryOperation:
    operator: UnaryOperator
    operand: "Expression"
    token: Token = field(repr=False, compare=False)


@dataclass
class NumberLiteral:
    v: float
    token: Token = field(repr=False, compare=False)


@dataclass
class StringLiteral:
    v: str
    token: Token = field(repr=False, compare=False)


@dataclass
class Variable:
    name: str
    token: Token = field(repr=False, compare=False)


@dataclass
class ExpressionStatement:
    expression: "Expression"
    token: Token = field(repr=False, compare=False)


@dataclass
class Assignment:
    target: Variable
    value: "Expression"
    token: Token = field(repr=False, compare=False)


Expression = Union[BinaryOperation, UnaryOperation, NumberLiteral, StringLiteral, Variable]
Statement = Union[ExpressionStatement, Assignment]

# loosest-binding level first, each level is left-associative
BINARY_OPERATOR_LEVELS: list[dict[TokenType, BinaryOperator]] = [
    {
        TokenType.EQUAL_EQUAL: BinaryOperator.EQ,
        TokenType.BANG_EQUAL: BinaryOperator.NE,
    },
    {
        TokenType.PLUS: BinaryOperator.ADD,
        TokenType.MINUS: BinaryOperator.SUB,
    },
    {
        TokenType.STAR: BinaryOperator.MUL,
        TokenType.SLASH: BinaryOperator.DIV,
    },
]


def parse(tokens: list[Token]) -> list[Statement]:
    """Parses a whole line into statements. tokens must end with an EXPR_END token.

    Semicolons between statements are optional and skipped.
    """
    result: list[Statement] = []
    i = 0
    while True:
        while tokens[i].type is TokenType.SEMICOLON:
            i += 1
        if tokens[i].type is TokenType.EXPR_END:
            break
        statement, i = _consume_statement(tokens, i)
        result.append(statement)
    return result


def _consume_statement(tokens: list[Token], i: int) -> tuple[Statement, int]:
    expr, i = _consume_expression(tokens, i)
    if tokens[i].type is not TokenType.EQUAL:
        return ExpressionStatement(expression=expr, token=tokens[i - 1]), i

    equal_token = tokens[i]
    if not isinstance(expr, Variable):
        raise ParserError("only identifiers can be assigned to", pos=equal_token.pos)
    value, i = _consume_expression(tokens, i + 1)
    return Assignment(target=expr, value=value, token=equal_token), i


def _consume_expression(tokens: list[Token], i: int) -> tuple[Expression, int]:
    return _consume_binary(tokens, i, level=0)


def _consume_binary(tokens: list[Token], i: int, level: int) -> tuple[Expression, int]:
    if level == len(BINARY_OPERATOR_LEVELS):
        return _consume_unary(tokens, i)

    operators = BINARY_OPERATOR_LEVELS[level]
    left, i = _consume_binary(tokens, i, level + 1)
    while tokens[i].type in operators:
        operator_token = tokens[i]
        right, i = _consume_binary(tokens, i + 1, level + 1)
        left = BinaryOperation(
            operator=operators[operator_token.type],
            left=left,
            right=right,
            token=operator_token,
        )
    return left, i


def _consume_unary(tokens: list[Token], i: int) -> tuple[Expression, int]:
    if tokens[i].type is TokenType.MINUS:
        operator_token = tokens[i]
        operand, i = _consume_unary(tokens, i + 1)
        return UnaryOperation(operator=UnaryOperator.NEG, operand=operand, token=operator_token), i
    return _consume_operand(tokens, i)


def _consume_operand(tokens: list[Token], i: int) -> tuple[Expression, int]:
    first = tokens[i]
    if first.type is TokenType.NUMBER:
        return NumberLiteral(float(first.value), token=first), i + 1  # type: ignore
    elif first.type is TokenType.STRING:
        return StringLiteral(str(first.value), token=first), i + 1
    elif first.type is TokenType.IDENTIFIER:
        return Variable(first.lexeme, token=first), i + 1
    elif first.type is TokenType.BRACKET_OPEN:
        expr, i = _consume_expression(tokens, i + 1)
        if tokens[i].type is not TokenType.BRACKET_CLOSE:
            raise ParserError("expected closing parenthesis", pos=tokens[i].pos)
        return expr, i + 1
    else:
        raise ParserError("invalid expression", pos=first.pos)
