from typing import Type

from calclang.errors import CalcError
from calclang.parser import (
    Assignment,
    BinaryOperation,
    BinaryOperator,
    Expression,
    ExpressionStatement,
    NumberLiteral,
    Statement,
    StringLiteral,
    UnaryOperation,
    UnaryOperator,
    Variable,
)
from calclang.tokenizer import Token
from calclang.value import BinaryOperationImpl, Boolean, Null, Number, String, UnaryOperationImpl, Value


class CalcRuntimeError(CalcError):
    pass


BOOLEAN_LITERALS = {"true": Boolean(True), "false": Boolean(False)}

EQUALITY_OPERATORS = {BinaryOperator.EQ, BinaryOperator.NE}


def evaluate(statements: list[Statement], variables: dict[str, Value]) -> list[Value]:
    results: list[Value] = []
    for statement in statements:
        results.append(evaluate_statement(statement, variables))
    return results


def evaluate_statement(statement: Statement, variables: dict[str, Value]) -> Value:
    """Evaluates one top-level statement. Assignments bind the name in variables and yield Null"""
    if isinstance(statement, ExpressionStatement):
        return evaluate_expression(statement.expression, variables)
    elif isinstance(statement, Assignment):
        name = statement.target.name
        if name in BOOLEAN_LITERALS:
            raise CalcRuntimeError(f"cannot assign to reserved word '{name}'", pos=statement.token.pos)
        variables[name] = evaluate_expression(statement.value, variables)
        return Null()
    else:
        raise RuntimeError(f"Unexpected statement type: {statement}")


def evaluate_expression(expression: Expression, variables: dict[str, Value]) -> Value:
    if isinstance(expression, NumberLiteral):
        return Number(expression.v)
    elif isinstance(expression, StringLiteral):
        return String(expression.v)
    elif isinstance(expression, Variable):
        if expression.name in BOOLEAN_LITERALS:
            return BOOLEAN_LITERALS[expression.name]
        elif expression.name in variables:
            return variables[expression.name]
        else:
            raise CalcRuntimeError(f"unresolved symbol '{expression.name}'", pos=expression.token.pos)
    elif isinstance(expression, BinaryOperation):
        left_res = evaluate_expression(expression.left, variables)
        right_res = evaluate_expression(expression.right, variables)
        return eval_binary_operation(expression.operator, left_res, right_res, expression.token)
    elif isinstance(expression, UnaryOperation):
        operand = evaluate_expression(expression.operand, variables)
        if expression.operator is UnaryOperator.NEG:
            return eval_unary_operation(table=neg_impls, operand=operand, token=expression.token)
        else:
            raise RuntimeError(f"Unexpected unary operator: {expression.operator}")
    else:
        raise RuntimeError(f"Unexpected expression type: {expression}")


BinaryOperationImplTable = list[tuple[tuple[Type[Value], Type[Value]], BinaryOperationImpl]]


def eval_binary_operation(operator: BinaryOperator, a: Value, b: Value, token: Token) -> Value:
    if type(a) is not type(b):
        raise CalcRuntimeError(f"type mismatch: {a.type_name()} and {b.type_name()}", pos=token.pos)
    if operator not in EQUALITY_OPERATORS:
        if isinstance(a, Boolean):
            raise CalcRuntimeError("cannot apply arithmetic to booleans", pos=token.pos)
        if isinstance(a, String) and operator is not BinaryOperator.ADD:
            raise CalcRuntimeError(f"invalid operation with strings: '{operator.symbol}'", pos=token.pos)

    for (type_a, type_b), impl in binary_impls[operator]:
        if isinstance(a, type_a) and isinstance(b, type_b):
            try:
                return impl(a, b)
            except ZeroDivisionError:
                raise CalcRuntimeError("Division by zero", pos=token.pos)
    else:
        raise CalcRuntimeError(
            f"'{operator.symbol}' is not defined for {a.type_name()} and {b.type_name()}", pos=token.pos
        )


eq_impls: BinaryOperationImplTable = [
    ((Number, Number), lambda a, b: Boolean(a.v == b.v)),  # type: ignore
    ((Boolean, Boolean), lambda a, b: Boolean(a.v == b.v)),  # type: ignore
    ((String, String), lambda a, b: Boolean(a.v == b.v)),  # type: ignore
]
ne_impls: BinaryOperationImplTable = [
    ((Number, Number), lambda a, b: Boolean(a.v != b.v)),  # type: ignore
    ((Boolean, Boolean), lambda a, b: Boolean(a.v != b.v)),  # type: ignore
    ((String, String), lambda a, b: Boolean(a.v != b.v)),  # type: ignore
]
add_impls: BinaryOperationImplTable = [
    ((Number, Number), lambda a, b: Number(a.v + b.v)),  # type: ignore
    ((String, String), lambda a, b: String(a.v + b.v)),  # type: ignore
]
sub_impls: BinaryOperationImplTable = [((Number, Number), lambda a, b: Number(a.v - b.v))]  # type: ignore
mul_impls: BinaryOperationImplTable = [((Number, Number), lambda a, b: Number(a.v * b.v))]  # type: ignore
# float division by 0.0 raises ZeroDivisionError, reported as "Division by zero"
div_impls: BinaryOperationImplTable = [((Number, Number), lambda a, b: Number(a.v / b.v))]  # type: ignore

binary_impls: dict[BinaryOperator, BinaryOperationImplTable] = {
    BinaryOperator.EQ: eq_impls,
    BinaryOperator.NE: ne_impls,
    BinaryOperator.ADD: add_impls,
    BinaryOperator.SUB: sub_impls,
    BinaryOperator.MUL: mul_impls,
    BinaryOperator.DIV: div_impls,
}

UnaryOperationImplTable = list[tuple[Type[Value], UnaryOperationImpl]]


def eval_unary_operation(table: UnaryOperationImplTable, operand: Value, token: Token) -> Value:
    for operand_type, impl in table:
        if isinstance(operand, operand_type):
            return impl(operand)
    else:
        raise CalcRuntimeError(f"unary '-' cannot be applied to {operand.type_name()}", pos=token.pos)


neg_impls: UnaryOperationImplTable = [(Number, lambda a: Number(-a.v))]  # type: ignore
