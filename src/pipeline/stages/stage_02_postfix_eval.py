"""STAGE 2: Postfix Evaluator — вычисление RPN последовательности

Стек значений:
- NUMBER → push float(value)
- OPERATOR → pop b, pop a (a был положен раньше), push apply(a, op, b)

Ошибки:
- '/' при abs(b) < EPS_DIVISOR → DivisionByZero
- оператор при < 2 значениях на стеке → MalformedExpression
- после обработки на стеке не ровно одно значение → MalformedExpression
- результат NaN/Inf → NumericOverflow
"""

import logging
import operator as py_operator
from typing import Callable, Final

from src.core.domain.errors import DivisionByZero, MalformedExpression, NumericOverflow
from src.core.domain.operators import Operator
from src.core.domain.token import Token
from src.core.math.numerical_safeguards import (
    EPS_DIVISOR,
    is_degenerate_divisor,
    is_valid_float,
)

logger = logging.getLogger(__name__)

_ARITHMETIC: Final[dict[Operator, Callable[[float, float], float]]] = {
    Operator.ADD: py_operator.add,
    Operator.SUB: py_operator.sub,
    Operator.MUL: py_operator.mul,
    Operator.DIV: py_operator.truediv,
}


def apply_operator(
    a: float, op: Operator, b: float, divisor_eps: float = EPS_DIVISOR
) -> float:
    """
    Применение бинарного оператора.

    Args:
        a: Левый операнд
        op: Оператор
        b: Правый операнд
        divisor_eps: Минимальный модуль делителя для '/'

    Returns:
        a op b

    Raises:
        DivisionByZero: op == '/' и abs(b) < divisor_eps
        NumericOverflow: Результат NaN/Inf
    """
    if op == Operator.DIV and is_degenerate_divisor(b, divisor_eps):
        raise DivisionByZero(f"Division by zero: {a!r} / {b!r}")

    result = _ARITHMETIC[op](a, b)

    if not is_valid_float(result):
        raise NumericOverflow(f"Result is not finite: {a!r} {op.value} {b!r} = {result!r}")
    return result


def evaluate_postfix(tokens: list[Token], divisor_eps: float = EPS_DIVISOR) -> float:
    """
    Вычисление постфиксного выражения.

    Args:
        tokens: Лексемы в постфиксном порядке
        divisor_eps: Минимальный модуль делителя

    Returns:
        Результат вычисления

    Raises:
        MalformedExpression: Недостаточно операндов или остаток на стеке
        DivisionByZero: Деление на вырожденный делитель
        NumericOverflow: Результат NaN/Inf
    """
    stack: list[float] = []

    for token in tokens:
        if token.is_number:
            try:
                value = token.value
            except ValueError:
                raise MalformedExpression(f"Invalid number: {token.text!r}") from None
            if not is_valid_float(value):
                raise NumericOverflow(f"Number literal is not finite: {token.text!r}")
            stack.append(value)
        elif token.is_operator:
            if len(stack) < 2:
                raise MalformedExpression(
                    f"Malformed expression: operator {token.text!r} needs 2 operands, "
                    f"stack has {len(stack)}"
                )
            b = stack.pop()
            a = stack.pop()
            stack.append(apply_operator(a, token.operator, b, divisor_eps))
        else:
            raise MalformedExpression(f"Unknown token in RPN: {token.text!r}")

    if len(stack) != 1:
        raise MalformedExpression(
            f"Malformed expression after evaluation: {len(stack)} values left on stack"
        )

    logger.debug("Evaluated %d postfix tokens to %r", len(tokens), stack[0])
    return stack[0]
