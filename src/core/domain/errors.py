"""
Errors — Исключения конвейера вычисления

Все ошибки tokenizer / shunting-yard / postfix evaluator поднимаются как
исключения и всплывают до границы "equals". Expression Builder исключений
не поднимает никогда.

Иерархия:
- CalculatorError
  - MalformedExpression: неизвестный символ, две точки в числе, оператор
    без операндов, остаток на стеке
  - DivisionByZero: abs(делитель) < EPS_DIVISOR
  - NumericOverflow: результат NaN/Inf
"""


class CalculatorError(Exception):
    """Базовое исключение вычисления выражения."""

    kind: str = "calculator_error"


class MalformedExpression(CalculatorError):
    """
    Выражение синтаксически некорректно.

    Attributes:
        position: Позиция символа в исходном тексте (если известна)
    """

    kind = "malformed_expression"

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.position = position


class DivisionByZero(CalculatorError, ZeroDivisionError):
    """Деление на вырожденный делитель (abs(b) < EPS_DIVISOR)."""

    kind = "division_by_zero"


class NumericOverflow(CalculatorError, ArithmeticError):
    """Результат операции вышел за пределы конечных float (NaN/Inf)."""

    kind = "numeric_overflow"
