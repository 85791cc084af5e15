"""
Operators — Бинарные операторы и таблица приоритетов

Immutable Pydantic модель OperatorSpec и статическая таблица OPERATOR_SPECS.
Грамматика плоская: четыре левоассоциативных бинарных оператора,
без скобок и возведения в степень.

Приоритеты:
    *  /  → 2
    +  -  → 1
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class Operator(str, Enum):
    """Бинарный оператор"""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @classmethod
    def from_char(cls, char: str) -> "Operator | None":
        """
        Парсинг оператора из одного символа.

        Единственная точка перехода от текста к Operator.

        Returns:
            Operator или None, если символ не является оператором
        """
        try:
            return cls(char)
        except ValueError:
            return None


# Символы операторов в порядке объявления
OPERATOR_CHARS: Final[frozenset[str]] = frozenset(op.value for op in Operator)


def is_operator_char(char: str) -> bool:
    """True если char является символом одного из четырёх операторов."""
    return char in OPERATOR_CHARS


# =============================================================================
# OPERATOR SPEC
# =============================================================================


class OperatorSpec(BaseModel):
    """
    Спецификация оператора: приоритет и ассоциативность.
    """

    operator: Operator = Field(..., description="Оператор")
    precedence: int = Field(..., ge=1, description="Приоритет (больше значит сильнее связывает)")
    is_left_associative: bool = Field(
        default=True, description="Левая ассоциативность (все операторы левые)"
    )

    model_config = {"frozen": True}


OPERATOR_SPECS: Final[dict[Operator, OperatorSpec]] = {
    Operator.ADD: OperatorSpec(operator=Operator.ADD, precedence=1),
    Operator.SUB: OperatorSpec(operator=Operator.SUB, precedence=1),
    Operator.MUL: OperatorSpec(operator=Operator.MUL, precedence=2),
    Operator.DIV: OperatorSpec(operator=Operator.DIV, precedence=2),
}


def get_precedence(operator: Operator) -> int:
    """Приоритет оператора из OPERATOR_SPECS."""
    return OPERATOR_SPECS[operator].precedence
