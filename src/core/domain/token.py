"""
Token — Лексема инфиксного/постфиксного выражения

Immutable Pydantic модель. Tagged union:
- NUMBER: числовой литерал в виде десятичного текста (знак может быть свёрнут
  в литерал для унарного минуса, например "-5")
- OPERATOR: один из четырёх бинарных операторов

Создаётся tokenizer'ом на каждое вычисление, не персистится.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from .operators import Operator


# =============================================================================
# ENUMS
# =============================================================================


class TokenKind(str, Enum):
    """Тип лексемы"""

    NUMBER = "number"
    OPERATOR = "operator"


# =============================================================================
# TOKEN MODEL
# =============================================================================


class Token(BaseModel):
    """
    Лексема выражения.

    Для NUMBER заполнено text, для OPERATOR: operator.
    """

    kind: TokenKind = Field(..., description="Тип лексемы")
    text: str = Field(..., min_length=1, description="Исходный текст лексемы")
    operator: Operator | None = Field(None, description="Оператор (только для OPERATOR)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_tagged_union(self) -> "Token":
        """Проверка согласованности kind и operator"""
        if self.kind == TokenKind.OPERATOR:
            if self.operator is None:
                raise ValueError("operator token requires operator")
            if self.text != self.operator.value:
                raise ValueError(
                    f"operator token text {self.text!r} does not match {self.operator.value!r}"
                )
        elif self.operator is not None:
            raise ValueError("number token must not carry operator")
        return self

    @classmethod
    def number(cls, text: str) -> "Token":
        """Числовая лексема из десятичного текста"""
        return cls(kind=TokenKind.NUMBER, text=text)

    @classmethod
    def op(cls, operator: Operator) -> "Token":
        """Операторная лексема"""
        return cls(kind=TokenKind.OPERATOR, text=operator.value, operator=operator)

    @property
    def is_number(self) -> bool:
        return self.kind == TokenKind.NUMBER

    @property
    def is_operator(self) -> bool:
        return self.kind == TokenKind.OPERATOR

    @property
    def value(self) -> float:
        """
        Числовое значение NUMBER лексемы.

        Raises:
            ValueError: Если лексема не NUMBER или текст не читается как float
        """
        if not self.is_number:
            raise ValueError(f"token {self.text!r} is not a number")
        return float(self.text)

    def __str__(self) -> str:
        return self.text
