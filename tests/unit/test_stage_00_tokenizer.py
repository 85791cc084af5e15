"""Тесты для STAGE 0: Tokenizer

Покрытие:
- Числа и операторы
- Унарный минус (начало, после оператора, без цифр)
- Пробельные символы
- Ошибки: неизвестный символ, две точки, нечитаемое число
"""

import pytest

from src.core.domain import MalformedExpression, Operator, Token
from src.pipeline.stages import tokenize


def texts(tokens):
    return [t.text for t in tokens]


class TestTokenizerBasics:
    """Числа и бинарные операторы."""

    def test_single_number(self):
        assert tokenize("42") == [Token.number("42")]

    def test_simple_expression(self):
        tokens = tokenize("2+3*4")

        assert texts(tokens) == ["2", "+", "3", "*", "4"]
        assert tokens[1].operator is Operator.ADD
        assert tokens[3].operator is Operator.MUL

    def test_decimal_numbers(self):
        assert texts(tokenize("1.5/0.25")) == ["1.5", "/", "0.25"]

    def test_leading_and_trailing_dot(self):
        """".5" и "5." являются допустимыми литералами"""
        assert texts(tokenize(".5+5.")) == [".5", "+", "5."]

    def test_whitespace_skipped(self):
        assert texts(tokenize("  12 +\t3 ")) == ["12", "+", "3"]

    def test_empty_text(self):
        assert tokenize("") == []
        assert tokenize("   ") == []

    def test_trailing_operator_kept(self):
        """Tokenizer не проверяет грамматику, это делает evaluator"""
        assert texts(tokenize("5+")) == ["5", "+"]


class TestUnaryMinus:
    """Унарный минус сворачивается в числовой литерал."""

    def test_leading_minus(self):
        tokens = tokenize("-5")

        assert tokens == [Token.number("-5")]
        assert tokens[0].value == -5.0

    def test_minus_after_operator(self):
        tokens = tokenize("5*-2")

        assert texts(tokens) == ["5", "*", "-2"]
        assert tokens[2].is_number

    def test_double_minus(self):
        assert texts(tokenize("5--3")) == ["5", "-", "-3"]

    def test_signed_number_is_not_operator(self):
        """После "-3" минус бинарный: "-3-2" → [-3, -, 2]"""
        tokens = tokenize("-3-2")

        assert texts(tokens) == ["-3", "-", "2"]
        assert tokens[1].is_operator

    def test_signed_decimal(self):
        assert texts(tokenize("-.5")) == ["-.5"]
        assert texts(tokenize("-2.5*4")) == ["-2.5", "*", "4"]

    def test_minus_without_digits_is_operator(self):
        """Без цифры после '-' это обычный оператор"""
        tokens = tokenize("-")

        assert tokens == [Token.op(Operator.SUB)]

    def test_minus_before_space_is_operator(self):
        assert texts(tokenize("- 5")) == ["-", "5"]

    def test_builder_unary_convention(self):
        """Буфер "0-5" от ExpressionBuilder содержит бинарный минус"""
        assert texts(tokenize("0-5")) == ["0", "-", "5"]

    def test_other_operators_never_unary(self):
        assert texts(tokenize("+5")) == ["+", "5"]
        assert texts(tokenize("5*+2")) == ["5", "*", "+", "2"]


class TestTokenizerErrors:
    """Fail-fast ошибки."""

    def test_unknown_character(self):
        with pytest.raises(MalformedExpression, match="Unknown character") as exc_info:
            tokenize("2a")

        assert exc_info.value.position == 1

    def test_parentheses_not_supported(self):
        with pytest.raises(MalformedExpression):
            tokenize("(2+3)")

    def test_exponent_not_supported(self):
        with pytest.raises(MalformedExpression):
            tokenize("2^3")

    def test_unicode_digits_rejected(self):
        with pytest.raises(MalformedExpression):
            tokenize("2²")

    def test_double_decimal(self):
        with pytest.raises(MalformedExpression, match="Invalid number format"):
            tokenize("1.2.3")

    def test_double_decimal_in_signed_number(self):
        with pytest.raises(MalformedExpression, match="Invalid number format"):
            tokenize("-1..2")

    def test_lone_dot(self):
        with pytest.raises(MalformedExpression, match="Invalid number format"):
            tokenize(".")

    def test_minus_dot(self):
        with pytest.raises(MalformedExpression):
            tokenize("-.")

    def test_error_in_second_segment(self):
        with pytest.raises(MalformedExpression) as exc_info:
            tokenize("1.5+2.5.5")

        assert exc_info.value.position == 4
