"""Тесты для STAGE 2: Postfix Evaluator

Покрытие:
- Четыре операции и порядок операндов (a pushed first)
- DivisionByZero с EPS_DIVISOR
- MalformedExpression: нехватка операндов, остаток на стеке
- NumericOverflow
"""

import pytest

from src.core.domain import (
    DivisionByZero,
    MalformedExpression,
    NumericOverflow,
    Operator,
    Token,
)
from src.pipeline.stages import apply_operator, evaluate_postfix, to_postfix, tokenize


def evaluate(text, **kwargs):
    return evaluate_postfix(to_postfix(tokenize(text)), **kwargs)


class TestApplyOperator:
    """Тесты apply_operator."""

    def test_arithmetic(self):
        assert apply_operator(6.0, Operator.ADD, 2.0) == 8.0
        assert apply_operator(6.0, Operator.SUB, 2.0) == 4.0
        assert apply_operator(6.0, Operator.MUL, 2.0) == 12.0
        assert apply_operator(6.0, Operator.DIV, 2.0) == 3.0

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZero):
            apply_operator(5.0, Operator.DIV, 0.0)

    def test_division_by_tiny(self):
        with pytest.raises(DivisionByZero):
            apply_operator(5.0, Operator.DIV, -1e-16)

    def test_division_at_threshold_allowed(self):
        assert apply_operator(1.0, Operator.DIV, 1e-15) == pytest.approx(1e15)

    def test_custom_divisor_eps(self):
        with pytest.raises(DivisionByZero):
            apply_operator(1.0, Operator.DIV, 0.001, divisor_eps=0.01)

    def test_zero_numerator_ok(self):
        assert apply_operator(0.0, Operator.DIV, 4.0) == 0.0

    def test_overflow(self):
        with pytest.raises(NumericOverflow):
            apply_operator(1e308, Operator.MUL, 10.0)


class TestEvaluatePostfix:
    """Вычисление выражений через STAGE 0-2."""

    def test_precedence(self):
        assert evaluate("2+3*4") == 14.0
        assert evaluate("2*3+4") == 10.0

    def test_left_associativity(self):
        assert evaluate("8-3-2") == 3.0
        assert evaluate("8/4/2") == 1.0

    def test_operand_order(self):
        """b снимается первым: "7 2 -" = 7 - 2"""
        tokens = [Token.number("7"), Token.number("2"), Token.op(Operator.SUB)]

        assert evaluate_postfix(tokens) == 5.0

    def test_unary_minus(self):
        assert evaluate("-5") == -5.0
        assert evaluate("5*-2") == -10.0
        assert evaluate("5--3") == 8.0
        assert evaluate("-3-2") == -5.0

    def test_builder_unary_prefix(self):
        assert evaluate("0-5") == -5.0

    def test_decimals(self):
        assert evaluate("0.1+0.2") == pytest.approx(0.3)
        assert evaluate("5.*2") == 10.0

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZero):
            evaluate("5/0")

    def test_division_by_zero_inside_chain(self):
        with pytest.raises(DivisionByZero):
            evaluate("1+2/0*3")

    def test_division_by_difference_is_not_checked_early(self):
        """Делитель равен значению правого операнда '/', а не выражению справа"""
        assert evaluate("6/2-2") == 1.0

    def test_dangling_operator(self):
        with pytest.raises(MalformedExpression, match="needs 2 operands"):
            evaluate("5+")

    def test_unary_prefix_alone(self):
        """Буфер "0-" без второго операнда"""
        with pytest.raises(MalformedExpression):
            evaluate("0-")

    def test_leading_binary_operator(self):
        with pytest.raises(MalformedExpression):
            evaluate("*5")

    def test_empty(self):
        with pytest.raises(MalformedExpression, match="0 values left"):
            evaluate_postfix([])

    def test_leftover_values(self):
        tokens = [Token.number("1"), Token.number("2")]

        with pytest.raises(MalformedExpression, match="2 values left"):
            evaluate_postfix(tokens)

    def test_overflow_in_chain(self):
        big = "1" + "0" * 300

        with pytest.raises(NumericOverflow):
            evaluate(f"{big}*{big}")

    def test_non_finite_literal(self):
        with pytest.raises(NumericOverflow):
            evaluate("9" * 400)
