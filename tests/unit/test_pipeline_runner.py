"""Тесты для Pipeline Runner (STAGE 0-3)."""

import pytest

from src.core.domain import DivisionByZero, MalformedExpression
from src.pipeline import (
    EvaluationConfig,
    EvaluationResult,
    evaluate_expression,
    run_pipeline,
)


class TestEvaluationConfig:
    def test_defaults(self):
        config = EvaluationConfig()

        assert config.divisor_eps == 1e-15
        assert config.integer_snap_tol == 1e-12
        assert config.significant_digits == 12

    def test_invalid_divisor_eps(self):
        with pytest.raises(ValueError, match="divisor_eps"):
            EvaluationConfig(divisor_eps=0.0)

    def test_invalid_significant_digits(self):
        with pytest.raises(ValueError, match="significant_digits"):
            EvaluationConfig(significant_digits=0)

    def test_frozen(self):
        config = EvaluationConfig()

        with pytest.raises(AttributeError):
            config.divisor_eps = 1.0  # type: ignore


class TestEvaluateExpression:
    def test_success(self):
        assert evaluate_expression("2+3*4") == "14"
        assert evaluate_expression("10/4") == "2.5"

    def test_raises_on_failure(self):
        with pytest.raises(DivisionByZero):
            evaluate_expression("5/0")

        with pytest.raises(MalformedExpression):
            evaluate_expression("5+")

    def test_custom_config(self):
        config = EvaluationConfig(significant_digits=3)

        assert evaluate_expression("2/3", config) == "0.667"


class TestRunPipeline:
    def test_ok_result(self):
        result = run_pipeline("2*3+4")

        assert isinstance(result, EvaluationResult)
        assert result.ok
        assert result.value == 10.0
        assert result.result_text == "10"
        assert result.error_kind == ""
        assert result.expression == "2*3+4"

    def test_division_by_zero(self):
        result = run_pipeline("5/0")

        assert not result.ok
        assert result.value is None
        assert result.result_text is None
        assert result.error_kind == "division_by_zero"

    def test_malformed(self):
        result = run_pipeline("1.2.3")

        assert not result.ok
        assert result.error_kind == "malformed_expression"
        assert "Invalid number format" in result.details

    def test_overflow(self):
        big = "1" + "0" * 300

        result = run_pipeline(f"{big}*{big}")

        assert not result.ok
        assert result.error_kind == "numeric_overflow"

    def test_empty(self):
        assert run_pipeline("").error_kind == "malformed_expression"
