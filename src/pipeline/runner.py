"""Pipeline Runner — цепочка STAGE 0-3 для кнопки "equals"

Порядок стадий (фиксированный):
- STAGE 0: Tokenizer
- STAGE 1: Infix → Postfix (shunting-yard)
- STAGE 2: Postfix Evaluator
- STAGE 3: Result Formatter

Каждая стадия fail-fast поднимает CalculatorError. Runner является единственной
граница, где исключение превращается в EvaluationResult (ok / error_kind).
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.core.domain.errors import CalculatorError
from src.core.math.numerical_safeguards import (
    EPS_DIVISOR,
    EPS_INTEGER_SNAP,
    SIGNIFICANT_DIGITS_DEFAULT,
    validate_in_range,
    validate_positive,
)
from src.pipeline.stages.stage_00_tokenizer import tokenize
from src.pipeline.stages.stage_01_shunting_yard import to_postfix
from src.pipeline.stages.stage_02_postfix_eval import evaluate_postfix
from src.pipeline.stages.stage_03_result_format import format_result

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EvaluationConfig:
    """Конфигурация конвейера вычисления."""

    # Минимальный модуль делителя
    divisor_eps: float = EPS_DIVISOR

    # Прилипание к целому при форматировании
    integer_snap_tol: float = EPS_INTEGER_SNAP

    # Максимум значащих цифр нецелого результата
    significant_digits: int = SIGNIFICANT_DIGITS_DEFAULT

    def __post_init__(self):
        validate_positive(self.divisor_eps, "divisor_eps")
        validate_positive(self.integer_snap_tol, "integer_snap_tol")
        validate_in_range(self.significant_digits, "significant_digits", 1, 17)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class EvaluationResult:
    """Результат прогона конвейера."""

    ok: bool
    expression: str

    # Успех
    value: Optional[float]
    result_text: Optional[str]

    # Ошибка
    error_kind: str

    # Детали
    details: str


# =============================================================================
# RUNNER
# =============================================================================


def _run_stages(text: str, config: EvaluationConfig) -> tuple[float, str]:
    tokens = tokenize(text)
    postfix = to_postfix(tokens)
    value = evaluate_postfix(postfix, divisor_eps=config.divisor_eps)
    result_text = format_result(
        value,
        integer_snap_tol=config.integer_snap_tol,
        significant_digits=config.significant_digits,
    )
    return value, result_text


def evaluate_expression(text: str, config: Optional[EvaluationConfig] = None) -> str:
    """
    Вычисление выражения с поднятием исключения при ошибке.

    Args:
        text: Инфиксное выражение
        config: Конфигурация (default: EvaluationConfig())

    Returns:
        Отформатированный результат

    Raises:
        MalformedExpression, DivisionByZero, NumericOverflow
    """
    _, result_text = _run_stages(text, config or EvaluationConfig())
    return result_text


def run_pipeline(text: str, config: Optional[EvaluationConfig] = None) -> EvaluationResult:
    """
    Прогон STAGE 0-3 с конверсией ошибок в EvaluationResult.

    Args:
        text: Инфиксное выражение (снапшот буфера)
        config: Конфигурация (default: EvaluationConfig())

    Returns:
        EvaluationResult; ok=False если любая стадия упала
    """
    try:
        value, result_text = _run_stages(text, config or EvaluationConfig())
    except CalculatorError as e:
        logger.debug("Pipeline failed for %r: %s (%s)", text, e, e.kind)
        return EvaluationResult(
            ok=False,
            expression=text,
            value=None,
            result_text=None,
            error_kind=e.kind,
            details=str(e),
        )

    return EvaluationResult(
        ok=True,
        expression=text,
        value=value,
        result_text=result_text,
        error_kind="",
        details=f"{text} = {result_text}",
    )
