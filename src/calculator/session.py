"""Calculator Session — публичный API ядра для UI-слоя.

Связывает ExpressionBuilder (буфер ввода) и конвейер вычисления:
- on_digit / on_decimal / on_operator / on_clear_entry / on_reset_all
  мутируют буфер через keypad state machine
- on_equals прогоняет снапшот буфера через STAGE 0-3; буфер не меняется
- current_expression_text / last_result / display_state: чтение для дисплея

Ошибка вычисления → last_result = "Error", буфер сохраняется для исправления.

Все публичные методы выполняются под одним RLock на сессию; сессии
не разделяют состояния.
"""

import logging
import threading
from typing import Optional

from src.calculator.config import (
    EMPTY_RESULT_TEXT,
    ERROR_RESULT_TEXT,
    CalculatorConfig,
)
from src.core.contracts import validate_display_state
from src.core.domain.display_state import DisplayState
from src.keypad.state_machine import ExpressionBuilder, KeypadTransitionResult
from src.pipeline.runner import EvaluationResult, run_pipeline

logger = logging.getLogger(__name__)


class CalculatorSession:
    """Сессия калькулятора: буфер выражения + последний результат."""

    def __init__(self, config: Optional[CalculatorConfig] = None):
        self.config = config or CalculatorConfig()
        self._builder = ExpressionBuilder()
        self._last_result = EMPTY_RESULT_TEXT
        self._last_evaluation: Optional[EvaluationResult] = None
        self._lock = threading.RLock()

    # -------------------------------------------------------------------------
    # Ввод
    # -------------------------------------------------------------------------

    def on_digit(self, digit: str) -> KeypadTransitionResult:
        with self._lock:
            return self._builder.on_digit(digit)

    def on_decimal(self) -> KeypadTransitionResult:
        with self._lock:
            return self._builder.on_decimal()

    def on_operator(self, op: str) -> KeypadTransitionResult:
        with self._lock:
            return self._builder.on_operator(op)

    def on_clear_entry(self) -> KeypadTransitionResult:
        with self._lock:
            return self._builder.on_clear_entry()

    def on_reset_all(self) -> KeypadTransitionResult:
        """Очистка буфера и сброс результата в "0"."""
        with self._lock:
            result = self._builder.on_reset_all()
            self._last_result = EMPTY_RESULT_TEXT
            self._last_evaluation = None
            return result

    def on_equals(self) -> str:
        """
        Вычисление текущего выражения.

        Пустой буфер → no-op, возвращается текущий last_result.

        Returns:
            Отформатированный результат или "Error"
        """
        with self._lock:
            expression = self._builder.text
            if not expression.strip():
                return self._last_result

            evaluation = run_pipeline(expression, self.config.evaluation)
            self._last_evaluation = evaluation

            if evaluation.ok:
                self._last_result = evaluation.result_text
            else:
                logger.warning(
                    "Evaluation error (%s) for %r: %s",
                    evaluation.error_kind,
                    expression,
                    evaluation.details,
                )
                self._last_result = ERROR_RESULT_TEXT
            return self._last_result

    # -------------------------------------------------------------------------
    # Чтение
    # -------------------------------------------------------------------------

    def current_expression_text(self) -> str:
        """Буфер выражения или "0", если буфер пуст."""
        with self._lock:
            return self._builder.display_text

    @property
    def last_result(self) -> str:
        with self._lock:
            return self._last_result

    @property
    def last_evaluation(self) -> Optional[EvaluationResult]:
        """Полный результат последнего on_equals (None до первого вычисления)."""
        with self._lock:
            return self._last_evaluation

    def preview(self) -> Optional[str]:
        """
        Предварительный результат текущего буфера без изменения last_result.

        Returns:
            Отформатированный результат или None (пустой буфер / ошибка)
        """
        with self._lock:
            expression = self._builder.text
            if not expression.strip():
                return None
            evaluation = run_pipeline(expression, self.config.evaluation)
            return evaluation.result_text if evaluation.ok else None

    def display_state(self) -> DisplayState:
        """
        Снапшот дисплея для UI-слоя.

        Raises:
            jsonschema.ValidationError: Снапшот нарушает display_state контракт
        """
        with self._lock:
            state = DisplayState(
                expression_text=self._builder.display_text,
                result_text=self._last_result,
                preview_text=self.preview() if self.config.live_preview else None,
            )
            if self.config.validate_display_contract:
                validate_display_state(state.model_dump(mode="json"))
            return state
