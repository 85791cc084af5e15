"""Calculator Config — конфигурация сессии калькулятора."""

from dataclasses import dataclass, field
from typing import Final

from src.pipeline.runner import EvaluationConfig

# Тексты дисплея
EMPTY_RESULT_TEXT: Final[str] = "0"
ERROR_RESULT_TEXT: Final[str] = "Error"


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация сессии.

    - evaluation: параметры конвейера (eps делителя, форматирование)
    - live_preview: заполнять preview_text в display_state() после каждой правки
    - validate_display_contract: проверять display_state() по JSON Schema
    """

    evaluation: EvaluationConfig = field(default_factory=EvaluationConfig)
    live_preview: bool = False
    validate_display_contract: bool = True
