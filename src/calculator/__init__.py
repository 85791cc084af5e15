"""Calculator — сессия калькулятора и её конфигурация (публичный API ядра)."""

from .config import (
    EMPTY_RESULT_TEXT,
    ERROR_RESULT_TEXT,
    CalculatorConfig,
)
from .session import CalculatorSession

__all__ = [
    "CalculatorSession",
    "CalculatorConfig",
    "EMPTY_RESULT_TEXT",
    "ERROR_RESULT_TEXT",
]
