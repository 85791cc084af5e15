"""Keypad — state machine построения выражения из кнопочного ввода.

- Цифры, десятичная точка, операторы с коррекцией
- Унарный минус в начале как "0-"
- Clear entry (последняя лексема) и reset all
"""

from .state_machine import (
    ExpressionBuilder,
    KeypadEvent,
    KeypadTransitionResult,
    last_operator_index,
)

__all__ = [
    "ExpressionBuilder",
    "KeypadEvent",
    "KeypadTransitionResult",
    "last_operator_index",
]
