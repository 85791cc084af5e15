"""Keypad State Machine — построение выражения из кнопочного ввода.

События: DIGIT / DECIMAL / OPERATOR / CLEAR_ENTRY / RESET_ALL.
EQUALS буфер не меняет и обрабатывается на уровне сессии.

Инварианты буфера:
- Нет двух операторов подряд (кроме "0-" для унарного минуса в начале)
- Не больше одной точки в сегменте числа (сегмент: максимальная серия
  цифр/точек между операторами)
- Флаги last_input_is_operator / has_decimal_in_current_number не хранятся,
  а выводятся из хвоста буфера через last_operator_index()

Невалидные правки молча игнорируются, исключения не поднимаются.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.core.domain.operators import Operator, is_operator_char

logger = logging.getLogger(__name__)

EMPTY_DISPLAY = "0"
UNARY_MINUS_PREFIX = "0-"
LEADING_DECIMAL = "0."
DIGITS = frozenset("0123456789")


class KeypadEvent(str, Enum):
    """Событие кнопочного ввода."""

    DIGIT = "DIGIT"
    DECIMAL = "DECIMAL"
    OPERATOR = "OPERATOR"
    CLEAR_ENTRY = "CLEAR_ENTRY"
    RESET_ALL = "RESET_ALL"


@dataclass(frozen=True)
class KeypadTransitionResult:
    """Результат обработки одного события."""

    event: KeypadEvent
    changed: bool
    reason: str

    previous_text: str
    new_text: str


def last_operator_index(buffer: str) -> int:
    """
    Индекс последнего символа-оператора в буфере.

    Returns:
        Индекс или -1, если операторов нет

    Examples:
        >>> last_operator_index("12+34")
        2
        >>> last_operator_index("12.5")
        -1
    """
    for i in range(len(buffer) - 1, -1, -1):
        if is_operator_char(buffer[i]):
            return i
    return -1


class ExpressionBuilder:
    """Буфер выражения + правила редактирования.

    Один экземпляр на сессию калькулятора; создаётся с пустым буфером.
    """

    def __init__(self):
        self._buffer: list[str] = []

    # -------------------------------------------------------------------------
    # Состояние
    # -------------------------------------------------------------------------

    @property
    def text(self) -> str:
        """Содержимое буфера как есть (может быть пустым)."""
        return "".join(self._buffer)

    @property
    def display_text(self) -> str:
        """Текст для дисплея: буфер или "0", если буфер пуст."""
        return self.text or EMPTY_DISPLAY

    @property
    def is_empty(self) -> bool:
        return not self._buffer

    @property
    def last_input_is_operator(self) -> bool:
        return bool(self._buffer) and is_operator_char(self._buffer[-1])

    @property
    def has_decimal_in_current_number(self) -> bool:
        text = self.text
        return "." in text[last_operator_index(text) + 1:]

    # -------------------------------------------------------------------------
    # События
    # -------------------------------------------------------------------------

    def on_digit(self, digit: str) -> KeypadTransitionResult:
        """Цифра "0".."9" дописывается в конец; всё остальное игнорируется."""
        previous = self.text
        if not isinstance(digit, str) or digit not in DIGITS:
            return self._result(KeypadEvent.DIGIT, previous, "digit_ignored_invalid")

        self._buffer.append(digit)
        return self._result(KeypadEvent.DIGIT, previous, "digit_appended")

    def on_decimal(self) -> KeypadTransitionResult:
        """Десятичная точка.

        - Пустой буфер или оператор в конце → "0."
        - В текущем числе уже есть точка → no-op
        - Иначе → "."
        """
        previous = self.text

        if self.is_empty or self.last_input_is_operator:
            self._buffer.extend(LEADING_DECIMAL)
            return self._result(KeypadEvent.DECIMAL, previous, "decimal_appended_leading_zero")

        if self.has_decimal_in_current_number:
            return self._result(KeypadEvent.DECIMAL, previous, "decimal_ignored_duplicate")

        self._buffer.append(".")
        return self._result(KeypadEvent.DECIMAL, previous, "decimal_appended")

    def on_operator(self, op: str) -> KeypadTransitionResult:
        """Оператор "+", "-", "*", "/".

        - Пустой буфер: только "-" → "0-", остальные игнорируются
        - Оператор в конце → замена последнего символа (коррекция оператора)
        - Иначе → оператор дописывается
        """
        previous = self.text
        operator = Operator.from_char(op) if isinstance(op, str) and len(op) == 1 else None
        if operator is None:
            return self._result(KeypadEvent.OPERATOR, previous, "operator_ignored_invalid")

        if self.is_empty:
            if operator != Operator.SUB:
                return self._result(
                    KeypadEvent.OPERATOR, previous, "operator_ignored_empty_buffer"
                )
            self._buffer.extend(UNARY_MINUS_PREFIX)
            return self._result(KeypadEvent.OPERATOR, previous, "unary_minus_started")

        if self.last_input_is_operator:
            self._buffer[-1] = operator.value
            return self._result(KeypadEvent.OPERATOR, previous, "operator_replaced")

        self._buffer.append(operator.value)
        return self._result(KeypadEvent.OPERATOR, previous, "operator_appended")

    def on_clear_entry(self) -> KeypadTransitionResult:
        """Удаление последней лексемы: оператора или числа целиком."""
        previous = self.text

        if self.is_empty:
            return self._result(KeypadEvent.CLEAR_ENTRY, previous, "clear_entry_empty")

        if self.last_input_is_operator:
            self._buffer.pop()
            return self._result(
                KeypadEvent.CLEAR_ENTRY, previous, "clear_entry_operator_removed"
            )

        del self._buffer[last_operator_index(previous) + 1:]
        return self._result(KeypadEvent.CLEAR_ENTRY, previous, "clear_entry_number_removed")

    def on_reset_all(self) -> KeypadTransitionResult:
        """Полная очистка буфера."""
        previous = self.text
        self._buffer.clear()
        return self._result(KeypadEvent.RESET_ALL, previous, "reset_all")

    def handle(self, event: KeypadEvent, payload: Optional[str] = None) -> KeypadTransitionResult:
        """Диспетчер событий для UI-обвязки кнопок.

        Args:
            event: Событие
            payload: Цифра для DIGIT, символ оператора для OPERATOR
        """
        if event == KeypadEvent.DIGIT:
            return self.on_digit(payload)
        if event == KeypadEvent.DECIMAL:
            return self.on_decimal()
        if event == KeypadEvent.OPERATOR:
            return self.on_operator(payload)
        if event == KeypadEvent.CLEAR_ENTRY:
            return self.on_clear_entry()
        if event == KeypadEvent.RESET_ALL:
            return self.on_reset_all()
        raise ValueError(f"Unknown keypad event: {event!r}")

    def _result(self, event: KeypadEvent, previous: str, reason: str) -> KeypadTransitionResult:
        new_text = self.text
        result = KeypadTransitionResult(
            event=event,
            changed=new_text != previous,
            reason=reason,
            previous_text=previous,
            new_text=new_text,
        )
        logger.debug("%s: %s %r -> %r", event.value, reason, previous, new_text)
        return result
