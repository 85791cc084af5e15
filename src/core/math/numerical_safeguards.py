"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную устойчивость арифметики калькулятора:
- Epsilon-защита делителя (деление на "почти ноль" запрещено)
- NaN/Inf проверки результата
- Epsilon-сравнения float для прилипания к целому значению
- Валидация параметров конфигурации

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на делитель с abs(b) < EPS_DIVISOR никогда не выполняется
2. NaN/Inf никогда не попадают на дисплей
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Минимальный модуль делителя
# abs(b) < EPS_DIVISOR → DivisionByZero
EPS_DIVISOR: Final[float] = 1e-15

# Толерантность прилипания к целому при форматировании результата
# abs(x - round(x)) < EPS_INTEGER_SNAP → x выводится как целое
EPS_INTEGER_SNAP: Final[float] = 1e-12

# Число значащих цифр для нецелых результатов
SIGNIFICANT_DIGITS_DEFAULT: Final[int] = 12


# =============================================================================
# ЗАЩИТА ДЕЛИТЕЛЯ
# =============================================================================


def is_degenerate_divisor(value: float, eps: float = EPS_DIVISOR) -> bool:
    """
    Проверка, является ли делитель вырожденным (слишком близким к нулю).

    Args:
        value: Делитель
        eps: Минимальный абсолютный порог (default: EPS_DIVISOR)

    Returns:
        True если abs(value) < eps

    Examples:
        >>> is_degenerate_divisor(0.0)
        True
        >>> is_degenerate_divisor(1e-16)
        True
        >>> is_degenerate_divisor(-2.0)
        False
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    return abs(value) < eps


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def nearest_integer(value: float) -> int:
    """
    Ближайшее целое (round half to even, как встроенный round).

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"value must be a valid float (not NaN/Inf), got {value}")

    return int(round(value))


def is_near_integer(value: float, tol: float = EPS_INTEGER_SNAP) -> bool:
    """
    Проверка, лежит ли значение в пределах tol от ближайшего целого.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: EPS_INTEGER_SNAP)

    Returns:
        True если abs(value - round(value)) < tol; False для NaN/Inf

    Examples:
        >>> is_near_integer(7.0)
        True
        >>> is_near_integer(0.1 + 0.2 + 0.7)
        True
        >>> is_near_integer(1 / 3)
        False
    """
    if not is_valid_float(value):
        return False

    return abs(value - round(value)) < tol


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение строго положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Валидация, что значение в заданном диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        ValueError: Если value вне диапазона или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")
