"""STAGE 3: Result Formatter — float → строка для дисплея

- abs(x - round(x)) < EPS_INTEGER_SNAP → целое без точки и хвостовых нулей
  (-0 выводится как "0")
- иначе до SIGNIFICANT_DIGITS значащих цифр в формате 'g'

Вывод не зависит от локали: разделитель '.', без группировки разрядов.
"""

from src.core.domain.errors import NumericOverflow
from src.core.math.numerical_safeguards import (
    EPS_INTEGER_SNAP,
    SIGNIFICANT_DIGITS_DEFAULT,
    is_near_integer,
    is_valid_float,
    nearest_integer,
)


def format_result(
    value: float,
    integer_snap_tol: float = EPS_INTEGER_SNAP,
    significant_digits: int = SIGNIFICANT_DIGITS_DEFAULT,
) -> str:
    """
    Форматирование результата вычисления.

    Args:
        value: Результат evaluator
        integer_snap_tol: Толерантность прилипания к целому
        significant_digits: Максимум значащих цифр для нецелых значений

    Returns:
        Строка для дисплея

    Raises:
        NumericOverflow: value NaN/Inf

    Examples:
        >>> format_result(7.0)
        '7'
        >>> format_result(1 / 3)
        '0.333333333333'
        >>> format_result(-2.5)
        '-2.5'
    """
    if not is_valid_float(value):
        raise NumericOverflow(f"Cannot format non-finite value: {value!r}")

    if is_near_integer(value, integer_snap_tol):
        return str(nearest_integer(value))

    # format() с 'g' не использует локаль (в отличие от 'n')
    return format(value, f".{significant_digits}g")
