"""STAGE 0: Tokenizer — текст инфиксного выражения → последовательность Token

Алгоритм (слева направо, пробельные символы пропускаются):
- '-' в начале или сразу после Operator-лексемы: попытка прочитать знаковое
  число ('-' + цифры/точки) как одну NUMBER лексему (унарный минус
  сворачивается в литерал). Если за '-' нет ни цифры, ни точки → обычный
  OPERATOR '-'.
- Любой другой символ оператора → OPERATOR лексема.
- Цифра или '.' → максимальная серия цифр/точек как одна NUMBER лексема;
  вторая точка в серии → MalformedExpression.
- Любой другой символ → MalformedExpression.

NUMBER лексема, полученная из унарного минуса, оператором НЕ считается:
"-3-2" → [-3, -, 2].
"""

import logging

from src.core.domain.errors import MalformedExpression
from src.core.domain.operators import Operator
from src.core.domain.token import Token

logger = logging.getLogger(__name__)

DECIMAL_POINT = "."


def _is_number_char(char: str) -> bool:
    # str.isdigit() пропускает не-ASCII цифры ('²', '٣')
    return "0" <= char <= "9" or char == DECIMAL_POINT


def _scan_number(text: str, start: int) -> int:
    """Индекс конца максимальной серии цифр/точек, начиная со start."""
    end = start
    while end < len(text) and _is_number_char(text[end]):
        end += 1
    return end


def _make_number(literal: str, position: int) -> Token:
    """
    NUMBER лексема с проверкой формата.

    Raises:
        MalformedExpression: Две точки в числе или текст не читается как float
    """
    if literal.count(DECIMAL_POINT) > 1:
        raise MalformedExpression(
            f"Invalid number format: {literal!r} at position {position}",
            position=position,
        )
    try:
        float(literal)
    except ValueError:
        raise MalformedExpression(
            f"Invalid number format: {literal!r} at position {position}",
            position=position,
        ) from None
    return Token.number(literal)


def tokenize(text: str) -> list[Token]:
    """
    Разбор текста выражения на лексемы.

    Args:
        text: Инфиксное выражение, например "2+3*4" или "-5*-2"

    Returns:
        Список Token в порядке появления

    Raises:
        MalformedExpression: Неизвестный символ или некорректное число
    """
    tokens: list[Token] = []
    i = 0

    while i < len(text):
        char = text[i]

        if char.isspace():
            i += 1
            continue

        operator = Operator.from_char(char)
        if operator is not None:
            unary_position = not tokens or tokens[-1].is_operator
            if operator == Operator.SUB and unary_position:
                end = _scan_number(text, i + 1)
                if end > i + 1:
                    tokens.append(_make_number(text[i:end], i))
                    i = end
                    continue
            tokens.append(Token.op(operator))
            i += 1
            continue

        if _is_number_char(char):
            end = _scan_number(text, i)
            tokens.append(_make_number(text[i:end], i))
            i = end
            continue

        raise MalformedExpression(
            f"Unknown character in expression: {char!r} at position {i}",
            position=i,
        )

    logger.debug("Tokenized %r into %d tokens", text, len(tokens))
    return tokens
