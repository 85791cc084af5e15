"""STAGE 1: Infix → Postfix (shunting-yard, только операторы, без скобок)

Выходная последовательность + стек операторов (LIFO):
- NUMBER → сразу в выход
- OPERATOR → пока на вершине стека оператор с приоритетом выше текущего,
  либо равным при левой ассоциативности текущего: pop в выход, затем push
- В конце все операторы со стека выгружаются в выход в порядке pop

Специализация классического shunting-yard на четыре плоских левоассоциативных
бинарных оператора.
"""

import logging

from src.core.domain.errors import MalformedExpression
from src.core.domain.operators import OPERATOR_SPECS
from src.core.domain.token import Token

logger = logging.getLogger(__name__)


def _should_pop(top: Token, current: Token) -> bool:
    """Выталкивать ли top перед push текущего оператора."""
    top_spec = OPERATOR_SPECS[top.operator]
    current_spec = OPERATOR_SPECS[current.operator]

    if top_spec.precedence > current_spec.precedence:
        return True
    return (
        top_spec.precedence == current_spec.precedence
        and current_spec.is_left_associative
    )


def to_postfix(tokens: list[Token]) -> list[Token]:
    """
    Переупорядочивание лексем из инфиксной записи в постфиксную (RPN).

    Args:
        tokens: Лексемы от tokenizer

    Returns:
        Лексемы в постфиксном порядке

    Raises:
        MalformedExpression: Лексема неизвестного типа

    Examples:
        2 + 3 * 4  →  2 3 4 * +
        2 * 3 + 4  →  2 3 * 4 +
        8 - 3 - 2  →  8 3 - 2 -
    """
    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        if token.is_number:
            output.append(token)
        elif token.is_operator:
            while stack and stack[-1].is_operator and _should_pop(stack[-1], token):
                output.append(stack.pop())
            stack.append(token)
        else:
            raise MalformedExpression(f"Unsupported token: {token.text!r}")

    while stack:
        output.append(stack.pop())

    logger.debug("Postfix: %s", " ".join(str(t) for t in output))
    return output
