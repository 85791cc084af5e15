"""
Domain models and value objects.

Contains fundamental calculator entities: Operator, OperatorSpec, Token,
DisplayState and the evaluation error hierarchy.
"""

from src.core.domain.display_state import DisplayState
from src.core.domain.errors import (
    CalculatorError,
    DivisionByZero,
    MalformedExpression,
    NumericOverflow,
)
from src.core.domain.operators import (
    OPERATOR_CHARS,
    OPERATOR_SPECS,
    Operator,
    OperatorSpec,
    get_precedence,
    is_operator_char,
)
from src.core.domain.token import Token, TokenKind

__all__ = [
    # Operators
    "Operator",
    "OperatorSpec",
    "OPERATOR_SPECS",
    "OPERATOR_CHARS",
    "get_precedence",
    "is_operator_char",
    # Tokens
    "Token",
    "TokenKind",
    # Display
    "DisplayState",
    # Errors
    "CalculatorError",
    "MalformedExpression",
    "DivisionByZero",
    "NumericOverflow",
]
