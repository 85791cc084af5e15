"""
Contract Validation Module

Модуль для валидации JSON контрактов между ядром калькулятора и UI-слоем.
"""

from .validators import (
    ContractValidator,
    DisplayStateValidator,
    SchemaLoader,
    validate_display_state,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DisplayStateValidator",
    # Functions
    "validate_display_state",
]
