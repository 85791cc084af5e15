"""
DisplayState — Снапшот состояния дисплея калькулятора

Immutable Pydantic модель, передаваемая UI-слою.
Полная совместимость с JSON Schema (contracts/schema/display_state.json).
"""

from pydantic import BaseModel, Field


class DisplayState(BaseModel):
    """
    Состояние дисплея (expression + result).

    Immutable модель (frozen=True):
    - expression_text: содержимое буфера выражения или "0"
    - result_text: последний результат, "0" или "Error"
    - preview_text: предварительный результат (только при live_preview)
    """

    schema_version: str = Field(
        default="1", pattern="^1$", description="Версия схемы для tracking совместимости"
    )
    expression_text: str = Field(..., min_length=1, description="Текст выражения на дисплее")
    result_text: str = Field(..., min_length=1, description="Текст результата на дисплее")
    preview_text: str | None = Field(
        None, description="Предварительный результат текущего выражения (nullable)"
    )

    model_config = {"frozen": True}
