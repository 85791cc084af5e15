"""Stages — стадии конвейера вычисления выражения.

- STAGE 0: Tokenizer (текст → лексемы, унарный минус)
- STAGE 1: Infix → Postfix (shunting-yard)
- STAGE 2: Postfix Evaluator
- STAGE 3: Result Formatter
"""

from .stage_00_tokenizer import tokenize
from .stage_01_shunting_yard import to_postfix
from .stage_02_postfix_eval import apply_operator, evaluate_postfix
from .stage_03_result_format import format_result

__all__ = [
    "tokenize",
    "to_postfix",
    "apply_operator",
    "evaluate_postfix",
    "format_result",
]
