"""Pipeline — вычисление инфиксного выражения: tokenize → postfix → evaluate → format.

Операторы только бинарные (+ - * /), приоритеты плоские, без скобок.
"""

from .runner import (
    EvaluationConfig,
    EvaluationResult,
    evaluate_expression,
    run_pipeline,
)

__all__ = [
    "EvaluationConfig",
    "EvaluationResult",
    "evaluate_expression",
    "run_pipeline",
]
