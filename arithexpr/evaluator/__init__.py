"""
arithexpr Evaluator Package

Walks an expression tree and computes its floating-point value, guarding
against division by zero and results that leave the finite float range.

Author: xwest
"""

from .evaluator import Evaluator, evaluate, evaluate_string, real_power
from .errors import EvalError, EvalErrorKind

__all__ = [
    "Evaluator",
    "evaluate",
    "evaluate_string",
    "real_power",
    "EvalError",
    "EvalErrorKind",
]
