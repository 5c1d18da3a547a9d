"""
Tree-walking evaluator for arithexpr.

Every computed value (anything but a literal) passes through a range check
before it is handed to the parent node: +inf raises OVERFLOW and -inf raises
UNDERFLOW. NaN is an ordinary value here and propagates unchanged.

The walk keeps its own stack of pending nodes, so tree depth is bounded by
memory rather than by the interpreter's recursion limit.

Author: xwest
"""

import logging
import math
import operator
from typing import Callable, Dict, List, Tuple

from ..parser.ast_nodes import (
    ASTNode, ASTNodeType, ASTVisitor, BinaryOp, Number, Div, Neg
)
from .errors import EvalError, EvalErrorKind

logger = logging.getLogger("arithexpr.evaluator")


def _is_odd_integer(value: float) -> bool:
    return value.is_integer() and value % 2 == 1


def real_power(base: float, exponent: float) -> float:
    """
    Real-valued exponentiation following IEEE 754 pow().

    math.pow raises where IEEE pow returns a value, so those cases are mapped
    back: results too large become a signed infinity, zero to a negative
    power becomes infinity, and a negative base with a non-integer exponent
    becomes NaN.
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        pass
    except ValueError:
        if base != 0.0:
            return math.nan

    if _is_odd_integer(exponent):
        return math.copysign(math.inf, base)
    return math.inf


# Binary nodes whose operands are evaluated left then right
BINARY_OPERATIONS: Dict[ASTNodeType, Callable[[float, float], float]] = {
    ASTNodeType.ADD: operator.add,
    ASTNodeType.SUB: operator.sub,
    ASTNodeType.MUL: operator.mul,
    ASTNodeType.POW: real_power,
}


class Evaluator(ASTVisitor):
    """
    Evaluates expression trees to floats.

    Holds no state between calls, so one instance can evaluate any number of
    trees. Evaluation order is left operand first, except for division,
    which looks at the divisor first and never evaluates the dividend when
    the divisor is zero.
    """

    def evaluate(self, node: ASTNode) -> float:
        """
        Evaluate a tree.

        Returns:
            The value of the expression

        Raises:
            EvalError: On division by zero, overflow or underflow
        """
        try:
            value = node.accept(self)
        except EvalError as e:
            logger.debug("evaluation of %s failed: %s", node, e)
            raise
        logger.debug("evaluated %s = %r", node, value)
        return value

    def visit(self, node: ASTNode) -> float:
        # Each entry is a node and the step it has reached: step 0 schedules
        # the operands, later steps combine the values they left behind.
        pending: List[Tuple[ASTNode, int]] = [(node, 0)]
        values: List[float] = []

        while pending:
            current, step = pending.pop()

            if isinstance(current, Number):
                values.append(current.value)
            elif isinstance(current, Neg):
                if step == 0:
                    pending.append((current, 1))
                    pending.append((current.operand, 0))
                else:
                    values.append(self._check_range(-values.pop()))
            elif isinstance(current, Div):
                self._step_div(current, step, pending, values)
            elif isinstance(current, BinaryOp) and current.node_type in BINARY_OPERATIONS:
                if step == 0:
                    pending.append((current, 1))
                    pending.append((current.right, 0))
                    pending.append((current.left, 0))
                else:
                    right = values.pop()
                    left = values.pop()
                    apply = BINARY_OPERATIONS[current.node_type]
                    values.append(self._check_range(apply(left, right)))
            else:
                raise TypeError(f"Cannot evaluate {type(current).__name__}")

        return values.pop()

    def _step_div(self, node: Div, step: int,
                  pending: List[Tuple[ASTNode, int]], values: List[float]):
        if step == 0:
            pending.append((node, 1))
            pending.append((node.right, 0))
        elif step == 1:
            if values[-1] == 0.0:
                raise EvalError(EvalErrorKind.DIVISION_BY_ZERO)
            pending.append((node, 2))
            pending.append((node.left, 0))
        else:
            dividend = values.pop()
            divisor = values.pop()
            values.append(self._check_range(dividend / divisor))

    @staticmethod
    def _check_range(value: float) -> float:
        if value == math.inf:
            raise EvalError(EvalErrorKind.OVERFLOW)
        if value == -math.inf:
            raise EvalError(EvalErrorKind.UNDERFLOW)
        return value


def evaluate(node: ASTNode) -> float:
    """
    Convenience function to evaluate a tree.

    Raises:
        EvalError: On division by zero, overflow or underflow
    """
    return Evaluator().evaluate(node)


def evaluate_string(source: str) -> float:
    """
    Parse and evaluate a source string.

    Raises:
        LexerError: If the very first token is malformed
        ParseError: If parsing fails
        EvalError: If evaluation fails
    """
    from ..parser.parser import parse_string

    return evaluate(parse_string(source))
