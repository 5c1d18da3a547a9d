"""
Abstract Syntax Tree node definitions for arithexpr.

Nodes are immutable and compare structurally. Each composite node owns its
children outright; there is no parent pointer and no sharing.

Author: xwest
"""

import math
from abc import ABC, abstractmethod
from typing import List, Any, Union
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    NUMBER = "Number"
    ADD = "Add"
    SUB = "Sub"
    MUL = "Mul"
    DIV = "Div"
    NEG = "Neg"
    POW = "Pow"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'ASTNode') -> Any:
        """Visit a generic AST node."""
        pass


class ASTNode(ABC):
    """Base class for all AST nodes."""

    node_type: ASTNodeType

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass

    def __str__(self) -> str:
        return to_display_string(self)


class Expression(ASTNode):
    """Base class for expressions."""

    def evaluate(self) -> float:
        """Evaluate this tree. Raises EvalError on division by zero or overflow."""
        from ..evaluator import evaluate

        return evaluate(self)


@dataclass(frozen=True, repr=False)
class Number(Expression):
    """Numeric literal."""
    value: float

    node_type = ASTNodeType.NUMBER

    def children(self) -> List[ASTNode]:
        return []

    def __repr__(self) -> str:
        return f"Number({self.value!r})"


class BinaryOp(Expression):
    """Binary operation expression."""
    left: Expression
    right: Expression
    operator: str

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]

    def __repr__(self) -> str:
        return f"{self.node_type.value}({self.left!r}, {self.right!r})"


@dataclass(frozen=True, repr=False)
class Add(BinaryOp):
    left: Expression
    right: Expression

    node_type = ASTNodeType.ADD
    operator = "+"


@dataclass(frozen=True, repr=False)
class Sub(BinaryOp):
    left: Expression
    right: Expression

    node_type = ASTNodeType.SUB
    operator = "-"


@dataclass(frozen=True, repr=False)
class Mul(BinaryOp):
    left: Expression
    right: Expression

    node_type = ASTNodeType.MUL
    operator = "*"


@dataclass(frozen=True, repr=False)
class Div(BinaryOp):
    left: Expression
    right: Expression

    node_type = ASTNodeType.DIV
    operator = "/"


@dataclass(frozen=True, repr=False)
class Pow(BinaryOp):
    """
    Exponentiation. Only reachable by building the tree directly; the
    grammar has no operator for it.
    """
    left: Expression
    right: Expression

    node_type = ASTNodeType.POW
    operator = "^"

    @property
    def base(self) -> Expression:
        return self.left

    @property
    def exponent(self) -> Expression:
        return self.right


@dataclass(frozen=True, repr=False)
class Neg(Expression):
    """Unary negation."""
    operand: Expression

    node_type = ASTNodeType.NEG

    def children(self) -> List[ASTNode]:
        return [self.operand]

    def __repr__(self) -> str:
        return f"Neg({self.operand!r})"


def format_number(value: float) -> str:
    """
    Render a float in plain decimal notation, never with an exponent.

    Integral values print without a fractional part (2.0 -> '2'), small
    values print in full (1e-07 -> '0.0000001') and the sign of zero is
    kept (-0.0 -> '-0').
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    # repr() gives the shortest digits that round-trip
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def to_display_string(node: ASTNode) -> str:
    """
    Render a tree with every sub-expression parenthesized.

    ``Add(Number(2), Mul(Number(3), Number(4)))`` becomes
    ``(2) + ((3) * (4))``.
    """
    parts: List[str] = []
    # Nodes still to render and literal text, in reverse output order
    pending: List[Union[ASTNode, str]] = [node]

    while pending:
        current = pending.pop()
        if isinstance(current, str):
            parts.append(current)
        elif isinstance(current, Number):
            parts.append(format_number(current.value))
        elif isinstance(current, Neg):
            pending.extend([")", current.operand, "-("])
        elif isinstance(current, BinaryOp):
            pending.extend([")", current.right, f") {current.operator} (", current.left, "("])
        else:
            raise TypeError(f"Cannot render {type(current).__name__}")

    return "".join(parts)
