"""Expression evaluation.

``ExpressionEvaluator`` reduces an expression tree to a 32-bit integer
against an ``Environment``. It only reads the environment. Unbound
identifiers evaluate to 0. Both operands of an operator are always
evaluated, left first, before the operator is applied.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from .ast import Expression, Id, Number, Operator, OperatorKind
from .environment import Environment
from .errors import DivisionByZero
from .types import truncating_div, wrap_int
from .visitor import ExpressionVisitor


def _divide(a: int, b: int) -> int:
    if b == 0:
        raise DivisionByZero()
    return truncating_div(a, b)


ARITHMETIC: Dict[OperatorKind, Callable[[int, int], int]] = {
    OperatorKind.ADD: lambda a, b: a + b,
    OperatorKind.SUBTRACT: lambda a, b: a - b,
    OperatorKind.MULTIPLY: lambda a, b: a * b,
    OperatorKind.DIVIDE: _divide,
}

if set(ARITHMETIC) != set(OperatorKind):
    raise TypeError('ARITHMETIC must cover every OperatorKind')


def apply_operator(kind: OperatorKind, a: int, b: int) -> int:
    """Apply ``kind`` to two integers, wrapping the result to 32 bits."""
    return wrap_int(ARITHMETIC[kind](a, b))


class ExpressionEvaluator(ExpressionVisitor[int]):
    def __init__(self, env: Environment):
        self.env = env

    def evaluate(self, node: Expression) -> int:
        return node.accept(self)

    def visit_id(self, node: Id) -> int:
        return self.env.get(node.name)

    def visit_number(self, node: Number) -> int:
        return node.value

    def visit_operator(self, node: Operator) -> int:
        left = node.left.accept(self)
        right = node.right.accept(self)
        return apply_operator(node.kind, left, right)


def evaluate(expression: Expression, env: Optional[Environment] = None) -> int:
    """Evaluate a single expression; an empty environment is used by default."""
    return ExpressionEvaluator(env if env is not None else Environment()).evaluate(expression)
