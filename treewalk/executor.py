"""Statement execution.

``StatementExecutor`` walks a statement tree and performs its effects on the
``Environment`` it owns. Expressions are handed to an ``ExpressionEvaluator``
bound to the same environment. Errors raised during evaluation (currently only
``DivisionByZero``) are not caught here: they abort the running statement and
every enclosing block, loop and branch, and reach the caller of ``run``.
Assignments that completed before the failure stay in the environment.
"""

from __future__ import annotations

import logging
from typing import Optional

from .ast import Assign, Block, Branch, Loop, Statement
from .environment import Environment
from .evaluator import ExpressionEvaluator
from .types import is_truthy
from .visitor import StatementVisitor

logger = logging.getLogger(__name__)


class StatementExecutor(StatementVisitor[None]):
    """Executes statements against one environment.

    ``debug_level`` controls how much is logged at DEBUG level:
    1 logs run start and end, 2 adds every assignment, 3 adds every
    branch and loop predicate.
    """
    def __init__(self, env: Optional[Environment] = None, debug_level: int = 0):
        self.env = env if env is not None else Environment()
        self.evaluator = ExpressionEvaluator(self.env)
        self.debug_level = debug_level

    def debug(self, level: int, msg: str, *args):
        if self.debug_level >= level:
            logger.debug(msg, *args)

    # Public API
    def run(self, program: Statement) -> Environment:
        self.env.acquire()
        try:
            self.debug(1, "run %s", type(program).__name__)
            program.accept(self)
            self.debug(1, "finished with %d binding(s)", len(self.env))
        finally:
            self.env.release()
        return self.env

    def visit_assign(self, node: Assign) -> None:
        value = self.evaluator.evaluate(node.value)
        self.env.set(node.target.name, value)
        self.debug(2, "assign %s = %d", node.target.name, value)

    def visit_block(self, node: Block) -> None:
        for stmt in node.statements:
            stmt.accept(self)

    def visit_branch(self, node: Branch) -> None:
        cond = self.evaluator.evaluate(node.predicate)
        truthy = is_truthy(cond)
        self.debug(3, "if condition %d -> %s", cond, truthy)
        if truthy:
            node.then_branch.accept(self)
        else:
            node.else_branch.accept(self)

    def visit_loop(self, node: Loop) -> None:
        # predicate is re-evaluated before every iteration, including the first
        while True:
            cond = self.evaluator.evaluate(node.predicate)
            self.debug(3, "while condition %d", cond)
            if not is_truthy(cond):
                break
            node.body.accept(self)


def run(program: Statement, env: Optional[Environment] = None, debug_level: int = 0) -> Environment:
    """Execute ``program`` and return the environment holding its bindings."""
    return StatementExecutor(env, debug_level=debug_level).run(program)
