# treewalk language package
# This package provides the AST, evaluator, executor and pretty-printer for
# the treewalk language.
from .ast import (
    Node, Statement, Expression, Assign, Block, Branch, Loop, Id, Number,
    Operator, OperatorKind, ident, number, operator, plus, minus, times,
    divide, assign, block, branch, loop,
)
from .environment import Environment
from .errors import TreeWalkError, DivisionByZero, EnvironmentBusy, AstFormatError
from .evaluator import ExpressionEvaluator, evaluate
from .executor import StatementExecutor, run
from .printer import PrettyPrinter, render
from .visitor import ExpressionVisitor, StatementVisitor, NodeVisitor

__all__ = [
    'Node', 'Statement', 'Expression', 'Assign', 'Block', 'Branch', 'Loop',
    'Id', 'Number', 'Operator', 'OperatorKind',
    'ident', 'number', 'operator', 'plus', 'minus', 'times', 'divide',
    'assign', 'block', 'branch', 'loop',
    'Environment',
    'TreeWalkError', 'DivisionByZero', 'EnvironmentBusy', 'AstFormatError',
    'ExpressionEvaluator', 'evaluate',
    'StatementExecutor', 'run',
    'PrettyPrinter', 'render',
    'ExpressionVisitor', 'StatementVisitor', 'NodeVisitor',
]
