"""Abstract Syntax Tree (AST) definitions for the treewalk language.

The tree has two disjoint node families. Statements (``Assign``, ``Block``,
``Branch``, ``Loop``) have effects when executed; expressions (``Id``,
``Number``, ``Operator``) reduce to an integer. Nodes are frozen dataclasses
and are validated when built, so a tree that exists is well formed.

Programs are assembled with the lowercase builder functions at the bottom of
this module::

    block(
        assign('factorial', 1),
        assign('i', 5),
        loop(ident('i'), block(
            assign('factorial', times('factorial', 'i')),
            assign('i', minus('i', 1)),
        )),
    )
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Tuple, Type, TypeVar, Union

from .types import check_int
from .visitor import ExpressionVisitor, StatementVisitor

T = TypeVar('T')

# visitor family -> visit method name -> node class
_BOUND: Dict[type, Dict[str, type]] = {}


class Node:
    """Base class for all AST nodes.

    Every class below ``Statement`` or ``Expression`` must name the visitor
    method its ``accept`` calls and define ``accept`` itself. The name must be
    declared by the family and not already bound to another node class;
    violations raise ``TypeError`` when the class is created.
    """
    visitor_method: ClassVar[str] = ''
    family: ClassVar[Type[Any]] = object

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        if Node in cls.__bases__:
            return
        name = cls.__dict__.get('visitor_method')
        if not name:
            raise TypeError(f'{cls.__name__}: node classes must declare visitor_method')
        if name not in getattr(cls.family, '__abstractmethods__', ()):
            raise TypeError(f'{cls.__name__}: {cls.family.__name__} has no method {name}')
        if 'accept' not in cls.__dict__:
            raise TypeError(f'{cls.__name__}: node classes must define accept')
        bound = _BOUND.setdefault(cls.family, {})
        if name in bound:
            raise TypeError(f'{cls.__name__}: {name} is already bound to {bound[name].__name__}')
        bound[name] = cls


class Statement(Node):
    family = StatementVisitor

    def accept(self, visitor: StatementVisitor[T]) -> T:
        raise NotImplementedError


class Expression(Node):
    family = ExpressionVisitor

    def accept(self, visitor: ExpressionVisitor[T]) -> T:
        raise NotImplementedError


class OperatorKind(Enum):
    """Binary arithmetic operators; the value is the display glyph."""
    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'

    @property
    def glyph(self) -> str:
        return self.value


def _require(value: Any, cls: type, where: str) -> None:
    if not isinstance(value, cls):
        raise TypeError(f'{where} must be {cls.__name__}, got {type(value).__name__}')


# Expressions

@dataclass(frozen=True)
class Id(Expression):
    name: str
    visitor_method: ClassVar[str] = 'visit_id'

    def __post_init__(self):
        _require(self.name, str, 'Id.name')
        if not self.name:
            raise ValueError('Id.name must not be empty')

    def accept(self, visitor: ExpressionVisitor[T]) -> T:
        return visitor.visit_id(self)


@dataclass(frozen=True)
class Number(Expression):
    value: int
    visitor_method: ClassVar[str] = 'visit_number'

    def __post_init__(self):
        check_int(self.value)

    def accept(self, visitor: ExpressionVisitor[T]) -> T:
        return visitor.visit_number(self)


@dataclass(frozen=True)
class Operator(Expression):
    kind: OperatorKind
    left: Expression
    right: Expression
    visitor_method: ClassVar[str] = 'visit_operator'

    def __post_init__(self):
        _require(self.kind, OperatorKind, 'Operator.kind')
        _require(self.left, Expression, 'Operator.left')
        _require(self.right, Expression, 'Operator.right')

    def accept(self, visitor: ExpressionVisitor[T]) -> T:
        return visitor.visit_operator(self)


# Statements

@dataclass(frozen=True)
class Assign(Statement):
    target: Id
    value: Expression
    visitor_method: ClassVar[str] = 'visit_assign'

    def __post_init__(self):
        _require(self.target, Id, 'Assign.target')
        _require(self.value, Expression, 'Assign.value')

    def accept(self, visitor: StatementVisitor[T]) -> T:
        return visitor.visit_assign(self)


@dataclass(frozen=True)
class Block(Statement):
    statements: Tuple[Statement, ...] = ()
    visitor_method: ClassVar[str] = 'visit_block'

    def __post_init__(self):
        statements = tuple(self.statements)
        for stmt in statements:
            _require(stmt, Statement, 'Block statement')
        object.__setattr__(self, 'statements', statements)

    def accept(self, visitor: StatementVisitor[T]) -> T:
        return visitor.visit_block(self)


@dataclass(frozen=True)
class Branch(Statement):
    predicate: Expression
    then_branch: Statement
    else_branch: Statement
    visitor_method: ClassVar[str] = 'visit_branch'

    def __post_init__(self):
        _require(self.predicate, Expression, 'Branch.predicate')
        _require(self.then_branch, Statement, 'Branch.then_branch')
        _require(self.else_branch, Statement, 'Branch.else_branch')

    def accept(self, visitor: StatementVisitor[T]) -> T:
        return visitor.visit_branch(self)


@dataclass(frozen=True)
class Loop(Statement):
    predicate: Expression
    body: Statement
    visitor_method: ClassVar[str] = 'visit_loop'

    def __post_init__(self):
        _require(self.predicate, Expression, 'Loop.predicate')
        _require(self.body, Statement, 'Loop.body')

    def accept(self, visitor: StatementVisitor[T]) -> T:
        return visitor.visit_loop(self)


EXPRESSION_TYPES = (Id, Number, Operator)
STATEMENT_TYPES = (Assign, Block, Branch, Loop)


def _check_dispatch_table() -> None:
    """Every abstract visitor method must be bound to exactly one node class."""
    for family in (ExpressionVisitor, StatementVisitor):
        bound = sorted(_BOUND.get(family, {}))
        declared = sorted(family.__abstractmethods__)
        if bound != declared:
            raise TypeError(f'{family.__name__} methods {declared} do not match node classes {bound}')


_check_dispatch_table()


###############################################################################
# Builders
###############################################################################

ExprLike = Union[Expression, str, int]
IdLike = Union[Id, str]


def _as_expression(value: ExprLike) -> Expression:
    # str -> Id and int -> Number keep hand-built programs short
    if isinstance(value, Expression):
        return value
    if isinstance(value, str):
        return Id(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return Number(value)
    raise TypeError(f'cannot use {type(value).__name__} as an expression')


def _as_id(value: IdLike) -> Id:
    if isinstance(value, str):
        return Id(value)
    _require(value, Id, 'assignment target')
    return value


def ident(name: str) -> Id:
    return Id(name)


def number(value: int) -> Number:
    return Number(value)


def operator(kind: OperatorKind, left: ExprLike, right: ExprLike) -> Operator:
    return Operator(kind, _as_expression(left), _as_expression(right))


def plus(left: ExprLike, right: ExprLike) -> Operator:
    return operator(OperatorKind.ADD, left, right)


def minus(left: ExprLike, right: ExprLike) -> Operator:
    return operator(OperatorKind.SUBTRACT, left, right)


def times(left: ExprLike, right: ExprLike) -> Operator:
    return operator(OperatorKind.MULTIPLY, left, right)


def divide(left: ExprLike, right: ExprLike) -> Operator:
    return operator(OperatorKind.DIVIDE, left, right)


def assign(target: IdLike, value: ExprLike) -> Assign:
    return Assign(_as_id(target), _as_expression(value))


def block(*statements: Statement) -> Block:
    return Block(statements)


def branch(predicate: ExprLike, then_branch: Statement, else_branch: Statement) -> Branch:
    """Build an if/else statement. Pass ``block()`` for an empty else."""
    return Branch(_as_expression(predicate), then_branch, else_branch)


def loop(predicate: ExprLike, body: Statement) -> Loop:
    return Loop(_as_expression(predicate), body)
