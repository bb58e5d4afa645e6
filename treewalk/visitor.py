"""Visitor interfaces used to traverse the treewalk AST.

Every operation over the tree (evaluation, execution, printing, JSON
serialization) is a visitor class. Each node's ``accept`` method calls
exactly one ``visit_*`` method, so operations never inspect node types.
All visitor methods are abstract: an operation that forgets a node variant
of its family cannot be instantiated.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from .ast import Assign, Block, Branch, Id, Loop, Number, Operator

T = TypeVar('T')


class ExpressionVisitor(ABC, Generic[T]):
    """Operation over expression nodes, producing a ``T`` per node."""

    @abstractmethod
    def visit_id(self, node: Id) -> T: ...

    @abstractmethod
    def visit_number(self, node: Number) -> T: ...

    @abstractmethod
    def visit_operator(self, node: Operator) -> T: ...


class StatementVisitor(ABC, Generic[T]):
    """Operation over statement nodes, producing a ``T`` per node."""

    @abstractmethod
    def visit_assign(self, node: Assign) -> T: ...

    @abstractmethod
    def visit_block(self, node: Block) -> T: ...

    @abstractmethod
    def visit_branch(self, node: Branch) -> T: ...

    @abstractmethod
    def visit_loop(self, node: Loop) -> T: ...


class NodeVisitor(StatementVisitor[T], ExpressionVisitor[T]):
    """Operation over every node variant."""
