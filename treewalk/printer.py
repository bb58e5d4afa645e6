"""Pretty-printer for treewalk trees.

Output is C-like, fully parenthesized and deterministic::

    {
        factorial = 1;
        i = 5;
        while (i != 0)
        {
            factorial = (factorial * i);
            i = (i - 1);
        }
    }

Statements nested in ``if``/``else``/``while`` start at the same indentation
as the keyword line; only the contents of a block are indented.
"""

from __future__ import annotations

from typing import List

from .ast import Assign, Block, Branch, Id, Loop, Node, Number, Operator
from .visitor import NodeVisitor

INDENT = '    '


class PrettyPrinter(NodeVisitor[None]):
    def __init__(self):
        self.parts: List[str] = []
        self.indent = 0

    def getvalue(self) -> str:
        return ''.join(self.parts)

    def write(self, text: str):
        self.parts.append(text)

    def line(self, text: str):
        self.parts.append(INDENT * self.indent + text + '\n')

    # Statements
    def visit_assign(self, node: Assign) -> None:
        self.write(INDENT * self.indent)
        node.target.accept(self)
        self.write(' = ')
        node.value.accept(self)
        self.write(';\n')

    def visit_block(self, node: Block) -> None:
        self.line('{')
        self.indent += 1
        for stmt in node.statements:
            stmt.accept(self)
        self.indent -= 1
        self.line('}')

    def visit_branch(self, node: Branch) -> None:
        self.write(INDENT * self.indent + 'if (')
        node.predicate.accept(self)
        self.write(')\n')
        node.then_branch.accept(self)
        self.line('else')
        node.else_branch.accept(self)

    def visit_loop(self, node: Loop) -> None:
        self.write(INDENT * self.indent + 'while (')
        node.predicate.accept(self)
        self.write(' != 0)\n')
        # body starts at the keyword's indentation, block or not
        node.body.accept(self)

    # Expressions
    def visit_id(self, node: Id) -> None:
        self.write(node.name)

    def visit_number(self, node: Number) -> None:
        self.write(str(node.value))

    def visit_operator(self, node: Operator) -> None:
        self.write('(')
        node.left.accept(self)
        self.write(f' {node.kind.glyph} ')
        node.right.accept(self)
        self.write(')')


def render(node: Node) -> str:
    printer = PrettyPrinter()
    node.accept(printer)
    return printer.getvalue()
