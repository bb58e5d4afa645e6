"""JSON serialization/deserialization for treewalk ASTs.

This module converts between AST nodes and plain Python dict/list
structures suitable for JSON encoding. Every object carries a ``"type"``
tag naming its node class; operators store their glyph under ``"op"``.
Decoding goes through the node constructors, so a decoded tree is
validated exactly like a hand-built one.
"""

from __future__ import annotations

import json
from typing import Any, Dict

from .ast import (
    Assign,
    Block,
    Branch,
    Id,
    Loop,
    Node,
    Number,
    Operator,
    OperatorKind,
    Statement,
)
from .errors import AstFormatError
from .visitor import NodeVisitor


class _Encoder(NodeVisitor[Dict[str, Any]]):
    def visit_assign(self, node: Assign) -> Dict[str, Any]:
        return {"type": "Assign", "target": node.target.accept(self), "value": node.value.accept(self)}

    def visit_block(self, node: Block) -> Dict[str, Any]:
        return {"type": "Block", "statements": [s.accept(self) for s in node.statements]}

    def visit_branch(self, node: Branch) -> Dict[str, Any]:
        return {
            "type": "Branch",
            "predicate": node.predicate.accept(self),
            "then_branch": node.then_branch.accept(self),
            "else_branch": node.else_branch.accept(self),
        }

    def visit_loop(self, node: Loop) -> Dict[str, Any]:
        return {"type": "Loop", "predicate": node.predicate.accept(self), "body": node.body.accept(self)}

    def visit_id(self, node: Id) -> Dict[str, Any]:
        return {"type": "Id", "name": node.name}

    def visit_number(self, node: Number) -> Dict[str, Any]:
        return {"type": "Number", "value": node.value}

    def visit_operator(self, node: Operator) -> Dict[str, Any]:
        return {
            "type": "Operator",
            "op": node.kind.glyph,
            "left": node.left.accept(self),
            "right": node.right.accept(self),
        }


def ast_to_obj(node: Node) -> Dict[str, Any]:
    return node.accept(_Encoder())


def _decode(obj: Any) -> Node:
    if not isinstance(obj, dict):
        raise AstFormatError(f"expected an AST object, got {type(obj).__name__}")
    t = obj.get("type")
    if t == "Assign":
        return Assign(target=_decode(obj["target"]), value=_decode(obj["value"]))
    if t == "Block":
        statements = obj["statements"]
        if not isinstance(statements, list):
            raise AstFormatError("Block.statements must be a list")
        return Block(tuple(_decode(s) for s in statements))
    if t == "Branch":
        return Branch(
            predicate=_decode(obj["predicate"]),
            then_branch=_decode(obj["then_branch"]),
            else_branch=_decode(obj["else_branch"]),
        )
    if t == "Loop":
        return Loop(predicate=_decode(obj["predicate"]), body=_decode(obj["body"]))
    if t == "Id":
        return Id(name=obj["name"])
    if t == "Number":
        return Number(value=obj["value"])
    if t == "Operator":
        return Operator(kind=OperatorKind(obj["op"]), left=_decode(obj["left"]), right=_decode(obj["right"]))
    raise AstFormatError(f"unknown AST node type: {t!r}")


def ast_from_obj(obj: Any) -> Node:
    try:
        return _decode(obj)
    except KeyError as e:
        raise AstFormatError(f"missing field {e.args[0]!r}") from e
    except (TypeError, ValueError) as e:
        raise AstFormatError(str(e)) from e
    except RecursionError as e:
        raise AstFormatError("AST is nested too deeply") from e


def statement_from_obj(obj: Any) -> Statement:
    """Decode ``obj`` and require the root to be a statement."""
    node = ast_from_obj(obj)
    if not isinstance(node, Statement):
        raise AstFormatError(f"expected a statement at the root, got {type(node).__name__}")
    return node


def dumps(node: Node, indent: int = 2) -> str:
    return json.dumps(ast_to_obj(node), ensure_ascii=False, indent=indent)


def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise AstFormatError(f"invalid JSON: {e}") from e
    except RecursionError as e:
        raise AstFormatError("JSON document is nested too deeply") from e


def loads(text: str) -> Node:
    return ast_from_obj(_parse_json(text))


def loads_statement(text: str) -> Statement:
    return statement_from_obj(_parse_json(text))
