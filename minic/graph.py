"""Rendering of the abstract syntax tree as a Graphviz DOT digraph."""

from __future__ import annotations

import os
from typing import List, Optional, Union

from .astnode import AstNode, AstOperatorType

__all__ = ["node_name", "ast_to_dot", "write_ast"]

_INTERNAL_NAMES = {
    AstOperatorType.BLOCK: "block",
    AstOperatorType.RETURN: "return",
    AstOperatorType.IF: "if",
    AstOperatorType.IF_ELSE: "if",
    AstOperatorType.WHILE: "while",
    AstOperatorType.BREAK: "break",
    AstOperatorType.CONTINUE: "continue",
    AstOperatorType.FUNC_DEF: "func-def",
    AstOperatorType.COMPILE_UNIT: "compile-unit",
    AstOperatorType.FUNC_FORMAL_PARAMS: "formal-params",
    AstOperatorType.FUNC_FORMAL_PARAM: "formal-param",
    AstOperatorType.VAR_DECL: "var-decl",
    AstOperatorType.DECL_STMT: "decl-stmt",
    AstOperatorType.ADD: "+",
    AstOperatorType.SUB: "-",
    AstOperatorType.MUL: "*",
    AstOperatorType.DIV: "/",
    AstOperatorType.MOD: "%",
    AstOperatorType.NEG: "-",
    AstOperatorType.ASSIGN: "=",
    AstOperatorType.FUNC_CALL: "func-call",
    AstOperatorType.FUNC_REAL_PARAMS: "real-params",
    AstOperatorType.LT: "<",
    AstOperatorType.GT: ">",
    AstOperatorType.LE: "<=",
    AstOperatorType.GE: ">=",
    AstOperatorType.EQ: "==",
    AstOperatorType.NE: "!=",
    AstOperatorType.AND: "&&",
    AstOperatorType.OR: "||",
    AstOperatorType.NOT: "!",
    AstOperatorType.ARRAY_DIMENSIONS: "array-dimensions",
    AstOperatorType.UNSPECIFIED_DIM: "[]",
    AstOperatorType.ARRAY_ACCESS: "array-access",
    AstOperatorType.NOP: "nop",
}

_LEAF_ATTRS = (
    ("fontcolor", "black"),
    ("fontname", "SimSun"),
    ("shape", "record"),
    ("style", "filled"),
    ("fillcolor", "yellow"),
)
_INTERNAL_ATTRS = (("shape", "ellipse"),)


def _as_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def node_name(node: AstNode) -> str:
    """Return the text shown for ``node`` in the drawing."""
    kind = node.node_type
    if kind == AstOperatorType.LEAF_LITERAL_UINT:
        return str(_as_int32(node.integer_val))
    if kind == AstOperatorType.LEAF_LITERAL_FLOAT:
        return f"{node.float_val:.6f}"
    if kind == AstOperatorType.LEAF_VAR_ID:
        return node.name
    if kind == AstOperatorType.LEAF_TYPE:
        return node.type.name.lower()
    return _INTERNAL_NAMES.get(kind, "unknown")


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class _DotBuilder:
    """Walks the tree, children first, emitting DOT nodes and edges."""

    def __init__(self) -> None:
        self.lines: List[str] = []
        self._count = 0

    def _new_node(self, label: str, attrs) -> str:
        node_id = f"n{self._count}"
        self._count += 1
        parts = [f"label={_quote(label)}"]
        parts.extend(f"{key}={_quote(value)}" for key, value in attrs)
        self.lines.append(f"    {node_id} [{', '.join(parts)}];")
        return node_id

    def visit(self, node: Optional[AstNode]) -> Optional[str]:
        if node is None:
            return None
        if node.is_leaf_node():
            return self._new_node(node_name(node), _LEAF_ATTRS)
        son_ids = [sid for sid in map(self.visit, node.sons) if sid is not None]
        node_id = self._new_node(node_name(node), _INTERNAL_ATTRS)
        self.lines.extend(f"    {node_id} -> {sid};" for sid in son_ids)
        return node_id


def ast_to_dot(root: Optional[AstNode]) -> str:
    """Return the DOT source of a directed graph drawing the tree under ``root``."""
    builder = _DotBuilder()
    builder.visit(root)
    body = "\n".join(builder.lines)
    header = 'digraph ast {\n    dpi="600";\n'
    return header + (body + "\n" if body else "") + "}\n"


def write_ast(root: Optional[AstNode], file_path: Union[str, os.PathLike]) -> None:
    """Write the DOT drawing of the tree under ``root`` to ``file_path``."""
    with open(file_path, "w", encoding="utf-8") as handle:
        handle.write(ast_to_dot(root))