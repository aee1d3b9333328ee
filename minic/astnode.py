"""Abstract syntax tree nodes and the helpers the parser uses to build them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, List, Optional

from .attrs import BasicType, DigitIntAttr, TypeAttr, VarIdAttr

__all__ = [
    "AstOperatorType",
    "AstNode",
    "new_node",
    "new_int_literal",
    "new_var_id",
    "new_id",
    "new_type_node",
    "create_contain_node",
    "create_func_def",
    "create_func_def_from_attrs",
    "type_attr_to_type",
    "create_type_node",
    "create_func_call",
    "create_var_decl_node",
    "create_var_decl_stmt_node",
    "create_var_decl_stmt_from_attrs",
    "add_var_decl_node",
]

_UINT32_MASK = 0xFFFFFFFF


class AstOperatorType(IntEnum):
    """Kinds of AST nodes."""

    # leaves
    LEAF_LITERAL_UINT = 0
    LEAF_LITERAL_FLOAT = 1
    LEAF_VAR_ID = 2
    LEAF_TYPE = 3

    # internal nodes
    COMPILE_UNIT = 4
    FUNC_DEF = 5
    FUNC_FORMAL_PARAMS = 6
    FUNC_FORMAL_PARAM = 7
    FUNC_CALL = 8
    FUNC_REAL_PARAMS = 9
    BLOCK = 10
    COMPOUNDSTMT = 10
    RETURN = 11
    ASSIGN = 12
    DECL_STMT = 13
    VAR_DECL = 14
    ADD = 15
    SUB = 16
    MUL = 17
    DIV = 18
    MOD = 19
    NEG = 20
    NOT = 21
    AND = 22
    OR = 23
    EQ = 24
    NE = 25
    LT = 26
    LE = 27
    GT = 28
    GE = 29
    IF = 30
    IF_ELSE = 31
    WHILE = 32
    BREAK = 33
    CONTINUE = 34
    MAX = 35
    ARRAY_DIMENSIONS = 36
    UNSPECIFIED_DIM = 37
    ARRAY_ACCESS = 38
    NOP = 39


_LEAF_TYPES = frozenset(
    {
        AstOperatorType.LEAF_LITERAL_UINT,
        AstOperatorType.LEAF_LITERAL_FLOAT,
        AstOperatorType.LEAF_VAR_ID,
        AstOperatorType.LEAF_TYPE,
    }
)


@dataclass(eq=False)
class AstNode:
    """A node of the abstract syntax tree."""

    node_type: AstOperatorType
    type: BasicType = BasicType.VOID
    line_no: int = -1
    integer_val: int = 0
    float_val: float = 0.0
    name: str = ""
    is_lvalue: bool = False
    need_scope: bool = True
    parent: Optional["AstNode"] = field(default=None, repr=False)
    sons: List["AstNode"] = field(default_factory=list, repr=False)
    # Filled in by later compilation stages.
    true_label: Any = field(default=None, repr=False)
    false_label: Any = field(default=None, repr=False)
    block_insts: List[Any] = field(default_factory=list, repr=False)
    val: Any = field(default=None, repr=False)

    def is_leaf_node(self) -> bool:
        """Return True for literal, identifier and type leaves."""
        return self.node_type in _LEAF_TYPES

    def set_is_lvalue(self, is_lvalue: bool) -> None:
        """Mark whether the node is used as an assignment target."""
        self.is_lvalue = is_lvalue

    def insert_son_node(self, node: Optional["AstNode"]) -> "AstNode":
        """Append ``node`` as the last child; ``None`` is ignored. Returns self."""
        if node is not None:
            node.parent = self
            self.sons.append(node)
        return self


def new_node(node_type: AstOperatorType, *args: Optional[AstNode]) -> AstNode:
    """Create an internal node with the given children, left to right."""
    parent = AstNode(node_type)
    for child in args:
        parent.insert_son_node(child)
    return parent


def new_int_literal(attr: DigitIntAttr) -> AstNode:
    """Create an unsigned integer literal leaf."""
    return AstNode(
        AstOperatorType.LEAF_LITERAL_UINT,
        BasicType.INT,
        attr.lineno,
        integer_val=attr.val & _UINT32_MASK,
    )


def new_var_id(attr: VarIdAttr) -> AstNode:
    """Create an identifier leaf from a lexer attribute."""
    return new_id(attr.id, attr.lineno)


def new_id(name: str, line_no: int) -> AstNode:
    """Create an identifier leaf."""
    return AstNode(AstOperatorType.LEAF_VAR_ID, BasicType.VOID, line_no, name=name)


def new_type_node(type_: BasicType) -> AstNode:
    """Create a leaf that carries a type."""
    return AstNode(AstOperatorType.LEAF_TYPE, type_)


def create_contain_node(
    node_type: AstOperatorType,
    first_child: Optional[AstNode] = None,
    second_child: Optional[AstNode] = None,
    third_child: Optional[AstNode] = None,
) -> AstNode:
    """Create an internal node with up to three children."""
    return new_node(node_type, first_child, second_child, third_child)


def create_func_def(
    type_node: AstNode,
    name_node: AstNode,
    block_node: Optional[AstNode] = None,
    params_node: Optional[AstNode] = None,
) -> AstNode:
    """Create a function definition node.

    Children are, in order: return type, name, formal parameters and body.
    Missing parameters or body are replaced by empty nodes.
    """
    node = AstNode(AstOperatorType.FUNC_DEF, type_node.type, name_node.line_no)
    node.name = name_node.name
    if params_node is None:
        params_node = AstNode(AstOperatorType.FUNC_FORMAL_PARAMS)
    if block_node is None:
        block_node = AstNode(AstOperatorType.BLOCK)
    for child in (type_node, name_node, params_node, block_node):
        node.insert_son_node(child)
    return node


def create_func_def_from_attrs(
    type_attr: TypeAttr,
    id_attr: VarIdAttr,
    block_node: Optional[AstNode] = None,
    params_node: Optional[AstNode] = None,
) -> AstNode:
    """Create a function definition node from lexer attributes."""
    type_node = create_type_node(type_attr)
    id_node = new_id(id_attr.id, id_attr.lineno)
    return create_func_def(type_node, id_node, block_node, params_node)


def type_attr_to_type(attr: TypeAttr) -> BasicType:
    """Map a type attribute to a node type: ``int`` stays int, anything else is void."""
    return BasicType.INT if attr.type == BasicType.INT else BasicType.VOID


def create_type_node(attr: TypeAttr) -> AstNode:
    """Create a type leaf from a type attribute."""
    return new_type_node(type_attr_to_type(attr))


def create_func_call(
    funcname_node: AstNode, params_node: Optional[AstNode] = None
) -> AstNode:
    """Create a function call node with the name and actual parameters as children."""
    node = AstNode(AstOperatorType.FUNC_CALL)
    node.name = funcname_node.name
    if params_node is None:
        params_node = AstNode(AstOperatorType.FUNC_REAL_PARAMS)
    node.insert_son_node(funcname_node)
    node.insert_son_node(params_node)
    return node


def create_var_decl_node(type_: BasicType, id_attr: VarIdAttr) -> AstNode:
    """Create a single variable declaration: a type leaf and a name leaf."""
    type_node = new_type_node(type_)
    id_node = new_id(id_attr.id, id_attr.lineno)
    decl_node = create_contain_node(AstOperatorType.VAR_DECL, type_node, id_node)
    decl_node.type = type_
    return decl_node


def create_var_decl_stmt_node(first_child: Optional[AstNode] = None) -> AstNode:
    """Create a declaration statement, optionally holding a first declaration."""
    stmt_node = create_contain_node(AstOperatorType.DECL_STMT)
    if first_child is not None:
        stmt_node.type = first_child.type
        stmt_node.insert_son_node(first_child)
    return stmt_node


def create_var_decl_stmt_from_attrs(type_attr: TypeAttr, id_attr: VarIdAttr) -> AstNode:
    """Create a declaration statement holding one variable."""
    decl_node = create_var_decl_node(type_attr_to_type(type_attr), id_attr)
    stmt_node = create_contain_node(AstOperatorType.DECL_STMT)
    stmt_node.type = decl_node.type
    stmt_node.insert_son_node(decl_node)
    return stmt_node


def add_var_decl_node(stmt_node: AstNode, id_attr: VarIdAttr) -> AstNode:
    """Append another variable of the statement's type to a declaration statement."""
    stmt_node.insert_son_node(create_var_decl_node(stmt_node.type, id_attr))
    return stmt_node