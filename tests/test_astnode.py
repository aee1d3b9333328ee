import pytest

from minic.astnode import (
    AstNode,
    AstOperatorType,
    add_var_decl_node,
    create_contain_node,
    create_func_call,
    create_func_def,
    create_func_def_from_attrs,
    create_type_node,
    create_var_decl_node,
    create_var_decl_stmt_from_attrs,
    create_var_decl_stmt_node,
    new_id,
    new_int_literal,
    new_node,
    new_type_node,
    new_var_id,
    type_attr_to_type,
)
from minic.attrs import BasicType, DigitIntAttr, TypeAttr, VarIdAttr


def test_compound_stmt_is_alias_of_block():
    node = AstNode(AstOperatorType.COMPOUNDSTMT)
    assert node.node_type is AstOperatorType.BLOCK
    assert node.is_leaf_node() is False


@pytest.mark.parametrize(
    "kind",
    [
        AstOperatorType.LEAF_LITERAL_UINT,
        AstOperatorType.LEAF_LITERAL_FLOAT,
        AstOperatorType.LEAF_VAR_ID,
        AstOperatorType.LEAF_TYPE,
    ],
)
def test_leaf_kinds(kind):
    assert AstNode(kind).is_leaf_node() is True


@pytest.mark.parametrize(
    "kind", [AstOperatorType.ADD, AstOperatorType.BLOCK, AstOperatorType.NOP]
)
def test_internal_kinds(kind):
    assert AstNode(kind).is_leaf_node() is False


def test_default_node_is_void_and_scoped():
    node = AstNode(AstOperatorType.RETURN)
    assert node.type is BasicType.VOID
    assert node.need_scope is True
    assert node.sons == []


def test_set_is_lvalue():
    node = new_id("a", 1)
    node.set_is_lvalue(True)
    assert node.is_lvalue is True


def test_insert_son_sets_parent_and_ignores_none():
    parent = AstNode(AstOperatorType.BLOCK)
    child = new_id("x", 2)
    assert parent.insert_son_node(child) is parent
    assert parent.insert_son_node(None) is parent
    assert parent.sons == [child]
    assert child.parent is parent


def test_new_node_keeps_children_order():
    a, b = new_id("a", 1), new_id("b", 1)
    node = new_node(AstOperatorType.ADD, a, b)
    assert node.node_type is AstOperatorType.ADD
    assert node.sons == [a, b]
    assert all(s.parent is node for s in node.sons)


def test_int_literal():
    node = new_int_literal(DigitIntAttr(2, 6))
    assert node.node_type is AstOperatorType.LEAF_LITERAL_UINT
    assert node.type is BasicType.INT
    assert node.integer_val == 2
    assert node.line_no == 6


def test_int_literal_wraps_to_uint32():
    node = new_int_literal(DigitIntAttr(2**32 + 3, 1))
    assert node.integer_val == 3


def test_var_id_from_attr_matches_new_id():
    from_attr = new_var_id(VarIdAttr("b", 4))
    direct = new_id("b", 4)
    assert (from_attr.node_type, from_attr.name, from_attr.line_no) == (
        direct.node_type,
        direct.name,
        direct.line_no,
    )
    assert from_attr.type is BasicType.VOID


def test_type_node():
    node = new_type_node(BasicType.INT)
    assert node.node_type is AstOperatorType.LEAF_TYPE
    assert node.type is BasicType.INT


def test_contain_node_skips_missing_children():
    a = new_id("a", 1)
    c = new_id("c", 1)
    node = create_contain_node(AstOperatorType.IF_ELSE, a, None, c)
    assert node.sons == [a, c]


@pytest.mark.parametrize(
    "given, expected",
    [
        (BasicType.INT, BasicType.INT),
        (BasicType.VOID, BasicType.VOID),
        (BasicType.FLOAT, BasicType.VOID),
    ],
)
def test_type_attr_to_type(given, expected):
    assert type_attr_to_type(TypeAttr(given, 1)) is expected
    assert create_type_node(TypeAttr(given, 1)).type is expected


def test_func_def_fills_missing_params_and_body():
    type_node = new_type_node(BasicType.INT)
    name_node = new_id("main", 1)
    func = create_func_def(type_node, name_node)
    assert func.node_type is AstOperatorType.FUNC_DEF
    assert func.name == "main"
    assert func.type is BasicType.INT
    assert func.line_no == name_node.line_no
    kinds = [s.node_type for s in func.sons]
    assert kinds == [
        AstOperatorType.LEAF_TYPE,
        AstOperatorType.LEAF_VAR_ID,
        AstOperatorType.FUNC_FORMAL_PARAMS,
        AstOperatorType.BLOCK,
    ]
    assert func.sons[2].sons == [] and func.sons[3].sons == []


def test_func_def_keeps_given_body():
    body = AstNode(AstOperatorType.BLOCK)
    params = AstNode(AstOperatorType.FUNC_FORMAL_PARAMS)
    func = create_func_def(new_type_node(BasicType.VOID), new_id("f", 3), body, params)
    assert func.sons[2] is params
    assert func.sons[3] is body


def test_func_def_from_attrs():
    func = create_func_def_from_attrs(
        TypeAttr(BasicType.INT, 1), VarIdAttr("main", 1), None, None
    )
    assert func.name == "main"
    assert func.sons[1].name == "main"
    assert func.sons[0].type is BasicType.INT


def test_func_call():
    name = new_id("putint", 5)
    call = create_func_call(name)
    assert call.node_type is AstOperatorType.FUNC_CALL
    assert call.name == "putint"
    assert call.sons[0] is name
    assert call.sons[1].node_type is AstOperatorType.FUNC_REAL_PARAMS


def test_var_decl_node():
    decl = create_var_decl_node(BasicType.INT, VarIdAttr("a", 3))
    assert decl.node_type is AstOperatorType.VAR_DECL
    assert decl.type is BasicType.INT
    assert [s.node_type for s in decl.sons] == [
        AstOperatorType.LEAF_TYPE,
        AstOperatorType.LEAF_VAR_ID,
    ]
    assert decl.sons[1].name == "a"


def test_var_decl_stmt_from_first_child():
    decl = create_var_decl_node(BasicType.INT, VarIdAttr("a", 3))
    stmt = create_var_decl_stmt_node(decl)
    assert stmt.node_type is AstOperatorType.DECL_STMT
    assert stmt.type is BasicType.INT
    assert stmt.sons == [decl]


def test_empty_var_decl_stmt():
    stmt = create_var_decl_stmt_node()
    assert stmt.sons == []
    assert stmt.type is BasicType.VOID


def test_int_c_d_declaration_statement():
    stmt = create_var_decl_stmt_from_attrs(TypeAttr(BasicType.INT, 5), VarIdAttr("c", 5))
    assert add_var_decl_node(stmt, VarIdAttr("d", 5)) is stmt
    names = [decl.sons[1].name for decl in stmt.sons]
    assert names == ["c", "d"]
    assert all(decl.type is BasicType.INT for decl in stmt.sons)
    assert all(decl.parent is stmt for decl in stmt.sons)