# minic

Pieces of a compiler for a small subset of C, targeting 32-bit ARM.

- `minic.attrs` – attribute records passed from a scanner to a parser:
  `BasicType` (`NONE`, `VOID`, `INT`, `FLOAT`, `MAX`), `DigitIntAttr`,
  `DigitRealAttr`, `VarIdAttr` and `TypeAttr`.
- `minic.astnode` – the abstract syntax tree: `AstOperatorType`, `AstNode`
  (`is_leaf_node`, `set_is_lvalue`, `insert_son_node`) and builders such as
  `new_node`, `new_int_literal`, `new_id`, `create_contain_node`,
  `create_func_def`, `create_func_def_from_attrs`, `create_func_call`,
  `create_var_decl_stmt_node`, `create_var_decl_stmt_from_attrs` and
  `add_var_decl_node`. `type_attr_to_type` maps `int` to `BasicType.INT` and
  every other type to `BasicType.VOID`.
- `minic.graph` – renders an AST as Graphviz DOT text: `node_name` gives the
  label of a node, `ast_to_dot` returns the whole digraph and `write_ast`
  writes it to a file.
- `minic.platform_arm32` – ARM32 facts: `REG_NAMES`, the register numbers
  `TMP_REG_NO`, `SP_REG_NO`, `FP_REG_NO`, `LX_REG_NO`, and the checks
  `is_const_expr` (an 8-bit value rotated by an even amount, for the number or
  its negation), `is_disp` (offsets strictly between -4096 and 4096) and
  `is_reg`.
- `minic.iloc` – an ARM32 instruction sequence: `ArmInst` (`render`,
  `replace`, `set_dead`) and `ILocArm32` with helpers for immediates
  (`load_imm`), symbols, base-plus-offset loads and stores, register moves,
  address computation (`lea_stack`), stack frames (`alloc_stack`), calls,
  jumps, comments and labels; `delete_unused_label` drops local labels that no
  branch targets, and `output` writes the text.
- `minic.regalloc` – `SimpleRegisterAllocator` hands out registers r0–r10
  (`allocate`, `reserve`, `free`, `free_reg`, `register_of`) and spills the
  value that got its register first when none is free.

## Installation

```
pip install .
```

## Example

```python
from minic.attrs import BasicType, TypeAttr, VarIdAttr
from minic.astnode import create_var_decl_stmt_from_attrs, add_var_decl_node
from minic.graph import ast_to_dot

stmt = create_var_decl_stmt_from_attrs(TypeAttr(BasicType.INT, 1), VarIdAttr("a", 1))
add_var_decl_node(stmt, VarIdAttr("b", 1))
print(ast_to_dot(stmt))
```

Emitting assembly:

```python
import sys
from minic.iloc import ILocArm32

iloc = ILocArm32()
iloc.label(".L0")
iloc.load_imm(0, 100000)
iloc.jump(".L0")
iloc.output(sys.stdout)
```

prints

```
.L0:
	movw r0,#:lower16:100000
	movt r0,#:upper16:100000
	b .L0
```

## What it does not do

The package holds building blocks only. It has no lexer or parser for C
source, no intermediate-code generation, no full instruction selector and no
command-line compiler: the AST is built by calling the builders yourself, and
assembly is emitted by calling `ILocArm32` methods directly. `write_ast`
writes DOT text; turning it into an image is left to Graphviz.

## Running the tests

```
pip install .[test]
pytest
```