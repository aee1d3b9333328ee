"""ARM32 assembly instruction sequences built during instruction selection."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

from .platform_arm32 import (
    FP_REG_NO,
    REG_NAMES,
    SP_REG_NO,
    is_const_expr,
    is_disp,
)

__all__ = ["ArmInst", "ILocArm32"]

_LABEL_MARK = ":"


@dataclass
class ArmInst:
    """One ARM32 assembly instruction, label or comment."""

    opcode: str
    result: str = ""
    arg1: str = ""
    arg2: str = ""
    cond: str = ""
    addition: str = ""
    dead: bool = False

    def replace(
        self,
        opcode: str,
        result: str = "",
        arg1: str = "",
        arg2: str = "",
        cond: str = "",
        addition: str = "",
    ) -> None:
        """Overwrite the instruction's contents, keeping its dead flag."""
        self.opcode = opcode
        self.result = result
        self.arg1 = arg1
        self.arg2 = arg2
        self.cond = cond
        self.addition = addition

    def set_dead(self) -> None:
        """Mark the instruction as removed from the output."""
        self.dead = True

    @property
    def is_label(self) -> bool:
        return self.result == _LABEL_MARK

    def render(self) -> str:
        """Return the assembly text; dead or empty instructions give ``""``."""
        if self.dead or not self.opcode:
            return ""
        text = self.opcode + self.cond
        if self.result:
            text += self.result if self.result == _LABEL_MARK else " " + self.result
        for extra in (self.arg1, self.arg2, self.addition):
            if extra:
                text += "," + extra
        return text


class ILocArm32:
    """An ordered list of ARM32 instructions with helpers to emit common forms."""

    def __init__(self) -> None:
        self.code: List[ArmInst] = []

    def _emit(self, *fields: str) -> None:
        self.code.append(ArmInst(*fields))

    def comment(self, text: str) -> None:
        """Emit an assembly comment."""
        self._emit("@", text)

    def to_str(self, num: int, flag: bool = True) -> str:
        """Format ``num``; with ``flag`` it is written as an immediate (``#``)."""
        return ("#" if flag else "") + str(num)

    def label(self, name: str) -> None:
        """Emit a label definition."""
        self._emit(name, _LABEL_MARK)

    def inst(self, op: str, rs: str, arg1: str = "", arg2: str = "") -> None:
        """Emit a generic instruction with up to two source operands."""
        self._emit(op, rs, arg1, arg2)

    def load_imm(self, rs_reg_no: int, constant: int) -> None:
        """Load a 32-bit immediate with ``movw`` and, if needed, ``movt``."""
        reg = REG_NAMES[rs_reg_no]
        self._emit("movw", reg, "#:lower16:" + str(constant))
        if (constant >> 16) & 0xFFFF:
            self._emit("movt", reg, "#:upper16:" + str(constant))

    def load_symbol(self, rs_reg_no: int, name: str) -> None:
        """Load the address of symbol ``name`` into a register."""
        reg = REG_NAMES[rs_reg_no]
        self._emit("movw", reg, "#:lower16:" + name)
        self._emit("movt", reg, "#:upper16:" + name)

    def load_base(self, rs_reg_no: int, base_reg_no: int, offset: int) -> None:
        """Emit ``ldr`` from ``[base, offset]``, using the target register for big offsets."""
        rs_reg = REG_NAMES[rs_reg_no]
        base = REG_NAMES[base_reg_no]
        if is_disp(offset):
            if offset:
                base += "," + self.to_str(offset)
        else:
            self.load_imm(rs_reg_no, offset)
            base += "," + rs_reg
        self._emit("ldr", rs_reg, "[" + base + "]")

    def store_base(
        self, src_reg_no: int, base_reg_no: int, disp: int, tmp_reg_no: int
    ) -> None:
        """Emit ``str`` to ``[base, disp]``, using ``tmp_reg_no`` for big offsets."""
        base = REG_NAMES[base_reg_no]
        if is_disp(disp):
            if disp:
                base += "," + self.to_str(disp)
        else:
            self.load_imm(tmp_reg_no, disp)
            base += "," + REG_NAMES[tmp_reg_no]
        self._emit("str", REG_NAMES[src_reg_no], "[" + base + "]")

    def mov_reg(self, rs_reg_no: int, src_reg_no: int) -> None:
        """Emit a register-to-register move."""
        self._emit("mov", REG_NAMES[rs_reg_no], REG_NAMES[src_reg_no])

    def lea_stack(self, rs_reg_no: int, base_reg_no: int, offset: int) -> None:
        """Load the address ``base + offset`` into a register."""
        rs_name = REG_NAMES[rs_reg_no]
        base_name = REG_NAMES[base_reg_no]
        if is_const_expr(offset):
            self._emit("add", rs_name, base_name, self.to_str(offset))
        else:
            self.load_imm(rs_reg_no, offset)
            self._emit("add", rs_name, base_name, rs_name)

    def alloc_stack(self, frame_size: int, tmp_reg_no: int) -> None:
        """Set up a stack frame of ``frame_size`` bytes; nothing for an empty frame."""
        if frame_size == 0:
            return
        self.mov_reg(FP_REG_NO, SP_REG_NO)
        if is_const_expr(frame_size):
            self._emit("sub", "sp", "sp", self.to_str(frame_size))
        else:
            self.load_imm(tmp_reg_no, frame_size)
            self._emit("sub", "sp", "sp", REG_NAMES[tmp_reg_no])

    def call_fun(self, name: str) -> None:
        """Emit a call to function ``name``."""
        self._emit("bl", name)

    def nop(self) -> None:
        """Emit an empty placeholder instruction."""
        self._emit("")

    def jump(self, label: str) -> None:
        """Emit an unconditional branch to ``label``."""
        self._emit("b", label)

    def delete_unused_label(self) -> None:
        """Mark as dead every local label that no live branch targets."""
        labels = [
            inst
            for inst in self.code
            if not inst.dead and inst.opcode.startswith(".") and inst.is_label
        ]
        for label in labels:
            used = any(
                not inst.dead
                and inst.opcode.startswith("b")
                and inst.result == label.opcode
                for inst in self.code
            )
            if not used:
                label.set_dead()

    def output(self, stream: Optional[TextIO] = None, output_empty: bool = False) -> None:
        """Write the assembly to ``stream`` (standard output by default)."""
        out = sys.stdout if stream is None else stream
        for inst in self.code:
            text = inst.render()
            if inst.is_label:
                out.write(text + "\n")
            elif text:
                out.write("\t" + text + "\n")
            elif output_empty:
                out.write("\n")