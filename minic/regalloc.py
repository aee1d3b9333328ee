"""A naive register allocator for loading operands into scratch registers."""

from __future__ import annotations

from typing import List, Optional, Set, Tuple

from .platform_arm32 import MAX_USABLE_REG_NUM

__all__ = ["SimpleRegisterAllocator"]


class SimpleRegisterAllocator:
    """Hands out registers r0-r10, spilling the oldest holder when none is free."""

    def __init__(self) -> None:
        self._busy: Set[int] = set()
        self._used: Set[int] = set()
        # (value, register) pairs in the order the values got their register
        self._holders: List[Tuple[object, int]] = []

    @property
    def busy(self) -> frozenset:
        """Registers currently occupied."""
        return frozenset(self._busy)

    @property
    def used(self) -> frozenset:
        """Every register that has ever been occupied."""
        return frozenset(self._used)

    @staticmethod
    def _check(no: int) -> None:
        if not 0 <= no < MAX_USABLE_REG_NUM:
            raise ValueError(f"register {no} is not allocatable")

    def _index_of(self, var: object) -> Optional[int]:
        for index, (holder, _) in enumerate(self._holders):
            if holder is var:
                return index
        return None

    def _occupy(self, no: int) -> None:
        self._busy.add(no)
        self._used.add(no)

    def register_of(self, var: object) -> Optional[int]:
        """Return the register loaded with ``var``, or None."""
        index = self._index_of(var)
        return None if index is None else self._holders[index][1]

    def allocate(self, var: object = None, no: Optional[int] = None) -> int:
        """Give a register to ``var`` (or to nobody if it is None).

        A value that already holds a register keeps it. Register ``no`` is
        used if given and free; otherwise the lowest free register. When all
        are busy, the value that got its register first is spilled.
        """
        if var is not None:
            held = self.register_of(var)
            if held is not None:
                return held

        if no is not None:
            self._check(no)
        if no is not None and no not in self._busy:
            regno: Optional[int] = no
        else:
            regno = next(
                (k for k in range(MAX_USABLE_REG_NUM) if k not in self._busy), None
            )

        if regno is not None:
            self._occupy(regno)
        else:
            if not self._holders:
                raise RuntimeError("no register can be freed by spilling")
            _, regno = self._holders.pop(0)

        if var is not None:
            self._holders.append((var, regno))
        return regno

    def reserve(self, no: int) -> None:
        """Take register ``no``, evicting whatever value holds it."""
        self._check(no)
        if no in self._busy:
            self.free_reg(no)
        self._occupy(no)

    def free(self, var: object) -> None:
        """Release the register held by ``var``, if any."""
        index = self._index_of(var)
        if index is None:
            return
        _, regno = self._holders.pop(index)
        self._busy.discard(regno)

    def free_reg(self, no: Optional[int]) -> None:
        """Release register ``no``; None or -1 is ignored."""
        if no is None or no == -1:
            return
        self._busy.discard(no)
        for index, (_, regno) in enumerate(self._holders):
            if regno == no:
                del self._holders[index]
                break