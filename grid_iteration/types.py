"""Package-wide type definitions."""

from __future__ import annotations

from collections.abc import MutableSequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from grid_iteration.borrow import Borrow, BorrowError

T = TypeVar("T")

Enumerated = tuple[int, int, T]
"""An ``(row, col, element)`` triple produced by coordinate enumeration."""


@dataclass(slots=True, eq=False)
class CellRef(Generic[T]):
    """Writable view over one slot of a mutable backing storage.

    The view does not copy the element: reading ``value`` always returns what
    the storage currently holds, and assigning ``value`` writes through.
    A view created under a borrow is only usable while that borrow is held.
    """

    storage: MutableSequence[T]
    offset: int
    borrow: Borrow | None = None

    def _check_borrow(self) -> None:
        borrow = self.borrow
        if borrow is not None and borrow.enforced and borrow.released:
            raise BorrowError(
                f"cell at offset {self.offset} outlived its mutable traversal"
            )

    @property
    def value(self) -> T:
        """Return the element currently stored at ``offset``."""
        self._check_borrow()
        return self.storage[self.offset]

    @value.setter
    def value(self, new_value: T) -> None:
        self._check_borrow()
        self.storage[self.offset] = new_value

    def __repr__(self) -> str:
        borrow = self.borrow
        if borrow is not None and borrow.enforced and borrow.released:
            return f"CellRef(offset={self.offset}, released)"
        return f"CellRef(offset={self.offset}, value={self.value!r})"
