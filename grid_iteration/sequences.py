"""Read-only and mutable dimensioned sequences over contiguous storage."""

from __future__ import annotations

from types import TracebackType
from typing import Any, Generic, TypeVar

from grid_iteration.dimensioned import Dimensioned
from grid_iteration.traversal import (
    MISSING,
    ContiguousTraversal,
    MutableSliceTraversal,
    SliceTraversal,
)
from grid_iteration.types import CellRef

T = TypeVar("T")
E = TypeVar("E")


class _DimensionedSequence(Dimensioned, Generic[E]):
    """Pair a contiguous traversal with the collection's ``rows``/``cols``.

    No validation is performed; the caller guarantees that ``rows * cols``
    matches the traversal's length.
    """

    def __init__(self, traversal: ContiguousTraversal[E], rows: int, cols: int) -> None:
        self._traversal = traversal
        self._rows = rows
        self._cols = cols

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def __iter__(self) -> _DimensionedSequence[E]:
        return self

    def __next__(self) -> E:
        return next(self._traversal)

    def nth(self, n: int, default: Any = MISSING) -> E:
        return self._traversal.nth(n, default)

    def size_hint(self) -> tuple[int, int | None]:
        return self._traversal.size_hint()

    def __length_hint__(self) -> int:
        return self._traversal.size_hint()[0]

    def count(self) -> int:
        return self._traversal.count()

    def close(self) -> None:
        self._traversal.close()

    def __enter__(self) -> _DimensionedSequence[E]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rows={self._rows}, cols={self._cols})"


class GridIter(_DimensionedSequence[T]):
    """Immutable two-dimensional collection iterator yielding stored elements."""

    def __init__(self, traversal: SliceTraversal[T], rows: int, cols: int) -> None:
        super().__init__(traversal, rows, cols)


class GridIterMut(_DimensionedSequence[CellRef[T]]):
    """Mutable two-dimensional collection iterator yielding :class:`CellRef` views."""

    def __init__(
        self, traversal: MutableSliceTraversal[T], rows: int, cols: int
    ) -> None:
        super().__init__(traversal, rows, cols)
