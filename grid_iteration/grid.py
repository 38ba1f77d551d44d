"""Row-major two-dimensional collection built on the traversal primitives."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any, Generic, TypeVar

import pandas as pd

from grid_iteration import settings
from grid_iteration.borrow import BorrowFlag
from grid_iteration.coordinates import CoordinateEnumerator
from grid_iteration.sequences import GridIter, GridIterMut
from grid_iteration.traversal import MutableSliceTraversal, SliceTraversal
from grid_iteration.types import CellRef

LOGGER = logging.getLogger("grid_iteration.grid")

T = TypeVar("T")

_FRAME_COLUMNS = ["row", "col", "value"]


class ShapeError(ValueError):
    """Raised when declared dimensions do not match the supplied data."""


class Grid(Generic[T]):
    """Two-dimensional collection stored as one row-major list.

    Traversals borrow the storage: any number of :meth:`iter` traversals may
    be alive together, while an :meth:`iter_mut` traversal needs the storage
    to itself. A traversal gives its borrow back once it is exhausted,
    closed, or garbage collected; cell views from a mutable traversal raise
    :class:`~grid_iteration.borrow.BorrowError` after that.
    """

    def __init__(
        self,
        data: Iterable[T],
        rows: int,
        cols: int,
        *,
        validate_shape: bool | None = None,
        enforce_borrows: bool | None = None,
    ) -> None:
        cfg = settings.get_settings()
        if validate_shape is None:
            validate_shape = cfg.validate_shape
        if enforce_borrows is None:
            enforce_borrows = cfg.enforce_borrows
        storage = list(data)
        if validate_shape:
            if rows < 0 or cols < 0:
                raise ShapeError(f"dimensions must be non-negative, got {rows}x{cols}")
            if len(storage) != rows * cols:
                raise ShapeError(
                    f"{rows}x{cols} grid needs {rows * cols} elements, got {len(storage)}"
                )
        self._data: list[T] = storage
        self._rows = rows
        self._cols = cols
        self._borrows = BorrowFlag(enforce=enforce_borrows)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]], **kwargs: Any) -> Grid[T]:
        """Build a grid from a list of equally long rows."""
        width = len(rows[0]) if rows else 0
        for index, row in enumerate(rows):
            if len(row) != width:
                raise ShapeError(
                    f"row {index} has {len(row)} elements, expected {width}"
                )
        data = [value for row in rows for value in row]
        return cls(data, len(rows), width, **kwargs)

    @classmethod
    def filled(cls, rows: int, cols: int, value: T, **kwargs: Any) -> Grid[T]:
        """Build a ``rows`` x ``cols`` grid with every cell set to ``value``."""
        return cls([value] * (max(rows, 0) * max(cols, 0)), rows, cols, **kwargs)

    @classmethod
    def from_frame(cls, frame: pd.DataFrame, **kwargs: Any) -> Grid[Any]:
        """Build a grid from the values of a DataFrame, ignoring its labels."""
        n_rows, n_cols = frame.shape
        data = frame.to_numpy().ravel(order="C").tolist()
        LOGGER.debug("grid from frame rows=%d cols=%d", n_rows, n_cols)
        return cls(data, n_rows, n_cols, **kwargs)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return self._rows, self._cols

    @property
    def borrows(self) -> BorrowFlag:
        """Borrow bookkeeping for this grid's storage."""
        return self._borrows

    def __len__(self) -> int:
        return len(self._data)

    def iter(self) -> GridIter[T]:
        """Return a read-only row-major traversal holding a shared borrow."""
        borrow = self._borrows.acquire_shared()
        traversal = SliceTraversal(self._data, borrow=borrow)
        return GridIter(traversal, self._rows, self._cols)

    def iter_mut(self) -> GridIterMut[T]:
        """Return a mutable row-major traversal holding the exclusive borrow."""
        borrow = self._borrows.acquire_exclusive()
        traversal = MutableSliceTraversal(self._data, borrow=borrow)
        return GridIterMut(traversal, self._rows, self._cols)

    def _offset(self, key: tuple[int, int]) -> int:
        row, col = key
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(
                f"index ({row}, {col}) out of range for {self._rows}x{self._cols} grid"
            )
        return row * self._cols + col

    def __getitem__(self, key: tuple[int, int]) -> T:
        offset = self._offset(key)
        with self._borrows.acquire_shared():
            return self._data[offset]

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        offset = self._offset(key)
        with self._borrows.acquire_exclusive():
            self._data[offset] = value

    def to_rows(self) -> list[list[T]]:
        """Return a copy of the contents as a list of rows."""
        with self._borrows.acquire_shared():
            cols = self._cols
            return [self._data[row * cols : (row + 1) * cols] for row in range(self._rows)]

    def to_frame(self, columns: Sequence[Any] | None = None) -> pd.DataFrame:
        """Return the contents as a DataFrame of shape ``(rows, cols)``."""
        labels = list(columns) if columns is not None else list(range(self._cols))
        return pd.DataFrame(self.to_rows(), columns=labels)

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, cols={self._cols})"


def coordinates_frame(enumerator: CoordinateEnumerator[Any]) -> pd.DataFrame:
    """Drain ``enumerator`` into a DataFrame with ``row``, ``col`` and ``value``.

    Mutable cell views are unwrapped to the values they currently hold.
    """
    records = [
        (row, col, element.value if isinstance(element, CellRef) else element)
        for row, col, element in enumerator
    ]
    return pd.DataFrame.from_records(records, columns=_FRAME_COLUMNS)
