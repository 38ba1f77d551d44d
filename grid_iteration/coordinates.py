"""Coordinate tracking on top of a row-major traversal."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from grid_iteration import settings
from grid_iteration.traversal import MISSING
from grid_iteration.types import Enumerated

if TYPE_CHECKING:
    from grid_iteration.dimensioned import DimensionedTraversal

LOGGER = logging.getLogger("grid_iteration.coordinates")

E = TypeVar("E")


class ZeroColumnsError(RuntimeError):
    """Raised when a sequence declaring zero columns produces an element."""


class CoordinateEnumerator(Generic[E]):
    """Yield ``(row, col, element)`` for each element of a dimensioned sequence.

    Coordinates are derived from a running position and the wrapped
    sequence's ``cols``; nothing two-dimensional is stored. ``row`` and
    ``col`` always point at the position the next element will come from.

    A sequence reporting ``cols == 0`` must never produce an element. With
    ``check_zero_columns`` enabled (the default) the enumerator raises
    :class:`ZeroColumnsError` when that happens; with it disabled the
    resulting coordinates are undefined.
    """

    def __init__(
        self,
        sequence: DimensionedTraversal[E],
        *,
        check_zero_columns: bool | None = None,
    ) -> None:
        if check_zero_columns is None:
            check_zero_columns = settings.get_settings().check_zero_columns
        self._sequence = sequence
        self._check_zero_columns = check_zero_columns
        self._row = 0
        self._col = 0
        self._exhausted = False
        LOGGER.debug(
            "enumerator created rows=%d cols=%d", sequence.rows, sequence.cols
        )

    @property
    def rows(self) -> int:
        return self._sequence.rows

    @property
    def cols(self) -> int:
        return self._sequence.cols

    @property
    def row(self) -> int:
        """Row index of the next element to be produced."""
        return self._row

    @property
    def col(self) -> int:
        """Column index of the next element to be produced."""
        return self._col

    def __iter__(self) -> CoordinateEnumerator[E]:
        return self

    def __next__(self) -> Enumerated[E]:
        try:
            element = next(self._sequence)
        except StopIteration:
            self._mark_exhausted()
            raise
        cols = self._columns()
        result = (self._row, self._col, element)
        self._col += 1
        if self._col == cols:
            self._col = 0
            self._row += 1
        return result

    def nth(self, n: int, default: Any = MISSING) -> Enumerated[E]:
        """Skip ``n`` elements and return the next one with its coordinates.

        The returned coordinates belong to the produced element; afterwards
        ``row``/``col`` point one position past it.
        """
        try:
            element = self._sequence.nth(n)
        except StopIteration:
            self._mark_exhausted()
            if default is MISSING:
                raise
            return default
        cols = self._columns()
        position = self._row * cols + self._col + n
        j = position % cols
        i = (position - j) // cols
        self._col = j + 1
        self._row = i
        if self._col == cols:
            self._row += 1
            self._col = 0
        LOGGER.debug("nth skipped=%d produced row=%d col=%d", n, i, j)
        return (i, j, element)

    def size_hint(self) -> tuple[int, int | None]:
        return self._sequence.size_hint()

    def __length_hint__(self) -> int:
        return self._sequence.size_hint()[0]

    def count(self) -> int:
        """Drain the wrapped sequence; no coordinates are produced."""
        remaining = self._sequence.count()
        self._mark_exhausted()
        return remaining

    def close(self) -> None:
        self._sequence.close()

    def __enter__(self) -> CoordinateEnumerator[E]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _columns(self) -> int:
        cols = self._sequence.cols
        if cols == 0 and self._check_zero_columns:
            LOGGER.warning(
                "zero-column sequence produced an element row=%d col=%d",
                self._row,
                self._col,
            )
            raise ZeroColumnsError(
                "sequence declares cols == 0 but produced an element"
            )
        return cols

    def _mark_exhausted(self) -> None:
        if not self._exhausted:
            self._exhausted = True
            LOGGER.debug("enumerator exhausted row=%d col=%d", self._row, self._col)


def enumerate_coordinates(
    sequence: DimensionedTraversal[E],
    *,
    check_zero_columns: bool | None = None,
) -> CoordinateEnumerator[E]:
    """Decorate any dimensioned sequence with coordinate tracking."""
    return CoordinateEnumerator(sequence, check_zero_columns=check_zero_columns)
