"""The dimensioned-sequence capability."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

from grid_iteration.coordinates import CoordinateEnumerator

E = TypeVar("E")
E_co = TypeVar("E_co", covariant=True)


@runtime_checkable
class DimensionedTraversal(Protocol[E_co]):
    """A row-major traversal that knows the extent of its collection.

    ``rows * cols`` is expected to equal the number of elements reachable at
    construction time. That is the constructing host's responsibility and is
    not checked here.
    """

    @property
    def rows(self) -> int:
        """Height of the two-dimensional collection."""
        ...

    @property
    def cols(self) -> int:
        """Width of the two-dimensional collection."""
        ...

    def __iter__(self) -> DimensionedTraversal[E_co]:
        ...

    def __next__(self) -> E_co:
        ...

    def nth(self, n: int, default: Any = ...) -> E_co:
        ...

    def size_hint(self) -> tuple[int, int | None]:
        ...

    def count(self) -> int:
        ...

    def close(self) -> None:
        ...


class Dimensioned:
    """Mixin giving a dimensioned sequence its ``enumerate_coordinates`` method."""

    def enumerate_coordinates(
        self: DimensionedTraversal[E],
        *,
        check_zero_columns: bool | None = None,
    ) -> CoordinateEnumerator[E]:
        """Consume this sequence into a coordinate-tracking enumerator.

        The enumerator starts at ``(0, 0)``.
        """
        return CoordinateEnumerator(self, check_zero_columns=check_zero_columns)
