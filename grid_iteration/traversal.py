"""Element-by-element traversal over contiguous storage."""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from collections.abc import MutableSequence, Sequence
from types import TracebackType
from typing import Any, Final, Generic, TypeVar, cast

from grid_iteration.borrow import Borrow
from grid_iteration.types import CellRef

T = TypeVar("T")
E = TypeVar("E")

MISSING: Final[Any] = object()
"""Default marker meaning "raise ``StopIteration`` instead of returning"."""


class ContiguousTraversal(ABC, Generic[E]):
    """Forward-only traversal over ``storage[0:len(storage)]``.

    The range is fixed when the traversal is created. Once exhausted the
    traversal stays exhausted and any borrow it holds is released; a borrow
    is also released when the traversal is closed or garbage collected.
    """

    def __init__(self, storage: Sequence[Any], *, borrow: Borrow | None = None) -> None:
        self._storage = storage
        self._position = 0
        self._end = len(storage)
        self._borrow = borrow
        self._finalizer = (
            weakref.finalize(self, borrow.release) if borrow is not None else None
        )

    @abstractmethod
    def _element(self, offset: int) -> E:
        """Return what the traversal yields for ``storage[offset]``."""

    def __iter__(self) -> ContiguousTraversal[E]:
        return self

    def __next__(self) -> E:
        if self._position >= self._end:
            self._release()
            raise StopIteration
        offset = self._position
        self._position += 1
        return self._element(offset)

    def nth(self, n: int, default: Any = MISSING) -> E:
        """Skip ``n`` elements and return the one after them.

        When fewer than ``n + 1`` elements remain the traversal is drained and
        ``default`` is returned, or ``StopIteration`` raised if none is given.
        """
        if n < 0:
            raise ValueError(f"nth() expects a non-negative index, got {n}")
        if self._end - self._position <= n:
            self._position = self._end
            self._release()
            if default is MISSING:
                raise StopIteration
            return default
        self._position += n
        return next(self)

    def size_hint(self) -> tuple[int, int | None]:
        remaining = self._end - self._position
        return remaining, remaining

    def __length_hint__(self) -> int:
        return self.size_hint()[0]

    def count(self) -> int:
        """Drain the traversal and return how many elements were left."""
        remaining = self._end - self._position
        self._position = self._end
        self._release()
        return remaining

    def close(self) -> None:
        """Stop the traversal early and release its borrow."""
        self._position = self._end
        self._release()

    def _release(self) -> None:
        if self._finalizer is not None:
            self._finalizer()

    def __enter__(self) -> ContiguousTraversal[E]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class SliceTraversal(ContiguousTraversal[T]):
    """Read-only traversal yielding the stored elements themselves."""

    def __init__(self, storage: Sequence[T], *, borrow: Borrow | None = None) -> None:
        super().__init__(storage, borrow=borrow)

    def _element(self, offset: int) -> T:
        return self._storage[offset]


class MutableSliceTraversal(ContiguousTraversal[CellRef[T]]):
    """Traversal yielding :class:`CellRef` views that write through to storage.

    Views share the traversal's borrow and stop working once it is released.
    """

    def __init__(
        self, storage: MutableSequence[T], *, borrow: Borrow | None = None
    ) -> None:
        super().__init__(storage, borrow=borrow)

    def _element(self, offset: int) -> CellRef[T]:
        storage = cast("MutableSequence[T]", self._storage)
        return CellRef(storage, offset, self._borrow)
