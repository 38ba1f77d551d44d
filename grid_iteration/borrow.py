"""Runtime-checked shared/exclusive access to a backing storage."""

from __future__ import annotations

import logging
from types import TracebackType

LOGGER = logging.getLogger("grid_iteration.borrow")


class BorrowError(RuntimeError):
    """Raised when a borrow conflicts with one already outstanding."""


class BorrowFlag:
    """Track outstanding borrows of a single storage.

    Any number of shared borrows may coexist, or exactly one exclusive
    borrow. Acquiring a conflicting borrow raises :class:`BorrowError`.
    """

    def __init__(self, *, enforce: bool = True) -> None:
        self._enforce = enforce
        self._shared = 0
        self._exclusive = False

    @property
    def shared(self) -> int:
        """Return the number of outstanding shared borrows."""
        return self._shared

    @property
    def exclusive(self) -> bool:
        """Return whether an exclusive borrow is outstanding."""
        return self._exclusive

    @property
    def is_free(self) -> bool:
        return self._shared == 0 and not self._exclusive

    def acquire_shared(self) -> Borrow:
        """Take a shared borrow; fails while an exclusive one is held."""
        if self._enforce and self._exclusive:
            raise BorrowError("storage is already borrowed exclusively")
        self._shared += 1
        LOGGER.debug("borrow acquired kind=shared shared=%d", self._shared)
        return Borrow(self, exclusive=False)

    def acquire_exclusive(self) -> Borrow:
        """Take the exclusive borrow; fails while any borrow is held."""
        if self._enforce and not self.is_free:
            raise BorrowError(
                "storage is already borrowed "
                f"(shared={self._shared}, exclusive={self._exclusive})"
            )
        self._exclusive = True
        LOGGER.debug("borrow acquired kind=exclusive")
        return Borrow(self, exclusive=True)

    def _release(self, *, exclusive: bool) -> None:
        if exclusive:
            self._exclusive = False
        else:
            self._shared = max(self._shared - 1, 0)
        LOGGER.debug(
            "borrow released kind=%s shared=%d",
            "exclusive" if exclusive else "shared",
            self._shared,
        )


class Borrow:
    """Handle for one outstanding borrow; releasing it twice is a no-op."""

    __slots__ = ("_flag", "_exclusive", "_released")

    def __init__(self, flag: BorrowFlag, *, exclusive: bool) -> None:
        self._flag = flag
        self._exclusive = exclusive
        self._released = False

    @property
    def exclusive(self) -> bool:
        return self._exclusive

    @property
    def released(self) -> bool:
        return self._released

    @property
    def enforced(self) -> bool:
        """Whether the owning flag rejects conflicting borrows."""
        return self._flag._enforce

    def release(self) -> None:
        """Give the borrow back to its flag."""
        if self._released:
            return
        self._released = True
        self._flag._release(exclusive=self._exclusive)

    def __enter__(self) -> Borrow:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()
