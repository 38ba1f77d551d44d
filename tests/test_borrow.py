"""Tests for shared/exclusive borrow tracking."""

from __future__ import annotations

import pytest

from grid_iteration.borrow import BorrowError, BorrowFlag


def test_shared_borrows_coexist() -> None:
    flag = BorrowFlag()
    first = flag.acquire_shared()
    second = flag.acquire_shared()
    assert flag.shared == 2
    first.release()
    second.release()
    assert flag.is_free


def test_exclusive_conflicts_with_shared() -> None:
    flag = BorrowFlag()
    shared = flag.acquire_shared()
    with pytest.raises(BorrowError, match="already borrowed"):
        flag.acquire_exclusive()
    shared.release()
    flag.acquire_exclusive()


def test_shared_conflicts_with_exclusive() -> None:
    flag = BorrowFlag()
    with flag.acquire_exclusive():
        with pytest.raises(BorrowError, match="exclusively"):
            flag.acquire_shared()
    assert flag.is_free


def test_release_is_idempotent() -> None:
    flag = BorrowFlag()
    keep = flag.acquire_shared()
    borrow = flag.acquire_shared()
    borrow.release()
    borrow.release()
    assert borrow.released
    assert flag.shared == 1
    keep.release()


def test_enforcement_can_be_disabled() -> None:
    flag = BorrowFlag(enforce=False)
    flag.acquire_exclusive()
    flag.acquire_shared()
    flag.acquire_exclusive()
