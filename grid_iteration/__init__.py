"""
Row-major two-dimensional iteration with row and column tracking.

Any sequence that reports its ``rows`` and ``cols`` can be decorated with
:func:`enumerate_coordinates` to yield ``(row, col, element)`` triples.
"""

from __future__ import annotations

import logging

from grid_iteration.borrow import Borrow, BorrowError, BorrowFlag
from grid_iteration.coordinates import (
    CoordinateEnumerator,
    ZeroColumnsError,
    enumerate_coordinates,
)
from grid_iteration.dimensioned import Dimensioned, DimensionedTraversal
from grid_iteration.grid import Grid, ShapeError, coordinates_frame
from grid_iteration.sequences import GridIter, GridIterMut
from grid_iteration.traversal import (
    ContiguousTraversal,
    MutableSliceTraversal,
    SliceTraversal,
)
from grid_iteration.types import CellRef, Enumerated

logging.getLogger("grid_iteration").addHandler(logging.NullHandler())

__all__: tuple[str, ...] = (
    "Borrow",
    "BorrowError",
    "BorrowFlag",
    "CellRef",
    "ContiguousTraversal",
    "CoordinateEnumerator",
    "Dimensioned",
    "DimensionedTraversal",
    "Enumerated",
    "Grid",
    "GridIter",
    "GridIterMut",
    "MutableSliceTraversal",
    "ShapeError",
    "SliceTraversal",
    "ZeroColumnsError",
    "coordinates_frame",
    "enumerate_coordinates",
)
