"""Marching-squares cell classification.

Each cell ``(row, col)`` has corners

    A = (row, col)        B = (row, col + 1)
    D = (row + 1, col)    C = (row + 1, col + 1)

A corner is *inside* (bit 1) when its value is ``<= 0`` and *outside*
(bit 0) otherwise.  The four bits are packed most-significant first in the
order A, B, C, D, so the code is an integer in ``[0, 15]``.  A value of
exactly zero counts as inside.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

_Array = npt.NDArray[np.floating]

__all__ = ["CORNERS", "is_inside", "classify_cell", "classify_lattice", "cell_corners"]

# Corner name -> (row offset, col offset), in bit order
CORNERS = {
    "A": (0, 0),
    "B": (0, 1),
    "C": (1, 1),
    "D": (1, 0),
}


def is_inside(value):
    """The inside rule, ``value <= 0``, for a scalar or an array.

    Every classification in this package goes through this function.
    """
    return value <= 0


def classify_cell(a: float, b: float, c: float, d: float) -> int:
    """4-bit topology code of a cell with corner values ``A, B, C, D``."""
    code = 0
    for value in (a, b, c, d):
        code = (code << 1) | (1 if is_inside(value) else 0)
    return code


def cell_corners(lattice: _Array, row: int, col: int) -> tuple:
    """Corner values ``(A, B, C, D)`` of cell ``(row, col)``."""
    return tuple(float(lattice[row + dr, col + dc]) for dr, dc in CORNERS.values())


def classify_lattice(lattice: _Array) -> npt.NDArray[np.uint8]:
    """Codes of every cell of *lattice*, shape ``(rows, cols)``.

    Vectorised equivalent of calling :func:`classify_cell` on each cell.
    """
    lattice = np.asarray(lattice)
    inside = is_inside(lattice).astype(np.uint8)
    a = inside[:-1, :-1]
    b = inside[:-1, 1:]
    c = inside[1:, 1:]
    d = inside[1:, :-1]
    return (a << 3) | (b << 2) | (c << 1) | d
