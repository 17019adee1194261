"""Segment generation for marching squares.

The contour through a cell is looked up in :data:`SEGMENT_TABLE` from the
cell's 4-bit code (see :mod:`isoline2d.cells`).  Each entry lists the pairs
of crossed edges to join:

    A ---- N ---- B
    |             |
    W             E
    |             |
    D ---- S ---- C

Every crossing is interpolated from the edge's inside corner toward its
outside corner, which decides where a zero/zero edge collapses (see
:func:`isoline2d.interpolate.crossing`).

The saddle codes 5 and 10 always split the same way: code 5 cuts off
corners A and C, code 10 cuts off B and D.  No centre sample is taken, so
on some data the two fragments join the "wrong" neighbours.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Sequence, Tuple

import numpy as np
import numpy.typing as npt

import isoline2d
from .cells import CORNERS, classify_lattice
from .errors import ContourError
from .field import FieldDifference
from .grid import (
    DEFAULT_DENSITY, DEFAULT_REGION, Density, Region,
    as_density, as_region, sample_lattice,
)
from .interpolate import crossing

logger = logging.getLogger(isoline2d.__name__)

_Array = npt.NDArray[np.floating]
_Point = Tuple[float, float]

__all__ = [
    "EDGES", "SEGMENT_TABLE", "SADDLE_CODES",
    "Segment", "ContourResult",
    "cell_segments", "build_segments", "extract_contour", "segments_to_array",
]


# ===========================================================================
# Tables
# ===========================================================================

# Edge name -> its two corners
EDGES: Dict[str, Tuple[str, str]] = {
    "N": ("A", "B"),
    "E": ("B", "C"),
    "S": ("D", "C"),
    "W": ("A", "D"),
}

# Code -> edge pairs joined by one segment each
SEGMENT_TABLE: Tuple[Tuple[Tuple[str, str], ...], ...] = (
    (),                          # 0   all outside
    (("W", "S"),),               # 1   D
    (("S", "E"),),               # 2   C
    (("W", "E"),),               # 3   C, D
    (("N", "E"),),               # 4   B
    (("W", "N"), ("S", "E")),    # 5   B, D  (saddle)
    (("N", "S"),),               # 6   B, C
    (("W", "N"),),               # 7   all but A
    (("W", "N"),),               # 8   A
    (("N", "S"),),               # 9   A, D
    (("N", "E"), ("W", "S")),    # 10  A, C  (saddle)
    (("N", "E"),),               # 11  all but B
    (("W", "E"),),               # 12  A, B
    (("S", "E"),),               # 13  all but C
    (("W", "S"),),               # 14  all but D
    (),                          # 15  all inside
)

SADDLE_CODES = frozenset({5, 10})

_CORNER_INDEX = {name: k for k, name in enumerate(CORNERS)}


# ===========================================================================
# Result types
# ===========================================================================

class Segment(NamedTuple):
    """Line segment from ``(x1, y1)`` to ``(x2, y2)`` in logical coordinates."""

    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def start(self) -> _Point:
        return self.x1, self.y1

    @property
    def end(self) -> _Point:
        return self.x2, self.y2


@dataclass(frozen=True)
class ContourResult:
    """Lattice, cell codes and segments from one extraction."""

    region: Region
    density: Density
    lattice: _Array
    codes: npt.NDArray[np.uint8]
    segments: Tuple[Segment, ...]

    def __len__(self) -> int:
        return len(self.segments)

    def vertex_signs(self) -> npt.NDArray[np.bool_]:
        """True at every vertex whose value is strictly positive."""
        return self.lattice > 0

    def segment_array(self) -> _Array:
        """Segments as a ``(N, 2, 2)`` array of ``[[x1, y1], [x2, y2]]``."""
        return segments_to_array(self.segments)


# ===========================================================================
# Segment emission
# ===========================================================================

def _corner_bit(code: int, corner: str) -> bool:
    # Reads the bit classify_cell stored for *corner*; does not re-test values
    return bool((code >> (3 - _CORNER_INDEX[corner])) & 1)


def _edge_crossing(code: int, edge: str, points: Sequence[_Point], values: Sequence[float]) -> _Point:
    first, second = EDGES[edge]
    if not _corner_bit(code, first):
        first, second = second, first
    i, j = _CORNER_INDEX[first], _CORNER_INDEX[second]
    return crossing(points[i], values[i], points[j], values[j])


def cell_segments(code: int, points: Sequence[_Point], values: Sequence[float]) -> List[Segment]:
    """Segments of one cell.

    Parameters
    ----------
    code:
        Cell code in ``[0, 15]`` from :func:`~isoline2d.cells.classify_cell`.
    points:
        Logical coordinates of corners ``A, B, C, D``.
    values:
        Lattice values at corners ``A, B, C, D``.

    Returns
    -------
    list of Segment
        Zero, one or two segments, in table order.
    """
    segments = []
    for edge1, edge2 in SEGMENT_TABLE[code]:
        x1, y1 = _edge_crossing(code, edge1, points, values)
        x2, y2 = _edge_crossing(code, edge2, points, values)
        segments.append(Segment(x1, y1, x2, y2))
    return segments


def build_segments(lattice: _Array, region, density, codes=None) -> Tuple[Segment, ...]:
    """All contour segments of a sampled lattice.

    Cells are visited row by row, left to right within a row.  *codes* may
    carry the result of :func:`~isoline2d.cells.classify_lattice` for
    *lattice*; it is computed here when omitted.

    Raises
    ------
    ContourError
        If *lattice* does not have shape ``(rows + 1, cols + 1)`` or *codes*
        does not have shape ``(rows, cols)``.
    """
    region = as_region(region)
    density = as_density(density)
    lattice = np.asarray(lattice, dtype=np.float64)
    if lattice.shape != density.shape:
        raise ContourError(
            f"Lattice shape {lattice.shape} does not match density {tuple(density)}"
        )

    xs = region.x_coords(density).tolist()
    ys = region.y_coords(density).tolist()
    if codes is None:
        codes = classify_lattice(lattice)
    codes = np.asarray(codes)
    if codes.shape != (density.rows, density.cols):
        raise ContourError(
            f"Codes shape {codes.shape} does not match density {tuple(density)}"
        )
    active = np.argwhere((codes != 0) & (codes != 15))

    segments: List[Segment] = []
    saddles = 0
    for row, col in active.tolist():
        code = int(codes[row, col])
        saddles += code in SADDLE_CODES
        points = [(xs[col + dc], ys[row + dr]) for dr, dc in CORNERS.values()]
        values = [float(lattice[row + dr, col + dc]) for dr, dc in CORNERS.values()]
        segments.extend(cell_segments(code, points, values))

    logger.debug(f"{len(active)} of {codes.size} cells crossed, {len(segments)} segments")
    if saddles:
        logger.info(f"{saddles} saddle cells resolved with the fixed pairing")
    return tuple(segments)


def segments_to_array(segments: Sequence[Segment]) -> _Array:
    """Stack *segments* into a ``(N, 2, 2)`` float array."""
    if not segments:
        return np.zeros((0, 2, 2), dtype=np.float64)
    return np.asarray(segments, dtype=np.float64).reshape(-1, 2, 2)


# ===========================================================================
# One-shot entry point
# ===========================================================================

def extract_contour(
    left,
    right=0.0,
    region=DEFAULT_REGION,
    density=DEFAULT_DENSITY,
) -> ContourResult:
    """Contour of ``left(x, y) == right(x, y)`` over *region*.

    Parameters
    ----------
    left, right:
        Fields, callables ``f(x, y)`` or numbers.
    region:
        ``(x0, y0, x1, y1)``; defaults to :data:`~isoline2d.grid.DEFAULT_REGION`.
    density:
        ``(rows, cols)``; defaults to :data:`~isoline2d.grid.DEFAULT_DENSITY`.

    Returns
    -------
    ContourResult
    """
    region = as_region(region)
    density = as_density(density)
    field = FieldDifference(left, right)

    lattice = sample_lattice(field, region, density)
    codes = classify_lattice(lattice)
    codes.flags.writeable = False
    segments = build_segments(lattice, region, density, codes)
    return ContourResult(region, density, lattice, codes, segments)
