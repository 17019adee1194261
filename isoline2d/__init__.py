"""
isoline2d — Marching-squares contour extraction
================================================

Extracts the zero contour of a 2D scalar field as a set of line segments.
The field ``left(x, y) - right(x, y)`` is sampled on a uniform lattice over
a rectangle, every cell is classified from the signs of its corners, and a
fixed lookup table turns each cell code into zero, one or two segments
with linearly interpolated endpoints.

Implemented features
--------------------
- Fields: :class:`Field2D`, :class:`FieldDifference`, :class:`Constant2D`
- Grid sampling: :func:`sample_lattice`, :func:`vertex_grid`
- Cell codes: :func:`classify_cell`, :func:`classify_lattice`
- Edge crossings: :func:`crossing`
- Segments: :func:`build_segments`, :func:`extract_contour`
- Drawing: :mod:`isoline2d.plotting` (requires matplotlib)

Quick start
-----------

::

    from isoline2d import extract_contour

    result = extract_contour(
        lambda x, y: (x + y + 0.7) ** 2 + (x - y) ** 2 - 1,
        0.0,
        region=(-2, 2, 2, -2),
        density=(16, 16),
    )
    for seg in result.segments:
        print(seg.start, seg.end)

Segments are independent: they are not stitched into polylines, and
saddle cells are always split the same way.
"""

from .errors import ContourError, InvalidDensity, DegenerateRegion
from .field import Field2D, Constant2D, FieldDifference, as_field
from .grid import (
    Region,
    Density,
    DEFAULT_REGION,
    DEFAULT_DENSITY,
    as_region,
    as_density,
    vertex_grid,
    sample_lattice,
)
from .cells import classify_cell, classify_lattice
from .interpolate import crossing
from .contour import (
    SEGMENT_TABLE,
    Segment,
    ContourResult,
    cell_segments,
    build_segments,
    extract_contour,
    segments_to_array,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "ContourError",
    "InvalidDensity",
    "DegenerateRegion",

    # Fields
    "Field2D",
    "Constant2D",
    "FieldDifference",
    "as_field",

    # Grid
    "Region",
    "Density",
    "DEFAULT_REGION",
    "DEFAULT_DENSITY",
    "as_region",
    "as_density",
    "vertex_grid",
    "sample_lattice",

    # Cells and crossings
    "classify_cell",
    "classify_lattice",
    "crossing",

    # Segments
    "SEGMENT_TABLE",
    "Segment",
    "ContourResult",
    "cell_segments",
    "build_segments",
    "extract_contour",
    "segments_to_array",
]
