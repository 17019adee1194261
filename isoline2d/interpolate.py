"""Linear zero-crossing on a cell edge."""

from __future__ import annotations

import math
from typing import Tuple

_Point = Tuple[float, float]

__all__ = ["crossing"]


def crossing(p1: _Point, d1: float, p2: _Point, d2: float) -> _Point:
    """Point on the edge ``p1 -> p2`` where the field is estimated to be zero.

    The weight ``|d1| / (|d1| + |d2|)`` is measured from *p1*.  When the
    weight is undefined (both values exactly zero, or non-finite samples)
    it is taken as 0 and *p1* is returned, so swapping the endpoints of
    such an edge moves the result.
    """
    total = abs(d1) + abs(d2)
    coef = abs(d1) / total if total != 0 else 0.0
    if math.isnan(coef):
        coef = 0.0
    x1, y1 = p1
    x2, y2 = p2
    return x1 + (x2 - x1) * coef, y1 + (y2 - y1) * coef
