"""Drawing a :class:`~isoline2d.contour.ContourResult` with matplotlib.

matplotlib is imported inside the drawing functions so the rest of
``isoline2d`` works without it installed.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Tuple

import numpy as np
import numpy.typing as npt

from .grid import vertex_grid

if TYPE_CHECKING:
    import matplotlib.axes  # noqa: F401 — type-checker only
    from .contour import ContourResult

_Array = npt.NDArray[np.floating]

CANVAS_SIZE = 800
POINT_SIZE = 4
LINE_WIDTH = 1.0
BACKGROUND = "black"
OUTSIDE_COLOR = "green"
INSIDE_COLOR = "red"
LINE_COLOR = "white"

__all__ = [
    "CANVAS_SIZE", "map_range", "to_device",
    "render_contour", "save_contour_png",
]


def map_range(value, start1: float, stop1: float, start2: float, stop2: float):
    """Map *value* linearly from ``[start1, stop1]`` onto ``[start2, stop2]``.

    An empty source range (a zero-extent region axis) maps everything to the
    middle of the target range.
    """
    value = np.asarray(value, dtype=float)
    if stop1 == start1:
        return np.full_like(value, (start2 + stop2) / 2)
    return (value - start1) / (stop1 - start1) * (stop2 - start2) + start2


def to_device(points: _Array, region, size: Tuple[int, int]) -> _Array:
    """Logical ``(..., 2)`` points to pixel coordinates.

    ``x0`` maps to column 0 and ``x1`` to *width*; ``y0`` maps to row 0 and
    ``y1`` to *height*.
    """
    width, height = size
    points = np.asarray(points, dtype=float)
    px = map_range(points[..., 0], region.x0, region.x1, 0, width)
    py = map_range(points[..., 1], region.y0, region.y1, 0, height)
    return np.stack([px, py], axis=-1)


def render_contour(
    result: ContourResult,
    ax: matplotlib.axes.Axes | None = None,
    size: int = CANVAS_SIZE,
    show_points: bool = True,
) -> matplotlib.axes.Axes:
    """Draw lattice vertices and contour segments onto *ax*.

    Vertices are green where the sampled value is positive and red
    elsewhere; segments are white on a black canvas of *size* pixels.
    """
    import matplotlib.pyplot as plt
    from matplotlib.collections import LineCollection

    if ax is None:
        _, ax = plt.subplots(figsize=(size / 100, size / 100), dpi=100)
    fig = ax.figure
    fig.set_facecolor(BACKGROUND)
    ax.set_facecolor(BACKGROUND)
    ax.set_xlim(0, size)
    ax.set_ylim(size, 0)  # row 0 at the top
    ax.set_aspect("equal")
    ax.set_axis_off()

    if show_points:
        X, Y = vertex_grid(result.region, result.density)
        pix = to_device(np.stack([X, Y], axis=-1), result.region, (size, size))
        colors = np.where(result.vertex_signs(), OUTSIDE_COLOR, INSIDE_COLOR)
        ax.scatter(pix[..., 0].ravel(), pix[..., 1].ravel(),
                   s=POINT_SIZE ** 2, c=colors.ravel(), marker="o", linewidths=0)

    if result.segments:
        lines = to_device(result.segment_array(), result.region, (size, size))
        ax.add_collection(LineCollection(lines, colors=LINE_COLOR, linewidths=LINE_WIDTH))
    return ax


def save_contour_png(result: ContourResult, path: str, size: int = CANVAS_SIZE,
                     show_points: bool = True) -> None:
    """Render *result* and save it to *path* (creates parent directories)."""
    import matplotlib.pyplot as plt

    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    ax = render_contour(result, size=size, show_points=show_points)
    fig = ax.figure
    fig.savefig(path, facecolor=fig.get_facecolor())
    plt.close(fig)
