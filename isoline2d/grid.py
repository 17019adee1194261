"""Uniform vertex lattices over a rectangular region."""

from __future__ import annotations

import logging
import math
import numbers
from typing import NamedTuple, Sequence, Tuple, Union

import numpy as np
import numpy.typing as npt

import isoline2d
from .errors import DegenerateRegion, InvalidDensity
from .field import Field2D, as_field

logger = logging.getLogger(isoline2d.__name__)

_Array = npt.NDArray[np.floating]

__all__ = [
    "Region", "Density", "as_region", "as_density",
    "vertex_grid", "sample_lattice",
    "DEFAULT_REGION", "DEFAULT_DENSITY",
]


# ===========================================================================
# Configuration types
# ===========================================================================

class Region(NamedTuple):
    """Rectangle spanned by the corners ``(x0, y0)`` and ``(x1, y1)``.

    The corners may come in any order; the lattice walks from ``(x0, y0)``
    toward ``(x1, y1)`` with signed steps.
    """

    x0: float
    y0: float
    x1: float
    y1: float

    def validate(self) -> Region:
        """Return a float copy of the region, or raise :class:`DegenerateRegion`."""
        try:
            bounds = [float(v) for v in self]
        except (TypeError, ValueError) as exc:
            raise DegenerateRegion(f"Region bounds must be real numbers, got {tuple(self)!r}") from exc
        if not all(math.isfinite(v) for v in bounds):
            raise DegenerateRegion(f"Region bounds must be finite, got {tuple(self)!r}")
        return Region(*bounds)

    def steps(self, density: Density) -> Tuple[float, float]:
        """``(x_step, y_step)`` for *density*; signs follow the corner order."""
        return (self.x1 - self.x0) / density.cols, (self.y1 - self.y0) / density.rows

    def x_coords(self, density: Density) -> _Array:
        """Column coordinates ``x0 + j * x_step`` for ``j = 0 .. cols``."""
        x_step, _ = self.steps(density)
        return self.x0 + np.arange(density.cols + 1) * x_step

    def y_coords(self, density: Density) -> _Array:
        """Row coordinates ``y0 + i * y_step`` for ``i = 0 .. rows``."""
        _, y_step = self.steps(density)
        return self.y0 + np.arange(density.rows + 1) * y_step

    def contains(self, x: float, y: float) -> bool:
        """True when ``(x, y)`` lies inside the closed rectangle."""
        return (min(self.x0, self.x1) <= x <= max(self.x0, self.x1)
                and min(self.y0, self.y1) <= y <= max(self.y0, self.y1))


class Density(NamedTuple):
    """Number of cells along each axis: *rows* follow y, *cols* follow x."""

    rows: int
    cols: int

    def validate(self) -> Density:
        """Return the density as plain ints, or raise :class:`InvalidDensity`."""
        for name, value in zip(self._fields, self):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidDensity(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise InvalidDensity(f"{name} must be positive, got {value}")
        return Density(int(self.rows), int(self.cols))

    @property
    def shape(self) -> Tuple[int, int]:
        """Lattice shape ``(rows + 1, cols + 1)``."""
        return self.rows + 1, self.cols + 1


_RegionLike = Union[Region, Sequence[float]]
_DensityLike = Union[Density, Sequence[int]]

# Reference scene: x from -2 to 2, y from 2 down to -2, 16 x 16 cells
DEFAULT_REGION = Region(-2.0, 2.0, 2.0, -2.0)
DEFAULT_DENSITY = Density(16, 16)


def as_region(region: _RegionLike) -> Region:
    """Build a validated :class:`Region` from a region or a 4-sequence."""
    if not isinstance(region, Region):
        try:
            values = tuple(region)
        except TypeError as exc:
            raise DegenerateRegion(f"Region must be a sequence of 4 numbers, got {region!r}") from exc
        if len(values) != 4:
            raise DegenerateRegion(f"Region must have 4 bounds, got {len(values)}")
        region = Region(*values)
    return region.validate()


def as_density(density: _DensityLike) -> Density:
    """Build a validated :class:`Density` from a density or a 2-sequence."""
    if not isinstance(density, Density):
        try:
            values = tuple(density)
        except TypeError as exc:
            raise InvalidDensity(f"Density must be a (rows, cols) pair, got {density!r}") from exc
        if len(values) != 2:
            raise InvalidDensity(f"Density must have 2 entries, got {len(values)}")
        density = Density(*values)
    return density.validate()


# ===========================================================================
# Sampling
# ===========================================================================

def vertex_grid(region: _RegionLike, density: _DensityLike) -> Tuple[_Array, _Array]:
    """Coordinate meshes ``(X, Y)`` of every lattice vertex.

    Both arrays have shape ``(rows + 1, cols + 1)``; ``X[i, j]`` and
    ``Y[i, j]`` are the logical coordinates of vertex ``(i, j)``.
    """
    region = as_region(region)
    density = as_density(density)
    Y, X = np.meshgrid(region.y_coords(density), region.x_coords(density), indexing="ij")
    return X, Y


def sample_lattice(
    field: Union[Field2D, object],
    region: _RegionLike,
    density: _DensityLike,
) -> _Array:
    """Sample *field* at every vertex of the lattice.

    Parameters
    ----------
    field:
        A :class:`~isoline2d.field.Field2D` (typically a
        :class:`~isoline2d.field.FieldDifference`) or anything
        :func:`~isoline2d.field.as_field` accepts.
    region:
        ``(x0, y0, x1, y1)`` corners in logical coordinates.
    density:
        ``(rows, cols)`` number of cells along y and x.

    Returns
    -------
    numpy.ndarray
        Read-only ``(rows + 1, cols + 1)`` float64 array indexed
        ``[row, col]``.

    Raises
    ------
    InvalidDensity, DegenerateRegion
        Before any sample is taken.
    """
    region = as_region(region)
    density = as_density(density)
    field = as_field(field)

    x_step, y_step = region.steps(density)
    logger.debug(
        f"Sampling {density.shape[0]}x{density.shape[1]} lattice, "
        f"steps ({x_step:g}, {y_step:g})"
    )

    X, Y = vertex_grid(region, density)
    lattice = np.array(field.evaluate(X, Y), dtype=np.float64)
    lattice.flags.writeable = False
    return lattice
