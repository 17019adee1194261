"""Scalar fields of two variables and the left-minus-right difference field."""

from __future__ import annotations

import numbers
from typing import Callable, Union

import numpy as np
import numpy.typing as npt

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------
_Array = npt.NDArray[np.floating]
_Value = Union[float, _Array]
_FieldFunc = Callable[[_Value, _Value], _Value]

__all__ = ["Field2D", "Constant2D", "FieldDifference", "as_field"]


# ===========================================================================
# Base class
# ===========================================================================

class Field2D:
    """A scalar field ``f(x, y)``.

    A ``Field2D`` wraps a callable ``func(x, y) -> value``.  The callable is
    handed either two Python floats or two broadcast-compatible numpy arrays
    and must answer in kind; a callable that ignores its arguments and
    returns a plain number (``lambda x, y: 0``) is broadcast to the input
    shape.  Functions written against :mod:`math` only should be wrapped
    with :meth:`pointwise`; bare callables passed to :func:`as_field` (and
    so to :func:`~isoline2d.contour.extract_contour`) get that wrapping
    automatically.

    Implements:
    - Evaluation:  :meth:`evaluate` (also ``__call__``)
    - Composition: :meth:`subtract`, :meth:`negate`, :meth:`translate`
    """

    def __init__(self, func: _FieldFunc) -> None:
        self._func = func

    @classmethod
    def pointwise(cls, func: _FieldFunc) -> Field2D:
        """Lift a scalar-only *func* so it also accepts numpy arrays."""
        return cls(np.vectorize(func, otypes=[float]))

    def evaluate(self, x: _Value, y: _Value) -> _Value:
        """Evaluate the field at ``(x, y)``.

        Returns a ``float`` for scalar input and a float array of the
        broadcast shape of *x* and *y* otherwise.
        """
        value = self._func(x, y)
        if np.ndim(x) == 0 and np.ndim(y) == 0:
            return float(value)
        shape = np.broadcast(x, y).shape
        return np.broadcast_to(np.asarray(value, dtype=float), shape)

    def __call__(self, x: _Value, y: _Value) -> _Value:
        return self.evaluate(x, y)

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def subtract(self, other: Field2D) -> FieldDifference:
        """Return the field ``self - other``."""
        return FieldDifference(self, other)

    def __sub__(self, other) -> FieldDifference:
        return FieldDifference(self, as_field(other))

    def negate(self) -> Field2D:
        """Return ``-self``; swaps inside and outside."""
        return Field2D(lambda x, y: -self.evaluate(x, y))

    def __neg__(self) -> Field2D:
        return self.negate()

    def translate(self, tx: float, ty: float) -> Field2D:
        """Shift the field by ``(tx, ty)``."""
        return Field2D(lambda x, y: self.evaluate(x - tx, y - ty))


class Constant2D(Field2D):
    """The same *value* everywhere."""

    def __init__(self, value: float) -> None:
        self.value = float(value)
        super().__init__(lambda x, y: self.value)


# ===========================================================================
# Field pair
# ===========================================================================

class FieldDifference(Field2D):
    """Signed difference ``left(x, y) - right(x, y)`` of two fields.

    This is the quantity sampled at every lattice vertex; its zero set is
    the curve ``left == right``.
    """

    def __init__(self, left, right) -> None:
        self.left = as_field(left)
        self.right = as_field(right)
        super().__init__(lambda x, y: self.left.evaluate(x, y) - self.right.evaluate(x, y))

    def difference(self, x: _Value, y: _Value) -> _Value:
        """``left(x, y) - right(x, y)``."""
        return self.evaluate(x, y)


def as_field(obj) -> Field2D:
    """Coerce a :class:`Field2D`, a callable or a number into a field.

    A bare callable is treated as ``real x real -> real`` and called once
    per point (see :meth:`Field2D.pointwise`).  Wrap it in :class:`Field2D`
    yourself to have it evaluated on whole arrays instead.
    """
    if isinstance(obj, Field2D):
        return obj
    if isinstance(obj, numbers.Real):
        return Constant2D(obj)
    if callable(obj):
        return Field2D.pointwise(obj)
    raise TypeError(f"Cannot build a field from {type(obj).__name__}")
