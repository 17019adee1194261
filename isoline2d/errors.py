"""Configuration errors raised before a lattice is sampled."""

from __future__ import annotations

__all__ = ["ContourError", "InvalidDensity", "DegenerateRegion"]


class ContourError(ValueError):
    """Base class for invalid contour-extraction input."""


class InvalidDensity(ContourError):
    """Row or column count is not a positive integer."""


class DegenerateRegion(ContourError):
    """Region bounds are missing or not finite."""
