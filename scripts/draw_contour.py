"""Render the zero contour of a 2D field with its sampled lattice.

Usage::

    python scripts/draw_contour.py                    # saves contour.png
    python scripts/draw_contour.py --out my_file.png  # custom output path
    python scripts/draw_contour.py --rows 32 --cols 32 --no-points

The default scene is ``(x + y + 0.7)^2 + (x - y)^2 - 1 = 0`` over
``x in [-2, 2]``, ``y`` from 2 down to -2, on a 16 x 16 lattice.

Requirements: numpy, matplotlib
"""
from __future__ import annotations

import argparse
import logging
import os
import sys

# Ensure the repo root (parent of scripts/) is importable regardless of cwd
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import matplotlib
matplotlib.use("Agg")

from isoline2d import DEFAULT_DENSITY, DEFAULT_REGION, ContourError, extract_contour
from isoline2d.plotting import CANVAS_SIZE, save_contour_png

logger = logging.getLogger("draw_contour")


def _left(x, y):
    return (x + y + 0.7) ** 2 + (x - y) ** 2 - 1


def _right(x, y):
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Draw a marching-squares contour to PNG.")
    parser.add_argument("--out", default="contour.png", help="Output PNG path")
    parser.add_argument("--rows", type=int, default=DEFAULT_DENSITY.rows, help="Cells along y (default 16)")
    parser.add_argument("--cols", type=int, default=DEFAULT_DENSITY.cols, help="Cells along x (default 16)")
    parser.add_argument("--region", type=float, nargs=4, metavar=("X0", "Y0", "X1", "Y1"),
                        default=list(DEFAULT_REGION), help="Region corners (default -2 2 2 -2)")
    parser.add_argument("--size", type=int, default=CANVAS_SIZE, help="Canvas size in pixels")
    parser.add_argument("--no-points", action="store_true", help="Do not draw lattice vertices")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        result = extract_contour(_left, _right, region=args.region, density=(args.rows, args.cols))
    except ContourError as exc:
        parser.error(str(exc))

    logger.info(f"{len(result.segments)} segments")
    save_contour_png(result, args.out, size=args.size, show_points=not args.no_points)
    print(f"Saved: {args.out}")


if __name__ == "__main__":
    main()
