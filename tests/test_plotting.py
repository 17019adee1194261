"""Tests for isoline2d.plotting.

Drawing tests need matplotlib and run on the Agg backend.
"""

import os
import tempfile
import warnings

import numpy as np
import numpy.testing as npt
import pytest

from isoline2d import Region, extract_contour
from isoline2d.plotting import map_range, to_device

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")


def _ellipse(x, y):
    return (x + y + 0.7) ** 2 + (x - y) ** 2 - 1


class TestMapRange:
    def test_endpoints(self):
        assert map_range(-2.0, -2.0, 2.0, 0, 800) == 0.0
        assert map_range(2.0, -2.0, 2.0, 0, 800) == 800.0

    def test_reversed_source_range(self):
        # y from 2 (top) down to -2 (bottom)
        npt.assert_allclose(map_range([2.0, 0.0, -2.0], 2.0, -2.0, 0, 800), [0.0, 400.0, 800.0])


    def test_empty_source_range_maps_to_centre(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", RuntimeWarning)
            npt.assert_array_equal(map_range([1.0, 1.0], 1.0, 1.0, 0, 800), [400.0, 400.0])


class TestToDevice:
    def test_region_corners(self):
        region = Region(-2.0, 2.0, 2.0, -2.0)
        pts = np.array([[-2.0, 2.0], [2.0, -2.0], [0.0, 0.0]])
        npt.assert_allclose(to_device(pts, region, (800, 600)),
                            [[0.0, 0.0], [800.0, 600.0], [400.0, 300.0]])

    def test_preserves_leading_shape(self):
        region = Region(0.0, 0.0, 1.0, 1.0)
        assert to_device(np.zeros((3, 2, 2)), region, (10, 10)).shape == (3, 2, 2)


class TestRender:
    def test_render_draws_every_segment(self):
        import matplotlib.pyplot as plt
        from isoline2d.plotting import render_contour

        result = extract_contour(_ellipse, 0.0)
        ax = render_contour(result, size=200)
        (lines,) = ax.collections[1:]
        assert len(lines.get_segments()) == len(result.segments)
        (points,) = ax.collections[:1]
        assert len(points.get_offsets()) == result.lattice.size
        plt.close(ax.figure)

    def test_render_without_points(self):
        import matplotlib.pyplot as plt
        from isoline2d.plotting import render_contour

        result = extract_contour(_ellipse, 0.0, density=(4, 4))
        ax = render_contour(result, size=100, show_points=False)
        assert len(ax.collections) == 1
        plt.close(ax.figure)

    def test_render_empty_contour(self):
        import matplotlib.pyplot as plt
        from isoline2d.plotting import render_contour

        result = extract_contour(lambda x, y: 1, 0.0, density=(2, 2))
        ax = render_contour(result, size=100, show_points=False)
        assert len(ax.collections) == 0
        plt.close(ax.figure)

    def test_render_zero_extent_region(self):
        import matplotlib.pyplot as plt
        from isoline2d.plotting import render_contour

        result = extract_contour(lambda x, y: y, 0.0, region=(1, -1, 1, 1), density=(2, 2))
        with warnings.catch_warnings():
            warnings.simplefilter("error", RuntimeWarning)
            ax = render_contour(result, size=100)
        pix = ax.collections[0].get_offsets()
        assert np.isfinite(pix).all()
        npt.assert_array_equal(np.asarray(pix)[:, 0], 50.0)
        plt.close(ax.figure)

    def test_save_png_creates_parent_dirs(self):
        from isoline2d.plotting import save_contour_png

        result = extract_contour(_ellipse, 0.0, density=(8, 8))
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "a", "b", "contour.png")
            save_contour_png(result, path, size=100)
            assert os.path.isfile(path)
