"""Test module for SplineSvgPage in cspline.page

The tests are run using pytest.
"""

from __future__ import annotations

import gzip
import re

import pytest

from cspline.config import RenderStyle, SplineConfig
from cspline.page import SplineSvgPage

SQUARE = [(100.0, 100.0), (700.0, 100.0), (700.0, 700.0), (100.0, 700.0)]


def _polyline_points(svg_text: str, tag: str) -> list:
    match = re.search(rf'<{tag}[^>]*points="([^"]*)"', svg_text)
    assert match, f"no <{tag}> element found"
    return match.group(1).split()


class TestSplineSvgPage:
    """Test drawing control points and curves."""

    def test_render_contains_curve_and_markers(self):
        """Rendered page has one closed curve and one marker per control point."""
        config = SplineConfig(steps=10)
        svg_text = SplineSvgPage.render(SQUARE, config).tostring().decode("utf-8")

        assert len(_polyline_points(svg_text, "polygon")) == 40
        assert svg_text.count("<circle") == 4
        assert 'fill="red"' in svg_text
        assert 'stroke="white"' in svg_text

    def test_render_open_curve_uses_polyline(self):
        """An open curve is drawn as polyline."""
        config = SplineConfig(steps=10, closed=False)
        svg_text = SplineSvgPage.render(SQUARE, config).tostring().decode("utf-8")
        assert len(_polyline_points(svg_text, "polyline")) == 30
        assert "<polygon" not in svg_text

    def test_render_two_points_draws_line(self):
        """Two control points are connected by a straight line strip."""
        svg_text = SplineSvgPage.render(SQUARE[:2]).tostring().decode("utf-8")
        assert _polyline_points(svg_text, "polyline") == ["100.0,100.0", "700.0,100.0"]
        assert svg_text.count("<circle") == 2

    def test_render_single_point_draws_marker_only(self):
        """A single control point gives a marker but no curve."""
        svg_text = SplineSvgPage.render(SQUARE[:1]).tostring().decode("utf-8")
        assert "<polyline" not in svg_text
        assert "<polygon" not in svg_text
        assert svg_text.count("<circle") == 1

    def test_debug_layer_holds_tangents(self):
        """Tangent lines are only written when the debug layer is included."""
        page = SplineSvgPage.render(SQUARE, SplineConfig(steps=4))
        without_debug = page.tostring(include_debug_layer=False).decode("utf-8")
        with_debug = page.tostring(include_debug_layer=True).decode("utf-8")
        assert "<line" not in without_debug
        assert with_debug.count("<line") == 4

    def test_marker_size_and_line_width(self):
        """Style attributes are applied."""
        style = RenderStyle(point_size=20.0, line_width=2.0, point_color="green", line_color="blue")
        svg_text = SplineSvgPage.render(SQUARE, SplineConfig(steps=4), style).tostring().decode("utf-8")
        assert 'r="10.0"' in svg_text
        assert 'stroke-width="2.0"' in svg_text
        assert 'fill="green"' in svg_text
        assert 'stroke="blue"' in svg_text

    def test_transparent_background(self):
        """background=None leaves out the background rectangle."""
        assert "<rect" in SplineSvgPage().tostring().decode("utf-8")
        assert "<rect" not in SplineSvgPage(background=None).tostring().decode("utf-8")

    def test_y_axis_flipped(self):
        """The root group flips the y-axis so that the origin is bottom-left."""
        svg_text = SplineSvgPage(800, 600).tostring().decode("utf-8")
        assert "scale(1,-1) translate(0,-600)" in svg_text

    @pytest.mark.parametrize("compressed", [False, True])
    def test_save_as(self, tmp_path, compressed):
        """save_as writes plain or gzip-compressed SVG."""
        filename = tmp_path / ("spline.svgz" if compressed else "spline.svg")
        SplineSvgPage.render(SQUARE, SplineConfig(steps=5)).save_as(str(filename), compressed=compressed)

        data = filename.read_bytes()
        if compressed:
            data = gzip.decompress(data)
        assert data.startswith(b"<?xml")
        assert b"<polygon" in data
