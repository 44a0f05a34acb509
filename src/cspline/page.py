"""SVG page to render control points and the cardinal spline through them."""

from __future__ import annotations

import copy
import gzip
import io
import logging
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np
import svgwrite
import svgwrite.base
import svgwrite.container
import svgwrite.elementfactory
from svgwrite.extensions import Inkscape

from cspline.cardinal import CardinalSpline
from cspline.common import CANVAS_HEIGHT, CANVAS_WIDTH, MIN_CONTROL_POINTS, ControlSequence, as_point_array
from cspline.config import DEFAULT_RENDER_STYLE, DEFAULT_SPLINE_CONFIG, RenderStyle, SplineConfig

logger = logging.getLogger(__name__)


@dataclass
class SplineSvgPage:
    """A canvas described by SVG to draw control points and spline curves onto.

    The canvas has its coordinate-system left-to-right and bottom-to-top.
    Contains groups/layers:
        - root       -- (group) just contains the y-flip and translation to bottom left
            - main   -- curve and control point markers
            - debug  -- tangent vectors, hidden->display="none"
    """

    _inkscape: Inkscape  # extension to support layers

    drawing: svgwrite.Drawing
    root_group: svgwrite.container.Group
    main_layer: svgwrite.container.Group
    debug_layer: svgwrite.container.Group

    def __init__(
        self,
        width: float = CANVAS_WIDTH,
        height: float = CANVAS_HEIGHT,
        background: Optional[str] = DEFAULT_RENDER_STYLE.background,
    ):
        """
        Initialize the SVG page with the given canvas dimensions.

        Args:
            width (float, optional): The width of the canvas. Defaults to CANVAS_WIDTH.
            height (float, optional): The height of the canvas. Defaults to CANVAS_HEIGHT.
            background (str, optional): Fill color of the canvas, None for transparent.
        """
        # profile="full" to support numbers with more than 4 decimal digits
        self.drawing = svgwrite.Drawing(size=(width, height), viewBox=f"0 0 {width} {height}", profile="full")

        if background is not None:
            self.drawing.add(self.drawing.rect(insert=(0, 0), size=(width, height), fill=background))

        # Define root group with transformation to flip y-axis and set origin to bottom-left
        self.root_group = self.drawing.g(id="root", transform=f"scale(1,-1) translate(0,{-height})")

        self._inkscape = Inkscape(self.drawing)

        self.main_layer = self._inkscape.layer(label="main", locked=False)
        self.debug_layer = self._inkscape.layer(label="debug", locked=False, display="none")

    def add(
        self,
        element: Union[svgwrite.base.BaseElement, svgwrite.elementfactory.ElementBuilder],
        add_to_debug_layer: bool = False,
    ) -> Union[svgwrite.base.BaseElement, svgwrite.elementfactory.ElementBuilder]:
        """Add a SVG element as subelement either to main or debug layer.

        Args:
            element (svgwrite.base.BaseElement): append this SVG element
            add_to_debug_layer (bool, optional): True if element should be added to debug layer.

        Returns:
            svgwrite.base.BaseElement: the added element
        """
        if add_to_debug_layer:
            return self.debug_layer.add(element)
        return self.main_layer.add(element)

    def add_curve(
        self,
        curve: ControlSequence,
        style: RenderStyle = DEFAULT_RENDER_STYLE,
        closed: bool = False,
    ) -> Optional[svgwrite.base.BaseElement]:
        """Draw the curve as line strip through its points.

        Args:
            curve: Curve points, e.g. the result of CardinalSpline.build_spline
            style: Line width and color
            closed: Also draw the line from the last point back to the first one

        Returns:
            The added element, None if the curve has less than 2 points
        """
        points = as_point_array(curve)
        if len(points) < 2:
            return None
        vertices = [(float(x), float(y)) for x, y in points]
        if closed:
            element = self.drawing.polygon(vertices)
        else:
            element = self.drawing.polyline(vertices)
        element.fill("none").stroke(style.line_color, width=style.line_width, linejoin="round")
        return self.add(element)

    def add_control_points(
        self, points: ControlSequence, style: RenderStyle = DEFAULT_RENDER_STYLE
    ) -> svgwrite.container.Group:
        """Draw a marker of diameter style.point_size at each control point.

        Returns:
            svgwrite.container.Group: the group holding all markers
        """
        group = self.drawing.g(fill=style.point_color)
        radius = style.point_size / 2
        for x, y in as_point_array(points):
            group.add(self.drawing.circle(center=(float(x), float(y)), r=radius))
        return self.add(group)

    def add_tangents(
        self, points: ControlSequence, tension: float, style: RenderStyle = DEFAULT_RENDER_STYLE
    ) -> Optional[svgwrite.container.Group]:
        """Draw the tangent vector at each control point into the debug layer.

        Returns:
            svgwrite.container.Group: the group holding the tangent lines,
                None if there are too few points for a spline
        """
        ctrl_points = as_point_array(points)
        num_points = len(ctrl_points)
        if num_points < MIN_CONTROL_POINTS:
            return None

        group = self.drawing.g(stroke=style.point_color, stroke_width=style.line_width / 2)
        for k in range(num_points):
            tangent = CardinalSpline.estimate_tangents(
                ctrl_points[(k - 1) % num_points],
                ctrl_points[k],
                ctrl_points[(k + 1) % num_points],
                ctrl_points[(k + 2) % num_points],
                tension,
            )
            x, y = float(ctrl_points[k][0]), float(ctrl_points[k][1])
            group.add(self.drawing.line(start=(x, y), end=(x + tangent.start[0], y + tangent.start[1])))
        return self.add(group, add_to_debug_layer=True)

    def save_as(
        self,
        filename: str,
        include_debug_layer: bool = False,
        pretty: bool = False,
        indent: int = 2,
        compressed: bool = False,
    ):
        """Save as SVG file

        Args:
            filename (str): path and filename
            include_debug_layer (bool, optional): True if file should contain debug_layer. Defaults to False.
            pretty (bool, optional): True for easy readable output. Defaults to False.
            indent (int, optional): Indention if pretty is enabled. Defaults to 2 spaces.
            compressed (bool, optional): Save as compressed svgz-file. Defaults to False.
        """
        with open(filename, "wb") as svg_file:
            svg_file.write(self.tostring(include_debug_layer, pretty, indent, compressed))
        logger.debug("saved %s", filename)

    def tostring(
        self,
        include_debug_layer: bool = False,
        pretty: bool = False,
        indent: int = 2,
        compressed: bool = False,
    ) -> bytes:
        """Return the assembled SVG document as bytes (gzip-compressed if requested)."""
        drawing_for_save = self.assemble_tree(
            copy.deepcopy(self.drawing),
            copy.deepcopy(self.root_group),
            copy.deepcopy(self.main_layer),
            copy.deepcopy(self.debug_layer),
            include_debug_layer,
        )

        svg_buffer = io.StringIO()
        drawing_for_save.write(svg_buffer, pretty=pretty, indent=indent)
        output_data = svg_buffer.getvalue().encode("utf-8")
        if compressed:
            output_data = gzip.compress(output_data)
        return output_data

    @classmethod
    def assemble_tree(
        cls,
        drawing: svgwrite.Drawing,
        root_group: svgwrite.container.Group,
        main_layer: svgwrite.container.Group,
        debug_layer: Optional[svgwrite.container.Group] = None,
        include_debug_layer: bool = False,
    ) -> svgwrite.Drawing:
        """Assemble a tree out of the given SVG elements.

        Args:
            drawing (svgwrite.Drawing): The main SVG drawing element.
            root_group (svgwrite.container.Group): The root group of the drawing.
            main_layer (svgwrite.container.Group): The main layer of the drawing.
            debug_layer (svgwrite.container.Group): The debug layer of the drawing.
            include_debug_layer (bool, optional): Include the debug layer in the tree. Defaults to False.

        Returns:
            svgwrite.Drawing: The given drawing with assembled SVG drawing elements.
        """
        drawing.add(root_group)
        if include_debug_layer and debug_layer:
            root_group.add(debug_layer)
        root_group.add(main_layer)
        return drawing

    @classmethod
    def render(
        cls,
        control_points: ControlSequence,
        config: SplineConfig = DEFAULT_SPLINE_CONFIG,
        style: RenderStyle = DEFAULT_RENDER_STYLE,
        width: float = CANVAS_WIDTH,
        height: float = CANVAS_HEIGHT,
    ) -> SplineSvgPage:
        """
        Create a page showing the control points and the cardinal spline through them.

        The curve is drawn below the markers. Tangents go to the debug layer.

        Args:
            control_points: Control points as sequence of (x, y) pairs or array of shape (n, 2)
            config: Spline parameters
            style: Drawing attributes
            width (float, optional): The width of the canvas.
            height (float, optional): The height of the canvas.

        Returns:
            SplineSvgPage: A new page with curve and markers.
        """
        ctrl_points = as_point_array(control_points)
        spline = CardinalSpline.build_spline(ctrl_points, config.steps, config.tension, config.closed)

        svg_page = SplineSvgPage(width, height, style.background)
        svg_page.add_curve(spline, style, closed=config.closed and len(ctrl_points) >= MIN_CONTROL_POINTS)
        svg_page.add_control_points(ctrl_points, style)
        svg_page.add_tangents(ctrl_points, config.tension, style)
        return svg_page


def main():
    """Main"""
    output_filename = "cardinal_spline_page.svg"

    control_points = np.array([[100, 100], [700, 150], [600, 650], [400, 400], [150, 600]], dtype=np.float64)
    svg_page = SplineSvgPage.render(control_points)

    print(f"save file {output_filename} ...")
    svg_page.save_as(output_filename, include_debug_layer=True, pretty=True, indent=2)
    print("save done.")


if __name__ == "__main__":
    main()
