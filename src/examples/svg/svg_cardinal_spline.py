"""Creates a SVG file of a 800x800 canvas showing a closed cardinal spline
through a handful of control points, drawn white on black with red markers.
The control points are appended one by one, the way a user would click them.
"""

from pathlib import Path

from cspline.config import RenderStyle, SplineConfig
from cspline.control_points import ControlPoints
from cspline.page import SplineSvgPage

OUTPUT_FILE = "data/output/example/svg/cardinal_spline.svg"

CLICKED_POINTS = [(120, 140), (400, 90), (680, 200), (560, 420), (700, 660), (380, 560), (160, 700), (240, 400)]

NUM_OF_SEGMENTS = 100  # between each two consecutive control points
TENSION = 0.5  # controls the amount of curviness


def main():
    """Collects the control points, builds the spline
    and saves the rendered page to a SVG file.
    """
    control_points = ControlPoints()
    for x, y in CLICKED_POINTS:
        control_points.append(x, y)

    config = SplineConfig(steps=NUM_OF_SEGMENTS, tension=TENSION)
    spline = control_points.build_spline(config)
    print(f"{len(control_points)} control points -> {len(spline)} spline points")

    svg_page = SplineSvgPage.render(control_points.snapshot(), config, RenderStyle())

    Path(OUTPUT_FILE).parent.mkdir(parents=True, exist_ok=True)
    print(f"save file {OUTPUT_FILE} ...")
    svg_page.save_as(OUTPUT_FILE, include_debug_layer=True, pretty=True, indent=2)
    print("save done.")


if __name__ == "__main__":
    main()
