"""Configuration value objects for spline building and rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from cspline.common import DEFAULT_STEPS, DEFAULT_TENSION

###############################################################################
# SplineConfig
###############################################################################


@dataclass(frozen=True)
class SplineConfig:
    """Parameters of a cardinal spline build.

    Attributes:
        steps: Number of interpolated points per segment (between two control points).
        tension: Scales the tangents. 0 gives zero tangents, larger values overshoot more.
            Not clamped.
        closed: If True, the closing segment from the last control point back to the
            first one is emitted as well.
    """

    steps: int = DEFAULT_STEPS
    tension: float = DEFAULT_TENSION
    closed: bool = True

    def __post_init__(self):
        # bool is an int subclass but makes no sense as a step count
        if isinstance(self.steps, bool) or not isinstance(self.steps, int):
            raise ValueError(f"steps must be an int, got {type(self.steps).__name__}")
        if self.steps < 0:
            raise ValueError(f"steps must not be negative, got {self.steps}")

    def to_dict(self) -> dict:
        """Convert the config to a dictionary for serialization."""
        return {
            "steps": self.steps,
            "tension": self.tension,
            "closed": self.closed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> SplineConfig:
        """Create a SplineConfig from a dictionary."""
        return cls(
            steps=data.get("steps", DEFAULT_STEPS),
            tension=data.get("tension", DEFAULT_TENSION),
            closed=data.get("closed", True),
        )


###############################################################################
# RenderStyle
###############################################################################


@dataclass(frozen=True)
class RenderStyle:
    """Drawing attributes for control point markers and the curve line strip.

    Attributes:
        point_size: Diameter of a control point marker.
        line_width: Stroke width of the curve.
        point_color: Fill color of the control point markers.
        line_color: Stroke color of the curve.
        background: Fill color of the canvas, None for a transparent canvas.
    """

    point_size: float = 10.0
    line_width: float = 5.0
    point_color: str = "red"
    line_color: str = "white"
    background: Optional[str] = "black"

    def to_dict(self) -> dict:
        """Convert the style to a dictionary for serialization."""
        return {
            "point_size": self.point_size,
            "line_width": self.line_width,
            "point_color": self.point_color,
            "line_color": self.line_color,
            "background": self.background,
        }

    @classmethod
    def from_dict(cls, data: dict) -> RenderStyle:
        """Create a RenderStyle from a dictionary."""
        return cls(
            point_size=data.get("point_size", 10.0),
            line_width=data.get("line_width", 5.0),
            point_color=data.get("point_color", "red"),
            line_color=data.get("line_color", "white"),
            background=data.get("background", "black"),
        )


DEFAULT_SPLINE_CONFIG = SplineConfig()
DEFAULT_RENDER_STYLE = RenderStyle()
