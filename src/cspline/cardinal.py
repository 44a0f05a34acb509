"""Cardinal spline construction through a closed loop of control points."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

from cspline.common import DEFAULT_STEPS, DEFAULT_TENSION, MIN_CONTROL_POINTS, ControlSequence, Vec2, as_point_array
from cspline.hermite import HermiteSegment

logger = logging.getLogger(__name__)

###############################################################################
# Tangent
###############################################################################


@dataclass(frozen=True)
class Tangent:
    """Tangent vectors at the two endpoints of a segment.

    Attributes:
        start: Tangent vector (dx, dy) at the segment's start point
        end: Tangent vector (dx, dy) at the segment's end point
    """

    start: Vec2
    end: Vec2


###############################################################################
# CardinalSpline
###############################################################################


class CardinalSpline:
    """Class to build cardinal splines out of control points.

    The control points are treated as a cyclic sequence: every segment between two
    consecutive control points takes its tangents from the point before and the
    point after, wrapping around at both ends.
    """

    @staticmethod
    def estimate_tangents(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        prev: Union[Sequence[float], NDArray[np.float64]],
        start: Union[Sequence[float], NDArray[np.float64]],
        end: Union[Sequence[float], NDArray[np.float64]],
        next_: Union[Sequence[float], NDArray[np.float64]],
        tension: float,
    ) -> Tangent:
        """
        Calculate the tangents at the endpoints of the segment start->end.

            tangent at start = tension * (end - prev)
            tangent at end   = tension * (next - start)

        The tension is not clamped; values outside [0, 1] scale the overshoot.

        Args:
            prev: Control point before start
            start: Start point of the segment
            end: End point of the segment
            next_: Control point after end
            tension: Scale of the tangents

        Returns:
            Tangent: The tangents at start and end
        """
        return Tangent(
            start=(float(tension * (end[0] - prev[0])), float(tension * (end[1] - prev[1]))),
            end=(float(tension * (next_[0] - start[0])), float(tension * (next_[1] - start[1]))),
        )

    @classmethod
    def build_spline(
        cls,
        points: ControlSequence,
        steps: int = DEFAULT_STEPS,
        tension: float = DEFAULT_TENSION,
        closed: bool = True,
    ) -> NDArray[np.float64]:
        """
        Calculate all interpolated points of the cardinal spline through the given control points.

        Segments are emitted in control point order 0->1, 1->2, ..., (n-1)->0, each one
        contributing exactly steps points. With closed=False the closing segment (n-1)->0
        is left out while the tangents still wrap around.

        Fewer than 3 control points do not define a curve: the points are returned unchanged.

        Args:
            points: Control points as sequence of (x, y) pairs or array of shape (n, 2)
            steps: Number of points per segment
            tension: Scale of the tangents
            closed: Whether to emit the closing segment back to the first point

        Returns:
            NDArray[np.float64] of shape (n * steps, 2), or (n - 1) * steps rows if not closed.
            Always a fresh array, never a view of the input.

        Raises:
            ValueError: If the points are not of shape (n, 2)
        """
        ctrl_points = as_point_array(points)
        num_points = len(ctrl_points)

        if num_points < MIN_CONTROL_POINTS:
            logger.debug("%d control point(s) do not define a spline, returning them unchanged", num_points)
            return ctrl_points

        num_segments = num_points if closed else num_points - 1
        spline_points = np.empty((num_segments * steps, 2), dtype=np.float64)
        logger.debug(
            "building cardinal spline: %d control points, %d segments, %d steps, tension %s",
            num_points,
            num_segments,
            steps,
            tension,
        )

        array_index = 0
        for k in range(num_segments):
            prev = ctrl_points[(k - 1) % num_points]
            start = ctrl_points[k]
            end = ctrl_points[(k + 1) % num_points]
            next_ = ctrl_points[(k + 2) % num_points]

            tangent = cls.estimate_tangents(prev, start, end, next_, tension)
            array_index += HermiteSegment.interpolate_segment_inplace(
                start, end, steps, tangent.start, tangent.end, spline_points, array_index
            )

        return spline_points


def main():
    """Main"""
    logging.basicConfig(level=logging.DEBUG)

    square = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]
    spline = CardinalSpline.build_spline(square, steps=4, tension=DEFAULT_TENSION)
    print(f"{len(spline)} spline points:")
    for point in spline:
        print(f"{point[0]:10.4f} {point[1]:10.4f}")


if __name__ == "__main__":
    main()
