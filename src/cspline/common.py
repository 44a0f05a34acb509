"""Central module containing types, constants and defaults for cardinal spline processing."""

from __future__ import annotations

import os
import sys
from typing import Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

###############################################################################
# Types
###############################################################################


Point2D = Tuple[float, float]  # (x, y)
Vec2 = Tuple[float, float]  # (dx, dy)

# A control sequence is accepted either as a sequence of (x, y) pairs or as an array of shape (n, 2)
ControlSequence = Union[Sequence[Sequence[float]], NDArray[np.float64]]


###############################################################################
# Enums and Consts
###############################################################################


DEFAULT_STEPS: int = 100  # interpolated points between each two consecutive control points
DEFAULT_TENSION: float = 0.5  # controls the amount of curviness
MIN_CONTROL_POINTS: int = 3  # fewer points do not define a curve (2 points are just a line)

CANVAS_WIDTH: int = 800
CANVAS_HEIGHT: int = 800


###############################################################################
# Functions
###############################################################################


def as_point_array(points: ControlSequence) -> NDArray[np.float64]:
    """Return a fresh float64 array of shape (n, 2) holding the given points.

    Args:
        points: Sequence of (x, y) pairs or array of shape (n, 2)

    Returns:
        NDArray[np.float64]: Independent copy of the points, shape (n, 2)

    Raises:
        ValueError: If the points are not 2-D
    """
    array = np.array(points, dtype=np.float64)
    if array.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if array.ndim != 2 or array.shape[1] != 2:
        raise ValueError(f"Points must have shape (n, 2), got {array.shape}")
    return array


def main() -> None:
    """Display system information and the default spline parameters."""
    print("sys.path:  ", sys.path)
    print()
    print("PYTHONPATH:", os.environ.get("PYTHONPATH", ""))
    print()
    print()

    print("DEFAULT_STEPS:     ", DEFAULT_STEPS)
    print("DEFAULT_TENSION:   ", DEFAULT_TENSION)
    print("MIN_CONTROL_POINTS:", MIN_CONTROL_POINTS)

    print()


if __name__ == "__main__":
    main()
