"""Append-only collection of control points feeding the spline builder."""

from __future__ import annotations

import logging
from typing import Iterator, Optional

import numpy as np
from numpy.typing import NDArray

from cspline.cardinal import CardinalSpline
from cspline.common import ControlSequence, Point2D, as_point_array
from cspline.config import DEFAULT_SPLINE_CONFIG, SplineConfig

logger = logging.getLogger(__name__)

_INITIAL_CAPACITY: int = 16


class ControlPoints:
    """Growable, append-only sequence of control points.

    The collection owns its storage. The spline builder only ever sees a snapshot,
    so appending after a build never changes an already computed curve.
    Not thread-safe: callers serialize appends against builds.
    """

    _points: NDArray[np.float64]
    _count: int

    def __init__(self, points: Optional[ControlSequence] = None):
        """Initialize the collection, optionally with initial points.

        Args:
            points: Initial control points as sequence of (x, y) pairs or array of shape (n, 2)
        """
        self._points = np.empty((_INITIAL_CAPACITY, 2), dtype=np.float64)
        self._count = 0
        if points is not None:
            self.extend(points)

    def _reserve(self, capacity: int) -> None:
        if capacity <= len(self._points):
            return
        new_capacity = max(capacity, 2 * len(self._points))
        grown = np.empty((new_capacity, 2), dtype=np.float64)
        grown[: self._count] = self._points[: self._count]
        self._points = grown

    def append(self, x: float, y: float) -> None:
        """Append a single control point (x, y)."""
        self._reserve(self._count + 1)
        self._points[self._count] = (x, y)
        self._count += 1
        logger.debug("added control point #%d at (%s, %s)", self._count, x, y)

    def extend(self, points: ControlSequence) -> None:
        """Append several control points keeping their order.

        Raises:
            ValueError: If the points are not of shape (n, 2)
        """
        new_points = as_point_array(points)
        self._reserve(self._count + len(new_points))
        self._points[self._count : self._count + len(new_points)] = new_points
        self._count += len(new_points)

    @property
    def points(self) -> NDArray[np.float64]:
        """
        Read-only view of the control points as a numpy array of shape (n_points, 2).
        """
        view = self._points[: self._count]
        view.flags.writeable = False
        return view

    def snapshot(self) -> NDArray[np.float64]:
        """Independent copy of the current control points, shape (n_points, 2)."""
        return self._points[: self._count].copy()

    def build_spline(self, config: Optional[SplineConfig] = None) -> NDArray[np.float64]:
        """Build the cardinal spline through a snapshot of the current control points.

        Args:
            config: Spline parameters. Defaults to DEFAULT_SPLINE_CONFIG.

        Returns:
            NDArray[np.float64]: The spline points, see CardinalSpline.build_spline
        """
        if config is None:
            config = DEFAULT_SPLINE_CONFIG
        return CardinalSpline.build_spline(self.snapshot(), config.steps, config.tension, config.closed)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Point2D]:
        for x, y in self._points[: self._count]:
            yield (float(x), float(y))

    def __str__(self):
        """Returns a string representation of the ControlPoints instance."""
        return f"ControlPoints(n={self._count}, points={self.snapshot().tolist()})"
