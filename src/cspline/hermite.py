"""Cubic Hermite segment evaluation for spline interpolation."""

from __future__ import annotations

from typing import Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

# Step count from which the vectorized NumPy evaluation is used instead of the pure Python loop
_NUMPY_STEPS_THRESHOLD: int = 70

_PointLike = Union[Sequence[float], NDArray[np.float64]]


class HermiteSegment:
    """Class to evaluate cubic Hermite segments.

    A segment runs from a start point to an end point and is shaped by the tangents
    at both endpoints. It is sampled at u = i / steps for i in [0, steps), so the
    end point itself is never part of the samples: it is the first sample of the
    following segment.

    Supports both pure Python and NumPy-optimized implementations.
    """

    @staticmethod
    def hermite_basis(
        u: Union[float, NDArray[np.float64]],
    ) -> Tuple[
        Union[float, NDArray[np.float64]],
        Union[float, NDArray[np.float64]],
        Union[float, NDArray[np.float64]],
        Union[float, NDArray[np.float64]],
    ]:
        """
        Return the four cubic Hermite basis weights (h0, h1, h2, h3) at parameter u.

            h0(u) =  2u^3 - 3u^2 + 1     weight of the start point
            h1(u) = -2u^3 + 3u^2         weight of the end point
            h2(u) =   u^3 - 2u^2 + u     weight of the start tangent
            h3(u) =   u^3 -  u^2         weight of the end tangent

        Args:
            u: Scalar parameter or array of parameters

        Returns:
            Tuple of the four weights, each of the same kind as u
        """
        u2 = u * u
        u3 = u2 * u
        h0 = 2.0 * u3 - 3.0 * u2 + 1.0
        h1 = -2.0 * u3 + 3.0 * u2
        h2 = u3 - 2.0 * u2 + u
        h3 = u3 - u2
        return h0, h1, h2, h3

    @classmethod
    def interpolate_segment_python_inplace(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        start: _PointLike,
        end: _PointLike,
        steps: int,
        tangent_start: _PointLike,
        tangent_end: _PointLike,
        output_buffer: NDArray[np.float64],
        start_index: int = 0,
    ) -> int:
        """
        Interpolate a Hermite segment directly into pre-allocated buffer using pure Python.
        """
        p0x, p0y = float(start[0]), float(start[1])
        p1x, p1y = float(end[0]), float(end[1])
        m0x, m0y = float(tangent_start[0]), float(tangent_start[1])
        m1x, m1y = float(tangent_end[0]), float(tangent_end[1])

        output_idx = start_index
        for i in range(steps):
            u = i / steps
            h0, h1, h2, h3 = cls.hermite_basis(u)

            output_buffer[output_idx, 0] = h0 * p0x + h1 * p1x + h2 * m0x + h3 * m1x
            output_buffer[output_idx, 1] = h0 * p0y + h1 * p1y + h2 * m0y + h3 * m1y
            output_idx += 1

        return steps

    @classmethod
    def interpolate_segment_numpy_inplace(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        start: _PointLike,
        end: _PointLike,
        steps: int,
        tangent_start: _PointLike,
        tangent_end: _PointLike,
        output_buffer: NDArray[np.float64],
        start_index: int = 0,
    ) -> int:
        """
        Interpolate a Hermite segment directly into pre-allocated buffer using NumPy.
        Uses direct evaluation with vectorized operations.
        """
        p0 = np.asarray(start, dtype=np.float64)
        p1 = np.asarray(end, dtype=np.float64)
        m0 = np.asarray(tangent_start, dtype=np.float64)
        m1 = np.asarray(tangent_end, dtype=np.float64)

        # u = i / steps, never reaching 1.0
        u = np.arange(steps, dtype=np.float64) / steps
        h0, h1, h2, h3 = cls.hermite_basis(u)

        end_idx = start_index + steps
        output_buffer[start_index:end_idx, 0] = h0 * p0[0] + h1 * p1[0] + h2 * m0[0] + h3 * m1[0]
        output_buffer[start_index:end_idx, 1] = h0 * p0[1] + h1 * p1[1] + h2 * m0[1] + h3 * m1[1]

        return steps

    @classmethod
    def interpolate_segment_inplace(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        start: _PointLike,
        end: _PointLike,
        steps: int,
        tangent_start: _PointLike,
        tangent_end: _PointLike,
        output_buffer: NDArray[np.float64],
        start_index: int = 0,
    ) -> int:
        """
        Interpolate a Hermite segment directly into pre-allocated buffer.
        Uses pure Python for small step counts, NumPy for larger ones.

        Args:
            start: Start point (x, y) of the segment
            end: End point (x, y) of the segment
            steps: Number of points to sample, u = i / steps for i in [0, steps)
            tangent_start: Tangent vector at the start point
            tangent_end: Tangent vector at the end point
            output_buffer: Pre-allocated buffer of shape (n, 2) to write points into
            start_index: Starting index in output_buffer

        Returns:
            Number of points written to buffer (always steps)
        """
        if steps < _NUMPY_STEPS_THRESHOLD:
            return cls.interpolate_segment_python_inplace(
                start, end, steps, tangent_start, tangent_end, output_buffer, start_index
            )
        return cls.interpolate_segment_numpy_inplace(
            start, end, steps, tangent_start, tangent_end, output_buffer, start_index
        )

    @classmethod
    def interpolate_segment(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        start: _PointLike,
        end: _PointLike,
        steps: int,
        tangent_start: _PointLike,
        tangent_end: _PointLike,
    ) -> NDArray[np.float64]:
        """
        Interpolate a Hermite segment into a sequence of points.

        Args:
            start: Start point (x, y) of the segment
            end: End point (x, y) of the segment
            steps: Number of points to sample; 0 gives an empty result
            tangent_start: Tangent vector at the start point
            tangent_end: Tangent vector at the end point

        Returns:
            NDArray[np.float64] of shape (steps, 2). The first row equals start,
            the end point is not included.
        """
        result = np.empty((steps, 2), dtype=np.float64)
        cls.interpolate_segment_inplace(start, end, steps, tangent_start, tangent_end, result, start_index=0)
        return result


def main():
    """Main"""
    points = HermiteSegment.interpolate_segment((0.0, 0.0), (10.0, 0.0), 10, (5.0, -5.0), (5.0, 5.0))
    for point in points:
        print(f"{point[0]:10.4f} {point[1]:10.4f}")


if __name__ == "__main__":
    main()
