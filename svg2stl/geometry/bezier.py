"""
Cubic Bezier flattening.

Curves are approximated by sampling the Bernstein form at evenly spaced
parameter values. The samples are produced lazily and can be iterated
any number of times.
"""

from typing import Iterator

from .commands import CubicCurve, Point2D


def bezier_point(curve: CubicCurve, t: float) -> Point2D:
    """Evaluate the curve at parameter ``t`` in [0, 1]."""
    mt = 1.0 - t
    b0 = mt * mt * mt
    b1 = 3.0 * mt * mt * t
    b2 = 3.0 * mt * t * t
    b3 = t * t * t
    p0, p1, p2, p3 = curve.start, curve.control1, curve.control2, curve.end
    return Point2D(
        b0 * p0.x + b1 * p1.x + b2 * p2.x + b3 * p3.x,
        b0 * p0.y + b1 * p1.y + b2 * p2.y + b3 * p3.y,
    )


class CurveSamples:
    """
    Points along a cubic curve at ``t = i / steps`` for ``i`` in ``0..steps``.

    Usage:
        samples = CurveSamples(curve, steps=10)
        len(samples)   # 11
        list(samples)  # evaluated on demand, every time
    """

    def __init__(self, curve: CubicCurve, steps: int):
        if steps < 1:
            raise ValueError(f"steps must be a positive integer, got {steps}")
        self.curve = curve
        self.steps = int(steps)

    def __len__(self) -> int:
        return self.steps + 1

    def __iter__(self) -> Iterator[Point2D]:
        for i in range(self.steps + 1):
            yield bezier_point(self.curve, i / self.steps)

    def __repr__(self) -> str:
        return f"CurveSamples({self.curve!r}, steps={self.steps})"


def flatten(curve: CubicCurve, steps: int) -> CurveSamples:
    """Approximate ``curve`` by ``steps`` straight segments (``steps + 1`` points)."""
    return CurveSamples(curve, steps)
