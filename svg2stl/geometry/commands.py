"""
Path commands for 2D outlines.

Coordinates are already absolute when commands are created, so every
command carries its own start point (the current position when the
command was issued).
"""

from dataclasses import dataclass
from typing import NamedTuple, Union


class Point2D(NamedTuple):
    """A point in drawing units."""
    x: float
    y: float

    @classmethod
    def from_complex(cls, z: complex) -> "Point2D":
        return cls(float(z.real), float(z.imag))


@dataclass(frozen=True)
class CubicCurve:
    """Cubic Bezier curve given by its end points and two control points."""
    start: Point2D
    control1: Point2D
    control2: Point2D
    end: Point2D


@dataclass(frozen=True)
class MoveTo:
    start: Point2D
    kind = "MoveTo"


@dataclass(frozen=True)
class LineTo:
    start: Point2D
    end: Point2D
    kind = "LineTo"


@dataclass(frozen=True)
class CubicCurveTo:
    start: Point2D
    control1: Point2D
    control2: Point2D
    end: Point2D
    kind = "CubicCurveTo"

    @property
    def curve(self) -> CubicCurve:
        return CubicCurve(self.start, self.control1, self.control2, self.end)


@dataclass(frozen=True)
class QuadraticCurveTo:
    """Quadratic Bezier segment. Readable, but not convertible."""
    start: Point2D
    control: Point2D
    end: Point2D
    kind = "QuadraticCurveTo"


@dataclass(frozen=True)
class ArcTo:
    """Elliptical arc segment. Readable, but not convertible."""
    start: Point2D
    radius: Point2D
    rotation: float
    large_arc: bool
    sweep: bool
    end: Point2D
    kind = "ArcTo"


@dataclass(frozen=True)
class ClosePath:
    start: Point2D
    kind = "ClosePath"


PathCommand = Union[MoveTo, LineTo, CubicCurveTo, QuadraticCurveTo, ArcTo, ClosePath]
