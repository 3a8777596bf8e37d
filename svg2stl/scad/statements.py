"""
OpenSCAD statements for extruded outlines.

Statements are plain value objects so generated models can be compared
structurally; text is produced only by ``to_scad()``.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from ..geometry.commands import Point2D
from ..geometry.contour import Segment
from ..utils import format_number

EXTRUDE_HEIGHT = 1.6
CIRCLE_FACETS = 30
POLYGON_CONVEXITY = 10
POLYLINE_WIDTH = 1


def _point(point: Point2D) -> str:
    return f"[{format_number(point.x)}, {format_number(point.y)}]"


def _segment_list(segments: Tuple[Segment, ...]) -> str:
    """Render segments as ``flatten([[[x1, y1], [x2, y2]], ...])``."""
    items = ", ".join(f"[{_point(a)}, {_point(b)}]" for a, b in segments)
    return f"flatten([{items}])"


@dataclass(frozen=True)
class PolygonStatement:
    """Filled polygon over a closed contour."""
    segments: Tuple[Segment, ...]
    convexity: int = POLYGON_CONVEXITY

    def to_scad(self) -> str:
        return f"polygon(points={_segment_list(self.segments)}, convexity={self.convexity});"


@dataclass(frozen=True)
class PolylineStatement:
    """Thin stroke along an open contour."""
    segments: Tuple[Segment, ...]
    width: float = POLYLINE_WIDTH

    def to_scad(self) -> str:
        return f"polyline({_segment_list(self.segments)}, {format_number(self.width)});"


@dataclass(frozen=True)
class CircleStatement:
    center: Point2D
    radius: float
    facets: int = CIRCLE_FACETS

    def to_scad(self) -> str:
        return (
            f"translate([{format_number(self.center.x)}, {format_number(self.center.y)}, 0]) "
            f"circle({format_number(self.radius)}, $fn={self.facets});"
        )


@dataclass(frozen=True)
class SquareStatement:
    """Axis-aligned rectangle at ``origin``."""
    origin: Point2D
    width: float
    height: float

    def to_scad(self) -> str:
        return (
            f"translate([{format_number(self.origin.x)}, {format_number(self.origin.y)}, 0]) "
            f"square([{format_number(self.width)}, {format_number(self.height)}]);"
        )


@dataclass
class SolidDescription:
    """
    A complete OpenSCAD program.

    The statements are subtracted in order: the first one is the base
    shape and every later one is removed from it.
    """
    preamble: str
    scale: float
    statements: List = field(default_factory=list)
    height: float = EXTRUDE_HEIGHT

    def to_scad(self) -> str:
        s = format_number(self.scale)
        lines = [
            self.preamble.rstrip("\n"),
            f"scale([{s}, {s}, 1]) {{ linear_extrude(height={format_number(self.height)}, "
            f"center=false) {{ difference() {{",
        ]
        lines.extend(statement.to_scad() for statement in self.statements)
        lines.append("} } }")
        return "\n".join(lines) + "\n"

    def __len__(self) -> int:
        return len(self.statements)
