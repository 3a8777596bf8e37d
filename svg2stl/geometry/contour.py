"""
Contour building for path entities.

A path's commands are turned into a flat list of line segments. Curves
become polylines; a close command marks the contour as closed.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from .bezier import flatten
from .commands import (
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    Point2D,
)

Segment = Tuple[Point2D, Point2D]


class UnsupportedSegmentError(ValueError):
    """Raised when a path uses a segment kind that cannot be converted."""

    def __init__(self, kind: str, position: Point2D):
        self.kind = kind
        self.position = position
        super().__init__(
            f"{kind} at {position.x}, {position.y} is not a supported path segment."
        )


@dataclass
class Contour:
    """Line segments of one path, in command order."""
    segments: List[Segment] = field(default_factory=list)
    closed: bool = False

    @property
    def points(self) -> List[Point2D]:
        """Segment end points concatenated, shared points included twice."""
        return [point for segment in self.segments for point in segment]

    def __len__(self) -> int:
        return len(self.segments)


def build_contour(commands: Iterable[PathCommand], curve_steps: int) -> Contour:
    """
    Build a contour from absolute path commands.

    Args:
        commands: Path commands in document order
        curve_steps: Line segments used per cubic curve

    Returns:
        Contour with one segment per line and ``curve_steps`` per curve

    Raises:
        UnsupportedSegmentError: For any command other than move, line,
            cubic curve or close
    """
    contour = Contour()

    for command in commands:
        if isinstance(command, MoveTo):
            # Positions are absolute, a move adds no segment
            continue
        elif isinstance(command, LineTo):
            contour.segments.append((command.start, command.end))
        elif isinstance(command, CubicCurveTo):
            samples = iter(flatten(command.curve, curve_steps))
            previous = next(samples)
            for point in samples:
                contour.segments.append((previous, point))
                previous = point
        elif isinstance(command, ClosePath):
            contour.closed = True
        else:
            kind = getattr(command, "kind", type(command).__name__)
            position = getattr(command, "start", Point2D(0.0, 0.0))
            raise UnsupportedSegmentError(kind, position)

    return contour
