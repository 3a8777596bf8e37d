"""
Geometry core.

Path commands, unit scaling, curve flattening and contour building for
2D drawings.
"""

from .commands import (
    Point2D,
    CubicCurve,
    MoveTo,
    LineTo,
    CubicCurveTo,
    QuadraticCurveTo,
    ArcTo,
    ClosePath,
    PathCommand,
)
from .units import (
    UnitType,
    MM_PER_INCH,
    DEFAULT_DPI,
    scale_factor,
    unit_type_from_length,
)
from .bezier import (
    CurveSamples,
    bezier_point,
    flatten,
)
from .contour import (
    Contour,
    Segment,
    UnsupportedSegmentError,
    build_contour,
)
from .entities import (
    PathEntity,
    CircleEntity,
    RectEntity,
    DrawingEntity,
)

__all__ = [
    # Commands
    "Point2D",
    "CubicCurve",
    "MoveTo",
    "LineTo",
    "CubicCurveTo",
    "QuadraticCurveTo",
    "ArcTo",
    "ClosePath",
    "PathCommand",
    # Units
    "UnitType",
    "MM_PER_INCH",
    "DEFAULT_DPI",
    "scale_factor",
    "unit_type_from_length",
    # Bezier
    "CurveSamples",
    "bezier_point",
    "flatten",
    # Contour
    "Contour",
    "Segment",
    "UnsupportedSegmentError",
    "build_contour",
    # Entities
    "PathEntity",
    "CircleEntity",
    "RectEntity",
    "DrawingEntity",
]
