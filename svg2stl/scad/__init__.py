"""
OpenSCAD output.

Statement objects for extruded outlines and the emitter that builds a
complete model from drawing entities.
"""

from .statements import (
    PolygonStatement,
    PolylineStatement,
    CircleStatement,
    SquareStatement,
    SolidDescription,
    EXTRUDE_HEIGHT,
    CIRCLE_FACETS,
)
from .emitter import (
    SolidEmitter,
    emit,
    load_preamble,
)

__all__ = [
    # Statements
    "PolygonStatement",
    "PolylineStatement",
    "CircleStatement",
    "SquareStatement",
    "SolidDescription",
    "EXTRUDE_HEIGHT",
    "CIRCLE_FACETS",
    # Emitter
    "SolidEmitter",
    "emit",
    "load_preamble",
]
