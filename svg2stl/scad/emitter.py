"""
OpenSCAD model generation from drawing entities.

Each entity becomes one statement inside a single ``difference()``
block, scaled to millimeters and extruded to a fixed plate thickness.
"""

from importlib import resources
from typing import Iterable, Optional

from ..geometry.commands import Point2D
from ..geometry.contour import build_contour
from ..geometry.entities import CircleEntity, PathEntity, RectEntity
from ..utils import get_logger
from .statements import (
    CircleStatement,
    PolygonStatement,
    PolylineStatement,
    SolidDescription,
    SquareStatement,
)

logger = get_logger("scad.emitter")


def load_preamble() -> str:
    """Read the OpenSCAD helper library shipped with the package."""
    return resources.files(__package__).joinpath("lib.scad").read_text(encoding="utf-8")


class SolidEmitter:
    """
    Converts drawing entities into a SolidDescription.

    Usage:
        emitter = SolidEmitter(curve_steps=10)
        description = emitter.emit(entities, scale=25.4 / 96)
        scad_text = description.to_scad()
    """

    def __init__(self, curve_steps: int = 10, preamble: Optional[str] = None):
        """
        Initialize emitter.

        Args:
            curve_steps: Line segments generated per cubic curve
            preamble: OpenSCAD text placed before the model; defaults to
                the bundled helper library
        """
        if curve_steps < 1:
            raise ValueError(f"curve_steps must be a positive integer, got {curve_steps}")
        self.curve_steps = curve_steps
        self.preamble = load_preamble() if preamble is None else preamble

    def convert_entity(self, entity):
        """Return the statement for one entity, or None for unknown kinds."""
        if isinstance(entity, PathEntity):
            contour = build_contour(entity.commands, self.curve_steps)
            segments = tuple(contour.segments)
            if contour.closed:
                return PolygonStatement(segments)
            # Open outlines cannot be filled, subtract a thin stroke instead
            return PolylineStatement(segments)
        elif isinstance(entity, CircleEntity):
            return CircleStatement(Point2D(entity.cx, entity.cy), entity.r)
        elif isinstance(entity, RectEntity):
            return SquareStatement(Point2D(entity.x, entity.y), entity.width, entity.height)
        return None

    def emit(self, entities: Iterable, scale: float) -> SolidDescription:
        """
        Build the model for all entities in traversal order.

        Raises:
            UnsupportedSegmentError: If any path holds an unsupported
                segment; nothing is returned in that case
        """
        statements = []
        skipped = 0
        for entity in entities:
            statement = self.convert_entity(entity)
            if statement is None:
                skipped += 1
                logger.debug(f"Skipping unsupported entity {type(entity).__name__}")
                continue
            statements.append(statement)

        logger.debug(f"Emitted {len(statements)} statements ({skipped} entities skipped)")
        return SolidDescription(preamble=self.preamble, scale=scale, statements=statements)


def emit(entities: Iterable, scale: float, curve_steps: int = 10,
         preamble: Optional[str] = None) -> SolidDescription:
    """Convenience wrapper around SolidEmitter.emit."""
    return SolidEmitter(curve_steps=curve_steps, preamble=preamble).emit(entities, scale)
