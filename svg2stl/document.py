"""
SVG document loading.

Reads an SVG file with svgpathtools and exposes the drawing as a list
of path, circle and rectangle entities in document order.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Union

from svgpathtools import Arc, CubicBezier, Document, Line, QuadraticBezier, parse_path

from .geometry.commands import (
    ArcTo,
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    Point2D,
    QuadraticCurveTo,
)
from .geometry.entities import CircleEntity, DrawingEntity, PathEntity, RectEntity
from .geometry.units import UnitType, unit_type_from_length
from .utils import get_logger

logger = get_logger("document")

_NUMBER = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")
_COORDINATE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_SUBPATH = re.compile(r"[Mm][^Mm]*")
_CLOSE = re.compile(r"[Zz]")


def _local_name(tag) -> str:
    """Strip the XML namespace from an element tag."""
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def parse_length(value: Optional[str], default: float = 0.0) -> float:
    """Numeric part of an SVG length ("12.5mm" -> 12.5)."""
    if value is None:
        return default
    match = _NUMBER.match(value)
    if not match:
        return default
    return float(match.group(1))


def segment_to_command(segment) -> PathCommand:
    """Convert one svgpathtools segment into a path command."""
    start = Point2D.from_complex(segment.start)
    end = Point2D.from_complex(segment.end)
    if isinstance(segment, Line):
        return LineTo(start, end)
    elif isinstance(segment, CubicBezier):
        return CubicCurveTo(
            start,
            Point2D.from_complex(segment.control1),
            Point2D.from_complex(segment.control2),
            end,
        )
    elif isinstance(segment, QuadraticBezier):
        return QuadraticCurveTo(start, Point2D.from_complex(segment.control), end)
    elif isinstance(segment, Arc):
        return ArcTo(
            start,
            Point2D.from_complex(segment.radius),
            float(segment.rotation),
            bool(segment.large_arc),
            bool(segment.sweep),
            end,
        )
    raise TypeError(f"Unknown svgpathtools segment: {type(segment).__name__}")


def _subpath_start(chunk: str, current: complex) -> complex:
    """Target of the moveto that opens ``chunk``."""
    numbers = _COORDINATE.findall(chunk, 1)
    if len(numbers) < 2:
        return current
    target = complex(float(numbers[0]), float(numbers[1]))
    return target if chunk[0] == "M" else current + target


def path_commands(d: str) -> List[PathCommand]:
    """
    Parse SVG path data into absolute commands.

    Each subpath (one moveto and what follows it) starts with a MoveTo
    and ends with a ClosePath when its data contains a close command.
    Returning to the start point without ``Z`` leaves the subpath open.
    """
    commands: List[PathCommand] = []
    current = 0j
    for chunk in _SUBPATH.findall(d):
        path = parse_path(chunk, current_pos=current)
        closed = _CLOSE.search(chunk) is not None

        if len(path) == 0:
            current = _subpath_start(chunk, current)
            continue

        start = path.start
        commands.append(MoveTo(Point2D.from_complex(start)))
        commands.extend(segment_to_command(segment) for segment in path)
        if closed:
            commands.append(ClosePath(Point2D.from_complex(start)))

        # After a trailing close the pen is back at the subpath start
        current = start if chunk.rstrip()[-1] in "Zz" else path.end
    return commands


@dataclass
class SvgDrawing:
    """A loaded SVG drawing."""
    path: Optional[Path]
    width: Optional[str]
    height: Optional[str]
    entities: List[DrawingEntity] = field(default_factory=list)

    @property
    def unit_type(self) -> UnitType:
        return unit_type_from_length(self.width)

    def __iter__(self) -> Iterator[DrawingEntity]:
        return iter(self.entities)

    def __len__(self) -> int:
        return len(self.entities)


def iter_entities(root) -> Iterator[DrawingEntity]:
    """Walk an SVG element tree depth-first, in document order."""
    for element in root.iter():
        name = _local_name(element.tag)
        element_id = element.get("id")
        if name == "path":
            yield PathEntity(path_commands(element.get("d", "")), element_id)
        elif name == "circle":
            yield CircleEntity(
                parse_length(element.get("cx")),
                parse_length(element.get("cy")),
                parse_length(element.get("r")),
                element_id,
            )
        elif name == "rect":
            yield RectEntity(
                parse_length(element.get("x")),
                parse_length(element.get("y")),
                parse_length(element.get("width")),
                parse_length(element.get("height")),
                element_id,
            )


def load_document(filepath: Union[str, Path]) -> SvgDrawing:
    """
    Load an SVG file.

    Args:
        filepath: Path to the SVG file

    Returns:
        SvgDrawing with entities in document order
    """
    filepath = Path(filepath)
    doc = Document(str(filepath))
    root = doc.tree.getroot()

    drawing = SvgDrawing(
        path=filepath,
        width=root.get("width"),
        height=root.get("height"),
        entities=list(iter_entities(root)),
    )
    logger.info(f"Loaded {filepath.name}: {len(drawing)} entities, width={drawing.width}")
    return drawing
