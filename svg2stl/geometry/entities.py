"""Drawing entities recognised by the converter."""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from .commands import PathCommand


@dataclass(frozen=True)
class PathEntity:
    """A path element with its commands in absolute coordinates."""
    commands: List[PathCommand] = field(default_factory=list)
    element_id: Optional[str] = None


@dataclass(frozen=True)
class CircleEntity:
    cx: float
    cy: float
    r: float
    element_id: Optional[str] = None


@dataclass(frozen=True)
class RectEntity:
    x: float
    y: float
    width: float
    height: float
    element_id: Optional[str] = None


DrawingEntity = Union[PathEntity, CircleEntity, RectEntity]
