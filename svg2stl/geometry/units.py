"""Drawing unit to millimeter scaling."""

import re
from enum import Enum
from typing import Optional

MM_PER_INCH = 25.4
DEFAULT_DPI = 96

_UNIT_SUFFIX = re.compile(r"([a-z%]*)\s*$", re.IGNORECASE)


class UnitType(str, Enum):
    """Unit declared by a drawing."""
    MILLIMETER = "mm"
    OTHER = "other"  # assumed to be pixels


def unit_type_from_length(length: Optional[str]) -> UnitType:
    """Classify a declared length such as ``"210mm"`` or ``"800"``."""
    if not length:
        return UnitType.OTHER
    suffix = _UNIT_SUFFIX.search(length.strip()).group(1).lower()
    if suffix == "mm":
        return UnitType.MILLIMETER
    return UnitType.OTHER


def scale_factor(unit_type: UnitType, dpi: int = DEFAULT_DPI) -> float:
    """
    Scale from drawing units to millimeters.

    Drawings already in millimeters are not scaled; anything else is
    treated as pixels at the given DPI.
    """
    # TODO: convert cm/in/pt declared widths instead of treating them as pixels
    if unit_type == UnitType.MILLIMETER:
        return 1.0
    return MM_PER_INCH / dpi
