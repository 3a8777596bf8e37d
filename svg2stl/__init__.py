"""svg2stl - extrude SVG drawings into printable STL plates."""

__version__ = "0.1.0"

from .geometry import UnsupportedSegmentError, scale_factor, flatten, build_contour
from .scad import SolidEmitter, SolidDescription, emit
from .pipeline import ConversionOptions, ConversionResult, SvgToStlConverter, convert_svg

__all__ = [
    "__version__",
    "UnsupportedSegmentError",
    "scale_factor",
    "flatten",
    "build_contour",
    "SolidEmitter",
    "SolidDescription",
    "emit",
    "ConversionOptions",
    "ConversionResult",
    "SvgToStlConverter",
    "convert_svg",
]
