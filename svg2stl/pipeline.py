"""
SVG to STL conversion pipeline.

Orchestrates a single conversion:
1. Load the SVG drawing
2. Work out the millimeter scale from the declared width unit
3. Generate the OpenSCAD model
4. Write it to a .scad file
5. Render the mesh with OpenSCAD
"""

import os
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .document import SvgDrawing, load_document
from .geometry.units import DEFAULT_DPI, scale_factor
from .renderer import OpenScadRenderer, RenderResult
from .scad.emitter import SolidEmitter
from .scad.statements import SolidDescription
from .utils import ensure_dir, get_logger

logger = get_logger("pipeline")


def default_output_path(input_path: Union[str, Path], suffix: str = ".stl") -> Path:
    """Input path with its .svg extension swapped for ``suffix``."""
    input_path = Path(input_path)
    if input_path.suffix.lower() == ".svg":
        return input_path.with_suffix(suffix)
    return input_path.with_name(input_path.name + suffix)


@dataclass
class ConversionOptions:
    """Options for one conversion run."""
    dpi: int = DEFAULT_DPI
    curve_steps: int = 10
    openscad_path: Optional[str] = None
    render_timeout: Optional[float] = 300.0
    scad_output: Optional[Path] = None  # keep the generated model here
    render: bool = True

    def validate(self) -> None:
        if self.dpi < 1:
            raise ValueError(f"dpi must be a positive integer, got {self.dpi}")
        if self.curve_steps < 1:
            raise ValueError(f"curve_steps must be a positive integer, got {self.curve_steps}")


@dataclass
class ConversionResult:
    """Result of a conversion."""
    input_path: Path
    output_path: Optional[Path]
    scale: float
    statement_count: int
    scad_path: Optional[Path] = None
    render_result: Optional[RenderResult] = None
    duration_seconds: float = 0.0


class SvgToStlConverter:
    """
    Converts SVG drawings into extruded STL meshes.

    Usage:
        converter = SvgToStlConverter(ConversionOptions(dpi=96))
        result = converter.convert("logo.svg")
    """

    def __init__(self, options: Optional[ConversionOptions] = None,
                 renderer: Optional[OpenScadRenderer] = None):
        self.options = options or ConversionOptions()
        self.options.validate()
        self.renderer = renderer or OpenScadRenderer(
            executable=self.options.openscad_path,
            timeout=self.options.render_timeout,
        )

    def describe(self, drawing: SvgDrawing) -> SolidDescription:
        """Generate the OpenSCAD model for a loaded drawing."""
        scale = scale_factor(drawing.unit_type, self.options.dpi)
        logger.info(f"Scale factor {scale:.6g} (unit {drawing.unit_type.value}, {self.options.dpi} dpi)")
        emitter = SolidEmitter(curve_steps=self.options.curve_steps)
        return emitter.emit(drawing.entities, scale)

    def write_scad(self, description: SolidDescription, path: Union[str, Path]) -> Path:
        """Write the model text to ``path``."""
        path = Path(path)
        ensure_dir(path.parent)
        path.write_text(description.to_scad(), encoding="utf-8")
        return path

    def convert(self, input_path: Union[str, Path],
                output_path: Union[str, Path, None] = None) -> ConversionResult:
        """
        Convert one SVG file.

        Args:
            input_path: SVG file to read
            output_path: Mesh file to write; defaults to the input name
                with a .stl extension

        Returns:
            ConversionResult describing what was produced
        """
        start = time.monotonic()
        input_path = Path(input_path)
        if not input_path.is_file():
            raise FileNotFoundError(f"Input file not found: {input_path}")
        output_path = Path(output_path) if output_path else default_output_path(input_path)

        drawing = load_document(input_path)
        description = self.describe(drawing)

        result = ConversionResult(
            input_path=input_path,
            output_path=output_path if self.options.render else None,
            scale=description.scale,
            statement_count=len(description),
        )

        if self.options.scad_output:
            scad_path = self.write_scad(description, self.options.scad_output)
            result.scad_path = scad_path
            logger.info(f"Model written to {scad_path}")
            if self.options.render:
                result.render_result = self._render(scad_path, output_path)
        elif self.options.render:
            fd, tmp = tempfile.mkstemp(suffix=".scad", prefix="svg2stl_")
            os.close(fd)
            scad_path = Path(tmp)
            try:
                self.write_scad(description, scad_path)
                result.render_result = self._render(scad_path, output_path)
            finally:
                scad_path.unlink(missing_ok=True)

        result.duration_seconds = time.monotonic() - start
        return result

    def _render(self, scad_path: Path, output_path: Path) -> RenderResult:
        ensure_dir(output_path.parent)
        logger.info(f"Rendering {output_path} with OpenSCAD")
        return self.renderer.render(scad_path, output_path)


def convert_svg(input_path: Union[str, Path],
                output_path: Union[str, Path, None] = None,
                dpi: int = DEFAULT_DPI,
                curve_steps: int = 10,
                **kwargs) -> ConversionResult:
    """Convenience function to convert an SVG file to STL."""
    options = ConversionOptions(dpi=dpi, curve_steps=curve_steps, **kwargs)
    return SvgToStlConverter(options).convert(input_path, output_path)
