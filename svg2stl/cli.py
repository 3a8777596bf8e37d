"""Command line entry point for svg2stl."""

from pathlib import Path
from typing import Optional
from xml.etree.ElementTree import ParseError

import click

from svg2stl import __version__
from svg2stl.config import get_settings
from svg2stl.utils import console, format_duration, setup_logging


@click.command()
@click.version_option(version=__version__, prog_name="svg2stl")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output_file", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.option("--dpi", type=click.IntRange(min=1), default=None,
              help="The DPI to use when scaling pixel units to millimeters.")
@click.option("--curve-steps", type=click.IntRange(min=1), default=None,
              help="How many segments to use for curved paths. Higher = smoother curves.")
@click.option("--openscad", "openscad_path", default=None, help="OpenSCAD executable")
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), default=None,
              help="Seconds to wait for OpenSCAD")
@click.option("--scad", "scad_path", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Also save the generated OpenSCAD model to this file")
@click.option("--scad-only", is_flag=True, help="Write the OpenSCAD model without rendering")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def cli(
    input_file: Path,
    output_file: Optional[Path],
    dpi: Optional[int],
    curve_steps: Optional[int],
    openscad_path: Optional[str],
    timeout: Optional[float],
    scad_path: Optional[Path],
    scad_only: bool,
    verbose: bool,
) -> None:
    """Convert an SVG drawing into an extruded STL plate.

    OUTPUT_FILE defaults to INPUT_FILE with a .stl extension.

    Example: svg2stl logo.svg logo.stl --dpi 72 --curve-steps 20
    """
    from svg2stl.geometry import UnsupportedSegmentError
    from svg2stl.pipeline import ConversionOptions, SvgToStlConverter, default_output_path
    from svg2stl.renderer import RendererError

    settings = get_settings()
    setup_logging("DEBUG" if verbose else settings.log_level)

    if scad_only and scad_path is None:
        scad_path = default_output_path(output_file or input_file, suffix=".scad")

    options = ConversionOptions(
        dpi=dpi or settings.dpi,
        curve_steps=curve_steps or settings.curve_steps,
        openscad_path=openscad_path or settings.openscad_path,
        render_timeout=timeout or settings.render_timeout,
        scad_output=scad_path,
        render=not scad_only,
    )

    try:
        converter = SvgToStlConverter(options)
        result = converter.convert(input_file, output_file)
    except UnsupportedSegmentError as e:
        console.print(f"[red]Unsupported drawing: {e}[/red]")
        raise SystemExit(1)
    except ParseError as e:
        console.print(f"[red]Malformed document {input_file}: {e}[/red]")
        raise SystemExit(1)
    except RendererError as e:
        console.print(f"[red]Rendering failed: {e}[/red]")
        raise SystemExit(1)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)

    console.print(f"[bold]{result.input_path.name}[/bold]")
    console.print(f"  Scale: {result.scale:.6g}")
    console.print(f"  Shapes: {result.statement_count}")
    if result.scad_path:
        console.print(f"  Model: {result.scad_path}")
    if result.output_path:
        console.print(f"  [green]Output: {result.output_path}[/green]")
    console.print(f"  [dim]Done in {format_duration(result.duration_seconds)}[/dim]")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
