"""OpenSCAD renderer.

Runs the ``openscad`` command line to turn a generated model into a mesh
file. Uses subprocess.run with an argument list (not shell).
"""

import os
import shutil
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from .utils import get_logger

logger = get_logger("renderer")


class RendererError(Exception):
    """Raised when OpenSCAD fails to produce the output file."""

    def __init__(self, message: str, return_code: Optional[int] = None, stderr: str = ""):
        super().__init__(message)
        self.return_code = return_code
        self.stderr = stderr


class RendererNotFoundError(RendererError):
    """Raised when the OpenSCAD executable cannot be launched."""
    pass


class RendererTimeoutError(RendererError):
    """Raised when OpenSCAD does not finish in time."""
    pass


@dataclass
class RenderResult:
    """Result of an OpenSCAD run."""
    output_path: Path
    return_code: int = 0
    stdout: str = ""
    stderr: str = ""
    duration_seconds: float = 0.0


OPENSCAD_PATHS = [
    "/Applications/OpenSCAD.app/Contents/MacOS/OpenSCAD",
    "/usr/bin/openscad",
    "/usr/local/bin/openscad",
    "/snap/bin/openscad",
    "openscad",
]


def find_openscad() -> Optional[str]:
    """Find the OpenSCAD executable, or None if it is not installed."""
    for path in OPENSCAD_PATHS:
        if os.path.isabs(path) and os.path.exists(path):
            return path
        result = shutil.which(path)
        if result:
            return result
    return None


class OpenScadRenderer:
    """
    Renders .scad files to meshes with OpenSCAD.

    Usage:
        renderer = OpenScadRenderer()
        result = renderer.render("model.scad", "model.stl")
    """

    def __init__(self, executable: Optional[str] = None, timeout: Optional[float] = 300.0):
        self.executable = executable or find_openscad() or "openscad"
        self.timeout = timeout

    def build_command(self, scad_path: Union[str, Path], output_path: Union[str, Path]) -> List[str]:
        """Command line for one render."""
        return [self.executable, "-o", str(output_path), str(scad_path)]

    def render(self, scad_path: Union[str, Path], output_path: Union[str, Path]) -> RenderResult:
        """
        Render ``scad_path`` into ``output_path``.

        Raises:
            RendererNotFoundError: OpenSCAD could not be started
            RendererTimeoutError: OpenSCAD ran longer than the timeout
            RendererError: OpenSCAD exited with a non-zero status
        """
        output_path = Path(output_path)
        cmd = self.build_command(scad_path, output_path)
        logger.debug(f"Running: {' '.join(cmd)}")

        start = time.monotonic()
        try:
            completed = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise RendererNotFoundError(f"OpenSCAD not found at: {self.executable}") from e
        except subprocess.TimeoutExpired as e:
            raise RendererTimeoutError(
                f"OpenSCAD timed out after {self.timeout} seconds"
            ) from e
        duration = time.monotonic() - start

        if completed.returncode != 0:
            logger.error(f"OpenSCAD exited with status {completed.returncode}")
            raise RendererError(
                f"OpenSCAD exited with status {completed.returncode}: "
                f"{completed.stderr.strip() or 'no output'}",
                return_code=completed.returncode,
                stderr=completed.stderr,
            )

        return RenderResult(
            output_path=output_path,
            return_code=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
            duration_seconds=duration,
        )
