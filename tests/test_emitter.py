"""Tests for OpenSCAD model generation."""

import pytest

from svg2stl.document import path_commands
from svg2stl.geometry.commands import (
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    Point2D,
    QuadraticCurveTo,
)
from svg2stl.geometry.contour import UnsupportedSegmentError
from svg2stl.geometry.entities import CircleEntity, PathEntity, RectEntity
from svg2stl.scad.emitter import SolidEmitter, emit, load_preamble
from svg2stl.scad.statements import (
    CircleStatement,
    PolygonStatement,
    PolylineStatement,
    SolidDescription,
    SquareStatement,
)

P = Point2D


def triangle(close: bool = True) -> PathEntity:
    """Create a triangle path entity."""
    commands = [
        MoveTo(P(0, 0)),
        LineTo(P(0, 0), P(10, 0)),
        LineTo(P(10, 0), P(10, 10)),
        LineTo(P(10, 10), P(0, 0)),
    ]
    if close:
        commands.append(ClosePath(P(0, 0)))
    return PathEntity(commands)


class TestStatements:
    """Tests for statement rendering."""

    def test_polygon(self):
        """Test polygon text."""
        statement = PolygonStatement(((P(0, 0), P(10, 0)), (P(10, 0), P(10, 10))))
        assert statement.to_scad() == (
            "polygon(points=flatten([[[0, 0], [10, 0]], [[10, 0], [10, 10]]]), convexity=10);"
        )

    def test_empty_polygon(self):
        """Test a polygon with no segments."""
        assert PolygonStatement(()).to_scad() == "polygon(points=flatten([]), convexity=10);"

    def test_polyline(self):
        """Test polyline text."""
        statement = PolylineStatement(((P(0, 0), P(1.5, -2.25)),))
        assert statement.to_scad() == "polyline(flatten([[[0, 0], [1.5, -2.25]]]), 1);"

    def test_circle(self):
        """Test circle text."""
        statement = CircleStatement(P(5, 6), 2.5)
        assert statement.to_scad() == "translate([5, 6, 0]) circle(2.5, $fn=30);"

    def test_square(self):
        """Test square text."""
        statement = SquareStatement(P(1, 2), 30, 40)
        assert statement.to_scad() == "translate([1, 2, 0]) square([30, 40]);"

    def test_structural_equality(self):
        """Test statements compare by value."""
        assert CircleStatement(P(1, 1), 2) == CircleStatement(P(1, 1), 2)
        assert SquareStatement(P(0, 0), 1, 1) != SquareStatement(P(0, 0), 1, 2)


class TestSolidDescription:
    """Tests for SolidDescription."""

    def test_wrapper(self):
        """Test scale, extrusion and difference wrapping."""
        description = SolidDescription(
            preamble="// lib",
            scale=1.0,
            statements=[SquareStatement(P(0, 0), 10, 10)],
        )
        assert description.to_scad() == (
            "// lib\n"
            "scale([1, 1, 1]) { linear_extrude(height=1.6, center=false) { difference() {\n"
            "translate([0, 0, 0]) square([10, 10]);\n"
            "} } }\n"
        )

    def test_pixel_scale(self):
        """Test the scale keeps full precision."""
        description = SolidDescription(preamble="", scale=25.4 / 96)
        text = description.to_scad()
        scale_line = next(line for line in text.splitlines() if line.startswith("scale(["))
        value = scale_line[len("scale(["):].split(",")[0]
        assert float(value) == 25.4 / 96

    def test_tiny_coordinates_kept(self):
        """Test sub-micron coordinates are not rounded away."""
        statement = PolygonStatement((
            (P(0, 0), P(0.0000004, 0)),
            (P(0.0000004, 0), P(0, 0.0000004)),
            (P(0, 0.0000004), P(0, 0)),
        ))
        assert statement.to_scad() == (
            "polygon(points=flatten([[[0, 0], [4e-07, 0]], [[4e-07, 0], [0, 4e-07]], "
            "[[0, 4e-07], [0, 0]]]), convexity=10);"
        )

    def test_len(self):
        """Test statement count."""
        description = SolidDescription(preamble="", scale=1.0,
                                       statements=[CircleStatement(P(0, 0), 1)] * 3)
        assert len(description) == 3


class TestLoadPreamble:
    """Tests for the bundled helper library."""

    def test_defines_helpers(self):
        """Test the preamble defines flatten and polyline."""
        preamble = load_preamble()
        assert "function flatten(" in preamble
        assert "module polyline(" in preamble


class TestSolidEmitter:
    """Tests for SolidEmitter."""

    @pytest.fixture
    def emitter(self):
        """Create an emitter without preamble."""
        return SolidEmitter(curve_steps=10, preamble="")

    def test_default_preamble(self):
        """Test the bundled preamble is used by default."""
        assert SolidEmitter().preamble == load_preamble()

    def test_invalid_curve_steps(self):
        """Test curve steps must be positive."""
        with pytest.raises(ValueError):
            SolidEmitter(curve_steps=0)

    def test_closed_path_becomes_polygon(self, emitter):
        """Test closed paths are filled."""
        description = emitter.emit([triangle()], scale=1.0)
        assert description.statements == [
            PolygonStatement((
                (P(0, 0), P(10, 0)),
                (P(10, 0), P(10, 10)),
                (P(10, 10), P(0, 0)),
            ))
        ]

    def test_open_path_becomes_polyline(self, emitter):
        """Test open paths become width 1 strokes."""
        description = emitter.emit([triangle(close=False)], scale=1.0)
        statement = description.statements[0]
        assert isinstance(statement, PolylineStatement)
        assert statement.width == 1
        assert len(statement.segments) == 3

    def test_curve_resolution(self):
        """Test curve_steps controls segments per curve."""
        path = PathEntity([
            MoveTo(P(0, 0)),
            CubicCurveTo(P(0, 0), P(0, 10), P(10, 10), P(10, 0)),
            ClosePath(P(10, 0)),
        ])
        coarse = SolidEmitter(curve_steps=4, preamble="").emit([path], 1.0)
        fine = SolidEmitter(curve_steps=24, preamble="").emit([path], 1.0)
        assert len(coarse.statements[0].segments) == 4
        assert len(fine.statements[0].segments) == 24

    def test_path_back_to_start_without_close(self, emitter):
        """Test geometry returning to its start is still stroked when not closed."""
        path = PathEntity(path_commands("M0 0 L10 0 L10 10 L0 0"))
        description = emitter.emit([path], scale=1.0)
        assert isinstance(description.statements[0], PolylineStatement)

        closed = PathEntity(path_commands("M0 0 L10 0 L10 10 Z"))
        assert isinstance(emitter.emit([closed], 1.0).statements[0], PolygonStatement)

    def test_circle_and_rect(self, emitter):
        """Test circle and rectangle entities."""
        description = emitter.emit(
            [CircleEntity(5, 6, 2), RectEntity(1, 2, 30, 40)], scale=1.0
        )
        assert description.statements == [
            CircleStatement(P(5, 6), 2, facets=30),
            SquareStatement(P(1, 2), 30, 40),
        ]

    def test_order_preserved(self, emitter):
        """Test statements follow entity order."""
        entities = [RectEntity(0, 0, 50, 50), CircleEntity(25, 25, 5), triangle()]
        description = emitter.emit(entities, scale=1.0)
        kinds = [type(s) for s in description.statements]
        assert kinds == [SquareStatement, CircleStatement, PolygonStatement]

        text = description.to_scad()
        assert text.index("square(") < text.index("circle(") < text.index("polygon(")

    def test_unknown_entities_skipped(self, emitter):
        """Test unrecognised entities are ignored."""
        description = emitter.emit(["text", None, RectEntity(0, 0, 1, 1)], scale=1.0)
        assert len(description) == 1

    def test_unsupported_segment_aborts(self, emitter):
        """Test an unsupported segment fails the whole model."""
        bad = PathEntity([MoveTo(P(0, 0)), QuadraticCurveTo(P(0, 0), P(5, 5), P(10, 0))])
        with pytest.raises(UnsupportedSegmentError):
            emitter.emit([RectEntity(0, 0, 10, 10), bad, triangle()], scale=1.0)

    def test_scale_passed_through(self, emitter):
        """Test the scale lands on the description."""
        description = emitter.emit([], scale=0.5)
        assert description.scale == 0.5
        assert "scale([0.5, 0.5, 1])" in description.to_scad()

    def test_emit_function(self):
        """Test the convenience wrapper."""
        description = emit([triangle()], scale=1.0, curve_steps=5, preamble="// x")
        assert description.preamble == "// x"
        assert isinstance(description.statements[0], PolygonStatement)


class TestTriangleScenario:
    """Millimeter triangle converted end to end without rendering."""

    def test_triangle_text(self):
        """Test the generated polygon keeps all six points."""
        description = emit([triangle()], scale=1.0, preamble="")
        lines = description.to_scad().splitlines()

        polygons = [line for line in lines if line.startswith("polygon(")]
        assert polygons == [
            "polygon(points=flatten([[[0, 0], [10, 0]], [[10, 0], [10, 10]], "
            "[[10, 10], [0, 0]]]), convexity=10);"
        ]
        assert polygons[0].count("[0, 0]") == 2
        assert "polyline(" not in description.to_scad()
