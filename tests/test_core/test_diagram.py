"""Tests for Diagram and Prim."""

from __future__ import annotations

import pytest
from pydantic import ValidationError
from shapely.geometry import Point as ShapelyPoint

from vectorcompose.core.diagram import Diagram
from vectorcompose.errors import DimensionMismatchError
from vectorcompose.geometry.bounds import Bounds
from vectorcompose.geometry.vectors import Vector
from vectorcompose.models.style import Style


def test_empty_diagram():
    e = Diagram.empty()
    assert not e.has_content
    assert e.get_bounds().is_empty
    assert e.dim == 2
    assert Diagram.empty(3).dim == 3


def test_move_origin_shifts_content_and_bounds(unit_square):
    moved = unit_square.move_origin_by((1, 0))
    assert moved.prims[0].offset == Vector(-1, 0)
    assert moved.get_bounds().boundary_v((1, 0)).isclose(Vector(0, 0))
    # input untouched
    assert unit_square.prims[0].offset == Vector(0, 0)


def test_placed_geometry(unit_square):
    moved = unit_square.translate((3, 1))
    assert moved.geometries()[0].bounds == pytest.approx((2.0, 0.0, 4.0, 2.0))


def test_set_bounds_keeps_content(unit_square, disc):
    swapped = unit_square.set_bounds(disc.get_bounds())
    assert swapped.prims == unit_square.prims
    assert swapped.get_bounds() is disc.get_bounds()


def test_set_bounds_dimension_checked(unit_square):
    with pytest.raises(DimensionMismatchError):
        unit_square.set_bounds(Bounds.empty(3))


def test_combine_superposes_in_order(unit_square, disc):
    both = unit_square.combine(disc.translate((5, 0)))
    assert len(both.prims) == 2
    assert both.prims[0].geometry.equals(unit_square.prims[0].geometry)
    assert both.get_bounds().boundary_v((1, 0)).isclose(Vector(6, 0))
    assert both.get_bounds().boundary_v((-1, 0)).isclose(Vector(-1, 0))


def test_combine_dimension_checked(unit_square):
    with pytest.raises(DimensionMismatchError):
        unit_square.combine(Diagram.empty(3))


def test_with_style_applies_to_all_prims(unit_square, disc):
    styled = unit_square.combine(disc).with_style(fill="red", stroke=None)
    assert all(p.style.fill == "red" and p.style.stroke is None for p in styled.prims)
    assert unit_square.prims[0].style.fill is None


def test_style_validation():
    with pytest.raises(ValidationError):
        Style(opacity=2.0)
    with pytest.raises(ValidationError):
        Style(stroke_width=-1)


def test_with_style_validates_updates(unit_square):
    with pytest.raises(ValidationError):
        unit_square.with_style(opacity=5.0)
    with pytest.raises(ValidationError):
        unit_square.with_style(stroke_width=-2)


def test_placed_geometry_keeps_z_offset():
    d = Diagram.from_geometry(ShapelyPoint(0, 0, 0), Bounds.from_points([(0, 0, 0)]))
    placed = d.translate((1, 2, 3)).geometries()[0]
    assert (placed.x, placed.y, placed.z) == pytest.approx((1.0, 2.0, 3.0))
