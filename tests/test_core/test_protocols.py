"""Tests for the composition protocol helpers and alignment."""

from __future__ import annotations

import pytest

from vectorcompose.core.align import align, align_b, align_by, align_l, align_r, align_t, center, center_xy
from vectorcompose.core.diagram import Diagram
from vectorcompose.core.protocols import (
    Juxtaposable,
    boundary,
    boundary_v,
    combine_all,
    move_to,
    translate,
)
from vectorcompose.core.trail import Path
from vectorcompose.errors import EmptyInputError
from vectorcompose.geometry.bounds import Bounds
from vectorcompose.geometry.vectors import Point, Vector
from vectorcompose import shapes


def test_diagrams_paths_and_bounds_are_juxtaposable(unit_square, square_bounds):
    assert isinstance(unit_square, Juxtaposable)
    assert isinstance(square_bounds, Juxtaposable)
    assert isinstance(Path.from_vertices([(0, 0), (1, 1)]), Juxtaposable)


def test_boundary_helpers(unit_square):
    assert boundary_v((1, 0), unit_square) == Vector(1, 0)
    assert boundary((0, 1), unit_square) == Point(0, 1)


def test_translate_moves_object_not_frame(unit_square):
    moved = translate((2, 0), unit_square)
    assert moved.prims[0].offset == Vector(2, 0)
    assert boundary((1, 0), moved).isclose(Point(3, 0))


def test_move_to_places_origin_on_point(disc):
    moved = move_to((3, -1), disc)
    assert moved.prims[0].offset == Vector(3, -1)


def test_move_to_works_on_points():
    assert move_to((1, 1), Point(2, 0)) == Point(3, 1)


def test_combine_all_folds_in_order(unit_square, disc):
    d = combine_all([unit_square, disc])
    assert d.prims == unit_square.prims + disc.prims


def test_combine_all_empty_needs_identity():
    with pytest.raises(EmptyInputError):
        combine_all([])
    assert combine_all([], Diagram.empty()).prims == ()


def test_combine_all_with_identity(unit_square):
    d = combine_all([unit_square], Diagram.empty())
    assert d.prims == unit_square.prims
    assert d.get_bounds().isclose(unit_square.get_bounds())


class TestAlign:
    def test_align_puts_origin_on_boundary(self, unit_square):
        right = align((1, 0), unit_square)
        assert right.prims[0].offset == Vector(-1, 0)
        assert right.get_bounds().boundary_v((1, 0)).isclose(Vector(0, 0))
        assert right.get_bounds().boundary_v((-1, 0)).isclose(Vector(-2, 0))

    def test_2d_helpers(self, tall_rect):
        assert align_l(tall_rect).prims[0].offset.isclose(Vector(0.5, 0))
        assert align_r(tall_rect).prims[0].offset.isclose(Vector(-0.5, 0))
        assert align_t(tall_rect).prims[0].offset.isclose(Vector(0, -1.5))
        assert align_b(tall_rect).prims[0].offset.isclose(Vector(0, 1.5))

    def test_align_by_interpolates(self, unit_square):
        shifted = translate((4, 0), unit_square)
        assert align_by((1, 0), -1, shifted).get_bounds().boundary_v((-1, 0)).isclose(Vector(0, 0))
        assert align_by((1, 0), 1, shifted).get_bounds().boundary_v((1, 0)).isclose(Vector(0, 0))
        assert align_by((1, 0), 0.5, shifted).prims[0].offset.isclose(Vector(-0.5, 0))

    def test_center_recentres(self, unit_square):
        shifted = translate((4, -2), unit_square)
        assert center((1, 0), shifted).prims[0].offset.isclose(Vector(0, -2))
        assert center_xy(shifted).prims[0].offset.isclose(Vector(0, 0))

    def test_align_bounds_directly(self, square_bounds):
        aligned = align((0, 1), square_bounds)
        assert isinstance(aligned, Bounds)
        assert aligned.boundary_v((0, -1)).isclose(Vector(0, -2))

    def test_align_empty_is_noop(self):
        e = Diagram.empty()
        assert align((1, 0), e) == e


def test_shapes_start_centred():
    for d in (shapes.square(2), shapes.circle(1), shapes.rect(3, 1)):
        assert center_xy(d).prims[0].offset.isclose(Vector(0, 0))
