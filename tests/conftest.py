"""Shared test fixtures."""

from __future__ import annotations

import pytest

from vectorcompose import shapes
from vectorcompose.core.diagram import Diagram
from vectorcompose.geometry.bounds import Bounds, default_directions
from vectorcompose.geometry.vectors import Vector

# Loose enough for chains of float ops, tight enough to catch a wrong placement.
TOL = 1e-7

DIRECTIONS = default_directions(2)

SQUARE_CORNERS = [(-1.0, -1.0), (1.0, -1.0), (1.0, 1.0), (-1.0, 1.0)]


def placed_bounds(source: Diagram, result: Diagram, index: int) -> Bounds:
    """Bounds of ``source`` where it ended up as prim ``index`` of ``result``.

    Assumes ``source`` is a single-prim shape drawn at its own origin.
    """
    return source.get_bounds().translate(result.prims[index].offset)


def offsets(d: Diagram) -> list[Vector]:
    return [p.offset for p in d.prims]


@pytest.fixture
def unit_square() -> Diagram:
    return shapes.square(2.0)


@pytest.fixture
def disc() -> Diagram:
    return shapes.circle(1.0)


@pytest.fixture
def tall_rect() -> Diagram:
    return shapes.rect(1.0, 3.0)


@pytest.fixture
def square_bounds() -> Bounds:
    return Bounds.from_points(SQUARE_CORNERS)
