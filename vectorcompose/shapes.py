"""2D primitive diagrams built on shapely geometries.

Each primitive is centred on its local origin and carries exact bounds:
ball bounds for circles, vertex bounds for everything straight-edged.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
import shapely
from shapely.geometry import LineString, Polygon, box
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry.base import BaseGeometry

from vectorcompose.core.diagram import Diagram
from vectorcompose.geometry.bounds import Bounds
from vectorcompose.geometry.vectors import PointLike, as_point, origin
from vectorcompose.models.style import Style

# Segments used to approximate the drawn circle; bounds stay exact.
_CIRCLE_QUAD_SEGS = 32


def from_geometry(geometry: BaseGeometry, style: Style | None = None) -> Diagram:
    """Wrap any shapely geometry; bounds come from its coordinates."""
    coords = shapely.get_coordinates(geometry)
    return Diagram.from_geometry(geometry, Bounds.from_points(coords, dim=2), style)


def polygon(points: Iterable[PointLike], style: Style | None = None) -> Diagram:
    pts = [tuple(as_point(p)) for p in points]
    if len(pts) < 3:
        raise ValueError(f"A polygon needs at least 3 vertices, got {len(pts)}")
    return from_geometry(Polygon(pts), style)


def rect(width: float, height: float, style: Style | None = None) -> Diagram:
    w, h = float(width) / 2, float(height) / 2
    return from_geometry(box(-w, -h, w, h), style)


def square(side: float, style: Style | None = None) -> Diagram:
    return rect(side, side, style)


def circle(radius: float, style: Style | None = None) -> Diagram:
    geom = ShapelyPoint(0.0, 0.0).buffer(float(radius), quad_segs=_CIRCLE_QUAD_SEGS)
    return Diagram.from_geometry(geom, Bounds.from_ball(origin(2), radius), style)


def regular_polygon(sides: int, side_length: float, style: Style | None = None) -> Diagram:
    """Regular n-gon with a horizontal bottom edge, centred on its circumcentre."""
    if sides < 3:
        raise ValueError(f"A regular polygon needs at least 3 sides, got {sides}")
    radius = side_length / (2 * np.sin(np.pi / sides))
    start = -np.pi / 2 - np.pi / sides
    angles = start + 2 * np.pi * np.arange(sides) / sides
    return polygon(np.column_stack([radius * np.cos(angles), radius * np.sin(angles)]), style)


def hrule(length: float, style: Style | None = None) -> Diagram:
    half = float(length) / 2
    return from_geometry(LineString([(-half, 0.0), (half, 0.0)]), style)


def vrule(length: float, style: Style | None = None) -> Diagram:
    half = float(length) / 2
    return from_geometry(LineString([(0.0, -half), (0.0, half)]), style)


def point_diagram(p: PointLike) -> Diagram:
    """Draws nothing; its bounds are the single point p."""
    return Diagram((), Bounds.from_points([p], dim=as_point(p).dim))
