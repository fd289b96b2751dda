"""Affine vectors/points and support-function bounds."""

from vectorcompose.geometry.bounds import Bounds, default_directions
from vectorcompose.geometry.vectors import (
    Point,
    Vector,
    as_point,
    as_vector,
    centroid,
    origin,
    unit_x,
    unit_y,
    with_length,
    zero,
)

__all__ = [
    "Bounds",
    "Point",
    "Vector",
    "as_point",
    "as_vector",
    "centroid",
    "default_directions",
    "origin",
    "unit_x",
    "unit_y",
    "with_length",
    "zero",
]
