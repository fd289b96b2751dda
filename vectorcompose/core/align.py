"""Alignment — move an object's local origin onto (or between) its boundaries."""

from __future__ import annotations

from vectorcompose.core.protocols import J, boundary_v
from vectorcompose.geometry.vectors import VectorLike, as_vector, unit_x, unit_y


def align(v: VectorLike, a: J) -> J:
    """Put the local origin of ``a`` on its own boundary in direction v."""
    return a.move_origin_by(boundary_v(v, a))


def align_by(v: VectorLike, d: float, a: J) -> J:
    """Interpolate the origin between the -v boundary (d = -1) and the v boundary (d = 1)."""
    v = as_vector(v)
    bounds = a.get_bounds()
    back = bounds.boundary_v(-v)
    front = bounds.boundary_v(v)
    return a.move_origin_by(back + (front - back) * ((float(d) + 1.0) / 2.0))


def center(v: VectorLike, a: J) -> J:
    """Centre the origin between the v and -v boundaries."""
    return align_by(v, 0.0, a)


# 2D helpers. The y axis points up.


def align_l(a: J) -> J:
    return align(-unit_x(), a)


def align_r(a: J) -> J:
    return align(unit_x(), a)


def align_t(a: J) -> J:
    return align(unit_y(), a)


def align_b(a: J) -> J:
    return align(-unit_y(), a)


def center_x(a: J) -> J:
    return center(unit_x(), a)


def center_y(a: J) -> J:
    return center(unit_y(), a)


def center_xy(a: J) -> J:
    return center_x(center_y(a))
