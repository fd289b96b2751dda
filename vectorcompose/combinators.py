"""Combinators — place boundable objects relative to each other.

All placement is computed from bounds alone. Every function returns a new
object; the local origin of each result is documented per function.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from itertools import chain, repeat

from vectorcompose.core.align import align
from vectorcompose.core.diagram import Diagram
from vectorcompose.core.protocols import (
    Boundable,
    J,
    boundary,
    boundary_v,
    combine_all,
    get_bounds,
    move_to,
)
from vectorcompose.core.trail import Path, Trail, path_vertices, trail_vertices
from vectorcompose.geometry.bounds import Bounds
from vectorcompose.geometry.vectors import (
    PointLike,
    VectorLike,
    as_vector,
    origin,
    unit_x,
    unit_y,
    with_length,
    zero,
)
from vectorcompose.options import CatMethod, CatOptions

logger = logging.getLogger(__name__)


def _identity(empty: J | None, dim: int) -> J:
    return empty if empty is not None else Diagram.empty(dim)


# ------------------------------------------------------------
# Working with bounds
# ------------------------------------------------------------


def with_bounds(ref: Boundable, target: Diagram) -> Diagram:
    """Give ``target`` the bounds of ``ref``; what ``target`` draws is unchanged."""
    return target.set_bounds(get_bounds(ref))


def phantom(ref: Boundable) -> Diagram:
    """A diagram with ``ref``'s bounds that draws nothing."""
    return Diagram((), get_bounds(ref))


def pad(factor: float, d: Diagram) -> Diagram:
    """Scale the bounds of ``d`` by ``factor`` about its local origin.

    Content is untouched. Because the scaling is about the local origin, an
    off-centre origin gives uneven padding; centre the origin first if that
    matters.
    """
    return d.set_bounds(d.get_bounds().scale(factor))


def strut(v: VectorLike) -> Diagram:
    """Invisible spacer: the bounds of a segment along v, centred on the origin."""
    v = as_vector(v)
    return phantom(Bounds.from_segment(v).translate(v * -0.5))


# ------------------------------------------------------------
# Combining two objects
# ------------------------------------------------------------


def beside(v: VectorLike, a: J, b: J) -> J:
    """Place ``b`` next to ``a`` along v so their bounds just touch.

    The vector v points from ``a``'s origin towards ``b``'s. The result keeps
    ``a``'s local origin. For a fixed v this is associative, and the empty
    object is a right identity only: ``beside(v, empty, b) == align(-v, b)``.
    """
    v = as_vector(v)
    shift = -boundary_v(v, a) + boundary_v(-v, b)
    return a.combine(b.move_origin_by(shift))


def beside_bounds(region: Boundable, v: VectorLike, a: J) -> J:
    """Place ``a`` against ``region`` in direction v.

    The result's origin is the origin of the frame ``region`` is expressed in.
    """
    v = as_vector(v)
    bounds = get_bounds(region)
    return align(-v, a).move_origin_by(origin(bounds.dim) - boundary(v, bounds))


def atop(a: J, b: J) -> J:
    """Superpose ``a`` on ``b`` without moving either."""
    return a.combine(b)


def hbeside(a: J, b: J) -> J:
    """``b`` to the right of ``a``."""
    return beside(unit_x(), a, b)


def vbeside(a: J, b: J) -> J:
    """``b`` below ``a``."""
    return beside(-unit_y(), a, b)


# ------------------------------------------------------------
# Combining multiple objects
# ------------------------------------------------------------


def appends(base: J, attachments: Iterable[tuple[VectorLike, J]]) -> J:
    """Attach each object beside ``base`` in its own direction.

    Every attachment is placed against the bounds of ``base`` alone, never
    against earlier attachments, so this is not iterated ``beside``.
    """
    bounds = base.get_bounds()
    placed = [beside_bounds(bounds, v, a) for v, a in attachments]
    logger.debug("appends: %d attachments", len(placed))
    return combine_all(placed, base)


def position(pairs: Iterable[tuple[PointLike, J]], empty: J | None = None, dim: int = 2) -> J:
    """Move each object's origin to its point, then superpose in input order."""
    placed = [move_to(p, a) for p, a in pairs]
    if not placed:
        return _identity(empty, dim)
    return combine_all(placed, empty)


def decorate_trail(trail: Trail, objects: Iterable[J], empty: J | None = None) -> J:
    """Put one object at each vertex of ``trail``, starting at the origin.

    Extra vertices or extra objects are dropped.
    """
    items = list(objects)
    pairs = list(zip(trail_vertices(origin(trail.dim), trail), items))
    n_vertices = len(trail) + 1
    if n_vertices != len(items):
        logger.debug(
            "decorate_trail: %d vertices, %d objects; placing %d",
            n_vertices,
            len(items),
            len(pairs),
        )
    return position(pairs, empty, trail.dim)


def decorate_path(path: Path, objects: Iterable[J], empty: J | None = None) -> J:
    """Like decorate_trail, over the vertices of every trail of ``path`` in turn."""
    items = list(objects)
    vertices = list(chain.from_iterable(path_vertices(path)))
    pairs = list(zip(vertices, items))
    if len(vertices) != len(items):
        logger.debug(
            "decorate_path: %d vertices, %d objects; placing %d",
            len(vertices),
            len(items),
            len(pairs),
        )
    return position(pairs, empty, path.dim)


def cat(v: VectorLike, objects: Iterable[J], empty: J | None = None) -> J:
    """Line objects up along v with touching bounds; origin is the first object's."""
    return cat_(v, CatOptions.default(), objects, empty)


def cat_(v: VectorLike, opts: CatOptions, objects: Iterable[J], empty: J | None = None) -> J:
    """Catenate with explicit spacing options.

    CAT keeps a uniform ``separation`` between successive boundaries.
    DISTRIB keeps a uniform ``separation`` between successive local origins,
    regardless of size, so objects may overlap. Distributing with zero
    separation is plain superposition.
    """
    v = as_vector(v)
    items: Sequence[J] = list(objects)

    if opts.method is CatMethod.DISTRIB:
        if len(items) < 2:
            return items[0] if items else _identity(empty, v.dim)
        step = with_length(opts.separation, v)
        trail = Trail.from_offsets(repeat(step, len(items)), dim=v.dim)
        logger.debug("cat_: distributing %d objects %.4g apart", len(items), opts.separation)
        return decorate_trail(trail, items, empty)

    if not items:
        return _identity(empty, v.dim)
    if len(items) == 1:
        return items[0]

    gap = with_length(opts.separation, -v)
    head, *tail = items
    line = [head] + [align(-v, d) for d in tail]
    # Each object sits past the v boundary of every object before it, so its
    # origin moves by the running sum of those steps.
    shift = zero(v.dim)
    placed = [head]
    for prev, d in zip(line, line[1:]):
        shift = shift + gap + (origin(v.dim) - boundary(v, prev))
        placed.append(d.move_origin_by(shift))
    logger.debug("cat_: catenated %d objects, separation %.4g", len(items), opts.separation)
    return combine_all(placed)


def hcat(objects: Iterable[J], empty: J | None = None) -> J:
    """Left to right."""
    return cat(unit_x(), objects, empty)


def vcat(objects: Iterable[J], empty: J | None = None) -> J:
    """Top to bottom."""
    return cat(-unit_y(), objects, empty)


def hcat_sep(separation: float, objects: Iterable[J], empty: J | None = None) -> J:
    return cat_(unit_x(), CatOptions(separation=separation), objects, empty)


def vcat_sep(separation: float, objects: Iterable[J], empty: J | None = None) -> J:
    return cat_(-unit_y(), CatOptions(separation=separation), objects, empty)
