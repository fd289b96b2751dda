"""The capability contract every combinator works against.

An object takes part in composition if it can report its bounds, move its
local origin, and superpose with another object of the same kind. Diagram,
Path and Bounds all qualify; so does anything else that implements the three
methods below.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

from vectorcompose.errors import EmptyInputError
from vectorcompose.geometry.vectors import Point, PointLike, Vector, VectorLike, as_point, as_vector

if TYPE_CHECKING:
    from vectorcompose.geometry.bounds import Bounds

J = TypeVar("J", bound="Juxtaposable")
H = TypeVar("H", bound="HasOrigin")


@runtime_checkable
class Boundable(Protocol):
    def get_bounds(self) -> Bounds: ...


@runtime_checkable
class HasOrigin(Protocol):
    def move_origin_by(self: H, v: Vector) -> H: ...


@runtime_checkable
class Juxtaposable(Boundable, HasOrigin, Protocol):
    """Boundable, originable, and closed under superposition."""

    def combine(self: J, other: J) -> J: ...


def get_bounds(a: Boundable) -> Bounds:
    return a.get_bounds()


def boundary_v(v: VectorLike, a: Boundable) -> Vector:
    return a.get_bounds().boundary_v(v)


def boundary(v: VectorLike, a: Boundable) -> Point:
    return a.get_bounds().boundary(v)


def move_origin_by(v: VectorLike, a: H) -> H:
    return a.move_origin_by(as_vector(v))


def translate(v: VectorLike, a: H) -> H:
    """Move the object (not its frame) by v."""
    return a.move_origin_by(-as_vector(v))


def move_to(p: PointLike, a: H) -> H:
    """Translate ``a`` so that its local origin lands on ``p``."""
    p = as_point(p)
    return a.move_origin_by(-p.to_vector())


def combine(a: J, b: J) -> J:
    """Superpose ``b`` under ``a`` at their current relative positions."""
    return a.combine(b)


def combine_all(items: Iterable[J], empty: J | None = None) -> J:
    """Left fold of ``combine`` starting from ``empty``.

    With no items the identity is returned, so callers composing a possibly
    empty list must supply one.
    """
    acc = empty
    for item in items:
        acc = item if acc is None else acc.combine(item)
    if acc is None:
        raise EmptyInputError("combine_all over no items needs an explicit identity")
    return acc
