"""Trails and paths — the vertex sources behind decorate_trail/decorate_path.

A Trail is a sequence of offsets with no fixed position; a Path pins one or
more trails to starting points. Only straight segments are modelled, so a
trail's vertices are the running sums of its offsets.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import chain

from vectorcompose.errors import DimensionMismatchError
from vectorcompose.geometry.bounds import Bounds
from vectorcompose.geometry.vectors import (
    Point,
    PointLike,
    Vector,
    VectorLike,
    as_point,
    as_vector,
    origin,
)


def _common_dim(dims: Iterable[int], default: int) -> int:
    seen = set(dims)
    if len(seen) > 1:
        raise DimensionMismatchError(f"Mixed dimensions: {sorted(seen)}")
    return seen.pop() if seen else default


@dataclass(frozen=True)
class Trail:
    offsets: tuple[Vector, ...] = ()
    dim: int = 2

    @classmethod
    def empty(cls, dim: int = 2) -> Trail:
        return cls((), dim)

    @classmethod
    def from_offsets(cls, offsets: Iterable[VectorLike], dim: int | None = None) -> Trail:
        vs = tuple(as_vector(o) for o in offsets)
        return cls(vs, _common_dim((v.dim for v in vs), 2 if dim is None else dim))

    @classmethod
    def from_vertices(cls, points: Iterable[PointLike]) -> Trail:
        """Trail through consecutive points; the first point only fixes the shape."""
        pts = [as_point(p) for p in points]
        dim = _common_dim((p.dim for p in pts), 2)
        return cls(tuple(b - a for a, b in zip(pts, pts[1:])), dim)

    def __len__(self) -> int:
        return len(self.offsets)

    def vertices(self, start: PointLike | None = None) -> Iterator[Point]:
        return trail_vertices(origin(self.dim) if start is None else start, self)

    def get_bounds(self) -> Bounds:
        """Bounds of the trail drawn from the origin."""
        return Bounds.from_points(self.vertices(), dim=self.dim)

    def move_origin_by(self, v: VectorLike) -> Trail:
        # Trails are translation invariant.
        return self

    def combine(self, other: Trail) -> Trail:
        """Concatenation: ``other`` continues from where this trail ends."""
        return Trail.from_offsets(self.offsets + other.offsets, dim=self.dim)


def trail_vertices(start: PointLike, trail: Trail) -> Iterator[Point]:
    """Lazily yield the start point followed by each segment endpoint."""
    p = as_point(start)
    yield p
    for offset in trail.offsets:
        p = p + offset
        yield p


@dataclass(frozen=True)
class Path:
    """Zero or more trails, each fixed at a starting point."""

    trails: tuple[tuple[Point, Trail], ...] = ()
    dim: int = 2

    @classmethod
    def empty(cls, dim: int = 2) -> Path:
        return cls((), dim)

    @classmethod
    def from_trail(cls, trail: Trail, start: PointLike | None = None) -> Path:
        p = origin(trail.dim) if start is None else as_point(start)
        return cls(((p, trail),), trail.dim)

    @classmethod
    def from_vertices(cls, points: Iterable[PointLike]) -> Path:
        pts = [as_point(p) for p in points]
        if not pts:
            return cls.empty()
        return cls.from_trail(Trail.from_vertices(pts), pts[0])

    @classmethod
    def from_trails(cls, located: Iterable[tuple[PointLike, Trail]]) -> Path:
        pairs = tuple((as_point(p), t) for p, t in located)
        dim = _common_dim(chain((p.dim for p, _ in pairs), (t.dim for _, t in pairs if t.offsets)), 2)
        return cls(pairs, dim)

    def get_bounds(self) -> Bounds:
        return Bounds.from_points(chain.from_iterable(path_vertices(self)), dim=self.dim)

    def move_origin_by(self, v: VectorLike) -> Path:
        v = as_vector(v)
        return Path(tuple((p - v, t) for p, t in self.trails), self.dim)

    def combine(self, other: Path) -> Path:
        if other.dim != self.dim and other.trails and self.trails:
            raise DimensionMismatchError(f"Cannot combine {self.dim}-d and {other.dim}-d paths")
        return Path(self.trails + other.trails, self.dim if self.trails else other.dim)


def path_vertices(path: Path) -> list[list[Point]]:
    """One vertex list per component trail, in path order."""
    return [list(trail_vertices(start, trail)) for start, trail in path.trails]
