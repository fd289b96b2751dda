"""Bounds — the support-function representation of spatial extent.

A Bounds value answers one question: given a direction v, how far along v is
the edge of the region? The answer is the scalar t such that t * v is the
boundary point, i.e.

    t(v) = max_{p in region} <p, v> / <v, v>

so the boundary *point* does not depend on the length of v. Everything the
combinators need (tangency, alignment, padding) is computed from this one
function; the concrete shape that produced it is never consulted.

Bounds are immutable and flat: a region is a union of leaves, each a base
support function seen through an optional linear map and then shifted by an
offset. Translation adds to the offsets, union concatenates the leaves, and a
linear map is folded into every leaf, so a query is a single pass over the
leaves however many compositions produced them.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import numpy as np
from numpy.typing import NDArray

from vectorcompose.config import settings
from vectorcompose.errors import DimensionMismatchError, InvalidDirectionError
from vectorcompose.geometry.vectors import (
    Point,
    PointLike,
    Vector,
    VectorLike,
    as_point,
    as_vector,
    origin,
    zero,
)

SupportFn = Callable[[NDArray[np.float64]], float]
# A base support function and the linear map applied to its region (None for identity).
Leaf = tuple[SupportFn, NDArray[np.float64] | None]

_NEG_INF = float("-inf")


def _frozen_offsets(offsets: NDArray[np.float64]) -> NDArray[np.float64]:
    offsets.setflags(write=False)
    return offsets


class Bounds:
    """Immutable bounding region of dimension ``dim`` given by a support function.

    ``Bounds(fn, dim)`` wraps a single support function; ``Bounds(None, dim)``
    is the empty region.
    """

    __slots__ = ("_leaves", "_offsets", "_dim")

    def __init__(self, fn: SupportFn | None, dim: int = 2) -> None:
        self._dim = int(dim)
        self._leaves: tuple[Leaf, ...] = () if fn is None else ((fn, None),)
        self._offsets = _frozen_offsets(np.zeros((len(self._leaves), self._dim)))

    @classmethod
    def _assemble(cls, leaves: tuple[Leaf, ...], offsets: NDArray[np.float64], dim: int) -> Bounds:
        b = cls.__new__(cls)
        b._leaves = leaves
        b._offsets = _frozen_offsets(offsets)
        b._dim = dim
        return b

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls, dim: int = 2) -> Bounds:
        """The identity for union: contains nothing, extends nowhere."""
        return cls(None, dim)

    @classmethod
    def from_points(cls, points: Iterable[PointLike], dim: int | None = None) -> Bounds:
        """Bounds of the convex hull of a finite point set."""
        rows = [as_point(p).coords for p in points]
        if not rows:
            return cls.empty(2 if dim is None else dim)
        pts = np.vstack(rows)
        if dim is not None and pts.shape[1] != dim:
            raise DimensionMismatchError(f"Expected {dim}-d points, got {pts.shape[1]}-d")

        def fn(d: NDArray[np.float64]) -> float:
            return float(np.max(pts @ d) / np.dot(d, d))

        return cls(fn, pts.shape[1])

    @classmethod
    def from_ball(cls, center: PointLike, radius: float) -> Bounds:
        """Exact bounds of a disc/ball, rather than a sampled approximation."""
        c = as_point(center).coords
        r = abs(float(radius))

        def fn(d: NDArray[np.float64]) -> float:
            dd = float(np.dot(d, d))
            return (float(np.dot(c, d)) + r * np.sqrt(dd)) / dd

        return cls(fn, c.shape[0])

    @classmethod
    def from_segment(cls, v: VectorLike) -> Bounds:
        """Bounds of the straight segment from the origin to ``v``."""
        v = as_vector(v)
        return cls.from_points([origin(v.dim), Point.from_array(v.coords)])

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def dim(self) -> int:
        return self._dim

    @property
    def is_empty(self) -> bool:
        return not self._leaves

    def _direction(self, v: VectorLike) -> NDArray[np.float64]:
        d = as_vector(v).coords
        if d.shape[0] != self._dim:
            raise DimensionMismatchError(f"Direction is {d.shape[0]}-d, bounds are {self._dim}-d")
        if not np.any(d) or not np.all(np.isfinite(d)):
            raise InvalidDirectionError(f"Boundary query along {as_vector(v)!r} has no direction")
        return d

    def _support(self, d: NDArray[np.float64]) -> float:
        dd = float(np.dot(d, d))
        shifts = self._offsets @ d / dd
        best = _NEG_INF
        for (fn, matrix), shift in zip(self._leaves, shifts):
            if matrix is None:
                t = fn(d)
            else:
                # <A p, d> = <p, A^T d>
                w = matrix.T @ d
                ww = float(np.dot(w, w))
                t = fn(w) * ww / dd if ww != 0.0 else 0.0
            best = max(best, t + float(shift))
        return best

    def __call__(self, v: VectorLike) -> float:
        """Raw support value t(v); ``-inf`` for empty bounds."""
        if self.is_empty:
            return _NEG_INF
        return self._support(self._direction(v))

    def boundary_v(self, v: VectorLike) -> Vector:
        """Offset from the local origin to the boundary in direction v.

        Empty bounds have no boundary; their boundary is the origin itself.
        """
        if self.is_empty:
            return zero(self._dim)
        d = self._direction(v)
        return Vector.from_array(d * self._support(d))

    def boundary(self, v: VectorLike) -> Point:
        return origin(self._dim) + self.boundary_v(v)

    def extent(self, v: VectorLike) -> float:
        """Signed distance from the origin to the boundary, measured along unit v."""
        if self.is_empty:
            return _NEG_INF
        d = self._direction(v)
        return float(self._support(d) * np.linalg.norm(d))

    def sample(self, directions: Iterable[VectorLike]) -> NDArray[np.float64]:
        """Boundary offsets for each direction, stacked as rows."""
        return np.vstack([self.boundary_v(d).coords for d in directions])

    def isclose(
        self,
        other: Bounds,
        directions: Iterable[VectorLike] | None = None,
        tol: float | None = None,
    ) -> bool:
        """Compare two regions by their boundary points along sample directions."""
        if self._dim != other._dim:
            return False
        if self.is_empty or other.is_empty:
            return self.is_empty == other.is_empty
        dirs = list(directions) if directions is not None else default_directions(self._dim)
        atol = settings.vectorcompose_tolerance if tol is None else tol
        return bool(np.allclose(self.sample(dirs), other.sample(dirs), rtol=0.0, atol=atol))

    # ------------------------------------------------------------------
    # Boundable / originable / monoid
    # ------------------------------------------------------------------

    def get_bounds(self) -> Bounds:
        return self

    def translate(self, t: VectorLike) -> Bounds:
        """Move the region by t; boundary points move by exactly t."""
        if self.is_empty:
            return self
        tv = as_vector(t).coords
        if tv.shape[0] != self._dim:
            raise DimensionMismatchError(f"Translation is {tv.shape[0]}-d, bounds are {self._dim}-d")
        if not np.any(tv):
            return self
        return Bounds._assemble(self._leaves, self._offsets + tv, self._dim)

    def move_origin_by(self, v: VectorLike) -> Bounds:
        return self.translate(-as_vector(v))

    def combine(self, other: Bounds) -> Bounds:
        """Union: the farther of the two boundaries in every direction."""
        if self._dim != other._dim:
            raise DimensionMismatchError(f"Cannot union {self._dim}-d and {other._dim}-d bounds")
        if self.is_empty:
            return other
        if other.is_empty:
            return self
        return Bounds._assemble(
            self._leaves + other._leaves,
            np.vstack([self._offsets, other._offsets]),
            self._dim,
        )

    __or__ = combine

    def transform(self, matrix: NDArray[np.float64] | Iterable[Iterable[float]]) -> Bounds:
        """Bounds of the region after the linear map ``matrix`` (about the origin)."""
        if self.is_empty:
            return self
        a = np.asarray(matrix, dtype=np.float64)
        if a.shape != (self._dim, self._dim):
            raise DimensionMismatchError(f"Expected a {self._dim}x{self._dim} matrix, got {a.shape}")
        # A (M p + t) = (A M) p + A t
        leaves = tuple((fn, a if m is None else a @ m) for fn, m in self._leaves)
        return Bounds._assemble(leaves, self._offsets @ a.T, self._dim)

    def scale(self, s: float) -> Bounds:
        """Uniform scaling by s about the local origin."""
        return self.transform(np.eye(self._dim) * float(s))

    def __repr__(self) -> str:
        state = "empty" if self.is_empty else f"{len(self._leaves)} leaves"
        return f"Bounds({state}, dim={self._dim})"


def default_directions(dim: int, n: int = 16) -> list[Vector]:
    """A spread of sample directions: a ring for 2D, +/- axes and diagonals otherwise."""
    if dim == 2:
        angles = np.linspace(0.0, 2 * np.pi, n, endpoint=False)
        return [Vector(float(np.cos(a)), float(np.sin(a))) for a in angles]
    dirs: list[Vector] = []
    eye = np.eye(dim)
    for row in eye:
        dirs.append(Vector.from_array(row))
        dirs.append(Vector.from_array(-row))
    dirs.append(Vector.from_array(np.ones(dim)))
    dirs.append(Vector.from_array(-np.ones(dim)))
    return dirs
