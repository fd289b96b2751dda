"""Affine model — vectors, points, and the helpers every combinator leans on.

Vectors and points are thin immutable wrappers over read-only float64 numpy
arrays. The dimension is whatever length the array has; mixing dimensions in
one operation raises DimensionMismatchError.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Union

import numpy as np
from numpy.typing import NDArray

from vectorcompose.config import settings
from vectorcompose.errors import DimensionMismatchError, EmptyInputError, InvalidDirectionError


def _frozen(values: Iterable[float] | NDArray[np.float64]) -> NDArray[np.float64]:
    arr = np.array(values, dtype=np.float64).reshape(-1)
    arr.setflags(write=False)
    return arr


def _check_dim(a: NDArray[np.float64], b: NDArray[np.float64]) -> None:
    if a.shape != b.shape:
        raise DimensionMismatchError(f"Dimension mismatch: {a.shape[0]} vs {b.shape[0]}")


class Vector:
    """A displacement in R^n."""

    __slots__ = ("_coords",)
    # numpy scalars and arrays defer to our reflected operators.
    __array_ufunc__ = None

    def __init__(self, *coords: float) -> None:
        self._coords = _frozen(coords)

    @classmethod
    def from_array(cls, arr: Iterable[float] | NDArray[np.float64]) -> Vector:
        v = cls.__new__(cls)
        v._coords = _frozen(arr)
        return v

    @property
    def coords(self) -> NDArray[np.float64]:
        return self._coords

    @property
    def dim(self) -> int:
        return int(self._coords.shape[0])

    def __len__(self) -> int:
        return self.dim

    def __iter__(self):
        return (float(c) for c in self._coords)

    def __getitem__(self, i: int) -> float:
        return float(self._coords[i])

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        _check_dim(self._coords, other._coords)
        return Vector.from_array(self._coords + other._coords)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        _check_dim(self._coords, other._coords)
        return Vector.from_array(self._coords - other._coords)

    def __neg__(self) -> Vector:
        return Vector.from_array(-self._coords)

    def __mul__(self, s: float) -> Vector:
        if isinstance(s, (Vector, Point)):
            return NotImplemented
        return Vector.from_array(self._coords * float(s))

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> Vector:
        if isinstance(s, (Vector, Point)):
            return NotImplemented
        return Vector.from_array(self._coords / float(s))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return bool(np.array_equal(self._coords, other._coords))

    def __hash__(self) -> int:
        return hash(("Vector", tuple(self._coords.tolist())))

    def __repr__(self) -> str:
        return f"Vector({', '.join(f'{c:g}' for c in self._coords)})"

    def dot(self, other: Vector) -> float:
        _check_dim(self._coords, other._coords)
        return float(np.dot(self._coords, other._coords))

    def norm(self) -> float:
        return float(np.linalg.norm(self._coords))

    def is_zero(self) -> bool:
        return not np.any(self._coords)

    def normalized(self) -> Vector:
        return with_length(1.0, self)

    def isclose(self, other: Vector, tol: float | None = None) -> bool:
        """Componentwise comparison within the configured absolute tolerance."""
        _check_dim(self._coords, other._coords)
        atol = settings.vectorcompose_tolerance if tol is None else tol
        return bool(np.allclose(self._coords, other._coords, rtol=0.0, atol=atol))


class Point:
    """An affine point: a position relative to the fixed origin of its space."""

    __slots__ = ("_coords",)
    __array_ufunc__ = None

    def __init__(self, *coords: float) -> None:
        self._coords = _frozen(coords)

    @classmethod
    def from_array(cls, arr: Iterable[float] | NDArray[np.float64]) -> Point:
        p = cls.__new__(cls)
        p._coords = _frozen(arr)
        return p

    @property
    def coords(self) -> NDArray[np.float64]:
        return self._coords

    @property
    def dim(self) -> int:
        return int(self._coords.shape[0])

    def __len__(self) -> int:
        return self.dim

    def __iter__(self):
        return (float(c) for c in self._coords)

    def __getitem__(self, i: int) -> float:
        return float(self._coords[i])

    def __add__(self, other: Vector) -> Point:
        if not isinstance(other, Vector):
            return NotImplemented
        _check_dim(self._coords, other.coords)
        return Point.from_array(self._coords + other.coords)

    def __sub__(self, other: Point | Vector) -> Point | Vector:
        if isinstance(other, Point):
            _check_dim(self._coords, other._coords)
            return Vector.from_array(self._coords - other._coords)
        if isinstance(other, Vector):
            _check_dim(self._coords, other.coords)
            return Point.from_array(self._coords - other.coords)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return bool(np.array_equal(self._coords, other._coords))

    def __hash__(self) -> int:
        return hash(("Point", tuple(self._coords.tolist())))

    def __repr__(self) -> str:
        return f"Point({', '.join(f'{c:g}' for c in self._coords)})"

    def to_vector(self) -> Vector:
        """Offset of this point from the origin."""
        return Vector.from_array(self._coords)

    def move_origin_by(self, v: Vector) -> Point:
        # Moving the frame's origin by v shifts every point's coordinates by -v.
        return self - v

    def isclose(self, other: Point, tol: float | None = None) -> bool:
        _check_dim(self._coords, other._coords)
        atol = settings.vectorcompose_tolerance if tol is None else tol
        return bool(np.allclose(self._coords, other._coords, rtol=0.0, atol=atol))


VectorLike = Union[Vector, Sequence[float], NDArray[np.float64]]
PointLike = Union[Point, Sequence[float], NDArray[np.float64]]


def as_vector(v: VectorLike) -> Vector:
    if isinstance(v, Vector):
        return v
    if isinstance(v, Point):
        return v.to_vector()
    return Vector.from_array(v)


def as_point(p: PointLike) -> Point:
    if isinstance(p, Point):
        return p
    if isinstance(p, Vector):
        return Point.from_array(p.coords)
    return Point.from_array(p)


def zero(dim: int = 2) -> Vector:
    return Vector.from_array(np.zeros(dim))


def origin(dim: int = 2) -> Point:
    return Point.from_array(np.zeros(dim))


def unit_x() -> Vector:
    return Vector(1.0, 0.0)


def unit_y() -> Vector:
    return Vector(0.0, 1.0)


def add(a: VectorLike, b: VectorLike) -> Vector:
    return as_vector(a) + as_vector(b)


def negate(v: VectorLike) -> Vector:
    return -as_vector(v)


def scale(s: float, v: VectorLike) -> Vector:
    return as_vector(v) * s


def sub(p1: PointLike, p2: PointLike) -> Vector:
    """Vector from p2 to p1."""
    return as_point(p1) - as_point(p2)


def with_length(s: float, v: VectorLike) -> Vector:
    """Rescale v to signed length s, keeping its direction.

    A zero vector has no direction, so this raises InvalidDirectionError
    instead of dividing by a zero magnitude.
    """
    v = as_vector(v)
    length = v.norm()
    if length == 0.0 or not np.isfinite(length):
        raise InvalidDirectionError(f"Cannot rescale {v!r}: direction is undefined")
    return v * (s / length)


def centroid(points: Iterable[PointLike]) -> Point:
    """Affine mean of a set of points.

    Raises EmptyInputError on empty input; the mean of nothing is undefined.
    """
    coords = [as_point(p).coords for p in points]
    if not coords:
        raise EmptyInputError("centroid of an empty point set is undefined")
    dims = {c.shape for c in coords}
    if len(dims) > 1:
        raise DimensionMismatchError(f"centroid over mixed dimensions: {sorted(d[0] for d in dims)}")
    return Point.from_array(np.mean(np.vstack(coords), axis=0))
