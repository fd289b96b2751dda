"""Diagram — visible content plus a bounding region, with a local origin.

Content is a tuple of primitives, each a shapely geometry drawn at an offset
from the diagram's origin. The bounds are stored separately from the content,
so they can be replaced (``set_bounds``) without touching what is drawn.
Moving the origin shifts both together.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from shapely import affinity
from shapely.geometry.base import BaseGeometry

from vectorcompose.errors import DimensionMismatchError
from vectorcompose.geometry.bounds import Bounds
from vectorcompose.geometry.vectors import Vector, VectorLike, as_vector, zero
from vectorcompose.models.style import Style


@dataclass(frozen=True)
class Prim:
    """A single drawable: geometry in its own frame, placed at ``offset``."""

    geometry: BaseGeometry
    offset: Vector = field(default_factory=lambda: zero(2))
    style: Style = field(default_factory=Style)

    def translated(self, v: Vector) -> Prim:
        return replace(self, offset=self.offset + v)

    def placed(self) -> BaseGeometry:
        """Geometry in the diagram's frame, ready for a renderer."""
        if self.offset.is_zero():
            return self.geometry
        zoff = self.offset[2] if self.offset.dim > 2 else 0.0
        return affinity.translate(self.geometry, xoff=self.offset[0], yoff=self.offset[1], zoff=zoff)


@dataclass(frozen=True)
class Diagram:
    """Immutable composable picture.

    ``prims`` are in superposition order: in ``a.combine(b)`` the prims of
    ``a`` come first and sit on top of those of ``b``.
    """

    prims: tuple[Prim, ...] = ()
    bounds: Bounds = field(default_factory=Bounds.empty)

    @classmethod
    def empty(cls, dim: int = 2) -> Diagram:
        return cls((), Bounds.empty(dim))

    @classmethod
    def from_geometry(cls, geometry: BaseGeometry, bounds: Bounds, style: Style | None = None) -> Diagram:
        return cls((Prim(geometry, zero(bounds.dim), style or Style()),), bounds)

    @property
    def dim(self) -> int:
        return self.bounds.dim

    @property
    def has_content(self) -> bool:
        return bool(self.prims)

    def get_bounds(self) -> Bounds:
        return self.bounds

    def set_bounds(self, bounds: Bounds) -> Diagram:
        """Same content, different extent."""
        if bounds.dim != self.dim:
            raise DimensionMismatchError(f"Cannot give a {self.dim}-d diagram {bounds.dim}-d bounds")
        return replace(self, bounds=bounds)

    def move_origin_by(self, v: VectorLike) -> Diagram:
        v = as_vector(v)
        shift = -v
        return Diagram(
            tuple(p.translated(shift) for p in self.prims),
            self.bounds.move_origin_by(v),
        )

    def translate(self, v: VectorLike) -> Diagram:
        return self.move_origin_by(-as_vector(v))

    def combine(self, other: Diagram) -> Diagram:
        if other.dim != self.dim:
            raise DimensionMismatchError(f"Cannot superpose {self.dim}-d and {other.dim}-d diagrams")
        return Diagram(self.prims + other.prims, self.bounds.combine(other.bounds))

    def with_style(self, **updates: Any) -> Diagram:
        """Apply style updates to every primitive; the updated styles are validated."""
        return replace(
            self,
            prims=tuple(
                replace(p, style=Style.model_validate({**p.style.model_dump(), **updates}))
                for p in self.prims
            ),
        )

    def geometries(self) -> list[BaseGeometry]:
        return [p.placed() for p in self.prims]
