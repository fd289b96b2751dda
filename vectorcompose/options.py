"""Catenation options — how cat_ spaces successive objects."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class CatMethod(enum.Enum):
    # Uniform gap between successive bounding boundaries
    CAT = "cat"
    # Uniform gap between successive local origins; objects may overlap
    DISTRIB = "distrib"


@dataclass(frozen=True)
class CatOptions:
    """Controls spacing in cat_."""

    method: CatMethod = CatMethod.CAT
    # Boundary-to-boundary distance for CAT, origin-to-origin for DISTRIB
    separation: float = 0.0

    @classmethod
    def default(cls) -> CatOptions:
        return cls()
