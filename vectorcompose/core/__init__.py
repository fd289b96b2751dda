"""Composable objects: the protocol, diagrams, trails/paths, and alignment."""

from vectorcompose.core.align import (
    align,
    align_b,
    align_by,
    align_l,
    align_r,
    align_t,
    center,
    center_x,
    center_xy,
    center_y,
)
from vectorcompose.core.diagram import Diagram, Prim
from vectorcompose.core.protocols import (
    Boundable,
    HasOrigin,
    Juxtaposable,
    boundary,
    boundary_v,
    combine,
    combine_all,
    get_bounds,
    move_origin_by,
    move_to,
    translate,
)
from vectorcompose.core.trail import Path, Trail, path_vertices, trail_vertices

__all__ = [
    "Boundable",
    "Diagram",
    "HasOrigin",
    "Juxtaposable",
    "Path",
    "Prim",
    "Trail",
    "align",
    "align_b",
    "align_by",
    "align_l",
    "align_r",
    "align_t",
    "boundary",
    "boundary_v",
    "center",
    "center_x",
    "center_xy",
    "center_y",
    "combine",
    "combine_all",
    "get_bounds",
    "move_origin_by",
    "move_to",
    "path_vertices",
    "trail_vertices",
    "translate",
]
