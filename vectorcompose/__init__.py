"""vectorcompose — compose boundable objects by their support-function bounds."""

from vectorcompose.combinators import (
    appends,
    atop,
    beside,
    beside_bounds,
    cat,
    cat_,
    decorate_path,
    decorate_trail,
    hbeside,
    hcat,
    hcat_sep,
    pad,
    phantom,
    position,
    strut,
    vbeside,
    vcat,
    vcat_sep,
    with_bounds,
)
from vectorcompose.core import (
    Diagram,
    Path,
    Trail,
    align,
    boundary,
    boundary_v,
    center,
    center_xy,
    combine,
    combine_all,
    get_bounds,
    move_to,
    path_vertices,
    trail_vertices,
    translate,
)
from vectorcompose.errors import (
    CompositionError,
    DimensionMismatchError,
    EmptyInputError,
    InvalidDirectionError,
)
from vectorcompose.geometry import Bounds, Point, Vector, centroid, origin, with_length, zero
from vectorcompose.options import CatMethod, CatOptions

__all__ = [
    "Bounds",
    "CatMethod",
    "CatOptions",
    "CompositionError",
    "Diagram",
    "DimensionMismatchError",
    "EmptyInputError",
    "InvalidDirectionError",
    "Path",
    "Point",
    "Trail",
    "Vector",
    "align",
    "appends",
    "atop",
    "beside",
    "beside_bounds",
    "boundary",
    "boundary_v",
    "cat",
    "cat_",
    "center",
    "center_xy",
    "centroid",
    "combine",
    "combine_all",
    "decorate_path",
    "decorate_trail",
    "get_bounds",
    "hbeside",
    "hcat",
    "hcat_sep",
    "move_to",
    "origin",
    "pad",
    "path_vertices",
    "phantom",
    "position",
    "strut",
    "trail_vertices",
    "translate",
    "vbeside",
    "vcat",
    "vcat_sep",
    "with_bounds",
    "with_length",
    "zero",
]
