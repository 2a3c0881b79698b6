# skadis/skadis_holes/__init__.py

from .skadis_hole_model import Hole, HoleSet
from .skadis_hole_policy import make_holes

from .gen_holes import clamp_hole_radius, hole_grid, hole_centers, make_capsule

__all__ = [
    "Hole",
    "HoleSet",
    "make_holes",
    "clamp_hole_radius",
    "hole_grid",
    "hole_centers",
    "make_capsule",
]
