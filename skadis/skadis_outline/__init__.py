# skadis/skadis_outline/__init__.py

from .skadis_outline_model import BoardOutlineModel
from .skadis_outline_policy import make_outline

from .gen_outline import clamp_corner_radius, generate_board_outline, outline_xyb

__all__ = [
    "BoardOutlineModel",
    "make_outline",
    "clamp_corner_radius",
    "generate_board_outline",
    "outline_xyb",
]
