from __future__ import annotations
import logging

from skadis.skadis_params import BoardParams
from .gen_holes import hole_grid, make_capsule
from .skadis_hole_model import Hole, HoleSet

logger = logging.getLogger(__name__)


def make_holes(params: BoardParams) -> HoleSet:
    """
    Place one capsule per grid position. A parameter set that leaves no room
    for any hole gives an empty HoleSet, not an error.
    """
    grid = hole_grid(
        params.board_width,
        params.board_height,
        hole_width=params.hole_width,
        hole_height=params.hole_height,
        h_spacing=params.h_spacing,
        v_spacing=params.v_spacing,
        offset_top=params.offset_top,
        offset_right=params.offset_right,
    )
    holes = [
        Hole(
            center=(x, y),
            column=int(col),
            row=int(row),
            polyline=make_capsule(x, y, params.hole_width, params.hole_height, params.hole_radius),
        )
        for col, row, x, y in grid.tolist()
    ]
    if not holes:
        logger.info("Parameters place no holes on a %g x %g mm board",
                    params.board_width, params.board_height)
    return HoleSet(holes)
