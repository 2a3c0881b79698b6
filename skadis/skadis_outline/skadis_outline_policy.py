# skadis/skadis_outline/skadis_outline_policy.py
from __future__ import annotations

import logging

from skadis.skadis_params import BoardParams
from .gen_outline import clamp_corner_radius, generate_board_outline
from .skadis_outline_model import BoardOutlineModel

logger = logging.getLogger(__name__)


def make_outline(params: BoardParams) -> BoardOutlineModel:
    """
    Build the board outline from a parameter snapshot.
    A corner radius larger than half the smaller side is silently reduced.
    """
    r = clamp_corner_radius(params.board_width, params.board_height, params.corner_radius)
    if r < params.corner_radius:
        logger.debug("Corner radius %.3f clamped to %.3f", params.corner_radius, r)

    polyline = generate_board_outline(params.board_width, params.board_height, params.corner_radius)
    return BoardOutlineModel(
        width=params.board_width,
        height=params.board_height,
        corner_radius=r,
        polyline=polyline,
    )
