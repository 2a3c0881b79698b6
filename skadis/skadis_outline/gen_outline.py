from __future__ import annotations

import math
import numpy as np
from numpy.typing import NDArray

from skadis.skadis_enums import ArcDirection, LayerName
from skadis.skadis_arc import ClosedPolyline, make_arc, make_straight

XybArray = NDArray[np.float64]   # (N,3): x, y, bulge


def clamp_corner_radius(width: float, height: float, corner_radius: float) -> float:
    """Effective corner radius: never more than half the smaller board side."""
    return min(corner_radius, width / 2, height / 2)


def generate_board_outline(width: float, height: float, corner_radius: float) -> ClosedPolyline:
    """
    Rounded-rectangle board outline as an 8-vertex closed polyline.

    Traversed counter-clockwise starting at (w-r, h), just past the top-right
    corner: straight runs (bulge 0) alternate with 90° corner arcs (bulge
    +tan(pi/8)). Arc endpoints are the tangent points offset by r from each
    nominal corner along the adjacent edges.

    Parameters
    ----------
    width, height : float
        Board size in mm, both > 0.
    corner_radius : float
        Requested corner radius (>= 0); clamped to min(r, w/2, h/2).

    Returns
    -------
    ClosedPolyline
        Tagged LayerName.BOARD. With r == 0 every bulge is 0 (sharp rectangle).
    """
    w, h = float(width), float(height)
    r = clamp_corner_radius(w, h, float(corner_radius))

    def corner(p):
        if r == 0:
            return make_straight(p)
        return make_arc(p, math.pi / 2, ArcDirection.CCW)

    segments = (
        make_straight((w - r, h)),   # top edge
        corner((r, h)),              # top-left arc
        make_straight((0.0, h - r)), # left edge
        corner((0.0, r)),            # bottom-left arc
        make_straight((r, 0.0)),     # bottom edge
        corner((w - r, 0.0)),        # bottom-right arc
        make_straight((w, r)),       # right edge
        corner((w, h - r)),          # top-right arc, closes to start
    )
    return ClosedPolyline(segments, LayerName.BOARD)


def outline_xyb(width: float, height: float, corner_radius: float) -> XybArray:
    """Outline as the (8,3) [x, y, bulge] array handed to an emitter."""
    return generate_board_outline(width, height, corner_radius).as_array()
