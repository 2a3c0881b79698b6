from __future__ import annotations

import math
from typing import Tuple
import numpy as np
from numpy.typing import NDArray

from skadis import config
from skadis.skadis_enums import ArcDirection, LayerName
from skadis.skadis_arc import ClosedPolyline, make_arc, make_straight

GridArray = NDArray[np.float64]   # (N,4): col, row, x, y
Centers = NDArray[np.float64]     # (N,2): x, y


def clamp_hole_radius(width: float, height: float, radius: float) -> float:
    return min(radius, width / 2, height / 2)


def _count_steps(start: float, half_extent: float, pitch: float, tol: float) -> int:
    """
    Number of k >= 0 with (start - k*pitch) - half_extent >= -tol.
    Zero when the first position already fails the guard.
    """
    room = start - half_extent
    if room < -tol:
        return 0
    return int(math.floor((room + tol) / pitch)) + 1


def hole_grid(
    board_width: float,
    board_height: float,
    *,
    hole_width: float,
    hole_height: float,
    h_spacing: float,
    v_spacing: float,
    offset_top: float,
    offset_right: float,
    tol: float = config.GEOM_TOL,
) -> GridArray:
    """
    Staggered hole grid, one row per hole: [col, row, x, y].

    Columns run right to left starting at x = board_width - offset_right and
    stop once a hole's left edge would leave the board. Within a column holes
    run top to bottom from y = board_height - offset_top, stopping once the
    bottom edge would leave the board. Odd columns are shifted down by half
    the row pitch.

    Coordinates are derived from integer column/row indices, so long runs
    do not accumulate floating-point drift. Spacings must be > 0.
    """
    if h_spacing <= 0 or v_spacing <= 0:
        raise ValueError("h_spacing and v_spacing must be > 0")

    x0 = board_width - offset_right
    n_cols = _count_steps(x0, hole_width / 2, h_spacing, tol)

    rows: list[Tuple[float, float, float, float]] = []
    for col in range(n_cols):
        x = x0 - col * h_spacing
        y0 = board_height - offset_top - (col % 2) * (v_spacing / 2)
        n_rows = _count_steps(y0, hole_height / 2, v_spacing, tol)
        for row in range(n_rows):
            rows.append((float(col), float(row), x, y0 - row * v_spacing))

    if not rows:
        return np.zeros((0, 4), dtype=np.float64)
    return np.asarray(rows, dtype=np.float64)


def hole_centers(board_width: float, board_height: float, **kwargs: float) -> Centers:
    """Centre coordinates only (N,2), in generation order. Same keywords as hole_grid."""
    return hole_grid(board_width, board_height, **kwargs)[:, 2:4]


def make_capsule(x: float, y: float, width: float, height: float, radius: float) -> ClosedPolyline:
    """
    Vertical capsule slot centred at (x, y): 180° arcs top and bottom,
    straight sides.

    Vertices are the endpoints of the two straight side tangent lines, in the
    order top-left, top-right, bottom-right, bottom-left, with bulges
    [-tan(pi/4), 0, -tan(pi/4), 0].

    A radius of 0 gives the plain width x height rectangle (same corner
    order, all bulges 0) instead of a zero-area slit.
    """
    r = clamp_hole_radius(width, height, radius)
    if r == 0:
        left_x, right_x = x - width / 2, x + width / 2
        top_y, bot_y = y + height / 2, y - height / 2
        segments = tuple(
            make_straight(p)
            for p in ((left_x, top_y), (right_x, top_y),
                      (right_x, bot_y), (left_x, bot_y))
        )
        return ClosedPolyline(segments, LayerName.HOLES)

    top_y = y + height / 2 - r
    bot_y = y - height / 2 + r
    left_x = x - r
    right_x = x + r

    segments = (
        make_arc((left_x, top_y), math.pi, ArcDirection.CW),    # top arc
        make_straight((right_x, top_y)),                        # right side
        make_arc((right_x, bot_y), math.pi, ArcDirection.CW),   # bottom arc
        make_straight((left_x, bot_y)),                         # left side
    )
    return ClosedPolyline(segments, LayerName.HOLES)
