from __future__ import annotations

import math
from typing import Tuple
import numpy as np
from numpy.typing import NDArray

from .skadis_arc_model import ClosedPolyline, Point

Polygon = NDArray[np.float64]   # (N,2)


def arc_center_radius(p0: Point, p1: Point, bulge: float) -> Tuple[Point, float]:
    """
    Centre and radius of the arc from p0 to p1 with the given bulge.
    The centre sits on the chord's perpendicular bisector, to the left of
    p0 -> p1 for a positive bulge below 1.
    """
    if bulge == 0.0:
        raise ValueError("Straight segment (bulge=0) has no arc centre")
    dx, dy = p1[0] - p0[0], p1[1] - p0[1]
    chord = math.hypot(dx, dy)
    if chord == 0.0:
        return (float(p0[0]), float(p0[1])), 0.0

    radius = chord * (1 + bulge * bulge) / (4 * abs(bulge))
    d = chord * (1 - bulge * bulge) / (4 * bulge)     # signed offset along the left normal
    mx, my = (p0[0] + p1[0]) / 2, (p0[1] + p1[1]) / 2
    nx, ny = -dy / chord, dx / chord
    return (mx + d * nx, my + d * ny), radius


def tessellate_segment(p0: Point, p1: Point, bulge: float, n: int = 16) -> Polygon:
    """
    Points along one segment, p0 and p1 included: (2,2) for straight runs,
    (n+1,2) for arcs.
    """
    if bulge == 0.0 or (p0[0] == p1[0] and p0[1] == p1[1]):
        return np.array([p0, p1], dtype=np.float64)

    (cx, cy), r = arc_center_radius(p0, p1, bulge)
    sweep = 4 * math.atan(bulge)              # signed, CCW positive
    a0 = math.atan2(p0[1] - cy, p0[0] - cx)
    t = np.linspace(0.0, 1.0, n + 1)
    pts = np.stack([cx + r * np.cos(a0 + sweep * t), cy + r * np.sin(a0 + sweep * t)], axis=1)
    # pin endpoints to the exact vertices
    pts[0] = p0
    pts[-1] = p1
    return pts


def tessellate_polyline(polyline: ClosedPolyline, n_arc: int = 16) -> Polygon:
    """
    Walk the closed polyline with each segment's line/arc rule.
    Returns (M,2) with the first point repeated at the end.
    """
    segs = polyline.segments
    parts = []
    for i, seg in enumerate(segs):
        nxt = segs[(i + 1) % len(segs)]
        pts = tessellate_segment(seg.point, nxt.point, seg.bulge, n_arc)
        parts.append(pts if i == 0 else pts[1:])
    return np.vstack(parts)


def polyline_area(polyline: ClosedPolyline) -> float:
    """
    Signed enclosed area (positive for CCW traversal), arcs included:
    shoelace over the vertices plus each arc's circular-segment area.
    """
    segs = polyline.segments
    area = 0.0
    for i, seg in enumerate(segs):
        p0 = seg.point
        p1 = segs[(i + 1) % len(segs)].point
        area += (p0[0] * p1[1] - p1[0] * p0[1]) / 2
        if seg.bulge != 0.0:
            _, r = arc_center_radius(p0, p1, seg.bulge)
            theta = 4 * math.atan(abs(seg.bulge))
            area += math.copysign(r * r * (theta - math.sin(theta)) / 2, seg.bulge)
    return area
