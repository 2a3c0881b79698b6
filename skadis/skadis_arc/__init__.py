# skadis/skadis_arc/__init__.py

from .skadis_arc_model import (
    ArcSegment, ClosedPolyline, Point,
    make_straight, make_arc,
    BULGE_90, BULGE_180,
)
from .skadis_arc_utils import (
    arc_center_radius, tessellate_segment, tessellate_polyline, polyline_area,
)

__all__ = [
    "ArcSegment",
    "ClosedPolyline",
    "Point",
    "make_straight",
    "make_arc",
    "BULGE_90",
    "BULGE_180",
    "arc_center_radius",
    "tessellate_segment",
    "tessellate_polyline",
    "polyline_area",
]
