from enum import IntEnum

class LayerName(IntEnum):
    """Drawing layer a polyline belongs to."""
    BOARD = 0
    HOLES = 1

class ArcDirection(IntEnum):
    """Rotational sense of a bulge arc (sign of the bulge)."""
    CW = -1
    STRAIGHT = 0
    CCW = 1
