from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple, Union
import numpy as np
from numpy.typing import NDArray

from skadis.skadis_enums import ArcDirection, LayerName

Point = Tuple[float, float]
XybArray = NDArray[np.float64]   # (N,3): x, y, bulge

# Bulge magnitudes: tan(theta/4) for a 90° and a 180° arc
BULGE_90 = math.tan(math.pi / 8)
BULGE_180 = math.tan(math.pi / 4)


@dataclass(frozen=True)
class ArcSegment:
    """
    One polyline vertex plus the curvature used to reach the *next* vertex.
    bulge = 0 is a straight segment; |bulge| = tan(theta/4) for included angle theta;
    positive bulge turns counter-clockwise, negative clockwise.
    """
    point: Point
    bulge: float = 0.0

    def as_array(self) -> NDArray[np.float64]:
        return np.array([float(self.point[0]), float(self.point[1]), float(self.bulge)], dtype=np.float64)


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def make_straight(p: Point) -> ArcSegment:
    return ArcSegment(point=(float(p[0]), float(p[1])), bulge=0.0)


def make_arc(p: Point, sweep_angle: float, direction: Union[ArcDirection, float]) -> ArcSegment:
    """Arc segment starting at p that sweeps `sweep_angle` radians in `direction`."""
    bulge = _sign(direction) * math.tan(sweep_angle / 4)
    return ArcSegment(point=(float(p[0]), float(p[1])), bulge=bulge)


@dataclass(frozen=True)
class ClosedPolyline:
    """
    Ordered, cyclic sequence of ArcSegments (>= 3) that wraps from the last
    vertex back to the first, tagged with the layer it is drawn on.
    """
    segments: Tuple[ArcSegment, ...]
    layer: LayerName
    closed: bool = True

    def __post_init__(self) -> None:
        segs = tuple(self.segments)
        if len(segs) < 3:
            raise ValueError(f"ClosedPolyline needs at least 3 segments; got {len(segs)}")
        object.__setattr__(self, "segments", segs)

    @classmethod
    def from_xyb(cls, rows: Iterable[Sequence[float]], layer: LayerName) -> "ClosedPolyline":
        """Build from [x, y, bulge] rows (the emitter hand-off format)."""
        return cls(tuple(ArcSegment((float(x), float(y)), float(b)) for x, y, b in rows), layer)

    def __len__(self) -> int: return len(self.segments)
    def __iter__(self) -> Iterator[ArcSegment]: return iter(self.segments)

    # --- exports ---
    def as_array(self) -> XybArray:
        """Return vertices as (N,3): x, y, bulge"""
        return np.vstack([s.as_array() for s in self.segments]).astype(np.float64, copy=False)

    @property
    def points(self) -> NDArray[np.float64]:
        return self.as_array()[:, :2]

    @property
    def bulges(self) -> NDArray[np.float64]:
        return self.as_array()[:, 2]

    def summary(self) -> None:
        print(f"=== ClosedPolyline [{self.layer.name}] ===")
        for i, s in enumerate(self.segments):
            print(f"  {i}: ({s.point[0]:.4f}, {s.point[1]:.4f}) bulge={s.bulge:+.6f}")
        print("=" * 28)
