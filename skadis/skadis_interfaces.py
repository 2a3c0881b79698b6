from __future__ import annotations
from typing import Protocol, Sequence, Tuple


XybPoint = Tuple[float, float, float]   # x, y, bulge to the next vertex


class PolylineEmitter(Protocol):
    """Drawing back end that accepts closed point+bulge polylines on named layers."""

    def add_layer(self, name: str, color: int) -> None: ...
    def set_active_layer(self, name: str) -> None: ...
    def draw_polyline(self, points: Sequence[XybPoint], closed: bool) -> None: ...
