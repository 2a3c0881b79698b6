from __future__ import annotations

from dataclasses import dataclass

from skadis.skadis_arc import ClosedPolyline, polyline_area


@dataclass(frozen=True, slots=True)
class BoardOutlineModel:
    """
    Pure data container for the board outline.
    - width, height: board size (mm)
    - corner_radius: effective (clamped) corner radius
    - polyline: 8-vertex closed point+bulge polyline on layer BOARD
    """
    width: float
    height: float
    corner_radius: float
    polyline: ClosedPolyline

    # ---- helpers ----
    def num_vertices(self) -> int:
        return len(self.polyline)

    def area(self) -> float:
        return polyline_area(self.polyline)

    def summary(self) -> None:
        print("=== BoardOutline Summary ===")
        print(f"Size: {self.width:g} x {self.height:g} mm")
        print(f"Corner radius (effective): {self.corner_radius:g}")
        print(f"Vertices: {self.num_vertices()}")
        print(f"Area: {self.area():.2f} mm^2")
        print("============================")
