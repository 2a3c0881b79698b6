from __future__ import annotations

from dataclasses import dataclass, fields

from skadis import config
from .skadis_params_policy import validate_params


@dataclass(frozen=True)
class BoardParams:
    """
    Immutable pegboard parameter set (all lengths in mm).
    - board_width, board_height: outer panel size
    - corner_radius: board corner rounding (clamped to half the smaller side)
    - hole_width, hole_height, hole_radius: capsule slot geometry
    - h_spacing, v_spacing: column / row pitch (centre to centre)
    - offset_top, offset_right: top/right board edge to the first hole centre
    """
    board_width: float = config.DEFAULT_BOARD_WIDTH
    board_height: float = config.DEFAULT_BOARD_HEIGHT
    corner_radius: float = config.DEFAULT_CORNER_RADIUS
    hole_width: float = config.HOLE_WIDTH
    hole_height: float = config.HOLE_HEIGHT
    hole_radius: float = config.HOLE_RADIUS
    h_spacing: float = config.H_SPACING
    v_spacing: float = config.V_SPACING
    offset_top: float = config.OFFSET_TOP
    offset_right: float = config.OFFSET_RIGHT

    def __post_init__(self) -> None:
        # Because the dataclass is frozen, normalize via object.__setattr__
        for f in fields(self):
            object.__setattr__(self, f.name, float(getattr(self, f.name)))
        validate_params(self)

    # -------- Convenience properties --------
    @property
    def effective_corner_radius(self) -> float:
        return min(self.corner_radius, self.board_width / 2, self.board_height / 2)

    @property
    def effective_hole_radius(self) -> float:
        return min(self.hole_radius, self.hole_width / 2, self.hole_height / 2)

    def as_dict(self) -> dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    # -------- Debug helpers --------
    def summary(self) -> None:
        print("=== BoardParams Summary ===")
        print(f"Board: {self.board_width:g} x {self.board_height:g} mm, "
              f"corner r={self.corner_radius:g} (effective {self.effective_corner_radius:g})")
        print(f"Hole: {self.hole_width:g} x {self.hole_height:g} mm, "
              f"r={self.hole_radius:g} (effective {self.effective_hole_radius:g})")
        print(f"Spacing: h={self.h_spacing:g}, v={self.v_spacing:g}")
        print(f"Offsets: top={self.offset_top:g}, right={self.offset_right:g}")
        print("===========================")
