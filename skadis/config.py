"""
Configuration & Defaults
========================
Central registry for the SKÅDIS hole pattern, default board size and the
export settings shared by the DXF writer, the preview and the CLI.

All lengths are millimetres.
"""
from pathlib import Path

INCH_MM: float = 25.4

# Board (user adjustable)
DEFAULT_BOARD_WIDTH: float = 30 * INCH_MM
DEFAULT_BOARD_HEIGHT: float = 22 * INCH_MM
DEFAULT_CORNER_RADIUS: float = 8.0

# IKEA SKÅDIS hole pattern (fixed)
HOLE_WIDTH: float = 5.0
HOLE_HEIGHT: float = 15.0
HOLE_RADIUS: float = 3.0
H_SPACING: float = 20.0
V_SPACING: float = 40.0
OFFSET_TOP: float = 40.0
OFFSET_RIGHT: float = 20.0

# Absolute tolerance for on-board placement guards
GEOM_TOL: float = 1e-9

# DXF export
DEFAULT_OUTPUT: Path = Path("skadis_board.dxf")
# Layer name -> (ACI colour for DXF, matplotlib colour for the export plot)
LAYER_STYLES: dict[str, tuple[int, str]] = {
    "BOARD": (3, "green"),
    "HOLES": (1, "red"),
}
LAYER_COLORS: dict[str, int] = {name: aci for name, (aci, _) in LAYER_STYLES.items()}
LAYER_PLOT_COLORS: dict[str, str] = {name: c for name, (_, c) in LAYER_STYLES.items()}
LAYER_LINETYPE: str = "Continuous"
