from .plot_board import (plot_board_outline, plot_holes, plot_layout,
                         plot_export_geometry, preview_title)
from .skadis_plotter import SkadisPlotter

__all__ = [
    "plot_board_outline", "plot_holes", "plot_layout",
    "plot_export_geometry", "preview_title",
    "SkadisPlotter",
]
