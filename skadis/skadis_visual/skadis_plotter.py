from pathlib import Path
from typing import Union

import matplotlib.pyplot as plt

from skadis.skadis_board import BoardLayout
from skadis.skadis_visual.plot_board import (plot_layout, plot_export_geometry,
                                             plot_board_outline, plot_holes)


class SkadisPlotter:
    """
    Visualization utilities for a BoardLayout.
    Holds a reference to a layout and provides plotting helpers.
    """

    def __init__(self, layout: BoardLayout):
        self.layout = layout

    def plot_outline(self, **kwargs):
        return plot_board_outline(self.layout, **kwargs)

    def plot_holes(self, **kwargs):
        return plot_holes(self.layout, **kwargs)

    def plot_preview(self, **kwargs):
        return plot_layout(self.layout, **kwargs)

    def plot_export_geometry(self, **kwargs):
        return plot_export_geometry(self.layout, **kwargs)

    def save_preview(self, path: Union[str, Path], dpi: int = 150, **kwargs) -> Path:
        ax = self.plot_preview(**kwargs)
        fig = ax.get_figure()
        out = Path(path)
        fig.savefig(out, dpi=dpi, bbox_inches="tight")
        plt.close(fig)
        return out
