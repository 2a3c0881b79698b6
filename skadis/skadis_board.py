from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List
import numpy as np
from numpy.typing import NDArray

from skadis.skadis_enums import LayerName
from skadis.skadis_arc import ClosedPolyline
from skadis.skadis_params import BoardParams
from skadis.skadis_outline import BoardOutlineModel, make_outline
from skadis.skadis_holes import HoleSet, make_holes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardLayout:
    """
    One complete generation result: the parameter snapshot it was built
    from, the board outline and the hole set. Export and preview both read
    from this object so they always agree.
    """
    params: BoardParams
    outline: BoardOutlineModel
    holes: HoleSet

    def layers(self) -> Dict[str, List[ClosedPolyline]]:
        """Layer name -> polylines, BOARD first, in the order they are drawn."""
        return {
            LayerName.BOARD.name: [self.outline.polyline],
            LayerName.HOLES.name: self.holes.polylines(),
        }

    def hole_centers(self) -> NDArray[np.float64]:
        return self.holes.centers()

    def summary(self) -> None:
        """Print a quick summary of the layout."""
        print("=== BoardLayout Summary ===")
        self.params.summary()
        self.outline.summary()
        if len(self.holes) > 0:
            self.holes.summary()
        else:
            print("No holes placed.")
        print("===========================")


def generate_layout(params: BoardParams) -> BoardLayout:
    """
    Build outline and holes from the same parameter snapshot.
    No geometry happens here; this only composes the two generators.
    """
    outline = make_outline(params)
    holes = make_holes(params)
    logger.debug("Layout %g x %g mm: %d holes in %d columns",
                 params.board_width, params.board_height, len(holes), holes.num_columns())
    return BoardLayout(params=params, outline=outline, holes=holes)
