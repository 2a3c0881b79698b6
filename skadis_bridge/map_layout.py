from __future__ import annotations

import logging

from skadis import config
from skadis.skadis_board import BoardLayout
from skadis.skadis_interfaces import PolylineEmitter

logger = logging.getLogger(__name__)


def _assert_layout_ready(layout: BoardLayout) -> None:
    if layout is None:
        raise ValueError("No layout to emit. Call generate_layout(params) first.")
    if layout.outline is None or layout.outline.polyline is None:
        raise ValueError("BoardLayout.outline is missing.")
    if layout.holes is None:
        raise ValueError("BoardLayout.holes is missing.")


def apply_layout(layout: BoardLayout, emitter: PolylineEmitter) -> None:
    """
    Map BoardLayout ➜ emitter calls.

    Registers every layer with its colour first, then draws each polyline on
    its layer as [x, y, bulge] rows with the closed flag set. Vertex order
    and bulge signs are passed through unchanged; a flipped sign or order
    would mirror the arc in the exported drawing.
    """
    _assert_layout_ready(layout)

    layers = layout.layers()
    for name in layers:
        emitter.add_layer(name, config.LAYER_COLORS[name])

    for name, polylines in layers.items():
        emitter.set_active_layer(name)
        for pl in polylines:
            rows = [tuple(row) for row in pl.as_array().tolist()]
            emitter.draw_polyline(rows, pl.closed)
        logger.debug("Emitted %d polylines on layer %s", len(polylines), name)
