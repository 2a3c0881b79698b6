from __future__ import annotations

import io
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Sequence, Union

import ezdxf
from ezdxf import units
from ezdxf.lldxf.const import DXFError

from skadis import config
from skadis.skadis_board import BoardLayout
from skadis.skadis_errors import EmitterError
from skadis.skadis_interfaces import XybPoint
from skadis_bridge import apply_layout

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class DxfEmitter:
    """
    PolylineEmitter backed by an ezdxf document (millimetre units).
    Polylines become closed LWPOLYLINE entities in "xyb" format.
    """

    def __init__(self, dxfversion: str = "R2010") -> None:
        self.doc = ezdxf.new(dxfversion)
        self.doc.units = units.MM
        self.msp = self.doc.modelspace()
        self._active_layer: Optional[str] = None

    @property
    def active_layer(self) -> Optional[str]:
        return self._active_layer

    def add_layer(self, name: str, color: int) -> None:
        if name in self.doc.layers:
            self.doc.layers.get(name).color = color
            return
        self.doc.layers.add(name, color=color, linetype=config.LAYER_LINETYPE)

    def set_active_layer(self, name: str) -> None:
        if name not in self.doc.layers:
            raise KeyError(f"Layer {name!r} has not been added")
        self._active_layer = name

    def draw_polyline(self, points: Sequence[XybPoint], closed: bool) -> None:
        if self._active_layer is None:
            raise ValueError("set_active_layer() must be called before drawing")
        self.msp.add_lwpolyline(
            points,
            format="xyb",
            close=closed,
            dxfattribs={"layer": self._active_layer},
        )

    def to_string(self) -> str:
        stream = io.StringIO()
        self.doc.write(stream)
        return stream.getvalue()


def build_dxf(layout: BoardLayout) -> DxfEmitter:
    """Populate a fresh DxfEmitter with the layout's BOARD and HOLES layers."""
    emitter = DxfEmitter()
    apply_layout(layout, emitter)
    return emitter


def dxf_string(layout: BoardLayout) -> str:
    """
    Serialise the layout to DXF text. Any failure inside the DXF library is
    reported as EmitterError with the original exception chained.
    """
    try:
        return build_dxf(layout).to_string()
    except (DXFError, ValueError, KeyError, TypeError) as e:
        raise EmitterError(f"Failed to build DXF: {e}") from e


def write_dxf(layout: BoardLayout, path: PathLike = config.DEFAULT_OUTPUT) -> Path:
    """
    Write the layout to `path` and return the resolved path.
    The drawing is serialised in memory, written to a temporary file next to
    the target and moved over it with os.replace, so a failed write keeps
    whatever was at `path` before and leaves no temporary file behind.
    """
    out = Path(path)
    try:
        emitter = build_dxf(layout)
        data = emitter.to_string().encode(emitter.doc.output_encoding)
    except (DXFError, ValueError, KeyError, TypeError) as e:
        raise EmitterError(f"Failed to build DXF: {e}") from e

    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{out.name}.", suffix=".tmp",
                                        dir=out.parent)
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, out)
    except OSError as e:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        raise EmitterError(f"Failed to write DXF file {out}: {e}") from e

    logger.info("Wrote %s (%d holes)", out, len(layout.holes))
    return out.resolve()
