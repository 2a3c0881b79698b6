"""Parametric SKÅDIS-style pegboard geometry: outline, hole grid and point+bulge polylines."""

from .skadis_enums import LayerName, ArcDirection
from .skadis_errors import InvalidParameterError, EmitterError
from .skadis_params import BoardParams, DEFAULT_PARAMS, default_params, with_changes
from .skadis_board import BoardLayout, generate_layout

__all__ = [
    "LayerName", "ArcDirection",
    "InvalidParameterError", "EmitterError",
    "BoardParams", "DEFAULT_PARAMS", "default_params", "with_changes",
    "BoardLayout", "generate_layout",
]
