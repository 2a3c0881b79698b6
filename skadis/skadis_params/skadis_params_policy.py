# skadis_params_policy.py
from __future__ import annotations

import math
from dataclasses import replace
from typing import TYPE_CHECKING

from skadis.skadis_errors import InvalidParameterError

if TYPE_CHECKING:
    from .skadis_params_model import BoardParams

# Must be strictly positive
_POSITIVE = (
    "board_width", "board_height",
    "hole_width", "hole_height",
    "h_spacing", "v_spacing",
)
# Zero allowed
_NON_NEGATIVE = ("corner_radius", "hole_radius", "offset_top", "offset_right")


# ---------- Validation ----------

def validate_params(params: BoardParams) -> None:
    """
    Reject parameter sets the geometry engine is not defined for.
    Radii larger than the geometry allows are not errors; they are clamped later.
    """
    for name in _POSITIVE + _NON_NEGATIVE:
        value = getattr(params, name)
        if not math.isfinite(value):
            raise InvalidParameterError(f"{name} must be a finite number; got {value!r}")

    for name in _POSITIVE:
        value = getattr(params, name)
        if value <= 0:
            raise InvalidParameterError(f"{name} must be > 0; got {value:g}")

    for name in _NON_NEGATIVE:
        value = getattr(params, name)
        if value < 0:
            raise InvalidParameterError(f"{name} must be >= 0; got {value:g}")


# ---------- Builders ----------

def default_params() -> BoardParams:
    """Fresh parameter set with the SKÅDIS defaults ("reset to defaults")."""
    from .skadis_params_model import BoardParams
    return BoardParams()


def with_changes(params: BoardParams, **changes: float) -> BoardParams:
    """
    Return a new BoardParams with some fields replaced; the input is untouched.
    Unknown field names raise TypeError (same as the dataclass constructor).
    """
    return replace(params, **changes)
