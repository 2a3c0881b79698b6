# __init__.py
from .skadis_params_model import BoardParams
from .skadis_params_policy import validate_params, default_params, with_changes

DEFAULT_PARAMS = BoardParams()

__all__ = [
    "BoardParams",
    "DEFAULT_PARAMS",
    "validate_params", "default_params", "with_changes",
]
