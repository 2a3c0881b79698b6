from .map_layout import apply_layout

__all__ = ["apply_layout"]
