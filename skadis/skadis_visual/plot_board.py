import matplotlib.pyplot as plt
from matplotlib.patches import FancyBboxPatch

from skadis import config
from skadis.skadis_arc import tessellate_polyline
from skadis.skadis_board import BoardLayout


def _rounded_rect(x: float, y: float, w: float, h: float, r: float, **kwargs) -> FancyBboxPatch:
    r = max(0.0, min(r, w / 2, h / 2))
    return FancyBboxPatch(
        (x, y), w, h,
        boxstyle=f"round,pad=0,rounding_size={r}",
        **kwargs
    )


def preview_title(layout: BoardLayout) -> str:
    p = layout.params
    return f"Board: {round(p.board_width)} × {round(p.board_height)} mm, Holes: {len(layout.holes)}"


def plot_board_outline(
    layout: BoardLayout,
    *,
    ax: plt.Axes = None,
    **kwargs
):
    """
    Draw the board as a rounded rectangle (preview style, not the export arcs).

    Parameters
    ----------
    layout : BoardLayout
        Result of generate_layout.
    ax : matplotlib.axes.Axes, optional
        Existing axes to plot on. If None, a new figure/axes is created.
    **kwargs : dict
        Extra keyword args forwarded to the patch (e.g., linestyle).
    """
    if ax is None:
        fig, ax = plt.subplots()

    o = layout.outline
    patch = _rounded_rect(
        0.0, 0.0, o.width, o.height, o.corner_radius,
        facecolor=kwargs.pop("facecolor", "white"),
        edgecolor=kwargs.pop("edgecolor", "#22d3ee"),
        linewidth=kwargs.pop("linewidth", 1.5),
        **kwargs
    )
    ax.add_patch(patch)

    ax.set_xlim(-0.02 * o.width, 1.02 * o.width)
    ax.set_ylim(-0.02 * o.height, 1.02 * o.height)
    ax.set_aspect("equal", adjustable="box")
    ax.set_xlabel("x [mm]")
    ax.set_ylabel("y [mm]")
    return ax


def plot_holes(
    layout: BoardLayout,
    *,
    ax: plt.Axes = None,
    **kwargs
):
    """
    Draw every hole as a rounded rectangle at its centre.
    Uses the centres of the same layout that is exported, so preview and
    file always match.
    """
    if ax is None:
        fig, ax = plt.subplots()

    p = layout.params
    style = dict(facecolor="#fbbf24", edgecolor="#f59e42", linewidth=0.8, alpha=0.85)
    style.update(kwargs)

    for x, y in layout.hole_centers():
        ax.add_patch(_rounded_rect(
            x - p.hole_width / 2, y - p.hole_height / 2,
            p.hole_width, p.hole_height, p.hole_radius,
            **style
        ))
    return ax


def plot_layout(
    layout: BoardLayout,
    *,
    ax: plt.Axes = None,
    figsize=(8, 6),
    **kwargs
):
    """Full preview: board, holes and a "Board: W × H mm, Holes: N" title."""
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)

    plot_board_outline(layout, ax=ax)
    plot_holes(layout, ax=ax, **kwargs)
    ax.set_title(preview_title(layout))
    return ax


def plot_export_geometry(
    layout: BoardLayout,
    *,
    ax: plt.Axes = None,
    n_arc: int = 16,
    **kwargs
):
    """
    Draw the polylines exactly as they will be exported, by walking each
    segment's line/arc rule. Useful to check bulge signs.
    """
    if ax is None:
        fig, ax = plt.subplots()

    for name, polylines in layout.layers().items():
        color = kwargs.get("color", config.LAYER_PLOT_COLORS[name])
        for pl in polylines:
            pts = tessellate_polyline(pl, n_arc=n_arc)
            ax.plot(pts[:, 0], pts[:, 1], color=color,
                    linewidth=kwargs.get("linewidth", 0.8))

    ax.set_aspect("equal", adjustable="box")
    ax.set_xlabel("x [mm]")
    ax.set_ylabel("y [mm]")
    ax.set_title(kwargs.get("title", "Export geometry"))
    return ax
