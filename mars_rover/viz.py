# region Imports
from typing import Optional, Sequence, Tuple
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
from matplotlib.patches import Patch
from matplotlib.lines import Line2D

from .grid import TerrainMap
# endregion


# region Visualization Function
def show_route(
    terrain: TerrainMap,
    path: Optional[Sequence[Tuple[int, int]]] = None,
    start: Optional[Tuple[int, int]] = None,
    goal: Optional[Tuple[int, int]] = None,
    title: str = "Rover route",
    ax=None,
    show: bool = False,
):
    """
    Render the terrain grid (blocked cells dark) with an optional path overlay.
    Returns the matplotlib Figure.
    """
    H, W = terrain.shape
    if ax is None:
        fig, ax = plt.subplots(figsize=(max(4, W * 0.8), max(4, H * 0.8)))
    else:
        fig = ax.figure

    # region Base Image
    cmap = ListedColormap(["#d9b38c", "#3b2a1a"])
    ax.imshow(terrain.blocked.astype(np.uint8), origin="upper", cmap=cmap, vmin=0, vmax=1)
    for r in range(H):
        for c in range(W):
            ax.text(c, r, terrain.label_at((r, c)), ha="center", va="center", fontsize=8,
                    color="white" if terrain.blocked[r, c] else "black")
    # endregion

    # region Path Overlay
    if path:
        ys, xs = zip(*path)
        ax.plot(xs, ys, color="cyan", linewidth=2.5, label="Path")
    if start is not None:
        ax.scatter(start[1], start[0], s=100, edgecolors="black", facecolors="white", zorder=3)
    if goal is not None:
        ax.scatter(goal[1], goal[0], s=100, edgecolors="black", facecolors="yellow", zorder=3)
    # endregion

    # region Legend / Layout
    legend_elements = [
        Line2D([0], [0], color="cyan", lw=2, label="Path"),
        Line2D([0], [0], marker="o", color="w", label="Start",
               markerfacecolor="white", markeredgecolor="black", markersize=9),
        Line2D([0], [0], marker="o", color="w", label="Goal",
               markerfacecolor="yellow", markeredgecolor="black", markersize=9),
        Patch(facecolor="#3b2a1a", label="Obstacle"),
        Patch(facecolor="#d9b38c", label="Traversable"),
    ]
    ax.legend(handles=legend_elements, loc="upper left", bbox_to_anchor=(1.01, 1.0),
              fontsize=8, framealpha=0.85)
    ax.set_title(title)
    ax.set_xticks(range(W))
    ax.set_yticks(range(H))
    fig.tight_layout()
    if show:
        plt.show()
    return fig
    # endregion


def save_route_png(terrain: TerrainMap, out_path: str, **kwargs) -> str:
    fig = show_route(terrain, **kwargs)
    fig.savefig(out_path, dpi=100)
    plt.close(fig)
    return out_path
# endregion
