# crucible_lab/plots/plotting.py
# Figures for a single solved grid (cost heatmap + route) and for strategy comparisons.
from __future__ import annotations
from typing import Iterable, List, Optional
import matplotlib.pyplot as plt

from ..core.grid import Grid
from ..core.metrics import SearchResult
from ..core.state import SearchState


def cost_heatmap(grid: Grid, path: Optional[List[SearchState]] = None, title: str = "Cell costs"):
    """Heatmap of the cost grid; the route (origin first) is drawn on top when given."""
    fig, ax = plt.subplots(figsize=(max(4, grid.cols * 0.45), max(4, grid.rows * 0.45)))
    im = ax.imshow(grid.costs, cmap="magma_r", interpolation="nearest")
    fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04, label="cost")
    if path:
        rows = [0] + [s.position[0] for s in path]
        cols = [0] + [s.position[1] for s in path]
        ax.plot(cols, rows, color="cyan", linewidth=2, marker="o", markersize=3)
    ax.set_title(title)
    ax.set_xticks([]); ax.set_yticks([])
    fig.tight_layout()
    return fig


def bar_compare(results: Iterable[SearchResult], title: str = "Relaxation Strategy Comparison"):
    results = list(results)
    names = [f"{r.strategy}/{r.variant}" for r in results]
    pops  = [r.pops for r in results]
    relax = [r.relaxations for r in results]
    times = [r.time_s for r in results]
    mems  = [r.peak_kb or 0 for r in results]

    fig, axs = plt.subplots(2, 2, figsize=(11,8))
    axs = axs.ravel()
    axs[0].bar(names, pops);  axs[0].set_title("Queue Pops"); axs[0].tick_params(axis='x', rotation=45)
    axs[1].bar(names, relax); axs[1].set_title("Relaxations"); axs[1].tick_params(axis='x', rotation=45)
    axs[2].bar(names, times); axs[2].set_title("Time (s)"); axs[2].tick_params(axis='x', rotation=45)
    axs[3].bar(names, mems);  axs[3].set_title("Peak Memory (KB)"); axs[3].tick_params(axis='x', rotation=45)
    fig.suptitle(title)
    fig.tight_layout(rect=[0,0,1,0.95])
    return fig
