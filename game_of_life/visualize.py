"""Plotting helpers for boards and run histories."""

from pathlib import Path

import matplotlib.pyplot as plt
import matplotlib.colors as mcolors
import pandas as pd
import seaborn as sns

from .board import Board

# Define colors
colors = {
    'dead': '#FFFFFF',
    'alive': '#2E86AB',  # Blue
    'population': '#F18F01'  # Orange
}

BOARD_CMAP = mcolors.ListedColormap([colors['dead'], colors['alive']])


def plot_board(board: Board, ax=None, title: str | None = None):
    """Draw the board as a heatmap of live (blue) and dead (white) cells."""
    if board.grid is None:
        raise ValueError("Cannot plot a board without a grid")
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    sns.heatmap(board.grid, ax=ax, cmap=BOARD_CMAP, vmin=0, vmax=1, cbar=False,
                square=True, linewidths=0.5, linecolor='#DDDDDD',
                xticklabels=False, yticklabels=False)

    ax.set_title(title or f'{board.width}×{board.height} board, population {board.population()}',
                 fontsize=12, fontweight='bold')
    return ax


def plot_population(history: pd.DataFrame, ax=None):
    """Line plot of live cells per generation."""
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 4))

    ax.plot(history['generation'], history['population'],
            color=colors['population'], marker='o', markersize=3, linewidth=2)
    ax.set_xlabel('Generation')
    ax.set_ylabel('Live cells')
    ax.set_title('Population over time', fontsize=12, fontweight='bold')
    ax.grid(True, alpha=0.3)
    return ax


def save_run_figure(board: Board, history: pd.DataFrame, out_path: str | Path) -> Path:
    """Save a two-panel figure (final board, population curve) and return its path."""
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 6))
    plot_board(board, ax=ax1, title=f'Generation {int(history["generation"].iloc[-1]) if len(history) else 0}')
    plot_population(history, ax=ax2)

    plt.tight_layout()
    fig.savefig(out_path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return out_path
