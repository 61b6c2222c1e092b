"""
Visualization utilities for generated longitudinal panels.

This module provides the trajectory ("spaghetti") plot used in the tutorials.
"""

import numpy as np

__all__ = []


def _plot_trajectories(frame, by_group: bool = True, ax=None, title: str = "Simulated trajectories", show: bool = True):
    """Draw one line per individual over ``time_index``.

    Args:
        frame: DataFrame with columns ``individual_id, group, time_index,
            outcome``.
        by_group: Colour lines by group label (one legend entry per group).
        ax: Existing matplotlib axes; a new figure is created when ``None``.
        title: Plot title.
        show: Call ``plt.show()`` once drawn.

    Returns:
        The matplotlib axes.

    Raises:
        ImportError: If ``matplotlib`` is not installed.
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError("matplotlib required for plotting: pip install matplotlib") from None

    if ax is None:
        fig, ax = plt.subplots(figsize=(12, 8))
    else:
        fig = ax.figure

    groups = sorted(frame["group"].unique())
    colors = plt.get_cmap("Set1")(np.linspace(0, 1, max(len(groups), 1)))
    color_of = {g: colors[i] for i, g in enumerate(groups)}
    labelled = set()

    for individual_id, sub in frame.groupby("individual_id", sort=True):
        group = sub["group"].iloc[0]
        color = color_of[group] if by_group else "#4c72b0"
        label = None
        if by_group and group not in labelled:
            label = f"group {group}"
            labelled.add(group)
        ax.plot(
            sub["time_index"],
            sub["outcome"],
            "o-",
            color=color,
            label=label,
            linewidth=1,
            markersize=3,
            alpha=0.5,
        )

    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.set_xlabel("Time index", fontsize=12)
    ax.set_ylabel("Outcome", fontsize=12)
    ax.grid(True, alpha=0.3)
    if by_group:
        ax.legend(bbox_to_anchor=(1.05, 1), loc="upper left")
    ax.set_xticks(range(1, int(frame["time_index"].max()) + 1))

    fig.text(
        0.5,
        0.01,
        "made with LongSim",
        ha="center",
        fontsize=9,
        color="#888888",
    )
    if show:
        plt.tight_layout(rect=(0, 0.03, 1, 1))
        plt.show()
    return ax
