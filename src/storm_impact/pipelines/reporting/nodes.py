"""Plotting nodes for the ranked event-type tables.

Figures are returned to Kedro and written by the catalog's
MatplotlibWriter, so nothing here touches the filesystem.
"""

from __future__ import annotations

import logging
from typing import Any

import matplotlib
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
import pandas as pd

matplotlib.use("Agg")  # non-interactive backend for CI / headless runs

logger = logging.getLogger(__name__)


def plot_top_event_types(
    ranked: pd.DataFrame,
    plot_params: dict[str, Any],
) -> Figure:
    """Scatter plot with one point per ranked event type.

    Args:
        ranked: Table from ``rank_event_types``; the first column holds the
            event type, the second the ranked value.
        plot_params: Dict with title, xlabel and ylabel.

    Returns:
        The matplotlib Figure.
    """
    label_col, value_col = ranked.columns[:2]

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.scatter(ranked[label_col].astype(str), ranked[value_col])
    ax.set_title(plot_params["title"])
    ax.set_xlabel(plot_params.get("xlabel", "Event type"))
    ax.set_ylabel(plot_params.get("ylabel", value_col))
    ax.tick_params(axis="x", labelrotation=30)
    fig.tight_layout()

    logger.info(
        "Plotted %d event types for '%s'",
        len(ranked),
        plot_params["title"],
    )
    return fig
