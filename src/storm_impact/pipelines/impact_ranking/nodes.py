"""Event-type aggregation and ranking nodes.

Two steps per metric:
    aggregate → one summed value per event_type label
    rank      → stable descending sort, truncated to the top N

Labels are compared exactly as recorded. Ties in the ranking keep the
order in which the labels first appear in the events table.
"""

from __future__ import annotations

import logging
from typing import Callable, Union

import pandas as pd

logger = logging.getLogger(__name__)

EVENT_TYPE_COLUMN = "event_type"

Metric = Union[str, Callable[[pd.DataFrame], pd.Series]]


# ── helper ──────────────────────────────────────────────────────
def _metric_name(metric: Metric) -> str:
    if callable(metric):
        return getattr(metric, "__name__", "value")
    return metric


# ── Aggregator ──────────────────────────────────────────────────
def aggregate_by_event_type(events: pd.DataFrame, metric: Metric) -> pd.Series:
    """Sum a metric per event type.

    Args:
        events: Event-level DataFrame with an ``event_type`` column.
        metric: Column name, or a callable mapping the events frame to one
            value per row (e.g. ``lambda df: df.fatalities + df.injuries``).

    Returns:
        Series indexed by event_type, in order of first appearance.
        Missing or non-numeric metric values count as 0; rows with a
        missing label are kept as their own group so no value is lost.
    """
    name = _metric_name(metric)
    if len(events) == 0:
        return pd.Series(
            [], dtype="float64", name=name, index=pd.Index([], name=EVENT_TYPE_COLUMN)
        )

    values = metric(events) if callable(metric) else events[metric]
    if not isinstance(values, pd.Series):
        values = pd.Series(values, index=events.index)
    values = pd.to_numeric(values, errors="coerce").fillna(0)

    totals = values.groupby(events[EVENT_TYPE_COLUMN], sort=False, dropna=False).sum()
    totals.index.name = EVENT_TYPE_COLUMN
    totals.name = name
    return totals


# ── Ranker ──────────────────────────────────────────────────────
def rank_top_n(aggregated: pd.Series, n: int) -> pd.Series:
    """Return the ``n`` largest entries, highest first.

    Uses a stable sort, so equal values keep their aggregation order.
    Asking for more entries than exist returns all of them.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    ranked = aggregated.sort_values(ascending=False, kind="stable")
    return ranked.head(n)


# ── Node ────────────────────────────────────────────────────────
def rank_event_types(
    events: pd.DataFrame,
    metric_column: str,
    top_n: int,
) -> pd.DataFrame:
    """Aggregate one metric by event type and keep the top N.

    Args:
        events: Clean events table from the data_processing pipeline.
        metric_column: Column to sum (e.g. fatalities, total_damage_billions).
        top_n: Number of event types to keep (from parameters).

    Returns:
        Two-column table (event_type, <metric_column>), highest first.
    """
    totals = aggregate_by_event_type(events, metric_column)
    ranked = rank_top_n(totals, top_n)

    logger.info(
        "Top %d of %s event types by %s: %s",
        len(ranked),
        f"{len(totals):,}",
        metric_column,
        [(label, round(float(value), 3)) for label, value in ranked.items()],
    )
    return ranked.reset_index()
