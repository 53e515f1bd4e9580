"""Clean events → ranked event types, one table per impact metric.

Node dependency graph:
    storm_events_clean -> [rank_by_fatalities]      -> top_fatalities
    storm_events_clean -> [rank_by_injuries]        -> top_injuries
    storm_events_clean -> [rank_by_economic_damage] -> top_economic_damage

The three nodes are independent of each other.
"""

from kedro.pipeline import Pipeline, node, pipeline

from .nodes import rank_event_types


def create_pipeline(**kwargs) -> Pipeline:  # noqa: ARG001
    """Create the impact_ranking pipeline."""
    return pipeline(
        [
            node(
                func=rank_event_types,
                inputs=[
                    "storm_events_clean",
                    "params:ranking.metrics.fatalities",
                    "params:ranking.top_n",
                ],
                outputs="top_fatalities",
                name="rank_by_fatalities",
            ),
            node(
                func=rank_event_types,
                inputs=[
                    "storm_events_clean",
                    "params:ranking.metrics.injuries",
                    "params:ranking.top_n",
                ],
                outputs="top_injuries",
                name="rank_by_injuries",
            ),
            node(
                func=rank_event_types,
                inputs=[
                    "storm_events_clean",
                    "params:ranking.metrics.economic_damage",
                    "params:ranking.top_n",
                ],
                outputs="top_economic_damage",
                name="rank_by_economic_damage",
            ),
        ]
    )
