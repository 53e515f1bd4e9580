"""Reporting pipeline — ranked tables → scatter plots.

Node dependency graph:
    top_fatalities      -> [plot_top_fatalities]      -> top_fatalities_plot
    top_injuries        -> [plot_top_injuries]        -> top_injuries_plot
    top_economic_damage -> [plot_top_economic_damage] -> top_economic_damage_plot
"""

from kedro.pipeline import Pipeline, node, pipeline

from .nodes import plot_top_event_types


def create_pipeline(**kwargs) -> Pipeline:  # noqa: ARG001
    """Create the reporting pipeline."""
    return pipeline(
        [
            node(
                func=plot_top_event_types,
                inputs=["top_fatalities", "params:reporting.fatalities"],
                outputs="top_fatalities_plot",
                name="plot_top_fatalities",
            ),
            node(
                func=plot_top_event_types,
                inputs=["top_injuries", "params:reporting.injuries"],
                outputs="top_injuries_plot",
                name="plot_top_injuries",
            ),
            node(
                func=plot_top_event_types,
                inputs=["top_economic_damage", "params:reporting.economic_damage"],
                outputs="top_economic_damage_plot",
                name="plot_top_economic_damage",
            ),
        ]
    )
