"""Raw → clean pipeline for the NOAA storm-events extract.

This pipeline reads the compressed StormData CSV, keeps the health and
damage columns, and outputs a cleaned events table with damage expressed
in dollars, ready for ranking by event type.
"""

from kedro.pipeline import Pipeline, node, pipeline

from .nodes import (
    compute_economic_damage,
    load_storm_data,
    select_and_clean_columns,
)


def create_pipeline(**kwargs) -> Pipeline:  # noqa: ARG001
    """Create the data_processing pipeline.

    Node chain:
        raw CSV → load → select columns → normalize damage → clean parquet
    """
    return pipeline(
        [
            node(
                func=load_storm_data,
                inputs="params:raw_data_path",
                outputs="storm_data_raw",
                name="load_storm_data",
            ),
            node(
                func=select_and_clean_columns,
                inputs="storm_data_raw",
                outputs="storm_events_selected",
                name="select_and_clean_columns",
            ),
            node(
                func=compute_economic_damage,
                inputs="storm_events_selected",
                outputs="storm_events_clean",
                name="compute_economic_damage",
            ),
        ]
    )
