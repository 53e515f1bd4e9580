"""Project pipelines."""

from __future__ import annotations

from kedro.pipeline import Pipeline

from storm_impact.pipelines import data_processing, impact_ranking, reporting


def register_pipelines() -> dict[str, Pipeline]:
    """Register the project's pipelines.

    Returns:
        A mapping from pipeline names to ``Pipeline`` objects.
    """
    data_processing_pipeline = data_processing.create_pipeline()
    impact_ranking_pipeline = impact_ranking.create_pipeline()
    reporting_pipeline = reporting.create_pipeline()

    return {
        "data_processing": data_processing_pipeline,
        "impact_ranking": impact_ranking_pipeline,
        "reporting": reporting_pipeline,
        "__default__": (
            data_processing_pipeline + impact_ranking_pipeline + reporting_pipeline
        ),
    }
