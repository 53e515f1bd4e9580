"""Kedro pipelines for the storm-events impact analysis."""
