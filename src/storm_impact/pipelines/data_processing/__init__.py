"""Raw → clean data processing pipeline for the NOAA storm-events extract."""

from .pipeline import create_pipeline

__all__ = ["create_pipeline"]
