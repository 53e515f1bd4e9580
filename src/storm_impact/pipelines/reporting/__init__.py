"""Reporting pipeline — scatter plots of the top-ranked event types."""

from .pipeline import create_pipeline

__all__ = ["create_pipeline"]
