"""Event-type ranking pipeline for health harm and economic damage."""

from .pipeline import create_pipeline

__all__ = ["create_pipeline"]
