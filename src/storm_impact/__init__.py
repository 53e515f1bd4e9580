"""storm_impact — which storm event types hurt people and property most."""

__version__ = "0.1.0"
