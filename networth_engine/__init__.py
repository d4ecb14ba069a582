"""Net worth aggregation and historical trend engine."""

__version__ = "0.1.0"
