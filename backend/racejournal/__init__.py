"""Race journal backend: GPX route statistics and journal aggregates."""

__version__ = "0.1.0"
