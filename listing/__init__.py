"""Incremental search and infinite-scroll pagination for result listings."""

__version__ = "0.1.0"
