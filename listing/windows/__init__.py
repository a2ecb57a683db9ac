"""Application windows."""
