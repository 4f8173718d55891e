"""Adapters to the outside world (filesystem)."""
