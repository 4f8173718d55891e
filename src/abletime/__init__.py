"""abletime: time spent on a project, estimated from its saved snapshots."""

__version__ = "0.2.0"
