"""Domain models and entities.

Why:
- Pure, strict data structures (Pydantic v2) live here.
- The domain does not know about the CLI or the filesystem: only problem concepts.
"""
