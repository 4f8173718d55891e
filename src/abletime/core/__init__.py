"""abletime core.

Why:
- Pure pipeline logic (sorting, duration heuristic, formatting) lives here.
- The core knows nothing about flags, terminals or `os.stat`.
"""
