"""
Core utilities shared across the Neighborhood API.

This package hosts:
- configuration helpers (env vars, data paths, paging defaults)
- logging setup shared by the app factory and the CLI scripts

Routers/services depend on these primitives instead of reading os.environ
directly.
"""
