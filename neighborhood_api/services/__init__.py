"""
High-level use cases for the Neighborhood API.

Each service module orchestrates repositories to implement business rules
(duplicate checks, id assignment, pagination).

Routers (FastAPI endpoints) call these services instead of manipulating the
JSON tables directly.
"""
