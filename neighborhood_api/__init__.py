"""Neighborhood REST backend over a JSON-file pseudo-database."""
