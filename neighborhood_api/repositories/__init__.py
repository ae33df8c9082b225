"""
Persistence adapters.

These modules encapsulate how data is stored/retrieved (today one JSON file
per table). Services depend on the repository objects rather than touching
the JSON files.
"""
