"""
Persistence adapters.

These modules encapsulate how guitar records are stored/retrieved (a flat
JSON file). Services depend on the repository rather than touching the file.
"""
