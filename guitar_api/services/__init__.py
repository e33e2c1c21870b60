"""
High-level use cases for the Guitar Store API.

Routers (FastAPI endpoints) call these services instead of manipulating the
in-memory collection or the JSON file directly.
"""
