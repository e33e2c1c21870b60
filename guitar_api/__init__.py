"""Fender Guitars API: a small CRUD service over a JSON-file-backed collection."""
