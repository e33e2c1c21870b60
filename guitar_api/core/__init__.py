"""
Core utilities shared across the Guitar Store API.

This package hosts configuration helpers (env vars, paths, feature flags)
and cross-cutting concerns such as logging setup. Routers/services should
depend on these primitives instead of reading os.environ directly.
"""
