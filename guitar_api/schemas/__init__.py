"""Pydantic response envelopes used by the routers."""
