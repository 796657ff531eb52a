"""Pydantic schemas exchanged with API clients."""
