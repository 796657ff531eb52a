"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, the record store and
error types), ``utils`` (date and name helpers), ``schemas``,
``services`` and the versioned routers under ``api/<version>/``.
"""

from .main import app  # noqa: F401
