"""
Top‑level package for the Student Records API.

All functionality lives in submodules under ``app``; modules are
imported using fully qualified names such as
``student_records_api.app.main``.
"""

__all__ = []
