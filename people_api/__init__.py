"""
Top‑level package for the People Management API.

This file makes ``people_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``people_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
