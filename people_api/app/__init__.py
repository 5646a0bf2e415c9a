"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, the record store and
error types), ``schemas`` (Pydantic payloads), ``services`` (business
logic) and ``api`` (versioned routers).
"""

from .main import app  # noqa: F401
