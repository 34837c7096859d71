"""
Application package initializer.

The project is organised into ``core`` (configuration, logging and the
in-memory store), ``services`` (operations on the store), ``schemas``
(Pydantic models) and ``api`` (versioned routers).
"""

from .main import app, create_app  # noqa: F401
