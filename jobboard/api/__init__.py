"""
HTTP API for jobs.

Flask blueprint and pydantic request schemas. Repository errors are mapped
to JSON error responses by create_app().
"""

from .app import create_app

__all__ = ["create_app"]
