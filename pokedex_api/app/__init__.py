"""
Application package initializer.

This package contains the entrypoint for the API and its submodules.
The in‑memory catalog and the query engine live in ``services``,
request and response shapes in ``schemas`` and the HTTP routes in
``api/v1/endpoints``.  ``core`` holds configuration, logging, error
types and seed data loading shared by the other layers.
"""
from .main import app  # noqa: F401
