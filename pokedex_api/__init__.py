"""
Top‑level package for the Pokedex API.

This file makes ``pokedex_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``pokedex_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
