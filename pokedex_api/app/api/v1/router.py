"""
Top‑level router for version 1 of the API.

Aggregates the resource routers under a unified prefix.  When new
resources are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import pokemon, types

router = APIRouter()

router.include_router(pokemon.router, prefix="/pokemon", tags=["pokemon"])
router.include_router(types.router, prefix="/types", tags=["types"])
