"""Type listing endpoint for API v1."""

from fastapi import APIRouter, Depends

from pokedex_api.app.api.deps import get_pokedex
from pokedex_api.app.schemas.pokemon import TypeList
from pokedex_api.app.services.pokedex_service import PokedexService

router = APIRouter()


@router.api_route("", methods=["GET", "HEAD"], response_model=TypeList)
async def list_types(service: PokedexService = Depends(get_pokedex)) -> TypeList:
    """Return every distinct Pokémon type in the catalog, sorted."""
    types = service.get_types()
    return TypeList(count=len(types), types=types)
