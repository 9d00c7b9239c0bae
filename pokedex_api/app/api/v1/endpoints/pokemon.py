"""
Pokémon endpoints for API v1.

These routes expose the catalog: a filtered, paginated listing with a
"did you mean" suggestion for name searches that find nothing, lookup
by id (as a path segment or an ``id`` query parameter), creation and
partial update.  Create and update accept JSON or urlencoded bodies.
GET routes also answer HEAD.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from pokedex_api.app.api.deps import get_pokedex, read_payload
from pokedex_api.app.core.config import settings
from pokedex_api.app.schemas.pokemon import (
    ErrorResponse,
    Pokemon,
    PokemonCreated,
    PokemonPayload,
    SuggestionList,
)
from pokedex_api.app.services.pokedex_service import PokedexService
from pokedex_api.app.services.query_options import parse_query_options
from pokedex_api.app.services.suggestion_service import suggest

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Unknown id"}}
BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid parameters or body"}}


def _find_or_404(service: PokedexService, pokemon_id: Any) -> Pokemon:
    pokemon = service.get_by_id(pokemon_id)
    if pokemon is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    return pokemon


@router.api_route(
    "",
    methods=["GET", "HEAD"],
    response_model=None,
    responses={**BAD_REQUEST, **NOT_FOUND},
)
async def list_pokemon(
    request: Request,
    service: PokedexService = Depends(get_pokedex),
) -> Any:
    """List Pokémon with filters and pagination.

    - **id** — return that single Pokémon instead of a list.
    - **type** — keep Pokémon having this type (case-insensitive).
    - **name** — keep Pokémon whose name contains this text.
    - **limit**, **offset** — paging; defaults 50 and 0.

    When a name search matches nothing, the response carries the
    closest name as ``suggestion`` if one is within the configured
    edit distance.
    """
    query = request.query_params
    if query.get("id"):
        return _find_or_404(service, query["id"])

    options = parse_query_options(query)
    result = service.list(**options.model_dump())
    if not options.name or result.count > 0:
        return result

    match = suggest(service, options.name, settings.fuzzy_max_distance)
    if match is None:
        return result
    return SuggestionList(
        count=0,
        results=[],
        suggestion=match.name,
        distance=match.distance,
        message=f'No exact match for "{options.name}". Did you mean "{match.name}"?',
    )


@router.api_route("/{pokemon_id}", methods=["GET", "HEAD"], response_model=Pokemon, responses=NOT_FOUND)
async def get_pokemon(
    pokemon_id: str,
    service: PokedexService = Depends(get_pokedex),
) -> Pokemon:
    """Retrieve a single Pokémon by id.  Unknown or non-numeric ids give 404."""
    return _find_or_404(service, pokemon_id)


@router.post("", response_model=PokemonCreated, status_code=status.HTTP_201_CREATED, responses=BAD_REQUEST)
async def create_pokemon(
    payload: PokemonPayload = Depends(read_payload),
    service: PokedexService = Depends(get_pokedex),
) -> PokemonCreated:
    """Add a Pokémon to the catalog.  ``name`` and ``num`` are required."""
    created = service.create(payload)
    return PokemonCreated(id=created.id)


@router.post(
    "/{pokemon_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**BAD_REQUEST, **NOT_FOUND},
)
async def update_pokemon(
    pokemon_id: str,
    payload: PokemonPayload = Depends(read_payload),
    service: PokedexService = Depends(get_pokedex),
) -> Response:
    """Update the fields present in the body and answer 204."""
    if service.update_by_id(pokemon_id, payload) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{pokemon_id}", response_model=Pokemon, responses={**BAD_REQUEST, **NOT_FOUND})
async def replace_fields(
    pokemon_id: str,
    payload: PokemonPayload = Depends(read_payload),
    service: PokedexService = Depends(get_pokedex),
) -> Pokemon:
    """Update the fields present in the body and return the result."""
    updated = service.update_by_id(pokemon_id, payload)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    return updated
