"""
Shared FastAPI dependencies.

``get_pokedex`` hands routes the catalog instance created at startup,
and ``read_payload`` decodes a create or update request body.
"""

import json
import logging

from fastapi import Request
from pydantic import ValidationError

from ..core.errors import InvalidParameterError
from ..schemas.pokemon import PokemonPayload
from ..services.pokedex_service import PokedexService

logger = logging.getLogger(__name__)


def get_pokedex(request: Request) -> PokedexService:
    """Return the catalog attached to the running application."""
    return request.app.state.pokedex


async def read_payload(request: Request) -> PokemonPayload:
    """Decode the request body into a ``PokemonPayload``.

    ``application/json`` bodies must hold a JSON object; any other
    content type goes through Starlette's form parser (urlencoded or
    multipart, via python-multipart).  Repeated form keys become
    lists.  Malformed bodies raise ``InvalidParameterError``.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip()

    if content_type == "application/json":
        body = await request.body()
        try:
            data = json.loads(body or b"{}")
        except ValueError:
            raise InvalidParameterError("Invalid JSON body") from None
        if not isinstance(data, dict):
            raise InvalidParameterError("Invalid JSON body")
    else:
        try:
            form = await request.form()
        except (ValueError, UnicodeDecodeError):
            raise InvalidParameterError("Invalid form body") from None
        data = {}
        for key in form.keys():
            values = form.getlist(key)
            data[key] = values[0] if len(values) == 1 else values

    try:
        return PokemonPayload.model_validate(data)
    except ValidationError as exc:
        logger.debug("Rejected payload: %s", exc)
        fields = ", ".join(dict.fromkeys(str(err["loc"][0]) for err in exc.errors() if err.get("loc")))
        raise InvalidParameterError(f"Invalid value for: {fields}") from None
