"""
Business logic for the Pokémon catalog.

``PokedexService`` owns the in‑memory catalog: an ordered list of
``Pokemon`` records loaded once from the seed dataset and mutated in
place afterwards.  It implements filtering with pagination, lookup by
id, the sorted set of types, creation with id allocation and partial
update.

The service holds no lock.  The API calls it from ``async`` route
handlers running on a single event loop, so each request's reads and
writes complete before the next request touches the catalog.  Code
that drives the service from several threads must serialize the calls
itself.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError

from ..core.errors import InvalidParameterError, MissingParametersError
from ..schemas.pokemon import Pokemon, PokemonList, PokemonPayload

logger = logging.getLogger(__name__)

PayloadLike = Union[PokemonPayload, Mapping[str, Any]]

# Fields that an update overwrites whenever they are present in the payload.
_OPTIONAL_FIELDS = ("img", "type", "height", "weight", "weaknesses")
_LIST_FIELDS = {"type", "weaknesses"}


def to_list(value: Any) -> List[Any]:
    """Normalize a scalar-or-list field value to a list.

    ``None`` and ``""`` give an empty list, a list or tuple gives a list
    of its items and any other value is wrapped in a one-element list.
    """
    if isinstance(value, (list, tuple)):
        return list(value)
    if value is None or value == "":
        return []
    return [value]


def is_missing(value: Any) -> bool:
    """Tell whether a required field counts as not supplied.

    ``None``, the empty string and numeric zero are all treated as
    missing.  Booleans are values, not numbers, here.
    """
    if value is None or value == "":
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return False


def coerce_id(value: Any) -> Optional[int]:
    """Turn a raw identifier into an ``int``, or ``None`` if it is not one.

    Accepts ints and strings or floats holding an integral number such
    as ``"25"``, ``" 25 "`` or ``"25.0"``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or not number.is_integer():
        return None
    return int(number)


def _as_payload(payload: PayloadLike) -> PokemonPayload:
    if isinstance(payload, PokemonPayload):
        return payload
    try:
        return PokemonPayload.model_validate(dict(payload))
    except ValidationError as exc:
        fields = ", ".join(dict.fromkeys(str(err["loc"][0]) for err in exc.errors() if err.get("loc")))
        raise InvalidParameterError(f"Invalid value for: {fields}") from None


class PokedexService:
    """In‑memory Pokémon catalog.

    Create one instance at startup from the seed records and pass it to
    every caller.  Tests build a fresh instance per case.
    """

    def __init__(self, records: Iterable[Union[Pokemon, Mapping[str, Any]]] = ()) -> None:
        self._pokedex: List[Pokemon] = [
            record if isinstance(record, Pokemon) else Pokemon.model_validate(record)
            for record in records
        ]
        self._next_id = max((p.id for p in self._pokedex), default=0) + 1
        logger.debug("Catalog ready with %d entries, next id %d", len(self._pokedex), self._next_id)

    def __len__(self) -> int:
        return len(self._pokedex)

    def __iter__(self):
        return iter(self._pokedex)

    @property
    def next_id(self) -> int:
        """Id that the next successful ``create`` will assign."""
        return self._next_id

    def list(
        self,
        type: Optional[str] = None,
        name: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> PokemonList:
        """Return one page of the catalog after filtering.

        - ``type``: keep entries having a type equal to the trimmed
          value, ignoring case.
        - ``name``: keep entries whose name contains the trimmed value,
          ignoring case.
        - ``limit`` and ``offset`` select the page.  ``count`` in the
          result is the number of matches before paging; an offset past
          the end gives an empty page.
        """
        results = list(self._pokedex)

        if isinstance(type, str) and type.strip():
            wanted = type.strip().lower()
            results = [
                p for p in results
                if any(isinstance(t, str) and t.lower() == wanted for t in p.type)
            ]

        if isinstance(name, str) and name.strip():
            needle = name.strip().lower()
            results = [p for p in results if p.name and needle in p.name.lower()]

        start = max(int(offset), 0)
        size = int(limit)
        if size <= 0:
            # The option parser never lets this through; treat as "everything".
            size = len(results)

        return PokemonList(count=len(results), results=results[start:start + size])

    def get_by_id(self, pokemon_id: Any) -> Optional[Pokemon]:
        """Return the entry with the given id, or ``None``.

        Non-numeric ids are not an error; they simply match nothing.
        """
        wanted = coerce_id(pokemon_id)
        if wanted is None:
            return None
        for pokemon in self._pokedex:
            if pokemon.id == wanted:
                return pokemon
        return None

    def get_types(self) -> List[str]:
        """Return every distinct type across the catalog, sorted."""
        types = set()
        for pokemon in self._pokedex:
            for t in pokemon.type:
                if t and isinstance(t, str):
                    types.add(t)
        return sorted(types)

    def create(self, payload: PayloadLike) -> Pokemon:
        """Append a new entry and return it.

        ``name`` and ``num`` are required; an absent, empty or zero value
        raises ``MissingParametersError``.  Note that this rejects
        ``num = 0`` as well.  The new entry gets the next free id;
        ``type`` and ``weaknesses`` are normalized to lists and the text
        fields default to ``""``.
        """
        data = _as_payload(payload)
        if is_missing(data.name) or is_missing(data.num):
            raise MissingParametersError("Missing required fields: name and num")

        pokemon = Pokemon(
            id=self._next_id,
            num=data.num,
            name=data.name,
            img=data.img or "",
            type=to_list(data.type),
            height=data.height or "",
            weight=data.weight or "",
            weaknesses=to_list(data.weaknesses),
        )
        self._pokedex.append(pokemon)
        self._next_id += 1
        logger.info("Created Pokemon %s '%s'", pokemon.id, pokemon.name)
        return pokemon

    def update_by_id(self, pokemon_id: Any, payload: PayloadLike) -> Optional[Pokemon]:
        """Update an existing entry in place.

        Returns the updated entry, or ``None`` if the id is unknown.
        ``name`` and ``num`` are only replaced by non-empty values.  The
        other fields are replaced whenever the payload contains them,
        even when empty; fields missing from the payload stay as they
        are.
        """
        existing = self.get_by_id(pokemon_id)
        if existing is None:
            return None

        data = _as_payload(payload)
        supplied = data.model_fields_set

        if not is_missing(data.name):
            existing.name = data.name
        if not is_missing(data.num):
            existing.num = data.num

        for field in _OPTIONAL_FIELDS:
            if field not in supplied:
                continue
            value = getattr(data, field)
            if field in _LIST_FIELDS:
                value = to_list(value)
            elif value is None:
                value = ""
            setattr(existing, field, value)

        logger.info("Updated Pokemon %s (%s)", existing.id, ", ".join(sorted(supplied)) or "no fields")
        return existing
