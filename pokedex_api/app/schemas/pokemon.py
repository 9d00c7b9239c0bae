"""
Pydantic models for Pokémon data.

Field names follow the public dataset (``img``, ``type``,
``weaknesses``) so that the JSON exchanged with clients keeps the same
shape as the seed file.  ``Pokemon`` is also the in‑memory record held
by the catalog; unknown keys from the seed file are kept as extras and
returned untouched.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt


class Pokemon(BaseModel):
    """A single catalog entry."""

    id: int
    num: Union[StrictInt, StrictFloat, str] = Field(..., examples=["025"])
    name: str = Field(..., examples=["Pikachu"])
    img: str = ""
    type: List[str] = Field(default_factory=list, examples=[["Electric"]])
    height: str = ""
    weight: str = ""
    weaknesses: List[str] = Field(default_factory=list, examples=[["Ground"]])

    model_config = {
        "extra": "allow",
        "from_attributes": True,
    }


class PokemonPayload(BaseModel):
    """Body of a create or update request.

    Every field is optional so that presence can be checked per field:
    ``model_fields_set`` lists exactly the keys the client sent, which
    is how an update tells "not supplied" apart from "supplied empty".
    ``type`` and ``weaknesses`` accept a single string or a list.
    """

    name: Optional[str] = None
    num: Optional[Union[StrictInt, StrictFloat, str]] = None
    img: Optional[str] = None
    type: Optional[Union[List[str], str]] = None
    height: Optional[str] = None
    weight: Optional[str] = None
    weaknesses: Optional[Union[List[str], str]] = None

    model_config = {
        "extra": "ignore",
    }


class QueryOptions(BaseModel):
    """Validated filter and pagination options for a list request."""

    type: Optional[str] = None
    name: Optional[str] = None
    limit: int = Field(50, gt=0)
    offset: int = Field(0, ge=0)


class PokemonList(BaseModel):
    """One page of a filtered listing.

    ``count`` is the number of matches before pagination.
    """

    count: int
    results: List[Pokemon]


class SuggestionList(PokemonList):
    """Empty listing returned with a "did you mean" suggestion."""

    suggestion: str
    distance: int
    message: str
    id: str = "closeMatch"


class FuzzyMatch(BaseModel):
    """Closest catalog name to a query and its edit distance."""

    id: int
    name: str
    distance: int


class TypeList(BaseModel):
    count: int
    types: List[str]


class PokemonCreated(BaseModel):
    message: str = "Pokemon created"
    id: int


class ErrorResponse(BaseModel):
    """JSON body of every error response."""

    message: str
    id: str
