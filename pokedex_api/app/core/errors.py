"""
Error types raised by the Pokedex core.

Each error carries the short ``error_id`` that the HTTP layer puts in
the ``id`` field of its JSON error body.  A missing record is not an
error: lookups return ``None`` and the routes answer 404 themselves.
"""


class PokedexError(Exception):
    """Base class for rejected Pokedex operations."""

    error_id = "badRequest"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"message": self.message, "id": self.error_id}


class InvalidParameterError(PokedexError):
    """A query or body parameter could not be parsed or is out of range."""

    error_id = "badRequest"


class MissingParametersError(PokedexError):
    """A create request lacks one of the required fields."""

    error_id = "missingParams"
