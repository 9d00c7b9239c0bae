"""
Parsing of list query parameters.

Turns the raw string parameters of a list request into
``QueryOptions``.  Filters pass through untouched; trimming and case
folding happen in ``PokedexService.list``.
"""

import math
from typing import Mapping, Optional

from ..core.errors import InvalidParameterError
from ..schemas.pokemon import QueryOptions

DEFAULT_LIMIT = 50
DEFAULT_OFFSET = 0


def _parse_int(raw: Optional[str], default: int, name: str) -> int:
    if raw is None or str(raw).strip() == "":
        return default
    try:
        number = float(str(raw).strip())
    except ValueError:
        raise InvalidParameterError(f"Invalid {name} parameter") from None
    if not math.isfinite(number):
        raise InvalidParameterError(f"Invalid {name} parameter")
    return int(number)


def parse_query_options(query: Mapping[str, str]) -> QueryOptions:
    """Validate ``limit``/``offset`` and collect the filters.

    ``limit`` defaults to 50 and must be positive; ``offset`` defaults
    to 0 and must not be negative.  Fractions are truncated toward zero
    before the range check, so ``limit=1.5`` means 1 and ``limit=0.5``
    is rejected.  Non-numeric, non-finite or out-of-range values raise
    ``InvalidParameterError``.
    """
    limit = _parse_int(query.get("limit"), DEFAULT_LIMIT, "limit")
    if limit <= 0:
        raise InvalidParameterError("Invalid limit parameter")

    offset = _parse_int(query.get("offset"), DEFAULT_OFFSET, "offset")
    if offset < 0:
        raise InvalidParameterError("Invalid offset parameter")

    return QueryOptions(
        type=query.get("type") or None,
        name=query.get("name") or None,
        limit=limit,
        offset=offset,
    )
