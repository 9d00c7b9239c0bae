"""
"Did you mean" lookup for name searches that find nothing.

``suggest`` scans the whole catalog for the name closest to the query by
edit distance.
"""

import logging
from typing import Optional

from ..schemas.pokemon import FuzzyMatch
from .matching import levenshtein
from .pokedex_service import PokedexService

logger = logging.getLogger(__name__)


def suggest(service: PokedexService, name: str, max_distance: int = 2) -> Optional[FuzzyMatch]:
    """Return the catalog entry whose name is closest to ``name``.

    Both sides are compared lower-cased; the query is also trimmed.
    Only distances up to ``max_distance`` qualify.  On a tie the entry
    met first in catalog order wins, and an exact match ends the scan.
    Returns ``None`` when nothing is close enough.
    """
    if not name or not isinstance(name, str):
        return None

    wanted = name.strip().lower()
    best: Optional[FuzzyMatch] = None

    for pokemon in service:
        distance = levenshtein((pokemon.name or "").lower(), wanted)
        if distance > max_distance:
            continue
        if best is None or distance < best.distance:
            best = FuzzyMatch(id=pokemon.id, name=pokemon.name, distance=distance)
            if distance == 0:
                break

    if best is not None:
        logger.debug("Suggesting '%s' (distance %d) for '%s'", best.name, best.distance, name)
    return best
