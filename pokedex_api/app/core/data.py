"""
Loading of the static seed dataset.

The catalog is filled once at startup from a JSON file holding an
array of Pokémon records.  ``get_data_path`` resolves the configured
location the same way for the server and for scripts.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import settings

logger = logging.getLogger(__name__)


def get_data_path(data_path: Optional[str] = None) -> str:
    """Compute the path to the seed JSON file.

    If the path (``settings.data_path`` by default) is absolute, use it
    directly.  Otherwise resolve it relative to the project root.
    """
    path = data_path or settings.data_path
    if os.path.isabs(path):
        return path
    base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
    return str((base_dir / path).resolve())


def load_seed(data_path: Optional[str] = None) -> List[Dict[str, Any]]:
    """Read the seed records from disk.

    Returns a new list of record dictionaries.  A file whose top level
    is not a JSON array yields an empty list.  A missing or unreadable
    file raises, since the service cannot start without its catalog.
    """
    path = get_data_path(data_path)
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        logger.warning("Seed file %s does not contain a JSON array; starting with an empty catalog", path)
        return []
    logger.info("Loaded %d records from %s", len(raw), path)
    return list(raw)
