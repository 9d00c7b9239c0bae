"""
Tests for seed loading.
"""

import json
import os
from pathlib import Path

from pokedex_api.app.core.data import get_data_path, load_seed
from pokedex_api.app.services.pokedex_service import PokedexService

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class TestSeed:
    """Test ``get_data_path`` and ``load_seed``."""

    def test_relative_path_resolved_from_project_root(self) -> None:
        assert get_data_path("data/pokedex.json") == str(PROJECT_ROOT / "data" / "pokedex.json")

    def test_absolute_path_kept(self, tmp_path: Path) -> None:
        target = str(tmp_path / "seed.json")
        assert get_data_path(target) == target

    def test_loads_array(self, tmp_path: Path) -> None:
        seed = tmp_path / "seed.json"
        seed.write_text(json.dumps([{"id": 3, "num": "003", "name": "Venusaur"}]), encoding="utf-8")
        records = load_seed(str(seed))
        assert records == [{"id": 3, "num": "003", "name": "Venusaur"}]
        assert PokedexService(records).next_id == 4

    def test_non_array_gives_empty_catalog(self, tmp_path: Path) -> None:
        seed = tmp_path / "seed.json"
        seed.write_text(json.dumps({"pokemon": []}), encoding="utf-8")
        assert load_seed(str(seed)) == []

    def test_shipped_dataset(self) -> None:
        service = PokedexService(load_seed(os.path.join(PROJECT_ROOT, "data", "pokedex.json")))
        ids = [p.id for p in service]
        assert len(ids) == len(set(ids))
        assert service.get_by_id(25).name == "Pikachu"
        assert service.next_id == max(ids) + 1
