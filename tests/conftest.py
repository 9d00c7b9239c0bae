"""
Pytest configuration and fixtures for the Pokedex API.

Every test gets a fresh catalog built from ``SAMPLE_RECORDS`` so that
creates and updates never leak between cases.
"""

from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from pokedex_api.app.main import create_app
from pokedex_api.app.services.pokedex_service import PokedexService

SAMPLE_RECORDS: List[Dict[str, Any]] = [
    {
        "id": 1, "num": "001", "name": "Bulbasaur", "img": "001.png",
        "type": ["Grass", "Poison"], "height": "0.71 m", "weight": "6.9 kg",
        "weaknesses": ["Fire", "Ice", "Flying", "Psychic"],
        "candy": "Bulbasaur Candy",
    },
    {
        "id": 4, "num": "004", "name": "Charmander", "img": "004.png",
        "type": ["Fire"], "height": "0.61 m", "weight": "8.5 kg",
        "weaknesses": ["Water", "Ground", "Rock"],
    },
    {
        "id": 6, "num": "006", "name": "Charizard", "img": "006.png",
        "type": ["Fire", "Flying"], "height": "1.70 m", "weight": "90.5 kg",
        "weaknesses": ["Water", "Electric", "Rock"],
    },
    {
        "id": 7, "num": "007", "name": "Squirtle", "img": "007.png",
        "type": ["Water"], "height": "0.51 m", "weight": "9.0 kg",
        "weaknesses": ["Electric", "Grass"],
    },
    {
        "id": 25, "num": "025", "name": "Pikachu", "img": "025.png",
        "type": ["Electric"], "height": "0.41 m", "weight": "6.0 kg",
        "weaknesses": ["Ground"],
    },
    {
        "id": 26, "num": "026", "name": "Raichu", "img": "026.png",
        "type": ["Electric"], "height": "0.79 m", "weight": "30.0 kg",
        "weaknesses": ["Ground"],
    },
    {
        # Lower-case type on purpose: filters ignore case, the type list does not.
        "id": 77, "num": "077", "name": "Ponyta", "img": "077.png",
        "type": ["fire"], "height": "1.00 m", "weight": "30.0 kg",
        "weaknesses": ["Water", "Ground", "Rock"],
    },
    {
        "id": 129, "num": "129", "name": "Magikarp", "img": "129.png",
        "type": ["Water"], "height": "0.89 m", "weight": "10.0 kg",
        "weaknesses": ["Electric", "Grass"],
    },
]


@pytest.fixture
def pokedex() -> PokedexService:
    """A fresh catalog holding the sample records."""
    return PokedexService(SAMPLE_RECORDS)


@pytest.fixture
def client(pokedex: PokedexService) -> TestClient:
    """HTTP client bound to an app serving the ``pokedex`` fixture."""
    return TestClient(create_app(service=pokedex))
