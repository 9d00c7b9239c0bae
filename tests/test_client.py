"""
Tests for the ``requests`` based API client, with the HTTP session mocked.
"""

import json
from typing import Any
from unittest.mock import MagicMock

import requests

from pokedex_client import PokedexAPI, main


def _response(status_code: int, body: Any = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = b"" if body is None else json.dumps(body).encode("utf-8")
    response.url = "http://testserver"
    return response


def _client(response: requests.Response) -> PokedexAPI:
    session = MagicMock(spec=requests.Session)
    session.request.return_value = response
    return PokedexAPI(base_url="http://testserver/", session=session)


class TestPokedexAPI:
    """Test ``PokedexAPI``."""

    def test_list_sends_only_given_filters(self) -> None:
        api = _client(_response(200, {"count": 0, "results": []}))
        data, error = api.list_pokemon(type="fire", limit=5)

        assert error is None
        assert data == {"count": 0, "results": []}
        kwargs = api.session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "http://testserver/api/pokemon"
        assert kwargs["params"] == {"type": "fire", "limit": 5}

    def test_error_body_is_reported(self) -> None:
        api = _client(_response(404, {"message": "Not found", "id": "notFound"}))
        data, error = api.get_pokemon(999)

        assert data is None
        assert error == {"status_code": 404, "message": "Not found", "id": "notFound"}
        assert api.session.request.call_args.kwargs["url"] == "http://testserver/api/pokemon/999"

    def test_connection_error(self) -> None:
        session = MagicMock(spec=requests.Session)
        session.request.side_effect = requests.ConnectionError("refused")
        api = PokedexAPI(base_url="http://testserver", session=session)

        data, error = api.list_types()
        assert data == []
        assert error["status_code"] is None
        assert "refused" in error["message"]

    def test_list_types(self) -> None:
        api = _client(_response(200, {"count": 2, "types": ["Fire", "Water"]}))
        assert api.list_types() == (["Fire", "Water"], None)

    def test_create_and_update_send_json(self) -> None:
        api = _client(_response(201, {"message": "Pokemon created", "id": 152}))
        data, _ = api.create_pokemon({"name": "Chikorita", "num": "152"})
        assert data["id"] == 152
        assert api.session.request.call_args.kwargs["json"] == {"name": "Chikorita", "num": "152"}

        api.update_pokemon(152, {"height": "0.89 m"})
        kwargs = api.session.request.call_args.kwargs
        assert (kwargs["method"], kwargs["url"]) == ("PUT", "http://testserver/api/pokemon/152")


class TestCommandLine:
    """Test ``main``."""

    def test_prints_json(self, capsys) -> None:
        client = MagicMock()
        client.get_pokemon.return_value = ({"id": 25, "name": "Pikachu"}, None)

        assert main(["get", "25"], client=client) == 0
        assert json.loads(capsys.readouterr().out) == {"id": 25, "name": "Pikachu"}
        client.get_pokemon.assert_called_once_with("25")

    def test_reports_errors(self, capsys) -> None:
        client = MagicMock()
        client.list_pokemon.return_value = (None, {"status_code": 400, "message": "Invalid limit parameter", "id": "badRequest"})

        assert main(["list", "--limit", "0"], client=client) == 1
        assert "Invalid limit parameter" in capsys.readouterr().err
