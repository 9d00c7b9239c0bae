"""Pokedex API client.

A thin wrapper around the Pokedex HTTP API built on ``requests``.  The
client exposes one method per operation:

* :meth:`list_pokemon` – filtered, paginated listing (with the "did you
  mean" fields when a name search finds nothing).
* :meth:`get_pokemon` – fetch a single Pokémon by id.
* :meth:`list_types` – all known types.
* :meth:`create_pokemon` – add a Pokémon.
* :meth:`update_pokemon` – change some fields of a Pokémon.

Every method returns a ``(data, error)`` tuple.  On success ``error`` is
``None``; on failure ``data`` is ``None`` (or empty) and ``error`` is a
dictionary with ``status_code``, ``message`` and ``id`` taken from the
server's error body when available.

Running the module starts a small command line tool::

    python pokedex_client.py --base-url http://127.0.0.1:3000 list --type fire
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class PokedexAPI:
    """Client for the Pokedex API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Server root, e.g. ``http://127.0.0.1:3000``.
            api_prefix: Prefix the routes are mounted under.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/") + "/" + api_prefix.strip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Result:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body
            (``None`` for empty responses such as 204).
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            return None, self._error_from_response(exc)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc), "id": None}

    @staticmethod
    def _error_from_response(exc: requests.HTTPError) -> Dict[str, Any]:
        response = exc.response
        status = response.status_code if response is not None else None
        message = ""
        error_id = None
        if response is not None:
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                message = body.get("message") or body.get("detail") or str(body)
                error_id = body.get("id")
            else:
                message = response.text
        if not message:
            message = str(exc)
        logger.error("API request failed (%s): %s", status, message)
        return {"status_code": status, "message": message, "id": error_id}

    # ------------------------------------------------------------------
    # Pokémon operations
    # ------------------------------------------------------------------
    def list_pokemon(
        self,
        *,
        type: Optional[str] = None,
        name: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Result:
        """List Pokémon matching the given filters.

        Returns:
            A tuple ``(page, error)`` where ``page`` is the listing body:
            ``count``, ``results`` and, for a failed name search, the
            ``suggestion`` and ``distance`` fields.
        """
        params = {
            key: value
            for key, value in {"type": type, "name": name, "limit": limit, "offset": offset}.items()
            if value is not None
        }
        return self._request("GET", "/pokemon", params=params)

    def get_pokemon(self, pokemon_id: Any) -> Result:
        """Retrieve a single Pokémon by id."""
        return self._request("GET", f"/pokemon/{pokemon_id}")

    def list_types(self) -> Tuple[List[str], Optional[Dict[str, Any]]]:
        """Return the sorted list of Pokémon types."""
        data, error = self._request("GET", "/types")
        if error or not isinstance(data, dict):
            return [], error
        return data.get("types", []), None

    def create_pokemon(self, payload: Dict[str, Any]) -> Result:
        """Create a Pokémon.

        Returns:
            A tuple ``(created, error)``; ``created["id"]`` is the new id.
        """
        return self._request("POST", "/pokemon", json_body=payload)

    def update_pokemon(self, pokemon_id: Any, payload: Dict[str, Any]) -> Result:
        """Update the given fields of a Pokémon and return the new record."""
        return self._request("PUT", f"/pokemon/{pokemon_id}", json_body=payload)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query a running Pokedex API.")
    parser.add_argument("--base-url", default="http://127.0.0.1:3000", help="Server root URL")
    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List Pokémon")
    list_cmd.add_argument("--type", dest="type")
    list_cmd.add_argument("--name")
    list_cmd.add_argument("--limit", type=int)
    list_cmd.add_argument("--offset", type=int)

    get_cmd = sub.add_parser("get", help="Show one Pokémon")
    get_cmd.add_argument("id")

    sub.add_parser("types", help="List all types")
    return parser


def main(argv: Optional[Sequence[str]] = None, client: Optional[PokedexAPI] = None) -> int:
    """Run the command line tool and return the process exit code."""
    args = _build_parser().parse_args(argv)
    client = client or PokedexAPI(base_url=args.base_url)

    if args.command == "list":
        data, error = client.list_pokemon(
            type=args.type, name=args.name, limit=args.limit, offset=args.offset
        )
    elif args.command == "get":
        data, error = client.get_pokemon(args.id)
    else:
        data, error = client.list_types()

    if error:
        print(f"Error ({error['status_code']}): {error['message']}", file=sys.stderr)
        return 1
    print(json.dumps(data, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    sys.exit(main())
