from __future__ import annotations

"""Minimal SPARQL HTTP client for a Jena Fuseki query endpoint."""

import logging
from typing import Any, Dict, Iterator, Mapping

import requests

logger = logging.getLogger(__name__)


class SPARQLClient:
    """Tiny wrapper around ``requests`` for running ``SELECT`` queries."""

    def __init__(
        self,
        endpoint: str = "http://localhost:3030/ds/sparql",
        *,
        timeout: float = 15,
    ) -> None:
        self.endpoint = endpoint
        self.session = requests.Session()
        self.timeout = timeout

    def select(self, query: str) -> Dict[str, Any]:
        """Execute a ``SELECT`` query and return parsed JSON."""

        resp = self.session.get(
            self.endpoint,
            params={"query": query},
            headers={"Accept": "application/sparql-results+json"},
            timeout=self.timeout,
        )
        if resp.status_code != 200:
            logger.error("SPARQL SELECT failed with status %s", resp.status_code)
            raise RuntimeError(f"SPARQL SELECT failed: {resp.status_code}")
        try:
            data = resp.json()
        except ValueError as exc:
            raise RuntimeError("Invalid JSON from SPARQL endpoint") from exc
        return data

    def iter_bindings(self, query: str) -> Iterator[Mapping[str, Any]]:
        """Yield the result bindings of a ``SELECT`` query one row at a time."""

        data = self.select(query)
        yield from data.get("results", {}).get("bindings", [])

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "SPARQLClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["SPARQLClient"]
