"""Thin convenience wrapper around :class:`jenaRecon.kg.sparql.SPARQLClient`."""
from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping

from jenaRecon.config import DEFAULT_DATASET_URL, load_config

from .sparql import SPARQLClient


def query_endpoint(dataset_url: str) -> str:
    """Return the ``/sparql`` endpoint of a Fuseki dataset URL."""

    base = dataset_url.rstrip("/")
    if base.endswith("/sparql"):
        return base
    return f"{base}/sparql"


class JenaClient:
    """Select helper bound to one Fuseki dataset."""

    def __init__(self, dataset_url: str | None = None, *, timeout: float | None = None) -> None:
        cfg = load_config()
        self.dataset_url = (dataset_url or cfg.dataset_url or DEFAULT_DATASET_URL).rstrip("/")
        self._client = SPARQLClient(
            endpoint=query_endpoint(self.dataset_url),
            timeout=timeout if timeout is not None else cfg.timeout,
        )

    def select(self, query: str) -> Dict[str, Any]:
        """Run a SPARQL SELECT query."""

        return self._client.select(query)

    def iter_bindings(self, query: str) -> Iterator[Mapping[str, Any]]:
        return self._client.iter_bindings(query)

    def close(self) -> None:
        self._client.close()


__all__ = ["JenaClient", "query_endpoint"]
