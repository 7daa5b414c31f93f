from __future__ import annotations

"""Run composed Jena Text queries and interpret their rows.

The reconciler glues :class:`~jenaRecon.kg.composer.JenaTextQueryFactory`, an
executor exposing ``iter_bindings(query)`` and the result wrappers. Executor
errors are not caught here; they surface to the caller unchanged.
"""

import logging
from typing import Any, Callable, Iterable, Iterator, List, Mapping, Protocol, Sequence

from jenaRecon.kg import results
from jenaRecon.kg.composer import JenaTextQueryFactory
from jenaRecon.models import ReconciliationRequest, SearchResultItem

logger = logging.getLogger(__name__)


class QueryExecutor(Protocol):
    def iter_bindings(self, query: str) -> Iterator[Mapping[str, Any]]:
        ...


class Reconciler:
    """Reconcile and suggest against one dataset and set of label properties."""

    def __init__(
        self,
        client: QueryExecutor,
        search_properties: Sequence[str],
        factory: JenaTextQueryFactory | None = None,
    ) -> None:
        self.client = client
        self.search_properties = tuple(search_properties)
        self.factory = factory or JenaTextQueryFactory()

    def _run(
        self,
        operation: str,
        query: str,
        wrap: Callable[[Iterable[Mapping[str, Any]]], List[SearchResultItem]],
    ) -> List[SearchResultItem]:
        items = wrap(self.client.iter_bindings(query))
        logger.info("%s returned %d rows", operation, len(items))
        return items

    def suggest_type(self, prefix: str, limit: int) -> List[SearchResultItem]:
        query = self.factory.type_suggest_query(prefix, limit)
        return self._run("suggest_type", query, results.wrap_type_suggest_result_set)

    def suggest_property(
        self, prefix: str, limit: int, type_uri: str | None = None
    ) -> List[SearchResultItem]:
        query = self.factory.property_suggest_query(prefix, limit, type_uri)
        return self._run("suggest_property", query, results.wrap_property_suggest_result_set)

    def reconcile(self, request: ReconciliationRequest) -> List[SearchResultItem]:
        """Return every interpreted row; an entity may appear more than once."""

        query = self.factory.reconciliation_query(request, self.search_properties)
        return self._run("reconcile", query, results.wrap_reconciliation_result_set)

    def reconcile_unique(self, request: ReconciliationRequest) -> List[SearchResultItem]:
        return results.unique_top(self.reconcile(request), request.limit)

    def sample_instances(self, type_uri: str, limit: int) -> List[SearchResultItem]:
        query = self.factory.sample_instances_query(type_uri, self.search_properties, limit)
        return self._run("sample_instances", query, results.wrap_sample_instances_result_set)

    def search_entities(self, prefix: str, limit: int) -> List[SearchResultItem]:
        query = self.factory.entity_search_query(prefix, self.search_properties, limit)
        items = self._run("search_entities", query, results.wrap_entity_search_result_set)
        return results.unique_top(items, limit)


__all__ = ["Reconciler", "QueryExecutor"]
