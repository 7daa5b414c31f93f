"""Compose Jena Text SPARQL queries for reconciliation and suggest calls.

Queries follow the syntax documented at
https://jena.apache.org/documentation/query/text-query.html. The factory holds
no state; build a new one per call if convenient.
"""
from __future__ import annotations

import json
import logging
from typing import IO, Dict, Iterable, List, Sequence

from jenaRecon.kg.errors import QueryPreconditionError
from jenaRecon.kg.escape import escape_query
from jenaRecon.kg.filters import build_context_filter, build_label_filter, build_type_filter
from jenaRecon.kg.shapes import (
    EntitySearch,
    PropertySuggest,
    QueryShape,
    ReconcileMulti,
    ReconcileSingle,
    SampleInstances,
    TypeSuggest,
)
from jenaRecon.models import ReconciliationRequest

logger = logging.getLogger(__name__)

DIALECT = "jena-text"


def calculated_limit(n_properties: int, limit: int) -> int:
    """Return the row limit for a search over ``n_properties`` predicates.

    Each predicate can contribute up to ``limit`` rows for the same entity, so
    the query asks for enough rows to still hold ``limit`` unique entities.
    """

    return max(n_properties, 1) * limit


def _unique(properties: Iterable[str]) -> List[str]:
    seen: Dict[str, None] = {}
    for prop in properties:
        seen.setdefault(prop, None)
    return list(seen)


def _require_properties(properties: Sequence[str], operation: str) -> None:
    if not properties:
        raise QueryPreconditionError(
            code="no_label_properties",
            message=f"{operation} requires at least one label property",
        )


class JenaTextQueryFactory:
    """Build the SPARQL text for every supported query shape."""

    def type_suggest_query(self, prefix: str, limit: int) -> str:
        return self._render(TypeSuggest(query=escape_query(prefix), limit=limit))

    def property_suggest_query(
        self, prefix: str, limit: int, type_uri: str | None = None
    ) -> str:
        return self._render(
            PropertySuggest(query=escape_query(prefix), limit=limit, type_uri=type_uri)
        )

    def reconciliation_shape(
        self, request: ReconciliationRequest, search_properties: Sequence[str]
    ) -> QueryShape:
        """Pick the reconcile shape for ``request``.

        A single label property gets the index-ranked fast path; several are
        searched as a UNION whose rows are ordered by the engine only.
        """

        properties = _unique(search_properties)
        _require_properties(properties, "reconciliation query")
        query = escape_query(request.query)
        limit = calculated_limit(len(properties), request.limit)
        type_filter = build_type_filter(request.types)
        context_filter = build_context_filter(request.context)
        if len(properties) == 1:
            return ReconcileSingle(
                query=query,
                limit=limit,
                label_property=properties[0],
                type_filter=type_filter,
                context_filter=context_filter,
            )
        return ReconcileMulti(
            query=query,
            limit=limit,
            label_filter=build_label_filter(properties),
            type_filter=type_filter,
            context_filter=context_filter,
        )

    def reconciliation_query(
        self, request: ReconciliationRequest, search_properties: Sequence[str]
    ) -> str:
        return self._render(self.reconciliation_shape(request, search_properties))

    def sample_instances_query(
        self, type_uri: str, search_properties: Sequence[str], limit: int
    ) -> str:
        properties = _unique(search_properties)
        _require_properties(properties, "sample instances query")
        return self._render(
            SampleInstances(type_uri=type_uri, label_property=properties[0], limit=limit)
        )

    def entity_search_query(
        self, prefix: str, search_properties: Sequence[str], limit: int
    ) -> str:
        properties = _unique(search_properties)
        _require_properties(properties, "entity search query")
        return self._render(
            EntitySearch(
                query=escape_query(prefix),
                limit=calculated_limit(len(properties), limit),
                label_filter=build_label_filter(properties),
            )
        )

    def descriptor(self) -> Dict[str, str]:
        return {"type": DIALECT}

    def write(self, fh: IO[str]) -> None:
        """Serialise :meth:`descriptor` as JSON to ``fh``."""

        json.dump(self.descriptor(), fh)

    @staticmethod
    def _render(shape: QueryShape) -> str:
        logger.debug("Composing %s query", shape.name)
        return shape.render()


__all__ = ["DIALECT", "JenaTextQueryFactory", "calculated_limit"]
