from __future__ import annotations

from typing import Any, Iterator, List, Mapping

import pytest

from jenaRecon.kg.errors import QueryPreconditionError
from jenaRecon.models import ReconciliationRequest, SearchResultItem
from jenaRecon.service.reconciler import Reconciler

RDFS_LABEL = "http://www.w3.org/2000/01/rdf-schema#label"
SKOS_PREF = "http://www.w3.org/2004/02/skos/core#prefLabel"


def uri(value: str) -> dict:
    return {"type": "uri", "value": value}


def lit(value: str) -> dict:
    return {"type": "literal", "value": value}


class FakeExecutor:
    def __init__(self, rows: List[Mapping[str, Any]]) -> None:
        self.rows = rows
        self.queries: List[str] = []

    def iter_bindings(self, query: str) -> Iterator[Mapping[str, Any]]:
        self.queries.append(query)
        yield from self.rows


class FailingExecutor:
    def iter_bindings(self, query: str) -> Iterator[Mapping[str, Any]]:
        raise RuntimeError("SPARQL SELECT failed: 503")


def test_reconcile_keeps_duplicates_and_unique_trims() -> None:
    executor = FakeExecutor(
        [
            {"entity": uri("http://ex.org/London"), "label": lit("London")},
            {"entity": uri("http://ex.org/London"), "label": lit("Londres")},
            {"entity": uri("http://ex.org/Londonderry"), "label": lit("Londonderry")},
        ]
    )
    reconciler = Reconciler(executor, [RDFS_LABEL, SKOS_PREF])
    request = ReconciliationRequest("lond", limit=2)

    assert len(reconciler.reconcile(request)) == 3
    assert reconciler.reconcile_unique(request) == [
        SearchResultItem("http://ex.org/London", "London"),
        SearchResultItem("http://ex.org/Londonderry", "Londonderry"),
    ]
    assert "LIMIT 4" in executor.queries[0]


def test_reconcile_without_properties_never_executes() -> None:
    executor = FakeExecutor([])
    reconciler = Reconciler(executor, [])
    with pytest.raises(QueryPreconditionError):
        reconciler.reconcile(ReconciliationRequest("lond", limit=2))
    assert executor.queries == []


def test_execution_errors_propagate() -> None:
    reconciler = Reconciler(FailingExecutor(), [RDFS_LABEL])
    with pytest.raises(RuntimeError, match="503"):
        reconciler.reconcile(ReconciliationRequest("lond", limit=2))


def test_suggest_type_picks_best_label() -> None:
    executor = FakeExecutor(
        [
            {
                "type": uri("http://ex.org/City"),
                "label1": lit("City"),
                "score1": lit("0.3"),
                "label2": lit("Urban area"),
                "score2": lit("0.6"),
            }
        ]
    )
    items = Reconciler(executor, [RDFS_LABEL]).suggest_type("ci", 5)
    assert items == [SearchResultItem("http://ex.org/City", "Urban area")]
    assert "SELECT DISTINCT ?type" in executor.queries[0]


def test_suggest_property_scoped_to_type() -> None:
    executor = FakeExecutor([{"p": uri("http://ex.org/name"), "label1": lit("name"), "score1": lit("1")}])
    items = Reconciler(executor, [RDFS_LABEL]).suggest_property("na", 5, "http://ex.org/City")
    assert items == [SearchResultItem("http://ex.org/name", "name")]
    assert "[] a <http://ex.org/City>;" in executor.queries[0]


def test_sample_instances() -> None:
    executor = FakeExecutor([{"entity": uri("http://ex.org/a"), "label1": lit("A")}])
    items = Reconciler(executor, [SKOS_PREF]).sample_instances("http://ex.org/City", 1)
    assert items == [SearchResultItem("http://ex.org/a", "A")]
    assert f"<{SKOS_PREF}> ?label" in executor.queries[0]


def test_search_entities_returns_unique_top() -> None:
    executor = FakeExecutor(
        [
            {"entity": uri("http://ex.org/a"), "label": lit("A")},
            {"entity": uri("http://ex.org/a"), "label": lit("Alpha")},
            {"entity": uri("http://ex.org/b"), "label": lit("B")},
        ]
    )
    items = Reconciler(executor, [RDFS_LABEL, SKOS_PREF]).search_entities("a", 1)
    assert items == [SearchResultItem("http://ex.org/a", "A")]
    assert executor.queries[0].endswith("LIMIT 2")
