from __future__ import annotations

import pytest

from jenaRecon.kg.shapes import SHAPES, EntitySearch, ReconcileMulti, TypeSuggest


def test_registry_names() -> None:
    assert sorted(SHAPES) == [
        "entity-search",
        "property-suggest",
        "reconcile-multi",
        "reconcile-single",
        "sample-instances",
        "type-suggest",
    ]


def test_shapes_are_immutable() -> None:
    shape = TypeSuggest(query="x", limit=1)
    with pytest.raises(AttributeError):
        shape.limit = 2  # type: ignore[misc]


def test_label_filter_missing_placeholder_value_raises() -> None:
    shape = EntitySearch(query="x", limit=1, label_filter="{ ${unknown} }")
    with pytest.raises(KeyError):
        shape.render()


def test_reconcile_multi_renders_fragments_in_order() -> None:
    shape = ReconcileMulti(
        query="q",
        limit=2,
        label_filter="{L '${query}' ${limit}}",
        type_filter="{T}",
        context_filter="C. ",
    )
    assert "WHERE {{L 'q' 2}{T}C.  FILTER (isIRI(?entity))}" in shape.render()
