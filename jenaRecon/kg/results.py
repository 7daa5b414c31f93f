from __future__ import annotations

"""Turn SPARQL JSON result bindings into :class:`SearchResultItem` values.

Rows are the ``results.bindings`` entries of a SPARQL JSON response, i.e.
mappings from variable name to ``{"type": ..., "value": ...}``. Variables
bound only by an OPTIONAL branch are simply absent from the row.
"""

import math
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Tuple

from jenaRecon.models import SearchResultItem

Row = Mapping[str, Mapping[str, Any]]
ScoredLabel = Tuple[Optional[str], Optional[float]]

# Suggest queries search rdfs:label and skos:prefLabel in two OPTIONAL slots.
DEFAULT_LABEL_SLOTS = 2


def binding_value(row: Row, name: str) -> str | None:
    binding = row.get(name)
    if not binding:
        return None
    return binding.get("value")


def binding_float(row: Row, name: str) -> float | None:
    value = binding_value(row, name)
    if value is None:
        return None
    try:
        score = float(value)
    except ValueError:
        return None
    # non-finite scores count as absent
    return score if math.isfinite(score) else None


def best_scored_label(candidates: Iterable[ScoredLabel]) -> str:
    """Return the label with the highest score.

    Candidates without a score are skipped. Equal scores keep the earlier
    candidate, and an empty string is returned when nothing is scored.
    """

    best_label = ""
    best_score: float | None = None
    for label, score in candidates:
        if score is None:
            continue
        if best_score is None or score > best_score:
            best_label = label or ""
            best_score = score
    return best_label


def resolve_label(row: Row, slots: int = DEFAULT_LABEL_SLOTS) -> str:
    """Pick the authoritative label among ``label1/score1 .. labelN/scoreN``."""

    return best_scored_label(
        (binding_value(row, f"label{i}"), binding_float(row, f"score{i}"))
        for i in range(1, slots + 1)
    )


def wrap_result_set(rows: Iterable[Row], id_field: str) -> List[SearchResultItem]:
    """Map each scored suggest row to an item, keeping row order.

    Rows are not merged by identifier; see :func:`unique_top`.
    """

    return [
        SearchResultItem(id=binding_value(row, id_field) or "", name=resolve_label(row))
        for row in rows
    ]


def wrap_type_suggest_result_set(rows: Iterable[Row]) -> List[SearchResultItem]:
    return wrap_result_set(rows, "type")


def wrap_property_suggest_result_set(rows: Iterable[Row]) -> List[SearchResultItem]:
    return wrap_result_set(rows, "p")


def _wrap_labelled(rows: Iterable[Row], label_field: str) -> List[SearchResultItem]:
    return [
        SearchResultItem(
            id=binding_value(row, "entity") or "",
            name=binding_value(row, label_field) or "",
        )
        for row in rows
    ]


def wrap_reconciliation_result_set(rows: Iterable[Row]) -> List[SearchResultItem]:
    return _wrap_labelled(rows, "label")


def wrap_entity_search_result_set(rows: Iterable[Row]) -> List[SearchResultItem]:
    return _wrap_labelled(rows, "label")


def wrap_sample_instances_result_set(rows: Iterable[Row]) -> List[SearchResultItem]:
    return _wrap_labelled(rows, "label1")


def iter_unique(items: Iterable[SearchResultItem]) -> Iterator[SearchResultItem]:
    seen: set[str] = set()
    for item in items:
        if item.id in seen:
            continue
        seen.add(item.id)
        yield item


def unique_top(items: Iterable[SearchResultItem], limit: int) -> List[SearchResultItem]:
    """Return the first ``limit`` items with distinct identifiers."""

    out: List[SearchResultItem] = []
    if limit <= 0:
        return out
    for item in iter_unique(items):
        out.append(item)
        if len(out) >= limit:
            break
    return out


__all__ = [
    "DEFAULT_LABEL_SLOTS",
    "binding_value",
    "binding_float",
    "best_scored_label",
    "resolve_label",
    "wrap_result_set",
    "wrap_type_suggest_result_set",
    "wrap_property_suggest_result_set",
    "wrap_reconciliation_result_set",
    "wrap_entity_search_result_set",
    "wrap_sample_instances_result_set",
    "iter_unique",
    "unique_top",
]
