from __future__ import annotations

"""Registry of the SPARQL query shapes understood by Jena Text.

Each shape is a frozen dataclass holding exactly the values its skeleton
needs and a ``render`` method performing one :class:`string.Template`
substitution. ``Template.substitute`` fills every occurrence of a placeholder
and raises ``KeyError`` for a missing one, so a rendered query never carries a
leftover placeholder. Values are inserted verbatim and are expected to be
escaped already (see :mod:`jenaRecon.kg.escape`).
"""

from dataclasses import dataclass
from string import Template
from typing import ClassVar, Dict, Type, Union

from jenaRecon.kg.namespaces import prefix_block

_SUGGEST_PREFIXES = prefix_block("text", "rdfs", "skos")

# The two OPTIONAL branches bind label1/score1 and label2/score2; the FILTER
# guarantees at least one of them is present on every row.
_SCORED_LABEL_BRANCHES = (
    "OPTIONAL {(?$var ?score1) text:query (rdfs:label '${query}*' ${limit}) . "
    "?$var rdfs:label ?label1 . }"
    "OPTIONAL {(?$var ?score2) text:query (skos:prefLabel '${query}*' ${limit}) . "
    "?$var skos:prefLabel ?label2 . }"
    "FILTER (bound(?label1) || bound(?label2))"
)


def _scored(var: str) -> str:
    return Template(_SCORED_LABEL_BRANCHES).safe_substitute(var=var)


@dataclass(frozen=True)
class TypeSuggest:
    query: str
    limit: int

    name: ClassVar[str] = "type-suggest"
    template: ClassVar[Template] = Template(
        _SUGGEST_PREFIXES
        + " SELECT DISTINCT ?type ?label1 ?score1 ?label2 ?score2 "
        "WHERE {"
        "[] a ?type. "
        + _scored("type")
        + "} LIMIT ${limit}"
    )

    def render(self) -> str:
        return self.template.substitute(query=self.query, limit=self.limit)


@dataclass(frozen=True)
class PropertySuggest:
    query: str
    limit: int
    type_uri: str | None = None

    name: ClassVar[str] = "property-suggest"
    template: ClassVar[Template] = Template(
        _SUGGEST_PREFIXES
        + " SELECT DISTINCT ?p ?label1 ?score1 ?label2 ?score2 "
        "WHERE {"
        "[] ?p ?v. "
        + _scored("p")
        + "} LIMIT ${limit}"
    )
    typed_template: ClassVar[Template] = Template(
        _SUGGEST_PREFIXES
        + " SELECT DISTINCT ?p ?label1 ?score1 ?label2 ?score2 "
        "WHERE {"
        "[] a <${type_uri}>; ?p ?v. "
        + _scored("p")
        + "} LIMIT ${limit}"
    )

    def render(self) -> str:
        if self.type_uri:
            return self.typed_template.substitute(
                query=self.query, limit=self.limit, type_uri=self.type_uri
            )
        return self.template.substitute(query=self.query, limit=self.limit)


@dataclass(frozen=True)
class ReconcileSingle:
    """Search one label predicate and let the index rank the matches."""

    query: str
    limit: int
    label_property: str
    type_filter: str = ""
    context_filter: str = ""

    name: ClassVar[str] = "reconcile-single"
    template: ClassVar[Template] = Template(
        prefix_block("rdfs", "text", "rdf")
        + " SELECT ?entity ?label "
        "WHERE { "
        "(?entity ?score1) text:query (<${label_property}> '${query}' ${limit}) . "
        "?entity <${label_property}> ?label . "
        "${type_filter}"
        "${context_filter}"
        " FILTER (isIRI(?entity))} GROUP BY ?entity ?label "
        "ORDER BY DESC(MAX(?score1)) LIMIT ${limit}"
    )

    def render(self) -> str:
        return self.template.substitute(
            query=self.query,
            limit=self.limit,
            label_property=self.label_property,
            type_filter=self.type_filter,
            context_filter=self.context_filter,
        )


@dataclass(frozen=True)
class ReconcileMulti:
    """Search several label predicates as one UNION; no global ordering."""

    query: str
    limit: int
    label_filter: str
    type_filter: str = ""
    context_filter: str = ""

    name: ClassVar[str] = "reconcile-multi"
    template: ClassVar[Template] = Template(
        prefix_block("text", "rdfs", "rdf", "skos")
        + " SELECT ?entity ?label "
        "WHERE {"
        "${label_filter}"
        "${type_filter}"
        "${context_filter}"
        " FILTER (isIRI(?entity))} GROUP BY ?entity ?label "
        "LIMIT ${limit}"
    )

    def render(self) -> str:
        label_filter = Template(self.label_filter).substitute(
            query=self.query, limit=self.limit
        )
        return self.template.substitute(
            limit=self.limit,
            label_filter=label_filter,
            type_filter=self.type_filter,
            context_filter=self.context_filter,
        )


@dataclass(frozen=True)
class SampleInstances:
    type_uri: str
    label_property: str
    limit: int

    name: ClassVar[str] = "sample-instances"
    template: ClassVar[Template] = Template(
        "SELECT ?entity (SAMPLE(?label) AS ?label1) "
        "WHERE {"
        "?entity a <${type_uri}>. "
        "?entity <${label_property}> ?label. "
        "} GROUP BY ?entity LIMIT ${limit}"
    )

    def render(self) -> str:
        return self.template.substitute(
            type_uri=self.type_uri, label_property=self.label_property, limit=self.limit
        )


@dataclass(frozen=True)
class EntitySearch:
    query: str
    limit: int
    label_filter: str

    name: ClassVar[str] = "entity-search"
    template: ClassVar[Template] = Template(
        _SUGGEST_PREFIXES
        + " SELECT ?entity ?label "
        "WHERE {"
        "${label_filter}"
        "} LIMIT ${limit}"
    )

    def render(self) -> str:
        label_filter = Template(self.label_filter).substitute(
            query=self.query, limit=self.limit
        )
        return self.template.substitute(limit=self.limit, label_filter=label_filter)


QueryShape = Union[
    TypeSuggest, PropertySuggest, ReconcileSingle, ReconcileMulti, SampleInstances, EntitySearch
]

SHAPES: Dict[str, Type] = {
    cls.name: cls
    for cls in (
        TypeSuggest,
        PropertySuggest,
        ReconcileSingle,
        ReconcileMulti,
        SampleInstances,
        EntitySearch,
    )
}


__all__ = [
    "TypeSuggest",
    "PropertySuggest",
    "ReconcileSingle",
    "ReconcileMulti",
    "SampleInstances",
    "EntitySearch",
    "QueryShape",
    "SHAPES",
]
