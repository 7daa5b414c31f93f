from __future__ import annotations

"""Value objects shared by the query composer and the result interpreter."""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple, Union

from rdflib import Literal, URIRef

DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class IriValue:
    """Context value pointing at another resource."""

    iri: str

    def as_sparql_value(self) -> str:
        return URIRef(self.iri).n3()


@dataclass(frozen=True)
class LiteralValue:
    """Context value holding a (possibly typed or tagged) literal."""

    value: str
    datatype: str | None = None
    lang: str | None = None

    def as_sparql_value(self) -> str:
        datatype = URIRef(self.datatype) if self.datatype else None
        return Literal(str(self.value), lang=self.lang, datatype=datatype).n3()


ContextValue = Union[IriValue, LiteralValue, str]


@dataclass(frozen=True)
class PropertyContext:
    """A ``(property, value)`` constraint the candidate entity must satisfy.

    ``v`` may be a value object or a SPARQL term the caller already rendered.
    """

    pid: str
    v: ContextValue

    def sparql_value(self) -> str:
        if isinstance(self.v, (IriValue, LiteralValue)):
            return self.v.as_sparql_value()
        return str(self.v or "")


@dataclass(frozen=True)
class ReconciliationRequest:
    query: str
    types: Tuple[str, ...] = ()
    limit: int = DEFAULT_LIMIT
    context: Tuple[PropertyContext, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit <= 0:
            raise ValueError(f"limit must be a positive integer, got {self.limit!r}")
        # normalise list arguments so the request stays hashable and read-only
        object.__setattr__(self, "types", tuple(self.types))
        object.__setattr__(self, "context", tuple(self.context))

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ReconciliationRequest":
        """Build a request from a reconciliation API query object.

        ``type`` may be a single IRI or a list; property values are either
        plain strings (literals) or ``{"id": iri}`` objects.
        """

        raw_types = payload.get("type") or ()
        if isinstance(raw_types, str):
            raw_types = (raw_types,)
        context = []
        for prop in payload.get("properties") or ():
            value = prop.get("v")
            if isinstance(value, Mapping):
                parsed: ContextValue = IriValue(str(value["id"]))
            else:
                parsed = LiteralValue(str(value))
            context.append(PropertyContext(pid=str(prop["pid"]), v=parsed))
        return cls(
            query=str(payload.get("query", "")),
            types=tuple(raw_types),
            limit=int(payload.get("limit") or DEFAULT_LIMIT),
            context=tuple(context),
        )


@dataclass(frozen=True)
class SearchResultItem:
    id: str
    name: str

    def as_dict(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.name}


__all__ = [
    "DEFAULT_LIMIT",
    "IriValue",
    "LiteralValue",
    "ContextValue",
    "PropertyContext",
    "ReconciliationRequest",
    "SearchResultItem",
]
