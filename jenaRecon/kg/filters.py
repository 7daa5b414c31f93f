from __future__ import annotations

"""Builders for the optional fragments spliced into reconcile queries.

Every non-empty fragment ends with a trailing space (or a closing brace) so
fragments can be concatenated in any order without a separator.
"""

from typing import Iterable, Sequence

from jenaRecon.kg.errors import QueryPreconditionError
from jenaRecon.models import PropertyContext


def build_type_filter(types: Sequence[str]) -> str:
    """Return a UNION requiring ``?entity`` to have any of ``types``."""

    if not types:
        return ""
    branches = " UNION ".join(f"{{?entity rdf:type <{t}>. }}" for t in types)
    return f" {{{branches}}}"


def build_context_filter(properties: Iterable[PropertyContext]) -> str:
    """Return one ``?entity <pid> value.`` clause per context property."""

    clauses = []
    for prop in properties:
        try:
            value = prop.sparql_value().strip()
        except (TypeError, ValueError) as exc:
            raise QueryPreconditionError(
                code="context_value_invalid",
                message=f"context value for property <{prop.pid}> cannot be rendered: {exc}",
            ) from exc
        if not value:
            raise QueryPreconditionError(
                code="context_value_missing",
                message=f"context value for property <{prop.pid}> is empty",
            )
        clauses.append(f"?entity <{prop.pid}> {value}. ")
    return "".join(clauses)


def build_label_filter(label_properties: Sequence[str]) -> str:
    """Return a UNION of one text search branch per label predicate.

    The result is a :class:`string.Template` body: ``${query}`` and
    ``${limit}`` are left in place and filled by the shape that embeds it.
    """

    branches = []
    for prop in label_properties:
        iri = prop.replace("$", "$$")
        branches.append(
            f"{{?entity text:query (<{iri}> '${{query}}*' ${{limit}}) . "
            f"?entity <{iri}> ?label . }}"
        )
    return " UNION ".join(branches)


__all__ = ["build_type_filter", "build_context_filter", "build_label_filter"]
