
"""Query composition and result interpretation for Jena Text."""

__all__ = [
    "JenaTextQueryFactory",
    "QueryPreconditionError",
    "SPARQLClient",
    "escape_query",
    "resolve_label",
    "wrap_result_set",
]

from .composer import JenaTextQueryFactory
from .errors import QueryPreconditionError
from .escape import escape_query
from .results import resolve_label, wrap_result_set
from .sparql import SPARQLClient
