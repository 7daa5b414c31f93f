from __future__ import annotations

"""Namespaces used by the Jena Text query skeletons."""

from rdflib import Namespace
from rdflib.namespace import RDF, RDFS, SKOS

TEXT_NS = "http://jena.apache.org/text#"
TEXT = Namespace(TEXT_NS)

RDFS_LABEL = str(RDFS.label)
SKOS_PREF_LABEL = str(SKOS.prefLabel)

# Prefix declarations shared by the skeletons, keyed by prefix.
PREFIXES: dict[str, str] = {
    "text": TEXT_NS,
    "rdfs": str(RDFS),
    "rdf": str(RDF),
    "skos": str(SKOS),
}


def prefix_block(*names: str) -> str:
    """Render ``PREFIX`` lines for ``names`` on a single line."""

    return " ".join(f"PREFIX {name}:<{PREFIXES[name]}>" for name in names)


__all__ = ["TEXT_NS", "TEXT", "RDFS_LABEL", "SKOS_PREF_LABEL", "PREFIXES", "prefix_block"]
