"""Escaping of user text for Jena Text ``text:query`` literals."""
from __future__ import annotations

# Characters the Lucene classic query parser treats as syntax.
LUCENE_SPECIAL_CHARS = frozenset('\\+-!():^[]"{}~*?|&/')


def escape_lucene(text: str | None) -> str:
    """Backslash-escape every Lucene query syntax character in ``text``."""

    out = []
    for ch in text or "":
        if ch in LUCENE_SPECIAL_CHARS:
            out.append("\\")
        out.append(ch)
    return "".join(out)


def escape_query(text: str | None) -> str:
    """Return ``text`` safe to splice inside a single-quoted SPARQL string.

    Lucene escaping runs first; the SPARQL literal pass then doubles every
    backslash (including the ones just added) and escapes single quotes.
    """

    escaped = escape_lucene(text)
    return escaped.replace("\\", "\\\\").replace("'", "\\'")


__all__ = ["LUCENE_SPECIAL_CHARS", "escape_lucene", "escape_query"]
