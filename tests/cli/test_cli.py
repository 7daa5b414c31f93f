from __future__ import annotations

import json

import requests
from click.testing import CliRunner

import jenaRecon.cli.__main__ as cli
import jenaRecon.kg.sparql as sparql

RDFS_LABEL = "http://www.w3.org/2000/01/rdf-schema#label"
SKOS_PREF = "http://www.w3.org/2004/02/skos/core#prefLabel"


def test_describe():
    result = CliRunner().invoke(cli.cli, ["describe"])
    assert result.exit_code == 0
    assert json.loads(result.output) == {"type": "jena-text"}


def test_query_reconcile_defaults_to_rdfs_label():
    result = CliRunner().invoke(cli.cli, ["query", "reconcile", "lond", "--limit", "5"])
    assert result.exit_code == 0, result.output
    assert f"text:query (<{RDFS_LABEL}> 'lond' 5)" in result.output
    assert "ORDER BY DESC(MAX(?score1)) LIMIT 5" in result.output


def test_query_reconcile_with_filters():
    result = CliRunner().invoke(
        cli.cli,
        [
            "query",
            "reconcile",
            "lond",
            "--type",
            "http://ex.org/City",
            "--property",
            "http://ex.org/country=<http://ex.org/UK>",
            "--property",
            "http://ex.org/code=LDN",
            "--label-property",
            RDFS_LABEL,
            "--label-property",
            SKOS_PREF,
            "--limit",
            "3",
        ],
    )
    assert result.exit_code == 0, result.output
    assert "{{?entity rdf:type <http://ex.org/City>. }}" in result.output
    assert "?entity <http://ex.org/country> <http://ex.org/UK>. " in result.output
    assert '?entity <http://ex.org/code> "LDN". ' in result.output
    assert result.output.strip().endswith("LIMIT 6")


def test_query_reconcile_bad_property():
    result = CliRunner().invoke(cli.cli, ["query", "reconcile", "x", "--property", "novalue"])
    assert result.exit_code != 0
    assert "PID=VALUE" in result.output


def test_query_reconcile_bad_limit():
    result = CliRunner().invoke(cli.cli, ["query", "reconcile", "x", "--limit", "0"])
    assert result.exit_code != 0


def test_query_label_properties_from_env(monkeypatch):
    monkeypatch.setenv("JENA_RECON_LABEL_PROPERTIES", SKOS_PREF)
    result = CliRunner().invoke(cli.cli, ["query", "search", "par", "--limit", "2"])
    assert result.exit_code == 0, result.output
    assert f"text:query (<{SKOS_PREF}> 'par*' 2)" in result.output


def test_query_suggest_commands():
    runner = CliRunner()
    typed = runner.invoke(cli.cli, ["query", "suggest-property", "na", "--type", "http://ex.org/C"])
    assert typed.exit_code == 0
    assert "[] a <http://ex.org/C>;" in typed.output
    types = runner.invoke(cli.cli, ["query", "suggest-type", "ci", "--limit", "4"])
    assert "rdfs:label 'ci*' 4" in types.output
    sample = runner.invoke(cli.cli, ["query", "sample", "http://ex.org/C"])
    assert "SAMPLE(?label)" in sample.output


def test_run_reconcile(monkeypatch):
    data = {
        "head": {"vars": ["entity", "label"]},
        "results": {
            "bindings": [
                {"entity": {"type": "uri", "value": "http://ex.org/a"}, "label": {"type": "literal", "value": "A"}},
                {"entity": {"type": "uri", "value": "http://ex.org/a"}, "label": {"type": "literal", "value": "A2"}},
            ]
        },
    }

    class Resp:
        status_code = 200

        def json(self):
            return data

    def fake_get(self, url, params=None, headers=None, timeout=None):
        assert url == "http://fuseki:3030/geo/sparql"
        return Resp()

    monkeypatch.setattr(sparql.requests.Session, "get", fake_get)
    result = CliRunner().invoke(
        cli.cli, ["run", "reconcile", "a", "--dataset", "http://fuseki:3030/geo"]
    )
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"result": [{"id": "http://ex.org/a", "name": "A"}]}


def test_run_reconcile_endpoint_failure(monkeypatch):
    class Resp:
        status_code = 502

    monkeypatch.setattr(sparql.requests.Session, "get", lambda self, *a, **kw: Resp())
    result = CliRunner().invoke(cli.cli, ["run", "reconcile", "a"])
    assert result.exit_code == 1
    assert "SPARQL SELECT failed: 502" in result.output


def test_run_reconcile_bad_timeout_is_clean_error(monkeypatch):
    monkeypatch.setenv("JENA_RECON_TIMEOUT", "soon")
    result = CliRunner().invoke(cli.cli, ["run", "reconcile", "a"])
    assert result.exit_code == 1
    assert "JENA_RECON_TIMEOUT" in result.output
    assert not isinstance(result.exception, ValueError)


def test_run_unreachable_endpoint_is_clean_error(monkeypatch):
    def refuse(self, *args, **kwargs):
        raise requests.ConnectionError("Connection refused")

    monkeypatch.setattr(sparql.requests.Session, "get", refuse)
    runner = CliRunner()
    for args in (["run", "reconcile", "a"], ["run", "suggest-type", "ci"]):
        result = runner.invoke(cli.cli, args)
        assert result.exit_code == 1
        assert "Connection refused" in result.output
