from __future__ import annotations

"""Command line for composing and running Jena Text reconciliation queries."""

import json
import logging
from typing import Sequence, Tuple

import click
import requests

from jenaRecon import __version__
from jenaRecon.config import load_config
from jenaRecon.kg.composer import JenaTextQueryFactory
from jenaRecon.kg.errors import QueryPreconditionError
from jenaRecon.kg.jena_client import JenaClient
from jenaRecon.models import IriValue, LiteralValue, PropertyContext, ReconciliationRequest
from jenaRecon.service.reconciler import Reconciler


def parse_property(raw: str) -> PropertyContext:
    """Parse ``PID=VALUE``; a value wrapped in ``<>`` is an IRI."""

    pid, sep, value = raw.partition("=")
    if not sep or not pid:
        raise click.BadParameter(f"expected PID=VALUE, got {raw!r}")
    if value.startswith("<") and value.endswith(">"):
        return PropertyContext(pid=pid, v=IriValue(value[1:-1]))
    return PropertyContext(pid=pid, v=LiteralValue(value))


def _label_properties(given: Sequence[str]) -> Tuple[str, ...]:
    if given:
        return tuple(given)
    try:
        return load_config().label_properties
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc


def _build_request(
    query: str, types: Sequence[str], properties: Sequence[str], limit: int
) -> ReconciliationRequest:
    try:
        return ReconciliationRequest(
            query=query,
            types=tuple(types),
            limit=limit,
            context=tuple(parse_property(p) for p in properties),
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


def _echo_items(items) -> None:
    click.echo(json.dumps({"result": [item.as_dict() for item in items]}, indent=2))


reconcile_options = [
    click.argument("query"),
    click.option("--type", "types", multiple=True, help="Candidate type IRI."),
    click.option("--property", "properties", multiple=True, help="Context PID=VALUE."),
    click.option("--label-property", "label_properties", multiple=True, help="Label predicate IRI."),
    click.option("--limit", type=int, default=10, show_default=True),
]


def with_reconcile_options(func):
    for option in reversed(reconcile_options):
        func = option(func)
    return func


@click.group()
@click.version_option(__version__)
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:  # pragma: no cover - simple wrapper
    """jenaRecon command line."""

    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@cli.command()
def describe() -> None:
    """Print the query dialect descriptor."""

    click.echo(json.dumps(JenaTextQueryFactory().descriptor()))


@cli.group()
def query() -> None:
    """Print composed SPARQL without executing it."""


@query.command(name="reconcile")
@with_reconcile_options
def query_reconcile(query, types, properties, label_properties, limit) -> None:
    request = _build_request(query, types, properties, limit)
    try:
        sparql = JenaTextQueryFactory().reconciliation_query(
            request, _label_properties(label_properties)
        )
    except QueryPreconditionError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(sparql)


@query.command(name="suggest-type")
@click.argument("prefix")
@click.option("--limit", type=int, default=10, show_default=True)
def query_suggest_type(prefix: str, limit: int) -> None:
    click.echo(JenaTextQueryFactory().type_suggest_query(prefix, limit))


@query.command(name="suggest-property")
@click.argument("prefix")
@click.option("--type", "type_uri", default=None, help="Restrict to subjects of this type.")
@click.option("--limit", type=int, default=10, show_default=True)
def query_suggest_property(prefix: str, type_uri: str | None, limit: int) -> None:
    click.echo(JenaTextQueryFactory().property_suggest_query(prefix, limit, type_uri))


@query.command(name="sample")
@click.argument("type_uri")
@click.option("--label-property", "label_properties", multiple=True)
@click.option("--limit", type=int, default=10, show_default=True)
def query_sample(type_uri: str, label_properties: Tuple[str, ...], limit: int) -> None:
    click.echo(
        JenaTextQueryFactory().sample_instances_query(
            type_uri, _label_properties(label_properties), limit
        )
    )


@query.command(name="search")
@click.argument("prefix")
@click.option("--label-property", "label_properties", multiple=True)
@click.option("--limit", type=int, default=10, show_default=True)
def query_search(prefix: str, label_properties: Tuple[str, ...], limit: int) -> None:
    click.echo(
        JenaTextQueryFactory().entity_search_query(
            prefix, _label_properties(label_properties), limit
        )
    )


@cli.group()
def run() -> None:
    """Execute queries against the configured Fuseki dataset."""


# Errors raised while executing against Fuseki that are reported as CLI errors.
EXECUTION_ERRORS = (QueryPreconditionError, RuntimeError, requests.RequestException)


def _open_client(dataset: str | None) -> JenaClient:
    try:
        return JenaClient(dataset)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc


@run.command(name="reconcile")
@with_reconcile_options
@click.option("--dataset", default=None, help="Fuseki dataset URL.")
@click.option("--unique/--all", default=True, show_default=True)
def run_reconcile(query, types, properties, label_properties, limit, dataset, unique) -> None:
    request = _build_request(query, types, properties, limit)
    client = _open_client(dataset)
    try:
        reconciler = Reconciler(client, _label_properties(label_properties))
        if unique:
            items = reconciler.reconcile_unique(request)
        else:
            items = reconciler.reconcile(request)
    except EXECUTION_ERRORS as exc:
        raise click.ClickException(str(exc)) from exc
    finally:
        client.close()
    _echo_items(items)


@run.command(name="suggest-type")
@click.argument("prefix")
@click.option("--limit", type=int, default=10, show_default=True)
@click.option("--dataset", default=None, help="Fuseki dataset URL.")
def run_suggest_type(prefix: str, limit: int, dataset: str | None) -> None:
    client = _open_client(dataset)
    try:
        items = Reconciler(client, ()).suggest_type(prefix, limit)
    except EXECUTION_ERRORS as exc:
        raise click.ClickException(str(exc)) from exc
    finally:
        client.close()
    _echo_items(items)


if __name__ == "__main__":  # pragma: no cover
    cli()
