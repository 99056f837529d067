"""Pathwright CLI - Main Entry Point.

Commands:
    routes - List the routes of a route table
    check  - Compile every route and report faults
    match  - Resolve a request against a route table
    url    - Reverse-generate the URL of a named route
"""

import json
import logging
import sys
from typing import Optional

import click

from . import __version__, __cli_name__
from .utils.colors import (
    success, error, info, warning, dim, bold,
    section, kv, table,
    _ARROW, _CHECK, _CROSS,
)
from ..config import ConfigLoader
from ..faults import Fault
from ..routing import Resolver, RouteRegistry, load_routes, read_route_table, normalize_methods


def _routes_file_option(fn):
    return click.option(
        '--file', '-f', 'routes_file',
        required=True,
        type=click.Path(exists=True, dir_okay=False),
        help='Route table (YAML or JSON)',
    )(fn)


def _build_resolver(ctx: click.Context, routes_file: str) -> Resolver:
    registry = RouteRegistry()
    load_routes(registry, routes_file)
    registry.freeze()
    return Resolver(registry, ctx.obj['config'])


@click.group()
@click.version_option(version=__version__, prog_name=__cli_name__)
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.option('--quiet', '-q', is_flag=True, help='Minimal output')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True, dir_okay=False),
              help='Config file (YAML or JSON)')
@click.pass_context
def cli(ctx, verbose: bool, quiet: bool, config_file: Optional[str]):
    """Typed route templates: list, check, match and reverse-generate.

    \b
    Quick start:
      pathwright routes -f routes.yaml
      pathwright match -f routes.yaml GET /users/42
      pathwright url -f routes.yaml user_show id=42
    """
    level = logging.DEBUG if verbose else logging.ERROR if quiet else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    ctx.obj['quiet'] = quiet

    try:
        loader = ConfigLoader.load(paths=[config_file] if config_file else None)
        ctx.obj['config'] = loader.router_config()
    except Fault as e:
        error(f"  {_CROSS} Invalid configuration: {e}")
        sys.exit(1)


# ============================================================================
# Commands
# ============================================================================

@cli.command('routes')
@_routes_file_option
@click.option('--json', 'as_json', is_flag=True, help='Output as JSON')
@click.pass_context
def routes(ctx, routes_file: str, as_json: bool):
    """
    List every route with its methods, template and endpoint.

    Examples:
      pathwright routes -f routes.yaml
      pathwright routes -f routes.yaml --json
    """
    try:
        registry = _build_resolver(ctx, routes_file).registry
    except Fault as e:
        error(f"  {_CROSS} {e}")
        sys.exit(1)

    if as_json:
        payload = []
        for template in registry:
            entry = template.to_dict()
            entry["methods"] = registry.methods_for(template.name)
            payload.append(entry)
        click.echo(json.dumps(payload, indent=2))
        return

    rows = []
    for template in registry:
        endpoint = template.to_dict()["endpoint"]
        rows.append([
            "|".join(registry.methods_for(template.name)),
            template.name,
            template.raw,
            "" if endpoint is None else str(endpoint),
        ])

    if not ctx.obj['quiet']:
        section(f"Routes ({len(rows)})")
    table(["Method", "Name", "Template", "Endpoint"], rows)


@cli.command('check')
@_routes_file_option
@click.pass_context
def check(ctx, routes_file: str):
    """
    Compile every route of a table and report each fault.

    Unlike ``routes`` this does not stop at the first bad entry.
    """
    try:
        table_data = read_route_table(routes_file)
    except Fault as e:
        error(f"  {_CROSS} {e}")
        sys.exit(1)

    entries = table_data.get("routes") or []
    registry = RouteRegistry()
    failures = 0

    for index, entry in enumerate(entries):
        try:
            load_routes(registry, {"routes": [entry]})
        except Fault as e:
            failures += 1
            label = entry.get("name", f"#{index}") if isinstance(entry, dict) else f"#{index}"
            error(f"  {_CROSS} {label}: {e}")
            continue

        if ctx.obj['verbose']:
            dim(f"  {_CHECK} {entry['name']}  {entry['template']}")

    if failures:
        error(f"  {_CROSS} {failures} of {len(entries)} routes failed")
        sys.exit(1)

    if not ctx.obj['quiet']:
        success(f"  {_CHECK} {len(entries)} routes compiled")


@cli.command('match')
@_routes_file_option
@click.argument('method')
@click.argument('uri')
@click.option('--all', 'show_all', is_flag=True, help='List every matching route, not just the winner')
@click.pass_context
def match(ctx, routes_file: str, method: str, uri: str, show_all: bool):
    """
    Resolve METHOD and URI and print the route and its decoded parameters.

    URI is cleaned first (query string and base URI removed).

    Examples:
      pathwright match -f routes.yaml GET /users/42
      pathwright match -f routes.yaml GET "/users/42?tab=posts" --all
    """
    from ..patterns import match_all
    from ..utils.urls import clean_uri

    try:
        method = normalize_methods(method)[0]
        resolver = _build_resolver(ctx, routes_file)
    except Fault as e:
        error(f"  {_CROSS} {e}")
        sys.exit(1)

    path = clean_uri(uri, resolver.config.base_uri)
    result = resolver.resolve_match(method, path)
    if result is None:
        error(f"  {_CROSS} No route matches {method} {path}")
        sys.exit(1)

    try:
        params = result.decode()
    except Fault as e:
        error(f"  {_CROSS} {result.template.name}: {e}")
        sys.exit(1)

    success(f"  {_CHECK} {method} {path} {_ARROW} {bold(result.template.name)}")
    if not ctx.obj['quiet']:
        kv("Template", result.template.raw)
        for name, value in params.items():
            kv(name, repr(value))

    if show_all:
        others = match_all(resolver.registry.routes_for_method(method).values(), path)[1:]
        for other in others:
            dim(f"  shadowed: {other.template.name}  {other.template.raw}")


@cli.command('url')
@_routes_file_option
@click.argument('name')
@click.argument('values', nargs=-1)
@click.option('--host', is_flag=True, help='Prefix with the configured app URL')
@click.pass_context
def url(ctx, routes_file: str, name: str, values: tuple, host: bool):
    """
    Reverse-generate the URL of route NAME.

    VALUES are key=value pairs; each value is decoded with the type of
    the parameter it fills.

    Examples:
      pathwright url -f routes.yaml user_show id=42
      pathwright url -f routes.yaml post_show slug=hello%20world --host
    """
    try:
        resolver = _build_resolver(ctx, routes_file)
    except Fault as e:
        error(f"  {_CROSS} {e}")
        sys.exit(1)

    template = resolver.find_by_name(name)
    if template is None:
        error(f"  {_CROSS} Unknown route '{name}'")
        sys.exit(1)

    typed = {}
    for pair in values:
        key, sep, raw = pair.partition("=")
        if not sep:
            error(f"  {_CROSS} Expected key=value, got '{pair}'")
            sys.exit(1)

        param_type = template.parameters.get(key)
        if param_type is None:
            warning(f"  Ignoring unknown parameter '{key}'")
            continue

        try:
            typed[key] = param_type.decode_from_string(raw)
        except Fault as e:
            error(f"  {_CROSS} {key}: {e}")
            sys.exit(1)

    result = template.build(typed)
    if not result.ok:
        error(f"  {_CROSS} {result.missing}")
        sys.exit(1)

    if ctx.obj['verbose']:
        info(f"  {template.raw}")
    click.echo(resolver.reverse_generate(name, typed, with_host=host))


def main():
    """Entry point for `pathwright` command."""
    cli(obj={})


if __name__ == '__main__':
    main()
