"""
Shared CLI plumbing — shell lookup, --set parsing, result printing.
"""

from __future__ import annotations

import json
import sys

import click

from dufflectl.adapters.base import Shell
from dufflectl.core.models.result import Result


def get_shell(ctx: click.Context) -> Shell:
    """The shell registered on the root context by ``cli``."""
    return ctx.find_root().obj["shell"]


def parse_set_values(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...],
) -> dict[str, str]:
    """Click callback: ``("a=1", "b=x=y")`` → ``{"a": "1", "b": "x=y"}``."""
    params: dict[str, str] = {}
    for raw in values:
        key, sep, value = raw.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {raw!r}", param=param)
        params[key] = value
    return params


def report(result: Result, as_json: bool = False, done: str = "") -> None:
    """Print a Result and exit 1 on failure."""
    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.failed:
            sys.exit(1)
        return

    if result.failed:
        for err in result.errors:
            click.secho(f"❌ {err}", fg="red")
        sys.exit(1)

    if done:
        click.secho(f"✅ {done}", fg="green")


def report_lines(result: Result, as_json: bool, title: str, empty: str) -> None:
    """Print a line-list Result as a bulleted list."""
    if as_json or result.failed:
        report(result, as_json)
        return

    items = result.value or []
    if not items:
        click.secho(f"⚠️  {empty}", fg="yellow")
        return

    click.secho(f"{title} ({len(items)}):", fg="cyan", bold=True)
    for item in items:
        click.echo(f"   • {item}")
