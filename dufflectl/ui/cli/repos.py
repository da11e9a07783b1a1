"""
CLI commands for bundle repositories.
"""

from __future__ import annotations

import click

from dufflectl.ui.cli.output import get_shell, report_lines


@click.group()
def repos() -> None:
    """Repos — known bundle repositories."""


@repos.command("list")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_cmd(ctx: click.Context, as_json: bool) -> None:
    """List bundle repositories."""
    from dufflectl.core.services.duffle_ops import list_repos

    report_lines(list_repos(get_shell(ctx)), as_json, "🌐 Repositories", "No repositories")
