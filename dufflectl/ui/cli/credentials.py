"""
CLI commands for credential sets.

Thin wrappers over ``dufflectl.core.services.duffle_ops``.
"""

from __future__ import annotations

import click

from dufflectl.ui.cli.output import get_shell, report, report_lines


@click.group()
def credentials() -> None:
    """Credentials — list, add, remove, generate credential sets."""


@credentials.command("list")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_cmd(ctx: click.Context, as_json: bool) -> None:
    """List credential sets."""
    from dufflectl.core.services.duffle_ops import list_credential_sets

    result = list_credential_sets(get_shell(ctx))
    report_lines(result, as_json, "🔑 Credential sets", "No credential sets")


@credentials.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.pass_context
def add(ctx: click.Context, files: tuple[str, ...]) -> None:
    """Import credential set FILES."""
    from dufflectl.core.services.duffle_ops import add_credential_sets

    result = add_credential_sets(get_shell(ctx), list(files))
    report(result, done=f"Added {len(files)} credential set file(s)")


@credentials.command()
@click.argument("name")
@click.pass_context
def remove(ctx: click.Context, name: str) -> None:
    """Remove credential set NAME."""
    from dufflectl.core.services.duffle_ops import delete_credential_set

    report(delete_credential_set(get_shell(ctx), name), done=f"Removed {name}")


@credentials.command()
@click.argument("name")
@click.option("--file", "-f", "bundle_file", type=click.Path(dir_okay=False), default=None,
              help="Generate for a local bundle file.")
@click.option("--bundle", "-b", "bundle_ref", default=None,
              help="Generate for a bundle reference.")
@click.pass_context
def generate(
    ctx: click.Context,
    name: str,
    bundle_file: str | None,
    bundle_ref: str | None,
) -> None:
    """Generate credential set NAME for a bundle."""
    from dufflectl.core.services.duffle_ops import (
        generate_credentials_for_bundle,
        generate_credentials_for_file,
    )

    if bool(bundle_file) == bool(bundle_ref):
        raise click.UsageError("Give exactly one of --file or --bundle.")

    shell = get_shell(ctx)
    if bundle_file:
        result = generate_credentials_for_file(shell, bundle_file, name)
    else:
        result = generate_credentials_for_bundle(shell, bundle_ref, name)
    report(result, done=f"Generated {name}")
