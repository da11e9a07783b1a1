"""
dufflectl — CLI entrypoint.

Usage:
    python -m dufflectl.main --help
    python -m dufflectl.main version
    python -m dufflectl.main bundles list
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from dufflectl import __version__
from dufflectl.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="dufflectl")
@click.option("--verbose", "-v", is_flag=True, help="Show duffle commands and output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to dufflectl.yml (default: auto-detect).",
)
@click.option(
    "--resources",
    "resources_path",
    type=click.Path(file_okay=False),
    default=None,
    help="Application resources root holding dufflebin/.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
    resources_path: str | None,
) -> None:
    """dufflectl — drive the duffle bundle installer."""
    from dufflectl.core.config.loader import ConfigError, load_settings

    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet

    try:
        settings = load_settings(Path(config_path) if config_path else None)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)
    ctx.obj["settings"] = settings

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = settings.log_level

    setup_logging(
        level=level,
        log_file=settings.log_file,
        log_file_level=settings.log_file_level,
    )

    # Register the resources root (bundled duffle fallback)
    from dufflectl.core.context import set_resources_path

    root = resources_path or settings.resources_path
    if root:
        set_resources_path(Path(root).expanduser().resolve())

    if "shell" not in ctx.obj:
        from dufflectl.adapters.shell.command import SubprocessShell

        ctx.obj["shell"] = SubprocessShell(timeout=settings.timeout)


@cli.command()
@click.pass_context
def home(ctx: click.Context) -> None:
    """Print duffle's home directory."""
    from dufflectl.core.services.duffle_ops import home as duffle_home

    click.echo(str(duffle_home(ctx.obj["shell"])))


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def version(ctx: click.Context, as_json: bool) -> None:
    """Locate duffle and show which binary will be used."""
    from dufflectl.core.services.duffle_binary import find_duffle_binary
    from dufflectl.core.services.duffle_invoke import NOT_FOUND_MESSAGE

    binary = find_duffle_binary(ctx.obj["shell"])

    if as_json:
        payload = {"available": binary is not None}
        if binary:
            payload.update(binary.model_dump())
        else:
            payload["error"] = NOT_FOUND_MESSAGE
        click.echo(json.dumps(payload, indent=2))
        if binary is None:
            sys.exit(1)
        return

    if binary is None:
        click.secho(f"❌ {NOT_FOUND_MESSAGE}", fg="red")
        sys.exit(1)

    click.secho(f"✅ duffle {binary.version}", fg="green")
    if not ctx.obj.get("quiet"):
        click.echo(f"   📍 {binary.path}")
        click.echo(f"   🏠 DUFFLE_HOME: {os.environ.get('DUFFLE_HOME', '(default)')}")


# ── Sub-groups ──────────────────────────────────────────────────

from dufflectl.ui.cli.bundles import bundles  # noqa: E402
from dufflectl.ui.cli.credentials import credentials  # noqa: E402
from dufflectl.ui.cli.repos import repos  # noqa: E402

cli.add_command(bundles)
cli.add_command(credentials)
cli.add_command(repos)


if __name__ == "__main__":
    cli()
