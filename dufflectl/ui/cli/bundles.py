"""
CLI commands for bundle claims.

Thin wrappers over ``dufflectl.core.services.duffle_ops``.
"""

from __future__ import annotations

import click

from dufflectl.ui.cli.output import get_shell, parse_set_values, report, report_lines


@click.group()
def bundles() -> None:
    """Bundles — list, install, upgrade, uninstall, push."""


# ── Observe ─────────────────────────────────────────────────────


@bundles.command("list")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_cmd(ctx: click.Context, as_json: bool) -> None:
    """List installed bundle claims."""
    from dufflectl.core.services.duffle_ops import list_bundles

    result = list_bundles(get_shell(ctx))
    report_lines(result, as_json, "📦 Installed bundles", "No bundles installed")


# ── Act ─────────────────────────────────────────────────────────


@bundles.command()
@click.argument("name")
@click.option("--file", "-f", "bundle_file", type=click.Path(dir_okay=False), default=None,
              help="Install from a local bundle file.")
@click.option("--bundle", "-b", "bundle_ref", default=None,
              help="Install a bundle reference (e.g. hub.cnlabs.io/app:1.0).")
@click.option("--set", "params", multiple=True, callback=parse_set_values,
              metavar="KEY=VALUE", help="Bundle parameter (repeatable).")
@click.option("--credentials", "-c", "credential_set", default=None,
              help="Credential set to apply.")
@click.pass_context
def install(
    ctx: click.Context,
    name: str,
    bundle_file: str | None,
    bundle_ref: str | None,
    params: dict[str, str],
    credential_set: str | None,
) -> None:
    """Install a bundle as claim NAME."""
    from dufflectl.core.services.duffle_ops import install_bundle, install_file

    if bool(bundle_file) == bool(bundle_ref):
        raise click.UsageError("Give exactly one of --file or --bundle.")

    shell = get_shell(ctx)
    if bundle_file:
        result = install_file(shell, bundle_file, name, params, credential_set)
    else:
        result = install_bundle(shell, bundle_ref, name, params, credential_set)
    report(result, done=f"Installed {name}")


@bundles.command()
@click.argument("name")
@click.pass_context
def upgrade(ctx: click.Context, name: str) -> None:
    """Upgrade claim NAME."""
    from dufflectl.core.services.duffle_ops import upgrade as duffle_upgrade

    report(duffle_upgrade(get_shell(ctx), name), done=f"Upgraded {name}")


@bundles.command()
@click.argument("name")
@click.pass_context
def uninstall(ctx: click.Context, name: str) -> None:
    """Uninstall claim NAME."""
    from dufflectl.core.services.duffle_ops import uninstall as duffle_uninstall

    report(duffle_uninstall(get_shell(ctx), name), done=f"Uninstalled {name}")


@bundles.command()
@click.argument("bundle_file", type=click.Path(dir_okay=False))
@click.option("--repo", required=True, help="Target repository.")
@click.pass_context
def push(ctx: click.Context, bundle_file: str, repo: str) -> None:
    """Push BUNDLE_FILE to a repository."""
    from dufflectl.core.services.duffle_ops import push_file

    report(push_file(get_shell(ctx), bundle_file, repo), done=f"Pushed to {repo}")
