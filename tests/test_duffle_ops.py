"""
Tests for duffle operations — the exact command surface sent to duffle.

Every operation is checked against the argv duffle receives, since the
token order is the compatibility contract with the duffle CLI.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from dufflectl.adapters.mock import MockShell
from dufflectl.core.services import duffle_ops
from dufflectl.core.services.duffle_invoke import NOT_FOUND_MESSAGE


def _last(sh: MockShell) -> list[str]:
    return sh.commands[-1]


# ═══════════════════════════════════════════════════════════════════
#  Home
# ═══════════════════════════════════════════════════════════════════


class TestHome:
    def test_default(self, shell: MockShell):
        assert duffle_ops.home(shell) == Path("/home/tester/.duffle")

    def test_env_override(self, shell: MockShell, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DUFFLE_HOME", "/opt/duffle")
        assert duffle_ops.home(shell) == Path("/opt/duffle")

    def test_empty_env_ignored(self, shell: MockShell, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DUFFLE_HOME", "")
        assert duffle_ops.home(shell) == Path("/home/tester/.duffle")


# ═══════════════════════════════════════════════════════════════════
#  Observe
# ═══════════════════════════════════════════════════════════════════


class TestListing:
    def test_list_bundles(self, duffle_shell: MockShell):
        duffle_shell.set_response(["duffle", "list"], stdout="wordpress\n  helloworld \n\n")
        result = duffle_ops.list_bundles(duffle_shell)
        assert result.value == ["wordpress", "helloworld"]
        assert _last(duffle_shell) == ["duffle", "list"]

    def test_list_credential_sets(self, duffle_shell: MockShell):
        duffle_shell.set_response(["duffle", "credentials", "list"], stdout="aws\nazure\n")
        result = duffle_ops.list_credential_sets(duffle_shell)
        assert result.value == ["aws", "azure"]
        assert _last(duffle_shell) == ["duffle", "credentials", "list"]

    def test_list_repos_is_fixed(self, shell: MockShell):
        result = duffle_ops.list_repos(shell)
        assert result.ok
        assert result.value == ["hub.cnlabs.io"]
        assert shell.call_count == 0

    def test_list_repos_without_duffle(self, missing_duffle_shell: MockShell):
        assert duffle_ops.list_repos(missing_duffle_shell).ok


# ═══════════════════════════════════════════════════════════════════
#  Act
# ═══════════════════════════════════════════════════════════════════


class TestActions:
    def test_upgrade(self, duffle_shell: MockShell):
        result = duffle_ops.upgrade(duffle_shell, "wordpress")
        assert result.ok and result.value is None
        assert _last(duffle_shell) == ["duffle", "upgrade", "wordpress"]

    def test_uninstall(self, duffle_shell: MockShell):
        duffle_ops.uninstall(duffle_shell, "wordpress")
        assert _last(duffle_shell) == ["duffle", "uninstall", "wordpress"]

    def test_push_file(self, duffle_shell: MockShell):
        duffle_ops.push_file(duffle_shell, "/my bundles/bundle.json", "hub.cnlabs.io")
        assert _last(duffle_shell) == [
            "duffle", "push", "-f", "/my bundles/bundle.json", "--repo", "hub.cnlabs.io",
        ]

    def test_install_bundle(self, duffle_shell: MockShell):
        duffle_ops.install_bundle(duffle_shell, "foo", "myclaim", {"x": "1", "y": ""}, "creds")
        assert _last(duffle_shell) == [
            "duffle", "install", "myclaim", "foo", "--set", "x=1", "-c", "creds",
        ]

    def test_install_rendered_command(self, duffle_shell: MockShell):
        result = duffle_ops.install_bundle(duffle_shell, "foo", "app", {"x": "1", "y": ""}, "creds")
        assert result.command == "duffle install app foo --set x=1 -c creds"

    def test_install_bundle_minimal(self, duffle_shell: MockShell):
        duffle_ops.install_bundle(duffle_shell, "hub.cnlabs.io/app:1.0", "app")
        assert _last(duffle_shell) == ["duffle", "install", "app", "hub.cnlabs.io/app:1.0"]

    def test_install_file(self, duffle_shell: MockShell):
        duffle_ops.install_file(
            duffle_shell, "/tmp/my bundle.json", "app", {"port": "80"}, None,
        )
        assert _last(duffle_shell) == [
            "duffle", "install", "app", "-f", "/tmp/my bundle.json", "--set", "port=80",
        ]

    def test_install_file_no_credentials_flag(self, duffle_shell: MockShell):
        duffle_ops.install_file(duffle_shell, "b.json", "app", {}, None)
        assert "-c" not in _last(duffle_shell)

    def test_install_value_stays_one_token(self, duffle_shell: MockShell):
        duffle_ops.install_bundle(duffle_shell, "b", "app", {"cmd": "echo hi; rm -rf /"})
        assert _last(duffle_shell)[-1] == "cmd=echo hi; rm -rf /"

    def test_install_failure(self, duffle_shell: MockShell):
        duffle_shell.set_response(["duffle", "install"], exit_code=1, stderr="bundle not found")
        result = duffle_ops.install_bundle(duffle_shell, "nope", "app")
        assert result.failed
        assert "bundle not found" in result.errors


# ═══════════════════════════════════════════════════════════════════
#  Credentials
# ═══════════════════════════════════════════════════════════════════


class TestCredentials:
    def test_add_credential_sets(self, duffle_shell: MockShell):
        duffle_ops.add_credential_sets(duffle_shell, ["a.yaml", "/c d/e.yaml"])
        assert _last(duffle_shell) == ["duffle", "credential", "add", "a.yaml", "/c d/e.yaml"]

    def test_delete_credential_set(self, duffle_shell: MockShell):
        duffle_ops.delete_credential_set(duffle_shell, "aws")
        assert _last(duffle_shell) == ["duffle", "credential", "remove", "aws"]

    def test_generate_for_file(self, duffle_shell: MockShell):
        duffle_ops.generate_credentials_for_file(duffle_shell, "bundle.json", "mycreds")
        assert _last(duffle_shell) == [
            "duffle", "credentials", "generate", "mycreds", "-f", "bundle.json",
        ]

    def test_generate_for_bundle(self, duffle_shell: MockShell):
        duffle_ops.generate_credentials_for_bundle(duffle_shell, "hub/app:1", "mycreds")
        assert _last(duffle_shell) == [
            "duffle", "credentials", "generate", "mycreds", "hub/app:1",
        ]


# ═══════════════════════════════════════════════════════════════════
#  Binary unavailable
# ═══════════════════════════════════════════════════════════════════


class TestUnavailable:
    @pytest.mark.parametrize("call", [
        lambda sh: duffle_ops.list_bundles(sh),
        lambda sh: duffle_ops.list_credential_sets(sh),
        lambda sh: duffle_ops.upgrade(sh, "a"),
        lambda sh: duffle_ops.uninstall(sh, "a"),
        lambda sh: duffle_ops.push_file(sh, "f", "r"),
        lambda sh: duffle_ops.install_file(sh, "f", "a"),
        lambda sh: duffle_ops.install_bundle(sh, "b", "a"),
        lambda sh: duffle_ops.add_credential_sets(sh, ["f"]),
        lambda sh: duffle_ops.delete_credential_set(sh, "c"),
        lambda sh: duffle_ops.generate_credentials_for_file(sh, "f", "c"),
        lambda sh: duffle_ops.generate_credentials_for_bundle(sh, "b", "c"),
    ])
    def test_fails_without_spawning(self, missing_duffle_shell: MockShell, call):
        result = call(missing_duffle_shell)
        assert result.failed
        assert result.errors == [NOT_FOUND_MESSAGE]
        assert missing_duffle_shell.commands == [["duffle", "version"]]
