"""Unit tests for YAML/environment configuration loader behavior."""

from __future__ import annotations

from pathlib import Path

import pytest

from demosdesk.config import ConfigLoader, DesktopConfig
from demosdesk.models.datatypes import ResolverSettings


def test_desktop_config_defaults_match_toolkit_layout() -> None:
    """Defaults should target the `demostools` script run through `bun`."""

    config = DesktopConfig()

    assert config.runtime == "bun"
    assert config.timeout_seconds is None
    assert config.verbose is False
    assert config.resolver_settings() == ResolverSettings()


def test_config_loader_from_yaml_loads_and_normalizes_values(tmp_path: Path) -> None:
    """YAML loader should parse valid payloads and normalize typed/blank values."""

    config_path = tmp_path / "demosdesk.yml"
    config_path.write_text(
        """
runtime: " /opt/bun/bin/bun "
toolkit_name: " toolkit "
tool_file_name: tool.ts
launcher_name: tool
timeout_seconds: " 30 "
verbose: " yes "
extra:
  channel: " nightly "
""".strip(),
        encoding="utf-8",
    )

    config = ConfigLoader.from_yaml(config_path)

    assert config.runtime == "/opt/bun/bin/bun"
    assert config.toolkit_name == "toolkit"
    assert config.tool_file_name == "tool.ts"
    assert config.launcher_name == "tool"
    assert config.bundle_tools_dir == "tools"
    assert config.timeout_seconds == 30.0
    assert config.verbose is True
    assert config.extra == {"channel": "nightly"}


def test_config_loader_from_yaml_accepts_empty_file(tmp_path: Path) -> None:
    """An empty YAML file should yield default configuration."""

    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    assert ConfigLoader.from_yaml(config_path) == DesktopConfig()


def test_config_loader_from_yaml_rejects_unknown_keys_and_bad_root(tmp_path: Path) -> None:
    """YAML loader should fail clearly on unknown fields and non-mapping payloads."""

    unknown_path = tmp_path / "unknown.yml"
    unknown_path.write_text("runtime: bun\ninstall_dir: /opt\n", encoding="utf-8")
    list_path = tmp_path / "list.yml"
    list_path.write_text("- bun\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"unsupported key\(s\): install_dir"):
        ConfigLoader.from_yaml(unknown_path)
    with pytest.raises(ValueError, match="top-level mapping"):
        ConfigLoader.from_yaml(list_path)


def test_config_loader_from_yaml_rejects_invalid_values(tmp_path: Path) -> None:
    """Invalid timeout, boolean, and path-like names should be rejected."""

    timeout_path = tmp_path / "timeout.yml"
    timeout_path.write_text("timeout_seconds: -1\n", encoding="utf-8")
    verbose_path = tmp_path / "verbose.yml"
    verbose_path.write_text("verbose: maybe\n", encoding="utf-8")
    name_path = tmp_path / "name.yml"
    name_path.write_text("tool_file_name: sub/tool.ts\n", encoding="utf-8")

    with pytest.raises(ValueError, match="`timeout_seconds` must be a positive number"):
        ConfigLoader.from_yaml(timeout_path)
    with pytest.raises(ValueError, match="`verbose` must be a boolean value"):
        ConfigLoader.from_yaml(verbose_path)
    with pytest.raises(ValueError, match="without path separators"):
        ConfigLoader.from_yaml(name_path)


def test_config_loader_from_yaml_reports_syntax_errors(tmp_path: Path) -> None:
    """Malformed YAML should surface as a `ValueError` naming the file."""

    config_path = tmp_path / "broken.yml"
    config_path.write_text("runtime: [bun\n", encoding="utf-8")

    with pytest.raises(ValueError, match="could not be parsed"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_env_reads_demosdesk_variables() -> None:
    """Environment loader should read only `DEMOSDESK_*` keys and skip blanks."""

    config = ConfigLoader.from_env(
        {
            "DEMOSDESK_RUNTIME": "node",
            "DEMOSDESK_TOOL_FILE": "cli.ts",
            "DEMOSDESK_TIMEOUT_SECONDS": "2.5",
            "DEMOSDESK_VERBOSE": "on",
            "DEMOSDESK_LAUNCHER": "   ",
            "HOME": "/home/u",
        }
    )

    assert config.runtime == "node"
    assert config.tool_file_name == "cli.ts"
    assert config.timeout_seconds == 2.5
    assert config.verbose is True
    assert config.launcher_name == "demostools"


def test_config_loader_from_env_reads_bundle_tools_dir() -> None:
    """The bundle tools directory variable should reach the resolver settings."""

    config = ConfigLoader.from_env({"DEMOSDESK_BUNDLE_TOOLS_DIR": "helpers"})

    assert config.bundle_tools_dir == "helpers"
    assert config.resolver_settings().bundle_tools_dir == "helpers"


def test_config_loader_from_env_rejects_invalid_timeout() -> None:
    """A non-numeric timeout variable should fail with the source named."""

    with pytest.raises(ValueError, match="Environment field `timeout_seconds`"):
        ConfigLoader.from_env({"DEMOSDESK_TIMEOUT_SECONDS": "soon"})


def test_config_loader_load_applies_cli_over_env_over_yaml(tmp_path: Path) -> None:
    """Merged loading should follow CLI > env > YAML > defaults precedence."""

    config_path = tmp_path / "demosdesk.yml"
    config_path.write_text(
        "runtime: yaml-bun\ntoolkit_name: yaml-kit\nverbose: false\n",
        encoding="utf-8",
    )

    config = ConfigLoader.load(
        config_path=config_path,
        env={"DEMOSDESK_TOOLKIT_NAME": "env-kit", "DEMOSDESK_VERBOSE": "false"},
        cli_overrides={"verbose": True, "runtime": None},
    )

    assert config.runtime == "yaml-bun"
    assert config.toolkit_name == "env-kit"
    assert config.verbose is True
    assert config.tool_file_name == "demostools_file.ts"


def test_config_loader_load_raises_for_missing_yaml(tmp_path: Path) -> None:
    """A missing config path should propagate `FileNotFoundError`."""

    with pytest.raises(FileNotFoundError):
        ConfigLoader.load(config_path=tmp_path / "missing.yml", env={})
