"""Configuration model and loaders for demosdesk.

Responsibilities:
- Define runtime configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.
- Merge sources with deterministic precedence: CLI > env > YAML > defaults.

Key types:
- `DesktopConfig`: normalized settings for resolution and invocation.
- `ConfigLoader`: static construction helpers for `DesktopConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .invoker import DEFAULT_RUNTIME
from .models.datatypes import ResolverSettings
from .parsing import (
    normalize_optional_string,
    parse_optional_positive_float,
    parse_permissive_boolean,
)


_DEFAULT_SETTINGS = ResolverSettings()


@dataclass(frozen=True, slots=True)
class DesktopConfig:
    """Runtime configuration for the desktop shell's tool bridge.

    Attributes:
        runtime: Script runtime launcher used to execute the toolkit.
        toolkit_name: Per-user directory stem (`~/.<toolkit_name>`).
        tool_file_name: Toolkit script file name.
        launcher_name: Wrapper name looked up on `PATH`.
        bundle_tools_dir: Internal-tools subdirectory beside an app bundle.
        timeout_seconds: Optional invocation timeout; `None` waits indefinitely.
        verbose: Whether probe-level events are logged.
        extra: Additional metadata for future extensions.
    """

    runtime: str = DEFAULT_RUNTIME
    toolkit_name: str = _DEFAULT_SETTINGS.toolkit_name
    tool_file_name: str = _DEFAULT_SETTINGS.tool_file_name
    launcher_name: str = _DEFAULT_SETTINGS.launcher_name
    bundle_tools_dir: str = _DEFAULT_SETTINGS.bundle_tools_dir
    timeout_seconds: float | None = None
    verbose: bool = False
    extra: dict[str, str] = field(default_factory=dict)

    def validate(self) -> None:
        """Validate configuration values before use."""

        self._require_file_name(self.runtime, "runtime")
        self._require_file_name(self.toolkit_name, "toolkit_name")
        self._require_file_name(self.tool_file_name, "tool_file_name")
        self._require_file_name(self.launcher_name, "launcher_name")
        self._require_file_name(self.bundle_tools_dir, "bundle_tools_dir")
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError("`timeout_seconds` must be a positive number of seconds.")

    def resolver_settings(self) -> ResolverSettings:
        """Return the naming constants the resolver searches for."""

        return ResolverSettings(
            toolkit_name=self.toolkit_name,
            tool_file_name=self.tool_file_name,
            launcher_name=self.launcher_name,
            bundle_tools_dir=self.bundle_tools_dir,
        )

    @staticmethod
    def _require_file_name(value: str, field_name: str) -> None:
        """Validate that a naming field is a non-empty single path segment."""

        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"`{field_name}` must be a non-empty string.")
        if field_name != "runtime" and ("/" in value or "\\" in value):
            raise ValueError(f"`{field_name}` must be a bare name without path separators.")


class ConfigLoader:
    """Factory methods for creating `DesktopConfig` from external sources."""

    _STRING_KEYS = (
        "runtime",
        "toolkit_name",
        "tool_file_name",
        "launcher_name",
        "bundle_tools_dir",
    )
    _SUPPORTED_YAML_KEYS = frozenset(_STRING_KEYS + ("timeout_seconds", "verbose", "extra"))
    _ENV_KEYS: dict[str, str] = {
        "DEMOSDESK_RUNTIME": "runtime",
        "DEMOSDESK_TOOLKIT_NAME": "toolkit_name",
        "DEMOSDESK_TOOL_FILE": "tool_file_name",
        "DEMOSDESK_LAUNCHER": "launcher_name",
        "DEMOSDESK_BUNDLE_TOOLS_DIR": "bundle_tools_dir",
        "DEMOSDESK_TIMEOUT_SECONDS": "timeout_seconds",
        "DEMOSDESK_VERBOSE": "verbose",
    }

    @staticmethod
    def from_yaml(path: Path, base: DesktopConfig | None = None) -> DesktopConfig:
        """Create a validated config from a YAML file layered over `base`."""

        raw_text = path.read_text(encoding="utf-8")
        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` could not be parsed: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")

        return ConfigLoader._apply_mapping(
            base or DesktopConfig(), payload, source_label=f"YAML `{path}`"
        )

    @staticmethod
    def from_env(
        env: Mapping[str, str] | None = None,
        base: DesktopConfig | None = None,
    ) -> DesktopConfig:
        """Create a validated config from `DEMOSDESK_*` variables layered over `base`."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        payload: dict[str, Any] = {}
        for env_key, field_name in ConfigLoader._ENV_KEYS.items():
            value = normalize_optional_string(env_map.get(env_key))
            if value is not None:
                payload[field_name] = value

        return ConfigLoader._apply_mapping(
            base or DesktopConfig(), payload, source_label="Environment"
        )

    @staticmethod
    def load(
        config_path: Path | None = None,
        env: Mapping[str, str] | None = None,
        cli_overrides: Mapping[str, Any] | None = None,
    ) -> DesktopConfig:
        """Merge defaults, YAML, environment, and CLI overrides in that order."""

        config = DesktopConfig()
        if config_path is not None:
            config = ConfigLoader.from_yaml(config_path, base=config)
        config = ConfigLoader.from_env(env, base=config)
        if cli_overrides:
            present = {key: value for key, value in cli_overrides.items() if value is not None}
            config = ConfigLoader._apply_mapping(config, present, source_label="CLI")
        return config

    @staticmethod
    def _apply_mapping(
        base: DesktopConfig,
        payload: Mapping[str, Any],
        source_label: str,
    ) -> DesktopConfig:
        """Overlay recognized payload keys onto a base config and validate."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        updates: dict[str, Any] = {}
        for key in ConfigLoader._STRING_KEYS:
            if key in payload:
                value = normalize_optional_string(payload[key])
                if value is None:
                    raise ValueError(f"{source_label} field `{key}` must be a non-empty string.")
                updates[key] = value

        if "timeout_seconds" in payload:
            try:
                updates["timeout_seconds"] = parse_optional_positive_float(
                    payload["timeout_seconds"], "timeout_seconds"
                )
            except ValueError as exc:
                raise ValueError(f"{source_label} field {exc}") from exc

        if "verbose" in payload:
            parsed = parse_permissive_boolean(payload["verbose"])
            if parsed is None:
                raise ValueError(
                    f"{source_label} field `verbose` must be a boolean value "
                    "(`true`/`false`, `1`/`0`, `yes`/`no`)."
                )
            updates["verbose"] = parsed

        if "extra" in payload:
            updates["extra"] = ConfigLoader._string_map(payload["extra"], source_label)

        config = replace(base, **updates)
        try:
            config.validate()
        except ValueError as exc:
            raise ValueError(f"{source_label}: {exc}") from exc
        return config

    @staticmethod
    def _string_map(raw: object, source_label: str) -> dict[str, str]:
        """Read an optional mapping with non-empty string keys and values."""

        if raw is None:
            return {}
        if not isinstance(raw, Mapping):
            raise ValueError(f"{source_label} field `extra` must be a mapping/object.")

        normalized: dict[str, str] = {}
        for raw_key, raw_value in raw.items():
            key_value = normalize_optional_string(raw_key)
            value_value = normalize_optional_string(raw_value)
            if key_value is None:
                raise ValueError(f"{source_label} field `extra` contains a blank key.")
            if value_value is None:
                raise ValueError(
                    f"{source_label} field `extra` contains blank value for `{key_value}`."
                )
            normalized[key_value] = value_value
        return normalized
