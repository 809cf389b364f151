"""Structured run logging utilities.

Responsibilities:
- Emit concise, deterministic logs for resolution probes and tool invocations.
- Route every line through `loguru` to a caller-selected sink (stderr by
  default, keeping command stdout clean for tool output).
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger


_SAFE_PUNCTUATION = frozenset("-_.:/\\")


def _field_token(value: object) -> str:
    """Render a log field value as one whitespace-free token.

    Path separators and drive colons are kept; any other punctuation becomes `_`.
    """

    text = str(value).strip() or "none"
    return "".join(ch if ch.isalnum() or ch in _SAFE_PUNCTUATION else "_" for ch in text)


def _render_fields(fields: dict[str, object]) -> str:
    return "".join(f" {key}={_field_token(fields[key])}" for key in sorted(fields))


class RunLogger:
    """Emit deterministic phase logs for resolver and invoker activity.

    Probe-level events are logged at DEBUG and only appear with `verbose=True`.
    Argument values are never logged, only their count.
    """

    def __init__(self, sink: TextIO | None = None, verbose: bool = False) -> None:
        """Initialize logger sink and configure deterministic formatting."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(
            self._sink,
            format="{message}",
            level="DEBUG" if verbose else "INFO",
            colorize=False,
        )

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured runtime log line."""

        line = f"[phase] level={level} stage={stage} event={event}{_render_fields(context)}"
        _loguru_logger.log(level, line)

    def log_probe(self, tier: str, path: str, exists: bool) -> None:
        """Emit one candidate existence check."""

        self._emit("DEBUG", "probe", "resolve", tier=tier, path=path, exists=exists)

    def log_resolved(self, tier: str, path: str, probes: int) -> None:
        """Emit a successful resolution event."""

        self._emit("INFO", "found", "resolve", tier=tier, path=path, probes=probes)

    def log_not_found(self, probes: int) -> None:
        """Emit an exhausted resolution event."""

        self._emit("ERROR", "not_found", "resolve", probes=probes)

    def log_invocation_start(self, command: str, arg_count: int) -> None:
        """Emit a tool-invocation start event."""

        self._emit("INFO", "start", "invoke", command=command, args=arg_count)

    def log_invocation_complete(self, command: str) -> None:
        """Emit a tool-invocation success event."""

        self._emit("INFO", "complete", "invoke", command=command)

    def log_invocation_failure(
        self,
        command: str,
        error_type: str,
        exit_code: int | None = None,
    ) -> None:
        """Emit a tool-invocation failure event without captured output."""

        self._emit(
            "ERROR",
            "failure",
            "invoke",
            command=command,
            error_type=error_type,
            exit_code="none" if exit_code is None else exit_code,
        )
