"""Toolkit command invocation through the external script runtime.

Responsibilities:
- Resolve the toolkit script for every invocation (no cached paths).
- Run `[runtime, script, command, *args]` and capture text output.
- Map spawn failures, non-zero exits, and timeouts to `InvocationFailed`.

Key types:
- `ToolInvoker`: runs one toolkit command and returns its stdout.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
import subprocess

from .errors import InvocationFailed, ResolutionFailed
from .models.datatypes import ConfigurationStatus
from .runtime_tools import ExecutableResolver
from .telemetry.logger import RunLogger


DEFAULT_RUNTIME = "bun"

_SETUP_HINT = (
    "Setup options: use `config init` for an encrypted config file, "
    "create a .env file in the toolkit's parent directory, "
    "or pass configuration via command line arguments."
)


class ToolInvoker:
    """Run toolkit sub-commands through a fixed runtime launcher."""

    def __init__(
        self,
        resolver: ExecutableResolver | None = None,
        runtime: str = DEFAULT_RUNTIME,
        timeout_seconds: float | None = None,
        runner: Callable[..., subprocess.CompletedProcess[str]] = subprocess.run,
        run_logger: RunLogger | None = None,
    ) -> None:
        self._resolver = resolver or ExecutableResolver(run_logger=run_logger)
        self._runtime = runtime
        self._timeout_seconds = timeout_seconds
        self._runner = runner
        self._run_logger = run_logger

    def build_command_line(self, tool_path: str, command: str, args: Sequence[str]) -> list[str]:
        """Return the process argument vector for one toolkit command."""

        return [self._runtime, tool_path, command, *args]

    def run(self, command: str, args: Sequence[str] = ()) -> str:
        """Run one toolkit command and return captured stdout.

        Raises:
            ResolutionFailed: If the toolkit script cannot be located.
            InvocationFailed: If the process cannot start, times out, or exits non-zero.
        """

        tool_path = self._resolver.require_path()
        command_line = self.build_command_line(tool_path, command, args)
        if self._run_logger is not None:
            self._run_logger.log_invocation_start(command, len(args))

        try:
            result = self._runner(
                command_line,
                check=False,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self._timeout_seconds,
            )
        except subprocess.TimeoutExpired as exc:
            self._log_failure(command, exc)
            raise InvocationFailed(
                command=command,
                detail=f"Command `{command}` timed out after {self._timeout_seconds:g} seconds.",
            ) from exc
        except OSError as exc:
            self._log_failure(command, exc)
            raise InvocationFailed(
                command=command,
                detail=f"Failed to execute command: {exc}",
            ) from exc

        if result.returncode != 0:
            detail = result.stderr
            if not detail.strip():
                detail = (
                    f"Command `{command}` exited with status {result.returncode} "
                    "and no error output."
                )
            error = InvocationFailed(command=command, detail=detail, exit_code=result.returncode)
            self._log_failure(command, error, exit_code=result.returncode)
            raise error

        if self._run_logger is not None:
            self._run_logger.log_invocation_complete(command)
        return result.stdout

    def _log_failure(
        self,
        command: str,
        exc: BaseException,
        exit_code: int | None = None,
    ) -> None:
        """Emit a failure event when a logger is configured."""

        if self._run_logger is not None:
            self._run_logger.log_invocation_failure(command, type(exc).__name__, exit_code)


def check_configuration(invoker: ToolInvoker) -> ConfigurationStatus:
    """Probe toolkit configuration by running `config show`.

    Resolution and invocation failures both mean the toolkit is not usable yet;
    their diagnostic is kept in `detail` for display.
    """

    try:
        invoker.run("config", ["show"])
    except (ResolutionFailed, InvocationFailed) as exc:
        return ConfigurationStatus(
            ok=False,
            message="Configuration needed",
            detail=f"{exc.detail}\n\n{_SETUP_HINT}",
        )
    return ConfigurationStatus(ok=True, message="Configuration OK")
