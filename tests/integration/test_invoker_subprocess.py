"""Invocation tests that spawn a real child process as the toolkit runtime."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from demosdesk.errors import InvocationFailed
from demosdesk.invoker import ToolInvoker, check_configuration
from demosdesk.runtime_tools import ExecutableResolver
from tests.resolver_fakes import SCENARIO_SETTINGS, RecordingWhich, make_context


_UNDECODABLE_TOOL = """\
import sys

stream = sys.stderr if sys.argv[1] == "fail" else sys.stdout
stream.buffer.write(b"\\xff\\xfe bad bytes\\n")
stream.flush()
sys.exit(1 if sys.argv[1] == "fail" else 0)
"""

_ECHO_TOOL = """\
import sys

print(" ".join(sys.argv[1:]))
"""


def _invoker(tmp_path: Path, source: str) -> ToolInvoker:
    """Install `source` as the per-user tool file and run it with this interpreter."""

    home = tmp_path / "home"
    tool_file = home / ".toolkit" / "tool.ts"
    tool_file.parent.mkdir(parents=True)
    tool_file.write_text(source, encoding="utf-8")
    context = make_context(home=str(home), cwd=str(tmp_path), executable=str(tmp_path / "app"))
    resolver = ExecutableResolver(
        settings=SCENARIO_SETTINGS,
        context_provider=lambda: context,
        which=RecordingWhich(),
    )
    return ToolInvoker(resolver=resolver, runtime=sys.executable, timeout_seconds=30)


def test_run_passes_arguments_and_returns_real_stdout(tmp_path: Path) -> None:
    invoker = _invoker(tmp_path, _ECHO_TOOL)

    output = invoker.run("sign", ["-hello world"])

    assert output.strip() == "sign -hello world"


def test_run_decodes_invalid_utf8_stdout_with_replacement(tmp_path: Path) -> None:
    """Non-UTF-8 tool output should be returned lossily, never raise a codec error."""

    invoker = _invoker(tmp_path, _UNDECODABLE_TOOL)

    output = invoker.run("config", ["show"])

    assert output.startswith("�� bad bytes")


def test_run_reports_invalid_utf8_stderr_as_invocation_failure(tmp_path: Path) -> None:
    invoker = _invoker(tmp_path, _UNDECODABLE_TOOL)

    with pytest.raises(InvocationFailed) as exc_info:
        invoker.run("fail", [])

    assert exc_info.value.exit_code == 1
    assert "bad bytes" in exc_info.value.detail
    assert "�" in exc_info.value.detail


def test_check_configuration_reports_needed_for_undecodable_error_output(
    tmp_path: Path,
) -> None:
    """A failing tool with non-UTF-8 stderr still yields a configuration status."""

    tool_file_source = _UNDECODABLE_TOOL.replace('sys.argv[1] == "fail"', "True")
    invoker = _invoker(tmp_path, tool_file_source)

    status = check_configuration(invoker)

    assert status.ok is False
    assert status.message == "Configuration needed"
    assert status.detail is not None
    assert "bad bytes" in status.detail
