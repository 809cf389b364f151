"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

import pytest
import typer

from demosdesk.catalog import tool_definition
from demosdesk.cli_rendering import (
    echo_candidates,
    echo_configuration_status,
    echo_tool_definition,
    exit_with_command_error,
)
from demosdesk.errors import DemosdeskError, InvocationFailed
from demosdesk.models.datatypes import Candidate, ConfigurationStatus


def test_exit_with_command_error_renders_stage_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print stage diagnostics and hint before exiting with code 1."""

    error = DemosdeskError(
        stage="config",
        detail="Config file not found: `missing.yml`.",
        hint="Provide an existing path via `--config <path.yaml>`.",
    )

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("locate", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "locate failed at stage `config`" in captured.err
    assert "Hint: Provide an existing path via `--config <path.yaml>`." in captured.err


def test_exit_with_command_error_renders_invocation_stderr_without_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Invocation failures should show tool stderr and no hint line."""

    error = InvocationFailed(command="send", detail="Error: insufficient funds", exit_code=1)

    with pytest.raises(typer.Exit):
        exit_with_command_error("run", error)

    captured = capsys.readouterr()
    assert "run failed at stage `invoke`: Error: insufficient funds" in captured.err
    assert "Hint:" not in captured.err


def test_exit_with_command_error_renders_non_stage_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print fallback exception text for non-stage failures."""

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("status", RuntimeError("unexpected failure"))

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "status failed: unexpected failure" in captured.err


def test_echo_candidates_lists_probes_in_order(capsys: pytest.CaptureFixture[str]) -> None:
    """Probe listings should keep order and mark existence."""

    echo_candidates(
        (
            Candidate(tier="per-user", path="/home/u/.toolkit/tool.ts", exists=False),
            Candidate(tier="development-tree", path="/work/tool.ts", exists=True),
        )
    )

    assert capsys.readouterr().out.splitlines() == [
        "[per-user] /home/u/.toolkit/tool.ts (missing)",
        "[development-tree] /work/tool.ts (found)",
    ]


def test_echo_tool_definition_marks_required_arguments(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Definitions should list argument kinds, options, and help text."""

    echo_tool_definition(tool_definition("sign"))

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Sign Message (sign)"
    assert lines[1] == "  message * [text; e.g. Hello World]"
    assert lines[2] == "      Message to sign"
    assert lines[3] == "  algorithm [select; one of: ed25519, ml-dsa, falcon]"


def test_echo_tool_definition_handles_commands_without_arguments(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Argument-less commands should say so explicitly."""

    echo_tool_definition(tool_definition("get-block"))

    assert capsys.readouterr().out.splitlines() == ["Get Block (get-block)", "  (no arguments)"]


def test_echo_configuration_status_prints_detail(capsys: pytest.CaptureFixture[str]) -> None:
    """Status output should include the message and optional detail."""

    echo_configuration_status(
        ConfigurationStatus(ok=False, message="Configuration needed", detail="No config")
    )

    assert capsys.readouterr().out.splitlines() == ["Configuration needed", "No config"]
