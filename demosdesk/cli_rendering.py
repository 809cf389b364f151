"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
probe listings, the command catalog, and configuration status.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import DemosdeskError
from .models.datatypes import Candidate, ConfigurationStatus, ToolDefinition


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, DemosdeskError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_candidates(candidates: tuple[Candidate, ...]) -> None:
    """Print probed locations in probe order with existence flags."""

    for candidate in candidates:
        marker = "found" if candidate.exists else "missing"
        typer.echo(f"[{candidate.tier}] {candidate.path} ({marker})")


def echo_command_list(commands: list[str]) -> None:
    """Print one command name per line."""

    for command in commands:
        typer.echo(command)


def echo_tool_definition(definition: ToolDefinition) -> None:
    """Print a command's title and argument reference."""

    typer.echo(f"{definition.title} ({definition.command})")
    if not definition.arguments:
        typer.echo("  (no arguments)")
        return
    for argument in definition.arguments:
        label = f"{argument.name}{' *' if argument.required else ''}"
        details = [argument.kind]
        if argument.options:
            details.append("one of: " + ", ".join(argument.options))
        if argument.placeholder:
            details.append(f"e.g. {argument.placeholder}")
        typer.echo(f"  {label} [{'; '.join(details)}]")
        if argument.help:
            typer.echo(f"      {argument.help}")


def echo_configuration_status(status: ConfigurationStatus) -> None:
    """Print configuration status with colored state and optional detail."""

    color = typer.colors.GREEN if status.ok else typer.colors.YELLOW
    typer.secho(status.message, fg=color)
    if status.detail:
        typer.echo(status.detail)
