"""Command-line interface for demosdesk.

Responsibilities:
- Expose the desktop shell's tool bridge as user-facing commands.
- Convert CLI options into `DesktopConfig` and wire resolver/invoker services.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .catalog import available_commands, tool_definition, validate_arguments
from .cli_rendering import (
    echo_candidates,
    echo_command_list,
    echo_configuration_status,
    echo_tool_definition,
    exit_with_command_error,
)
from .config import ConfigLoader, DesktopConfig
from .errors import DemosdeskError, ResolutionFailed
from .invoker import ToolInvoker, check_configuration
from .models.datatypes import NotFound
from .runtime_tools import ExecutableResolver, render_diagnostic
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="demosdesk",
    no_args_is_help=True,
    help="Desktop shell bridge for the demostools toolkit.",
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to a YAML config file."),
]
VerboseOption = Annotated[
    bool | None,
    typer.Option("--verbose/--quiet", help="Log every probed location to stderr."),
]


def _load_config(config_file: Path | None, verbose: bool | None) -> DesktopConfig:
    """Load effective config and map failures to config-stage errors."""

    try:
        return ConfigLoader.load(config_path=config_file, cli_overrides={"verbose": verbose})
    except FileNotFoundError as exc:
        raise DemosdeskError(
            stage="config",
            detail=f"Config file not found: `{config_file}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise DemosdeskError(
            stage="config",
            detail=f"Invalid configuration: {exc}",
            hint="Fix config file or `DEMOSDESK_*` environment values and rerun.",
        ) from exc


def _build_resolver(config: DesktopConfig, run_logger: RunLogger) -> ExecutableResolver:
    """Create a resolver for the configured toolkit names."""

    return ExecutableResolver(settings=config.resolver_settings(), run_logger=run_logger)


def _build_invoker(config: DesktopConfig) -> ToolInvoker:
    """Create an invoker wired to a fresh resolver and run logger."""

    run_logger = RunLogger(verbose=config.verbose)
    return ToolInvoker(
        resolver=_build_resolver(config, run_logger),
        runtime=config.runtime,
        timeout_seconds=config.timeout_seconds,
        run_logger=run_logger,
    )


@app.command("locate")
def locate_command(
    show_candidates: Annotated[
        bool,
        typer.Option(
            "--show-candidates",
            help="Print every probed location before the resolved path.",
        ),
    ] = False,
    config_file: ConfigOption = None,
    verbose: VerboseOption = None,
) -> None:
    """Resolve and print the toolkit script path."""

    try:
        config = _load_config(config_file, verbose)
        resolver = _build_resolver(config, RunLogger(verbose=config.verbose))
        outcome = resolver.resolve()
        if isinstance(outcome, NotFound):
            raise ResolutionFailed(outcome, render_diagnostic(outcome, resolver.settings))
    except Exception as exc:
        exit_with_command_error("locate", exc)

    if show_candidates:
        echo_candidates(outcome.candidates)
    typer.echo(outcome.path)


@app.command(
    "run",
    context_settings={"allow_interspersed_args": False, "ignore_unknown_options": True},
)
def run_command(
    command: Annotated[str, typer.Argument(help="Toolkit sub-command name.")],
    args: Annotated[
        list[str] | None,
        typer.Argument(help="Positional arguments passed to the sub-command."),
    ] = None,
    validate: Annotated[
        bool,
        typer.Option(
            "--validate",
            help="Check arguments against the command catalog before running.",
        ),
    ] = False,
    config_file: ConfigOption = None,
    verbose: VerboseOption = None,
) -> None:
    """Run one toolkit command and print its output.

    Options for this command go before COMMAND; everything after it is passed
    to the toolkit verbatim, including values that start with `-`.
    """

    arguments = list(args or [])
    try:
        if validate:
            problems = validate_arguments(command, arguments)
            if problems:
                raise DemosdeskError(
                    stage="validate",
                    detail=" ".join(problems),
                    hint=f"Use `demosdesk describe {command}` to list accepted arguments.",
                )
        config = _load_config(config_file, verbose)
        output = _build_invoker(config).run(command, arguments)
    except Exception as exc:
        exit_with_command_error("run", exc)

    typer.echo(output, nl=not output.endswith("\n"))


@app.command("commands")
def commands_command() -> None:
    """List recognized toolkit commands."""

    echo_command_list(available_commands())


@app.command("describe")
def describe_command(
    command: Annotated[str, typer.Argument(help="Toolkit sub-command name.")],
) -> None:
    """Show the title and arguments of one toolkit command."""

    try:
        definition = tool_definition(command)
    except KeyError:
        exit_with_command_error(
            "describe",
            DemosdeskError(
                stage="catalog",
                detail=f"Unknown toolkit command `{command}`.",
                hint="Use `demosdesk commands` to list recognized commands.",
            ),
        )

    echo_tool_definition(definition)


@app.command("status")
def status_command(
    config_file: ConfigOption = None,
    verbose: VerboseOption = None,
) -> None:
    """Check whether the toolkit is installed and configured."""

    try:
        config = _load_config(config_file, verbose)
        status = check_configuration(_build_invoker(config))
    except Exception as exc:
        exit_with_command_error("status", exc)

    echo_configuration_status(status)
    if not status.ok:
        raise typer.Exit(code=1)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
