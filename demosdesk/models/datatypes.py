"""Core datatypes shared across demosdesk modules.

Responsibilities:
- Represent immutable records produced by one executable resolution.
- Provide explicit typing for deterministic diagnostics and tests.

Key types:
- `PlatformContext`, `ResolverSettings`, `Candidate`, `Found`, `NotFound`,
  `ToolArgument`, `ToolDefinition`, and `ConfigurationStatus`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


OS_LINUX = "linux"
OS_MACOS = "macos"
OS_WINDOWS = "windows"
OS_OTHER = "other"


@dataclass(frozen=True, slots=True)
class PlatformContext:
    """Snapshot of environment facts captured once per resolution.

    Attributes:
        home: Value of the POSIX-style home variable, when set.
        user_profile: Value of the Windows-style profile variable, when set.
        cwd: Current working directory.
        executable: Path of the running executable.
        os_family: One of `linux`, `macos`, `windows`, or `other`.
    """

    home: str | None
    user_profile: str | None
    cwd: str
    executable: str
    os_family: str


@dataclass(frozen=True, slots=True)
class ResolverSettings:
    """Naming constants that define what the resolver looks for.

    Attributes:
        toolkit_name: Per-user directory stem (`~/.<toolkit_name>`).
        tool_file_name: Script file name searched in every tier.
        launcher_name: Wrapper name looked up on the executable search path.
        bundle_tools_dir: Internal-tools subdirectory next to an app bundle.
    """

    toolkit_name: str = "demostools"
    tool_file_name: str = "demostools_file.ts"
    launcher_name: str = "demostools"
    bundle_tools_dir: str = "tools"


@dataclass(frozen=True, slots=True)
class Candidate:
    """One probed location and whether it existed at check time."""

    tier: str
    path: str
    exists: bool


@dataclass(frozen=True, slots=True)
class Found:
    """Successful resolution outcome.

    Attributes:
        path: Path string to hand verbatim to the invoker.
        candidates: Every candidate probed up to and including the match.
        context: Environment snapshot the resolution ran against.
    """

    path: str
    candidates: tuple[Candidate, ...]
    context: PlatformContext


@dataclass(frozen=True, slots=True)
class NotFound:
    """Exhausted resolution outcome with the full probe record."""

    candidates: tuple[Candidate, ...]
    context: PlatformContext

    def checked_paths(self) -> list[str]:
        """Return probed path strings in probe order."""

        return [candidate.path for candidate in self.candidates]


SearchOutcome = Union[Found, NotFound]


@dataclass(frozen=True, slots=True)
class ToolArgument:
    """Definition of one positional argument accepted by a toolkit command.

    Attributes:
        name: Argument label shown to users.
        kind: Input kind: `text`, `number`, `select`, or `textarea`.
        required: Whether the command cannot run without it.
        options: Allowed values for `select` arguments.
        placeholder: Example value.
        help: One-line description.
    """

    name: str
    kind: str = "text"
    required: bool = False
    options: tuple[str, ...] = ()
    placeholder: str | None = None
    help: str | None = None


@dataclass(frozen=True, slots=True)
class ToolDefinition:
    """Human-readable title and ordered arguments for one toolkit command."""

    command: str
    title: str
    arguments: tuple[ToolArgument, ...] = field(default_factory=tuple)

    def required_count(self) -> int:
        """Return how many leading arguments are mandatory."""

        return sum(1 for argument in self.arguments if argument.required)


@dataclass(frozen=True, slots=True)
class ConfigurationStatus:
    """Result of probing whether the toolkit configuration is usable."""

    ok: bool
    message: str
    detail: str | None = None
