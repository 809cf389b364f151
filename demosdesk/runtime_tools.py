"""Deterministic toolkit script resolution.

Responsibilities:
- Locate the toolkit script across development, per-user, app-bundle,
  executable-relative, system-wide, and `PATH`-based installs.
- Probe tiers strictly in priority order and stop at the first existing file.
- Record every probed location once, for both the match decision and the
  failure diagnostic.

Resolution order:
1. Per-user install (`$HOME/.<toolkit>/<file>`, then `%USERPROFILE%` form).
2. App-bundle-relative locations (macOS `.app` layouts only).
3. Development tree (`<cwd>/../../<file>`).
4. Executable sibling, then up to three ancestor directories.
5. Platform system-wide install locations.
6. Launcher on `PATH`, preferring `<launcher>/../../<file>` over the launcher.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
import ntpath
import os
import posixpath
import shutil

from .errors import ResolutionFailed
from .models.datatypes import (
    Candidate,
    Found,
    NotFound,
    PlatformContext,
    ResolverSettings,
    SearchOutcome,
)
from .platform_context import HOME_ENV_KEY, PROFILE_ENV_KEY, capture_platform_context
from .platform_rules import PlatformRules, rules_for
from .telemetry.logger import RunLogger


TIER_PER_USER = "per-user"
TIER_APP_BUNDLE = "app-bundle"
TIER_DEVELOPMENT_TREE = "development-tree"
TIER_EXECUTABLE_ANCESTORS = "executable-ancestors"
TIER_SYSTEM_INSTALL = "system-install"
TIER_SEARCH_PATH = "search-path"

MAX_ANCESTOR_DEPTH = 3


@dataclass(frozen=True, slots=True)
class ProbeSession:
    """Inputs shared by every tier during one resolution."""

    context: PlatformContext
    rules: PlatformRules
    settings: ResolverSettings
    path_exists: Callable[[str], bool]
    which: Callable[[str], str | None]

    def check(self, tier: str, path: str) -> Candidate:
        """Check one path and return its candidate record."""

        return Candidate(tier=tier, path=path, exists=bool(self.path_exists(path)))


TierProbe = Callable[[ProbeSession], Iterator[Candidate]]


def probe_per_user_install(session: ProbeSession) -> Iterator[Candidate]:
    """Yield the home-variable candidate, then the profile-variable candidate."""

    context = session.context
    user_dir = f".{session.settings.toolkit_name}"
    file_name = session.settings.tool_file_name
    if context.home is not None:
        yield session.check(TIER_PER_USER, posixpath.join(context.home, user_dir, file_name))
    if context.user_profile is not None:
        yield session.check(
            TIER_PER_USER, ntpath.join(context.user_profile, user_dir, file_name)
        )


def probe_app_bundle(session: ProbeSession) -> Iterator[Candidate]:
    """Yield bundle-relative candidates supplied by the platform rules."""

    for path in session.rules.bundle_candidates(session.context.executable, session.settings):
        yield session.check(TIER_APP_BUNDLE, path)


def probe_development_tree(session: ProbeSession) -> Iterator[Candidate]:
    """Yield the source-checkout candidate two levels above the working directory."""

    rules = session.rules
    path = rules.normalize(
        rules.join(session.context.cwd, "..", "..", session.settings.tool_file_name)
    )
    yield session.check(TIER_DEVELOPMENT_TREE, path)


def probe_executable_ancestors(session: ProbeSession) -> Iterator[Candidate]:
    """Yield the executable-sibling candidate, then bounded ancestor candidates."""

    rules = session.rules
    file_name = session.settings.tool_file_name
    directory = rules.parent(session.context.executable)
    yield session.check(TIER_EXECUTABLE_ANCESTORS, rules.join(directory, file_name))

    for _ in range(MAX_ANCESTOR_DEPTH):
        parent = rules.parent(directory)
        if not parent or parent == directory:
            return
        directory = parent
        yield session.check(TIER_EXECUTABLE_ANCESTORS, rules.join(directory, file_name))


def probe_system_install(session: ProbeSession) -> Iterator[Candidate]:
    """Yield the platform's fixed system-wide install candidates."""

    for path in session.rules.system_candidates(session.settings):
        yield session.check(TIER_SYSTEM_INSTALL, path)


def probe_search_path(session: ProbeSession) -> Iterator[Candidate]:
    """Yield candidates derived from the launcher found on `PATH`.

    A launcher at `<prefix>/bin/<name>` implies the script at `<prefix>/<file>`;
    the launcher itself is the fallback when that derived path is missing.
    """

    launcher_name = session.settings.launcher_name
    launcher = session.which(launcher_name)
    if launcher is None:
        yield Candidate(tier=TIER_SEARCH_PATH, path=launcher_name, exists=False)
        return

    rules = session.rules
    prefix = rules.parent(rules.parent(launcher))
    yield session.check(TIER_SEARCH_PATH, rules.join(prefix, session.settings.tool_file_name))
    yield session.check(TIER_SEARCH_PATH, launcher)


DEFAULT_TIERS: tuple[TierProbe, ...] = (
    probe_per_user_install,
    probe_app_bundle,
    probe_development_tree,
    probe_executable_ancestors,
    probe_system_install,
    probe_search_path,
)


class ExecutableResolver:
    """Resolve the toolkit script path from live environment and filesystem state.

    The resolver holds configuration only; every `resolve()` call captures a
    fresh platform context and performs a fresh probe sequence.
    """

    def __init__(
        self,
        settings: ResolverSettings | None = None,
        context_provider: Callable[[], PlatformContext] = capture_platform_context,
        path_exists: Callable[[str], bool] = os.path.isfile,
        which: Callable[[str], str | None] = shutil.which,
        tiers: Sequence[TierProbe] = DEFAULT_TIERS,
        run_logger: RunLogger | None = None,
    ) -> None:
        self._settings = settings or ResolverSettings()
        self._context_provider = context_provider
        self._path_exists = path_exists
        self._which = which
        self._tiers = tuple(tiers)
        self._run_logger = run_logger

    @property
    def settings(self) -> ResolverSettings:
        """Return naming constants used by this resolver."""

        return self._settings

    def resolve(self) -> SearchOutcome:
        """Probe every tier in order and return the first existing candidate."""

        context = self._context_provider()
        session = ProbeSession(
            context=context,
            rules=rules_for(context.os_family),
            settings=self._settings,
            path_exists=self._path_exists,
            which=self._which,
        )

        checked: list[Candidate] = []
        for tier in self._tiers:
            for candidate in tier(session):
                checked.append(candidate)
                if self._run_logger is not None:
                    self._run_logger.log_probe(candidate.tier, candidate.path, candidate.exists)
                if candidate.exists:
                    if self._run_logger is not None:
                        self._run_logger.log_resolved(
                            candidate.tier, candidate.path, len(checked)
                        )
                    return Found(path=candidate.path, candidates=tuple(checked), context=context)

        if self._run_logger is not None:
            self._run_logger.log_not_found(len(checked))
        return NotFound(candidates=tuple(checked), context=context)

    def require_path(self) -> str:
        """Return the resolved path or raise `ResolutionFailed` with a diagnostic."""

        outcome = self.resolve()
        if isinstance(outcome, NotFound):
            raise ResolutionFailed(outcome, render_diagnostic(outcome, self._settings))
        return outcome.path


def render_diagnostic(outcome: NotFound, settings: ResolverSettings) -> str:
    """Render a multi-line, human-readable report of a failed resolution."""

    context = outcome.context
    lines = [
        f"Could not locate `{settings.tool_file_name}` in any known location.",
        f"Current directory: {context.cwd}",
        f"Current executable: {context.executable}",
        f"Operating system: {context.os_family}",
        f"{HOME_ENV_KEY}: {context.home or '<unset>'}",
        f"{PROFILE_ENV_KEY}: {context.user_profile or '<unset>'}",
        "Checked locations:",
    ]
    for candidate in outcome.candidates:
        lines.append(
            f"  [{candidate.tier}] {candidate.path} "
            f"(exists: {'true' if candidate.exists else 'false'})"
        )
    if not outcome.candidates:
        lines.append("  (none)")
    return "\n".join(lines)


def resolve_tool_path(settings: ResolverSettings | None = None) -> SearchOutcome:
    """Resolve the toolkit script against the live process environment."""

    return ExecutableResolver(settings=settings).resolve()
