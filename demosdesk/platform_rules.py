"""Platform-specific candidate rules for executable resolution.

Responsibilities:
- Provide one rule variant per OS family, each with its own path flavour,
  app-bundle candidates, and system-wide install candidates.
- Keep every rule a pure function of its inputs so each platform can be
  exercised on any host OS.

Key types:
- `PlatformRules`: base variant with no bundle layout and no system paths.
  Concrete variants override only the locations their platform defines.
- `PosixRules`, `MacOSRules`, `WindowsRules`: concrete OS variants.
"""

from __future__ import annotations

import ntpath
import posixpath
from types import ModuleType

from .models.datatypes import OS_LINUX, OS_MACOS, OS_WINDOWS, ResolverSettings


class PlatformRules:
    """Base rule variant: POSIX path flavour, no bundle or system locations."""

    path_module: ModuleType = posixpath

    def join(self, *parts: str) -> str:
        """Join path parts using this platform's separator."""

        return self.path_module.join(*parts)

    def parent(self, path: str) -> str:
        """Return the parent directory of a path in this platform's flavour."""

        return self.path_module.dirname(path)

    def normalize(self, path: str) -> str:
        """Collapse `..` segments and redundant separators lexically."""

        return self.path_module.normpath(path)

    def bundle_root(self, executable: str) -> str | None:
        """Return the app-bundle installation root for an executable, if any."""

        return None

    def bundle_candidates(self, executable: str, settings: ResolverSettings) -> list[str]:
        """Return ordered bundle-relative candidates for an executable path."""

        return []

    def system_candidates(self, settings: ResolverSettings) -> list[str]:
        """Return the ordered well-known system-wide install locations."""

        return []


class PosixRules(PlatformRules):
    """Rule variant for Linux and other POSIX systems."""

    path_module = posixpath
    system_roots: tuple[str, ...] = (
        "/usr/local/share",
        "/usr/share",
        "/opt",
    )

    def system_candidates(self, settings: ResolverSettings) -> list[str]:
        return [
            self.join(root, settings.toolkit_name, settings.tool_file_name)
            for root in self.system_roots
        ]


class MacOSRules(PosixRules):
    """Rule variant for macOS, including `.app` bundle layouts.

    A bundled executable lives at `<root>/<Name>.app/Contents/MacOS/<exe>`;
    walking up four parents from the executable lands on `<root>`.
    """

    system_roots = PosixRules.system_roots + (
        "/opt/homebrew/share",
        "/Applications",
    )
    _BUNDLE_DEPTH = 4

    def bundle_root(self, executable: str) -> str | None:
        macos_dir = self.parent(executable)
        contents_dir = self.parent(macos_dir)
        app_dir = self.parent(contents_dir)
        if self.path_module.basename(macos_dir) != "MacOS":
            return None
        if self.path_module.basename(contents_dir) != "Contents":
            return None
        if not self.path_module.basename(app_dir).endswith(".app"):
            return None

        root = executable
        for _ in range(self._BUNDLE_DEPTH):
            root = self.parent(root)
        return root

    def bundle_candidates(self, executable: str, settings: ResolverSettings) -> list[str]:
        root = self.bundle_root(executable)
        if root is None:
            return []
        return [
            self.join(root, settings.bundle_tools_dir, settings.tool_file_name),
            self.join(root, settings.tool_file_name),
            self.normalize(self.join(root, "..", "..", settings.tool_file_name)),
        ]


class WindowsRules(PlatformRules):
    """Rule variant for Windows, using backslash-separated paths."""

    path_module = ntpath
    system_roots: tuple[str, ...] = (
        "C:\\Program Files",
        "C:\\Program Files (x86)",
    )

    def system_candidates(self, settings: ResolverSettings) -> list[str]:
        return [
            self.join(root, settings.toolkit_name, settings.tool_file_name)
            for root in self.system_roots
        ]


_RULES_BY_FAMILY: dict[str, type[PlatformRules]] = {
    OS_LINUX: PosixRules,
    OS_MACOS: MacOSRules,
    OS_WINDOWS: WindowsRules,
}


def rules_for(os_family: str) -> PlatformRules:
    """Return the rule variant for an OS family tag.

    Unknown families are treated as generic POSIX systems.
    """

    rules_class = _RULES_BY_FAMILY.get(os_family, PosixRules)
    return rules_class()
