"""Environment snapshot capture for executable resolution.

Responsibilities:
- Read the home/profile variables, working directory, running executable,
  and OS identity exactly once per resolution.
- Map the platform's system name onto the OS family tags used by the
  platform rule variants.
"""

from __future__ import annotations

import os
import platform
import sys
from typing import Mapping

from .models.datatypes import OS_LINUX, OS_MACOS, OS_OTHER, OS_WINDOWS, PlatformContext
from .parsing import normalize_optional_string


HOME_ENV_KEY = "HOME"
PROFILE_ENV_KEY = "USERPROFILE"

_SYSTEM_FAMILIES = {
    "linux": OS_LINUX,
    "darwin": OS_MACOS,
    "windows": OS_WINDOWS,
}


def os_family_for(system_name: str) -> str:
    """Return the OS family tag for a `platform.system()` value."""

    return _SYSTEM_FAMILIES.get(system_name.strip().lower(), OS_OTHER)


def capture_platform_context(
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
    executable: str | None = None,
    system_name: str | None = None,
) -> PlatformContext:
    """Capture an immutable environment snapshot.

    Every argument defaults to the live process value; explicit values let
    callers build a context for a platform other than the host.
    """

    env_map: Mapping[str, str] = os.environ if env is None else env
    return PlatformContext(
        home=normalize_optional_string(env_map.get(HOME_ENV_KEY)),
        user_profile=normalize_optional_string(env_map.get(PROFILE_ENV_KEY)),
        cwd=cwd if cwd is not None else os.getcwd(),
        executable=executable if executable is not None else _current_executable(),
        os_family=os_family_for(system_name if system_name is not None else platform.system()),
    )


def _current_executable() -> str:
    """Resolve the running executable for frozen and non-frozen execution."""

    if getattr(sys, "frozen", False):
        return os.path.realpath(sys.executable)
    return sys.executable or sys.argv[0]
