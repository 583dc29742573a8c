from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path


class LauncherEnvironmentError(OSError):
    """The launcher cannot determine where it is installed or where it was invoked from."""


@dataclass(frozen=True)
class LaunchEnvironment:
    """Process facts the launcher depends on, resolved once at startup."""

    install_root: Path
    invocation_dir: Path


def resolve_install_root(program: str | None = None) -> Path:
    """Return the directory containing the running launcher program.

    ``program`` defaults to ``sys.argv[0]``. Symlinks are resolved so a launcher
    linked into ``~/bin`` still finds its real install tree.
    """

    if program is None:
        program = sys.argv[0] if sys.argv else ""
    if not program or program == "-c":
        raise LauncherEnvironmentError("cannot determine launcher location (no program path)")
    try:
        resolved = Path(program).resolve()
    except (OSError, RuntimeError) as e:
        raise LauncherEnvironmentError(f"cannot resolve launcher location: {program}: {e}") from e
    return resolved.parent


def resolve_invocation_dir() -> Path:
    """Return the caller's working directory.

    Prefers $PWD when it is absolute and names the same directory, so a shell
    sitting in a symlinked directory keeps the path the user actually typed from.
    """

    try:
        cwd = os.getcwd()
    except OSError as e:
        raise LauncherEnvironmentError(f"cannot determine working directory: {e}") from e

    pwd = os.environ.get("PWD", "")
    if pwd and os.path.isabs(pwd):
        try:
            if os.path.samefile(pwd, "."):
                return Path(pwd)
        except OSError:
            # Stale $PWD (removed or unreadable); the physical path still works.
            pass
    return Path(cwd)


def current_environment(program: str | None = None) -> LaunchEnvironment:
    """Query the running process for its LaunchEnvironment.

    Raises LauncherEnvironmentError when either query fails; callers must not
    start the companion in that case.
    """

    return LaunchEnvironment(
        install_root=resolve_install_root(program),
        invocation_dir=resolve_invocation_dir(),
    )
