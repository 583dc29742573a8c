"""Spawn the INJ companion script and wait for it.

The child shares the launcher's stdin/stdout/stderr file descriptors directly
(no pipes), so interactive use and binary output pass through live.
"""

from __future__ import annotations

import json
import os
import signal
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from inj.core.args import resolve_args
from inj.core.environment import LaunchEnvironment
from inj.core.launch_record import LaunchRecord, format_command_string, launch_record_to_dict
from inj.core.time import utc_timestamp_iso_z


DEBUG_ENV_VAR = "INJ_LAUNCHER_DEBUG"
TAG = "[inj]"


@dataclass(frozen=True)
class LauncherConfig:
    """Fixed layout of the companion install tree."""

    interpreter: str = "node"
    script_relpath: tuple[str, ...] = ("dist", "inj.js")

    def script_path(self, install_root: Path) -> Path:
        return install_root.joinpath(*self.script_relpath)


DEFAULT_CONFIG = LauncherConfig()


def debug_enabled() -> bool:
    return os.environ.get(DEBUG_ENV_VAR, "") == "1"


def trace(msg: str) -> None:
    if debug_enabled():
        print(f"{TAG} {msg}", file=sys.stderr, flush=True)


def build_command(install_root: Path, resolved_args: Sequence[str], config: LauncherConfig = DEFAULT_CONFIG) -> list[str]:
    return [config.interpreter, str(config.script_path(install_root)), *resolved_args]


def _in_foreground() -> bool:
    """True when this process owns the controlling terminal's foreground process group."""

    try:
        return os.tcgetpgrp(sys.stdin.fileno()) == os.getpgrp()
    except (AttributeError, OSError, ValueError):
        # No stdin, no tty, or no job control on this platform.
        return False


def _relay_interrupt(proc: subprocess.Popen) -> None:
    # A terminal Ctrl-C already reached the child through the shared process group.
    if os.name == "nt" or _in_foreground():
        return
    try:
        proc.send_signal(signal.SIGINT)
    except OSError as e:
        trace(f"cannot relay interrupt: {e}")
        return
    trace("relayed SIGINT to companion")


def _wait(proc: subprocess.Popen) -> int:
    while True:
        try:
            return proc.wait()
        except KeyboardInterrupt:
            _relay_interrupt(proc)
            trace("interrupted; waiting for companion to exit")


def run_companion(command: list[str], cwd: Path) -> LaunchRecord:
    """Run ``command`` in ``cwd`` with inherited standard streams and block until it exits."""

    started_at = utc_timestamp_iso_z()
    trace(f"run: {format_command_string(command)}")
    trace(f"cwd: {cwd}")
    try:
        proc = subprocess.Popen(command, cwd=str(cwd), stdin=None, stdout=None, stderr=None)
    except (OSError, ValueError) as e:
        trace(f"launch failed: {e}")
        return LaunchRecord(
            argv=list(command),
            cwd=str(cwd),
            exit_code=None,
            started_at=started_at,
            finished_at=utc_timestamp_iso_z(),
        )

    exit_code = _wait(proc)
    record = LaunchRecord(
        argv=list(command),
        cwd=str(cwd),
        exit_code=exit_code,
        started_at=started_at,
        finished_at=utc_timestamp_iso_z(),
    )
    trace(f"exit status: {exit_code}")
    trace(f"record: {json.dumps(launch_record_to_dict(record), sort_keys=True)}")
    return record


def launch(
    args: Sequence[str],
    environment: LaunchEnvironment,
    config: LauncherConfig = DEFAULT_CONFIG,
) -> LaunchRecord:
    """Rewrite ``args`` against the invocation directory and run the companion from the install root."""

    trace(f"install root: {environment.install_root}")
    trace(f"invocation dir: {environment.invocation_dir}")
    resolved = resolve_args(args, environment.invocation_dir)
    command = build_command(environment.install_root, resolved, config)
    return run_companion(command, environment.install_root)
