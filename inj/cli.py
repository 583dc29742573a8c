#!/usr/bin/env python3
"""INJ launcher CLI (console_scripts entrypoint).

Every argument is forwarded to ``node <install root>/dist/inj.js``; relative
arguments that name an existing file or directory under the current working
directory are made absolute first. The launcher has no flags of its own.

Exit codes:
- 0: companion exited successfully
- 1: launcher environment unavailable, companion failed to start, or companion exited non-zero
"""

from __future__ import annotations

import sys
from typing import Sequence

from inj.core.environment import LaunchEnvironment, LauncherEnvironmentError, current_environment
from inj.launcher import DEFAULT_CONFIG, TAG, LauncherConfig, launch


def main(
    argv: Sequence[str] | None = None,
    *,
    environment: LaunchEnvironment | None = None,
    config: LauncherConfig = DEFAULT_CONFIG,
) -> int:
    args = list(sys.argv[1:] if argv is None else argv)

    if environment is None:
        try:
            environment = current_environment()
        except LauncherEnvironmentError as e:
            print(f"{TAG} ERROR: {e}", file=sys.stderr)
            return 1

    record = launch(args, environment, config)
    return 0 if record.succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
