from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence


def resolve_arg(arg: str, invocation_dir: Path) -> str:
    """Rewrite ``arg`` to an absolute path when it names an existing entry under invocation_dir.

    Absolute arguments are returned unchanged. Relative ones are joined onto
    invocation_dir and stat'ed; on success the cleaned absolute path is
    returned, on any failure the original string is.
    """

    if os.path.isabs(arg):
        return arg
    candidate = os.path.normpath(os.path.join(os.fspath(invocation_dir), arg))
    try:
        os.stat(candidate)
    except (OSError, ValueError):
        # Missing, unreadable, broken symlink or NUL byte: not a path we can vouch for.
        return arg
    return candidate


def resolve_args(args: Sequence[str], invocation_dir: Path) -> list[str]:
    return [resolve_arg(a, invocation_dir) for a in args]
