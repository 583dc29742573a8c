#!/usr/bin/env python3
"""Forwarder to inj.cli for install trees.

Copy this script next to the companion's ``dist/`` directory; the launcher
treats the directory holding the invoked script as its install root. The inj
package itself must be importable (installed, or on PYTHONPATH).

Not named inj.py: a script by that name would shadow the real "inj" package
when invoked by path (Python places the script directory first on sys.path).
"""

from __future__ import annotations

import sys

from inj.cli import main as inj_main


def main() -> int:
    return inj_main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
