"""INJ launcher package.

Runs the INJ companion script (``dist/inj.js``) from its install tree with the
caller's relative path arguments made absolute.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version


def __getattr__(name: str):
    if name == "__version__":
        try:
            return version("inj-launcher")
        except PackageNotFoundError:
            return "0.0.0"
    raise AttributeError(name)
