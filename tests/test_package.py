"""Package identity checks: version lookup works installed or from a checkout."""

from __future__ import annotations

import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import pytest

pytestmark = pytest.mark.repo_local


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))
for _k in list(sys.modules.keys()):
    if _k == "inj" or _k.startswith("inj."):
        del sys.modules[_k]

import inj


def test_version_matches_distribution_metadata() -> None:
    try:
        expected = version("inj-launcher")
    except PackageNotFoundError:
        expected = "0.0.0"
    assert inj.__version__ == expected


def test_version_is_nonempty_string() -> None:
    assert isinstance(inj.__version__, str)
    assert inj.__version__


def test_unknown_attribute_raises() -> None:
    with pytest.raises(AttributeError):
        inj.no_such_attribute  # noqa: B018
