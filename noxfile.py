# topmark:header:start
#
#   project      : LineMark
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""LineMark project automation via Nox.

Sessions:
  - `qa`: Per-Python session that runs pytest (slow property tests excluded).
  - `property_test`: Long-running property tests (opt-in).

Common invocations:
  - `nox -s qa`
  - `nox -s qa -- -k convert`
"""

from __future__ import annotations

import pathlib
import sys
import warnings
from typing import Any, cast

import nox
import tomlkit

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"


def _parse_pyproject_toml() -> dict[str, Any]:
    """Parse `pyproject.toml` (empty dict if missing)."""
    path: pathlib.Path = pathlib.Path(__file__).parent / "pyproject.toml"
    if not path.exists():
        return {}
    return cast("dict[str, Any]", tomlkit.parse(path.read_text(encoding="utf-8")).unwrap())


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from `pyproject.toml` classifiers.

    Returns:
        list[str]: Supported versions like ["3.10", "3.11", ...], sorted.
    """
    project: dict[str, Any] = _parse_pyproject_toml().get("project", {})
    prefix = "Programming Language :: Python :: "
    versions: list[str] = []
    for c in project.get("classifiers", []):
        if not c.startswith(prefix):
            continue
        parts: list[str] = c.removeprefix(prefix).strip().split(".")
        if len(parts) == 2 and all(p.isdigit() for p in parts):
            versions.append(f"{int(parts[0])}.{int(parts[1])}")

    out: list[str] = sorted(set(versions), key=lambda s: tuple(int(p) for p in s.split(".")))
    if out:
        return out

    warnings.warn(
        f"No Python versions found in classifiers. Falling back to Python {CURRENT_PYTHON_VERSION}.",
        RuntimeWarning,
        stacklevel=2,
    )
    return [CURRENT_PYTHON_VERSION]


PYTHONS: list[str] = get_supported_pythons()

nox.options.sessions = ["qa"]


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the test suite (per Python version)."""
    session.log("Supported Python versions: " + ", ".join(PYTHONS))
    session.install("-e", ".[test]")
    session.run("pytest", "-q", "tests", "-m", "not hypothesis_slow", *session.posargs)


@nox.session(python=CURRENT_PYTHON_VERSION)
def property_test(session: nox.Session) -> None:
    """Run the long-running property tests (developer only)."""
    session.install("-e", ".[test]")
    session.run("pytest", "-vv", "tests", "-m", "hypothesis_slow", *session.posargs)
