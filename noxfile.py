# topmark:header:start
#
#   project      : TextAlchemy
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TextAlchemy project automation via Nox.

Sessions:
  - `lint`: Ruff lint and format check on the sources and tests.
  - `format`: Apply Ruff formatting and autofixes.
  - `qa`: Per-Python session that runs pytest.

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
"""

from __future__ import annotations

import pathlib
import sys
import warnings
from typing import Any

import nox

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"

LINT_PATHS: list[str] = ["src", "tests", "noxfile.py"]

nox.options.sessions = ["lint", "qa"]


def _parse_pyproject_toml() -> dict[str, Any]:
    """Parse `pyproject.toml` with the standard library parser when available.

    This runs at **noxfile import time**, so it must not depend on project
    runtime dependencies.

    Returns:
        dict[str, Any]: Parsed TOML document (top-level table), or ``{}``.
    """
    path: pathlib.Path = pathlib.Path(__file__).parent / "pyproject.toml"
    if not path.exists() or sys.version_info < (3, 11):
        return {}

    import tomllib

    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        return {}


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from `pyproject.toml` classifiers.

    Returns:
        list[str]: Supported versions like ["3.10", "3.11", ...], sorted.
    """
    project = _parse_pyproject_toml().get("project")
    classifiers = project.get("classifiers") if isinstance(project, dict) else None
    if not isinstance(classifiers, list):
        warnings.warn(
            "Could not read classifiers from pyproject.toml. "
            f"Falling back to Python {CURRENT_PYTHON_VERSION}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]

    prefix = "Programming Language :: Python :: "
    versions: set[str] = set()
    for c in classifiers:
        if not isinstance(c, str) or not c.startswith(prefix):
            continue
        parts: list[str] = c.removeprefix(prefix).strip().split(".")
        # Accept only X.Y numeric versions.
        if len(parts) == 2 and all(p.isdigit() for p in parts):
            versions.add(f"{int(parts[0])}.{int(parts[1])}")

    if not versions:
        return [CURRENT_PYTHON_VERSION]
    return sorted(versions, key=lambda s: tuple(int(p) for p in s.split(".")))


PYTHON_VERSIONS: list[str] = get_supported_pythons()


@nox.session
def lint(session: nox.Session) -> None:
    """Run Ruff lint and format checks."""
    session.install("ruff")
    session.run("ruff", "check", *LINT_PATHS)
    session.run("ruff", "format", "--check", *LINT_PATHS)


@nox.session(name="format")
def format_(session: nox.Session) -> None:
    """Apply Ruff formatting and safe autofixes."""
    session.install("ruff")
    session.run("ruff", "check", "--fix", *LINT_PATHS)
    session.run("ruff", "format", *LINT_PATHS)


@nox.session(python=PYTHON_VERSIONS)
def qa(session: nox.Session) -> None:
    """Install the project with its test extra and run pytest."""
    session.install("-e", ".[test]")
    session.run("pytest", *session.posargs)
