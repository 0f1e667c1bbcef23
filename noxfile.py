# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DoubleColonConceal project automation via Nox (using uv-backed virtualenvs).

Sessions:
  - `lint`: Ruff lint on the project.
  - `lint_fixall`: Ruff lint autofix.
  - `format_check`: Verify formatting (ruff).
  - `format`: Apply formatting (ruff).
  - `qa`: Per-Python session that runs pytest and pyright.
  - `property_test`: Property tests only (hypothesis).
  - `package_check`: Build sdist/wheel and validate metadata (twine).

Notes:
  - The default venv backend is `uv` (via `nox-uv`) for faster environment sync.
  - Sessions install the project with its ``dev`` extra, which also declares
    nox, nox-uv, uv and (below Python 3.11) toml for running this file.

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
"""

from __future__ import annotations

import pathlib
import sys
import warnings
from typing import TYPE_CHECKING, Any, cast

import nox

if TYPE_CHECKING:
    from collections.abc import Callable

if sys.version_info >= (3, 11):
    import tomllib

    _toml_loads = cast("Callable[[str], dict[str, Any]]", tomllib.loads)  # type: ignore[assignment]
else:
    import toml

    _toml_loads = cast("Callable[[str], dict[str, Any]]", toml.loads)  # type: ignore[assignment]

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"

DEV_INSTALL: tuple[str, ...] = ("-e", ".[dev]")


def _parse_pyproject_toml() -> dict[str, Any]:
    """Parse `pyproject.toml` with tomllib (or `toml` before Python 3.11).

    This runs at **noxfile import time**, so it must not depend on project
    runtime dependencies.
    """
    path: pathlib.Path = pathlib.Path(__file__).parent / "pyproject.toml"
    if not path.exists():
        return {}
    try:
        return _toml_loads(path.read_text(encoding="utf-8"))
    except ValueError:
        return {}


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from `pyproject.toml` classifiers.

    Returns:
        list[str]: Supported versions like ["3.10", "3.11", ...], sorted.
    """
    project_any = _parse_pyproject_toml().get("project")
    classifiers_any = project_any.get("classifiers") if isinstance(project_any, dict) else None
    if not isinstance(classifiers_any, list):
        warnings.warn(
            "Could not find 'classifiers' in pyproject.toml. "
            f"Falling back to Python {CURRENT_PYTHON_VERSION}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]

    prefix = "Programming Language :: Python :: "
    versions: set[str] = set()
    for c in cast("list[str]", classifiers_any):
        if not c.startswith(prefix):
            continue
        parts: list[str] = c.removeprefix(prefix).strip().split(".")
        # Accept only X.Y numeric versions.
        if len(parts) == 2 and all(p.isdigit() for p in parts):
            versions.add(f"{int(parts[0])}.{int(parts[1])}")

    if not versions:
        return [CURRENT_PYTHON_VERSION]
    return sorted(versions, key=lambda s: tuple(int(p) for p in s.split(".")))


PYTHONS: list[str] = get_supported_pythons()

nox.options.sessions = ["lint", "format_check", "qa"]
nox.options.default_venv_backend = "uv"


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run tests + pyright (per Python version)."""
    session.log("Supported Python versions: " + ", ".join(PYTHONS))
    session.install(*DEV_INSTALL)

    session.run("pytest", "-q", "tests", "-m", "not hypothesis_slow", *session.posargs)

    py_ver = session.python
    if not isinstance(py_ver, str) or not py_ver:
        raise RuntimeError(f"Unexpected session.python value: {py_ver!r}")

    session.run("pyright", "--pythonversion", py_ver)


@nox.session
def lint(session: nox.Session) -> None:
    """Run Ruff lint checks."""
    session.install(*DEV_INSTALL)
    session.run("ruff", "check", ".")


@nox.session
def lint_fixall(session: nox.Session) -> None:
    """Apply Ruff lint autofixes."""
    session.install(*DEV_INSTALL)
    session.run("ruff", "check", "--fix", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Check formatting without modifying files."""
    session.install(*DEV_INSTALL)
    session.run("ruff", "format", "--check", ".")


@nox.session
def format(session: nox.Session) -> None:
    """Apply formatting."""
    session.install(*DEV_INSTALL)
    session.run("ruff", "format", ".")


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the hypothesis property tests only."""
    session.install(*DEV_INSTALL)
    session.run("pytest", "-vv", "tests/core/test_predicate.py", "-k", "balanced")


@nox.session(python=CURRENT_PYTHON_VERSION)
def package_check(session: nox.Session) -> None:
    """Build sdist/wheel and validate distribution metadata (twine)."""
    session.install(*DEV_INSTALL, "build", "twine")
    session.run(
        "python",
        "-c",
        "import shutil; shutil.rmtree('dist', ignore_errors=True)",
    )
    session.run("python", "-m", "build", "--sdist", "--wheel")
    session.run("twine", "check", "dist/*")
