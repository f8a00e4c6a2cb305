# topmark:header:start
#
#   project      : TypeSniff
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSniff project automation via Nox (using uv-backed virtualenvs).

Sessions:
  - `lint`: Ruff static analysis.
  - `format_check`: Verify formatting (ruff).
  - `format`: Apply formatting (ruff).
  - `qa`: Per-Python session that runs pytest and pyright.
  - `property_test`: Property tests with a larger example budget.
  - `package_check`: Build sdist/wheel and validate metadata (twine).

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

    _toml_loads = cast("Callable[[str], dict[str, Any]]", tomllib.loads)
else:
    import toml

    _toml_loads = cast("Callable[[str], dict[str, Any]]", toml.loads)

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from `pyproject.toml` classifiers.

    Returns:
        list[str]: Supported versions like ["3.10", "3.11", ...], sorted.
    """
    path = pathlib.Path(__file__).parent / "pyproject.toml"
    try:
        doc: dict[str, Any] = _toml_loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        doc = {}

    classifiers: list[str] = doc.get("project", {}).get("classifiers", [])
    prefix = "Programming Language :: Python :: "
    versions: set[tuple[int, int]] = set()
    for c in classifiers:
        parts = c.removeprefix(prefix).strip().split(".") if c.startswith(prefix) else []
        if len(parts) == 2 and all(p.isdigit() for p in parts):
            versions.add((int(parts[0]), int(parts[1])))

    if not versions:
        warnings.warn(
            f"No Python versions found in classifiers. Falling back to {CURRENT_PYTHON_VERSION}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]
    return [f"{major}.{minor}" for major, minor in sorted(versions)]


PYTHONS: list[str] = get_supported_pythons()

nox.options.sessions = ["lint", "format_check", "qa"]
nox.options.default_venv_backend = "uv"


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run tests + pyright (per Python version)."""
    session.install("-e", ".[dev]")
    session.run("pytest", "-q", "tests", *session.posargs)

    py_ver = session.python
    if not isinstance(py_ver, str) or not py_ver:
        raise RuntimeError(f"Unexpected session.python value: {py_ver!r}")
    session.run("pyright", "--pythonversion", py_ver)


@nox.session
def lint(session: nox.Session) -> None:
    """Static analysis."""
    session.install("-e", ".[dev]")
    session.run("ruff", "check", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Check formatting."""
    session.install("-e", ".[dev]")
    session.run("ruff", "format", "--check", ".")


@nox.session
def format(session: nox.Session) -> None:
    """Apply formatting."""
    session.install("-e", ".[dev]")
    session.run("ruff", "format", ".")


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the property tests with a larger example budget (developer only)."""
    session.install("-e", ".[dev]")
    session.run(
        "pytest",
        "-vv",
        "--hypothesis-seed=0",
        "tests/magic/test_magic_properties.py",
        "tests/resolver/test_hierarchy.py",
        *session.posargs,
    )


@nox.session(python=CURRENT_PYTHON_VERSION)
def package_check(session: nox.Session) -> None:
    """Build sdist/wheel and validate distribution metadata (twine)."""
    session.install("build", "twine")
    session.run("python", "-c", "import shutil; shutil.rmtree('dist', ignore_errors=True)")
    session.run("python", "-m", "build", "--sdist", "--wheel")
    session.run("twine", "check", "dist/*")
