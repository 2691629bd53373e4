# topmark:header:start
#
#   project      : Debuggable
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Debuggable project automation via Nox.

Sessions:
  - `lint`: Ruff lint on the sources and tests.
  - `format_check`: Verify formatting with Ruff.
  - `format`: Apply formatting with Ruff.
  - `qa`: Per-Python session that runs pytest.

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
"""

from __future__ import annotations

import nox

PYTHON_VERSIONS: list[str] = ["3.10", "3.11", "3.12", "3.13"]
LINT_PATHS: tuple[str, ...] = ("src", "tests", "noxfile.py")

nox.options.sessions = ["lint", "format_check", "qa"]
nox.options.reuse_existing_virtualenvs = True


@nox.session
def lint(session: nox.Session) -> None:
    """Run Ruff lint checks."""
    session.install("ruff")
    session.run("ruff", "check", *LINT_PATHS)


@nox.session
def format_check(session: nox.Session) -> None:
    """Verify formatting without changing files."""
    session.install("ruff")
    session.run("ruff", "format", "--check", *LINT_PATHS)


@nox.session(name="format")
def format_(session: nox.Session) -> None:
    """Apply Ruff formatting."""
    session.install("ruff")
    session.run("ruff", "format", *LINT_PATHS)


@nox.session(python=PYTHON_VERSIONS)
def qa(session: nox.Session) -> None:
    """Install the package with test extras and run pytest."""
    session.install("-e", ".[test]")
    session.run("pytest", *session.posargs)
