# topmark:header:start
#
#   project      : Debuggable
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running the Debuggable CLI.

Tests that depend on label discovery should request the ``isolation`` fixture
so that the working directory is an empty temporary project.
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result
from yachalk import chalk

from debuggable.cli.exit_codes import ExitCode
from debuggable.cli.main import cli
from debuggable.config.logging import ChalkFormatter

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


@pytest.fixture(autouse=True)
def restore_global_output_state() -> Iterator[None]:
    """Undo the root-logger and yachalk changes the CLI makes on each invocation."""
    root = logging.getLogger()
    handlers: list[logging.Handler] = root.handlers[:]
    level: int = root.level
    color_mode = chalk.get_color_mode()
    yield
    # Only touch handlers installed by `setup_logging`; pytest manages its own per phase.
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, ChalkFormatter) and handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if isinstance(handler.formatter, ChalkFormatter) and handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
    chalk.set_color_mode(color_mode)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI in the current working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--help"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit_code(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, result.output
