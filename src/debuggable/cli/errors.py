# topmark:header:start
#
#   project      : Debuggable
#   file         : errors.py
#   file_relpath : src/debuggable/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for click-based command-line tools.

Usage:
    Raise `DebuggableCliError` subclasses in the ``debuggable`` CLI to signal
    errors with standardized exit codes.

    Applications built on click can raise `DebuggableClickException` with any
    diagnosable value; click then prints the full report instead of a one-line
    message and exits with the exception's exit code.

Styling:
    When the Click context enables color, reports are shown with
    [`render_styled`][debuggable.rendering.styled.render_styled]; otherwise
    with the plain-text renderer.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from debuggable.cli.exit_codes import ExitCode
from debuggable.model import DebugReport
from debuggable.rendering.styled import render_styled
from debuggable.rendering.text import render_report

if TYPE_CHECKING:
    from debuggable.rendering.labels import RenderLabels


class DebuggableCliError(click.ClickException):
    """Base class for all Debuggable CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))


class DebuggableUsageError(DebuggableCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class DebuggableInputError(DebuggableCliError):
    """Error for malformed report descriptions."""

    exit_code = ExitCode.INPUT_ERROR


class DebuggableFileNotFoundError(DebuggableCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class DebuggableConfigCliError(DebuggableCliError):
    """Error for invalid label configuration."""

    exit_code = ExitCode.CONFIG_ERROR


class DebuggableClickException(click.ClickException):
    """Click exception that shows a diagnosable value's full report.

    Example:
        ```python
        @click.command()
        def main() -> None:
            try:
                load()
            except FileError as exc:
                raise DebuggableClickException(exc) from exc
        ```
    """

    exit_code = ExitCode.FAILURE

    def __init__(
        self,
        value: object,
        *,
        labels: RenderLabels | None = None,
        exit_code: int | None = None,
    ) -> None:
        self.report: DebugReport = DebugReport.from_value(value)
        self.labels: RenderLabels | None = labels
        super().__init__(render_report(self.report, labels))
        if exit_code is not None:
            self.exit_code = exit_code

    def format_message(self) -> str:
        """Return the plain-text report."""
        return self.message

    def show(self, file: IO[Any] | None = None) -> None:
        """Print the report to ``file`` (stderr by default), colored if the context allows."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        color: bool | None = ctx.color if ctx is not None else None
        text: str = (
            render_styled(self.report, self.labels) if color else self.format_message()
        )
        click.echo(text, file=file, err=True, color=color)
