# topmark:header:start
#
#   project      : Debuggable
#   file         : render.py
#   file_relpath : src/debuggable/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Debuggable `render` command.

Reads a report description in TOML and prints the rendered report. Use ``-``
to read the description from standard input.

Example description:
    ```toml
    readable-name = "File Error"
    reason = "file not found"
    type-identifier = "App.FileError"
    instance-identifier = "missing"
    possible-causes = ["path misspelled"]
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from debuggable.cli.commands.common import load_effective_labels
from debuggable.cli.errors import DebuggableFileNotFoundError, DebuggableInputError
from debuggable.config.io import parse_toml_text
from debuggable.errors import DebuggableConfigError
from debuggable.model import DebugReport
from debuggable.rendering.styled import render_styled
from debuggable.rendering.text import render_report

if TYPE_CHECKING:
    from debuggable.rendering.labels import RenderLabels


@click.command(
    name="render",
    help="Render a TOML report description ('-' reads from STDIN).",
)
@click.argument("source", type=click.Path(dir_okay=False, allow_dash=True))
@click.pass_context
def render_command(ctx: click.Context, source: str) -> None:
    """Render a TOML report description as a human-readable report."""
    labels: RenderLabels = load_effective_labels(ctx)

    if source == "-":
        name: str = "<stdin>"
        text: str = click.get_text_stream("stdin").read()
    else:
        path = Path(source)
        if not path.is_file():
            raise DebuggableFileNotFoundError(f"Report description not found: {source}")
        name = str(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DebuggableInputError(f"Cannot read {source}: {exc}") from exc

    try:
        report: DebugReport = DebugReport.from_mapping(parse_toml_text(text, source=name))
    except DebuggableConfigError as exc:
        raise DebuggableInputError(str(exc)) from exc

    if ctx.obj.get("color_enabled"):
        click.echo(render_styled(report, labels), color=True)
    else:
        click.echo(render_report(report, labels))
