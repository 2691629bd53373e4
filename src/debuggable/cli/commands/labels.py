# topmark:header:start
#
#   project      : Debuggable
#   file         : labels.py
#   file_relpath : src/debuggable/cli/commands/labels.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Debuggable `labels` command.

Prints the effective report labels as a ``debuggable.toml`` document. The
output can be saved as-is and edited to customize the labels.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from debuggable.cli.commands.common import load_effective_labels
from debuggable.config.io import labels_to_toml

if TYPE_CHECKING:
    from debuggable.rendering.labels import RenderLabels


@click.command(
    name="labels",
    help="Show the effective report labels as TOML.",
)
@click.pass_context
def labels_command(ctx: click.Context) -> None:
    """Show the effective report labels as TOML."""
    labels: RenderLabels = load_effective_labels(ctx)

    if ctx.obj.get("verbosity_level", logging.WARNING) <= logging.INFO:
        source = ctx.obj.get("labels_source") or "built-in defaults"
        click.echo(f"# Labels loaded from: {source}")
    click.echo(labels_to_toml(labels), nl=False)
