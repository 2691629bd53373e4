# topmark:header:start
#
#   project      : Debuggable
#   file         : version.py
#   file_relpath : src/debuggable/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Debuggable `version` command.

Prints the current Debuggable version as installed in the active Python environment.
"""

from __future__ import annotations

import logging

import click

from debuggable.constants import DEBUGGABLE_VERSION


@click.command(
    name="version",
    help="Show the current version of Debuggable.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Show the current version of Debuggable.

    With ``-v``, the version is preceded by a title line.
    """
    vlevel: int = ctx.obj.get("verbosity_level", logging.WARNING)

    if vlevel <= logging.INFO:
        click.echo(click.style("Debuggable version:", bold=True, underline=True))
        click.echo(f"    {click.style(DEBUGGABLE_VERSION, bold=True)}")
    else:
        click.echo(click.style(DEBUGGABLE_VERSION, bold=True))
