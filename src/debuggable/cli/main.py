# topmark:header:start
#
#   project      : Debuggable
#   file         : main.py
#   file_relpath : src/debuggable/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the ``debuggable`` command.

Group-level options are resolved once and placed into ``ctx.obj``:

- ``verbosity_level``: program-output verbosity from ``-v``/``-q``.
- ``log_level``: internal logging level from ``DEBUGGABLE_LOG_LEVEL``.
- ``color_enabled``: resolved color mode (also stored on ``ctx.color``).
- ``config_path``: explicit label configuration file, if any.
"""

from __future__ import annotations

from pathlib import Path

import click
from yachalk import chalk
from yachalk.types import ColorMode as ChalkColorMode

from debuggable.cli.commands.labels import labels_command
from debuggable.cli.commands.render import render_command
from debuggable.cli.commands.version import version_command
from debuggable.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from debuggable.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Initialize shared state (verbosity, logging, color, config) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_path (Path | None): Explicit label configuration file from ``--config``.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    # Styled reports are rendered with yachalk; align it with the resolved mode.
    chalk.set_color_mode(ChalkColorMode.Basic16 if enable_color else ChalkColorMode.AllOff)

    ctx.obj["config_path"] = config_path
    logger.debug("CLI state: %s", ctx.obj)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Render human-readable reports for diagnosable errors.",
)
@common_verbose_options
@common_color_options
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Label configuration file (debuggable.toml or pyproject.toml). "
    "Discovered from the current directory when omitted.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Entry point for the Debuggable CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
        config_path=config_path,
    )

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'debuggable render FILE' to render a report description.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(version_command)

cli.add_command(labels_command)

cli.add_command(render_command)

if __name__ == "__main__":
    cli()
