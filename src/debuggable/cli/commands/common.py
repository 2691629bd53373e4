# topmark:header:start
#
#   project      : Debuggable
#   file         : common.py
#   file_relpath : src/debuggable/cli/commands/common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by Debuggable CLI commands."""

from __future__ import annotations

from pathlib import Path

import click

from debuggable.cli.errors import DebuggableConfigCliError, DebuggableFileNotFoundError
from debuggable.config.io import discover_config_file, load_labels
from debuggable.config.logging import get_logger
from debuggable.errors import DebuggableConfigError
from debuggable.rendering.labels import RenderLabels

logger = get_logger(__name__)


def load_effective_labels(ctx: click.Context) -> RenderLabels:
    """Resolve labels from ``--config`` or discovery, mapping failures to CLI errors.

    The path the labels were loaded from (or None) is stored as
    ``ctx.obj["labels_source"]``.

    Raises:
        DebuggableFileNotFoundError: If ``--config`` names a missing file.
        DebuggableConfigCliError: If the configuration is invalid.
    """
    config_path: Path | None = ctx.obj.get("config_path")
    try:
        if config_path is not None and not config_path.is_file():
            raise DebuggableFileNotFoundError(f"Configuration file not found: {config_path}")
        path: Path | None = config_path or discover_config_file(Path.cwd())
        ctx.obj["labels_source"] = path
        labels: RenderLabels = load_labels(path) if path is not None else RenderLabels()
    except DebuggableConfigError as exc:
        raise DebuggableConfigCliError(str(exc)) from exc
    logger.debug("Effective labels: %s", labels)
    return labels
