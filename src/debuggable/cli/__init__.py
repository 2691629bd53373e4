# topmark:header:start
#
#   project      : Debuggable
#   file         : __init__.py
#   file_relpath : src/debuggable/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Debuggable CLI package.

This package groups the Click command definitions and the click exception
integration (`debuggable.cli.errors.DebuggableClickException`).

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        debuggable = "debuggable.cli.main:cli"

All subcommands live in [`debuggable.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
