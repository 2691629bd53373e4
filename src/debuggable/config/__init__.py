# topmark:header:start
#
#   project      : Debuggable
#   file         : __init__.py
#   file_relpath : src/debuggable/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for Debuggable.

- [`debuggable.config.logging`][debuggable.config.logging]: project logger with
  a TRACE level and colored output.
- [`debuggable.config.io`][debuggable.config.io]: TOML label configuration
  (``debuggable.toml`` / ``[tool.debuggable]`` in ``pyproject.toml``).
- [`debuggable.config.keys`][debuggable.config.keys]: canonical TOML keys.

Submodules are imported explicitly; this package does not re-export them so that
the logging layer stays importable without the rendering layer.
"""
