# topmark:header:start
#
#   project      : Debuggable
#   file         : __main__.py
#   file_relpath : src/debuggable/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Debuggable via ``python -m debuggable``.

Equivalent to running the ``debuggable`` console script; it delegates directly
to `debuggable.cli.main.cli`.

Examples:
    Render a report description::

        python -m debuggable render error.toml
"""

from __future__ import annotations

from debuggable.cli.main import cli

if __name__ == "__main__":
    cli()
