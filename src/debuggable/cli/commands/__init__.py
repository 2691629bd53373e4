# topmark:header:start
#
#   project      : Debuggable
#   file         : __init__.py
#   file_relpath : src/debuggable/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the ``debuggable`` CLI."""
