# topmark:header:start
#
#   project      : Debuggable
#   file         : errors.py
#   file_relpath : src/debuggable/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the Debuggable library.

Rendering never raises for a value that satisfies the contract. The only
library-level failures are:

- a class that claims to be `Debuggable` but omits a required member, rejected
  when the class is defined (`DebuggableContractError`), and
- invalid label configuration or report descriptions (`DebuggableConfigError`).

CLI-specific exceptions with exit codes live in `debuggable.cli.errors`.
"""

from __future__ import annotations


class DebuggableContractError(TypeError):
    """A class violates the Debuggable contract (missing or invalid required member)."""


class DebuggableConfigError(ValueError):
    """Label configuration or a report description is malformed."""
