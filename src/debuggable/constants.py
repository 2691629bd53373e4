# topmark:header:start
#
#   project      : Debuggable
#   file         : constants.py
#   file_relpath : src/debuggable/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Debuggable Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DEBUGGABLE_VERSION: str = get_version("debuggable")

# Environment variable consulted by `debuggable.config.logging`:
LOG_LEVEL_ENV_VAR: str = "DEBUGGABLE_LOG_LEVEL"

# Label configuration discovery:
CONFIG_FILE_NAME: str = "debuggable.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"

# Placeholder substituted with the project name in templated section headers:
PROJECT_PLACEHOLDER: str = "project"

DEFAULT_PROJECT_NAME: str = "The project"
