# topmark:header:start
#
#   project      : Debuggable
#   file         : keys.py
#   file_relpath : src/debuggable/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for Debuggable.

This module defines the authoritative string constants used when reading
label configuration (``debuggable.toml`` and ``[tool.debuggable]`` in
``pyproject.toml``) and report descriptions consumed by ``debuggable render``.

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Debuggable.

    Notes:
        - Values must match user-facing TOML keys exactly.
        - Keys are kebab-case, following ``pyproject.toml`` conventions.
    """

    # pyproject.toml nesting: [tool.debuggable]
    SECTION_TOOL: Final[str] = "tool"
    SECTION_DEBUGGABLE: Final[str] = "debuggable"

    # [labels]
    SECTION_LABELS: Final[str] = "labels"

    KEY_PROJECT_NAME: Final[str] = "project-name"
    KEY_CAUSES_HEADER: Final[str] = "causes-header"
    KEY_FIXES_HEADER: Final[str] = "fixes-header"
    KEY_DOCUMENTATION_HEADER: Final[str] = "documentation-header"
    KEY_DISCUSSION_HEADER: Final[str] = "discussion-header"
    KEY_ISSUES_HEADER: Final[str] = "issues-header"

    # Report description (input of `debuggable render`)
    KEY_READABLE_NAME: Final[str] = "readable-name"
    KEY_REASON: Final[str] = "reason"
    KEY_TYPE_IDENTIFIER: Final[str] = "type-identifier"
    KEY_INSTANCE_IDENTIFIER: Final[str] = "instance-identifier"
    KEY_IDENTIFIER: Final[str] = "identifier"
    KEY_POSSIBLE_CAUSES: Final[str] = "possible-causes"
    KEY_SUGGESTED_FIXES: Final[str] = "suggested-fixes"
    KEY_DOCUMENTATION_LINKS: Final[str] = "documentation-links"
    KEY_EXTERNAL_DISCUSSION_LINKS: Final[str] = "external-discussion-links"
    KEY_RELATED_ISSUE_LINKS: Final[str] = "related-issue-links"
