# topmark:header:start
#
#   project      : Debuggable
#   file         : labels.py
#   file_relpath : src/debuggable/rendering/labels.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report sections and their configurable labels.

The order of `ReportSection` members is the order in which list sections
appear in a rendered report. Labels only affect the header text; the set and
order of sections are fixed.
"""

from __future__ import annotations

import string
from dataclasses import dataclass, fields
from enum import Enum
from typing import Final

from debuggable.constants import DEFAULT_PROJECT_NAME, PROJECT_PLACEHOLDER
from debuggable.errors import DebuggableConfigError


class ReportSection(Enum):
    """Optional list sections of a report, in rendering order.

    Each value is the name of the diagnosable member holding the section's items.
    """

    POSSIBLE_CAUSES = "possible_causes"
    SUGGESTED_FIXES = "suggested_fixes"
    DOCUMENTATION_LINKS = "documentation_links"
    EXTERNAL_DISCUSSION_LINKS = "external_discussion_links"
    RELATED_ISSUE_LINKS = "related_issue_links"

    @property
    def label_field(self) -> str:
        """Return the `RenderLabels` field holding this section's header."""
        return _LABEL_FIELDS[self]


_LABEL_FIELDS: Final[dict[ReportSection, str]] = {
    ReportSection.POSSIBLE_CAUSES: "causes_header",
    ReportSection.SUGGESTED_FIXES: "fixes_header",
    ReportSection.DOCUMENTATION_LINKS: "documentation_header",
    ReportSection.EXTERNAL_DISCUSSION_LINKS: "discussion_header",
    ReportSection.RELATED_ISSUE_LINKS: "issues_header",
}


@dataclass(frozen=True)
class RenderLabels:
    """Header text for each list section of a report.

    ``documentation_header`` is a `str.format` template; ``{project}`` is
    replaced with ``project_name``. The other headers are used verbatim. Each
    header is followed directly by the section's bulleted list, so the defaults
    end with a space.

    Raises:
        DebuggableConfigError: If ``documentation_header`` uses a placeholder
            other than ``{project}``.
    """

    project_name: str = DEFAULT_PROJECT_NAME
    causes_header: str = "Here are some possible causes: "
    fixes_header: str = "These suggestions could address the issue: "
    documentation_header: str = "{project}'s documentation talks about this: "
    discussion_header: str = "These external discussion links might be helpful: "
    issues_header: str = "See these issue-tracker links for discussion on this topic: "

    def __post_init__(self) -> None:
        try:
            placeholders = {
                name
                for _, name, _, _ in string.Formatter().parse(self.documentation_header)
                if name is not None
            }
        except ValueError as exc:
            raise DebuggableConfigError(
                f"Invalid documentation header template {self.documentation_header!r}: {exc}"
            ) from exc
        unknown = placeholders - {PROJECT_PLACEHOLDER}
        if unknown:
            raise DebuggableConfigError(
                f"Unknown placeholder(s) in documentation header: {', '.join(sorted(unknown))}"
            )

    def header(self, section: ReportSection) -> str:
        """Return the header text for a section, with placeholders resolved."""
        text: str = getattr(self, section.label_field)
        if section is ReportSection.DOCUMENTATION_LINKS:
            return text.format(**{PROJECT_PLACEHOLDER: self.project_name})
        return text

    def to_dict(self) -> dict[str, str]:
        """Return the labels as a plain mapping of field name to (unresolved) text."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
