# topmark:header:start
#
#   project      : Debuggable
#   file         : styled.py
#   file_relpath : src/debuggable/rendering/styled.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal-colored rendering of diagnosable values.

Same layout as [`render`][debuggable.rendering.text.render], with `yachalk`
styles applied to the reason line, the identifier line and section headers.
Bullet items are left unstyled so URLs stay copyable. Intended for
human-readable terminal output only.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from debuggable.model import DebugReport
from debuggable.rendering.labels import RenderLabels, ReportSection
from debuggable.rendering.text import BLOCK_SEPARATOR, IDENTIFIER_LABEL, bulleted_list

if TYPE_CHECKING:
    from collections.abc import Callable


class ReportStyle(Enum):
    """Styled parts of a report."""

    READABLE_NAME = "readable_name"
    IDENTIFIER = "identifier"
    HEADER = "header"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` style function for this part of the report."""
        return cast(
            "Callable[[str], str]",
            {
                ReportStyle.READABLE_NAME: chalk.red_bright.bold,
                ReportStyle.IDENTIFIER: chalk.dim,
                ReportStyle.HEADER: chalk.bold,
            }[self],
        )


def render_styled(value: object, labels: RenderLabels | None = None) -> str:
    """Render a diagnosable value with terminal colors.

    Removing the ANSI escape sequences from the result yields exactly
    ``render(value, labels)``.

    Args:
        value: A `Debuggable`, a `DebugReport`, or any value satisfying
            `DebuggableLike`.
        labels: Section labels; defaults to `RenderLabels()`.

    Returns:
        The colored report.
    """
    report: DebugReport = DebugReport.from_value(value)
    labels = labels or RenderLabels()

    blocks: list[str] = [
        f"{ReportStyle.READABLE_NAME.color(report.readable_name + ':')} {report.reason}",
        ReportStyle.IDENTIFIER.color(f"{IDENTIFIER_LABEL}: {report.identifier}"),
    ]
    for section in ReportSection:
        items: tuple[str, ...] = getattr(report, section.value)
        if items:
            blocks.append(ReportStyle.HEADER.color(labels.header(section)) + bulleted_list(items))
    return BLOCK_SEPARATOR.join(blocks)
