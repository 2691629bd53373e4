# topmark:header:start
#
#   project      : Debuggable
#   file         : text.py
#   file_relpath : src/debuggable/rendering/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plain-text rendering of diagnosable values.

A report is a list of blocks joined by a blank line:

1. ``"{readable_name}: {reason}"``
2. ``"Identifier: {identifier}"``
3. one block per non-empty list section, in `ReportSection` order:
   the section header directly followed by a bulleted list.

Empty sections are omitted. Rendering is a pure function of the value's fields.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from debuggable.config.logging import get_logger
from debuggable.model import DebugReport
from debuggable.rendering.labels import RenderLabels, ReportSection

if TYPE_CHECKING:
    from collections.abc import Iterable

    from debuggable.config.logging import DebuggableLogger

logger: DebuggableLogger = get_logger(__name__)

BLOCK_SEPARATOR: Final[str] = "\n\n"
BULLET_PREFIX: Final[str] = "\n- "
IDENTIFIER_LABEL: Final[str] = "Identifier"

_DEFAULT_LABELS: Final[RenderLabels] = RenderLabels()


def bulleted_list(items: Iterable[str]) -> str:
    """Render items as newline-and-dash-prefixed lines.

    Each item is preceded by ``"\\n- "``; nothing follows the last item.

    Args:
        items: The items to render.

    Returns:
        ``"\\n- a\\n- b"`` for ``["a", "b"]``, or ``""`` for no items.
    """
    return "".join(f"{BULLET_PREFIX}{item}" for item in items)


def report_blocks(report: DebugReport, labels: RenderLabels | None = None) -> list[str]:
    """Return the report's blocks in display order, without separators.

    Args:
        report: The report to lay out.
        labels: Section labels; defaults to `RenderLabels()`.

    Returns:
        The reason line, the identifier line, then one block per non-empty section.
    """
    labels = labels or _DEFAULT_LABELS
    blocks: list[str] = [
        f"{report.readable_name}: {report.reason}",
        f"{IDENTIFIER_LABEL}: {report.identifier}",
    ]
    for section in ReportSection:
        items: tuple[str, ...] = getattr(report, section.value)
        if items:
            blocks.append(labels.header(section) + bulleted_list(items))
    return blocks


def render_report(report: DebugReport, labels: RenderLabels | None = None) -> str:
    """Render a `DebugReport` as plain text."""
    blocks: list[str] = report_blocks(report, labels)
    logger.trace("Rendering %s with %d block(s)", report.identifier, len(blocks))
    return BLOCK_SEPARATOR.join(blocks)


def render(value: object, labels: RenderLabels | None = None) -> str:
    """Render a diagnosable value as a human-readable report.

    Example:
        A value with readable name ``"File Error"``, reason ``"file not found"``,
        identifier ``"App.FileError.missing"`` and one possible cause renders as:

        ```text
        File Error: file not found

        Identifier: App.FileError.missing

        Here are some possible causes:
        - path misspelled
        ```

        Each default section header ends with a space, so the causes line is
        ``"Here are some possible causes: "`` in the actual output.

    Args:
        value: A `Debuggable`, a `DebugReport`, or any value satisfying
            `DebuggableLike`.
        labels: Section labels; defaults to `RenderLabels()`.

    Returns:
        The rendered report.
    """
    return render_report(DebugReport.from_value(value), labels)
