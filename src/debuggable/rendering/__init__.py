# topmark:header:start
#
#   project      : Debuggable
#   file         : __init__.py
#   file_relpath : src/debuggable/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report rendering.

- [`debuggable.rendering.text`][debuggable.rendering.text]: plain text, the
  canonical report format.
- [`debuggable.rendering.styled`][debuggable.rendering.styled]: the same layout
  with terminal colors.
- [`debuggable.rendering.labels`][debuggable.rendering.labels]: section order
  and configurable header text.
"""

from __future__ import annotations

from debuggable.rendering.labels import RenderLabels, ReportSection
from debuggable.rendering.styled import render_styled
from debuggable.rendering.text import bulleted_list, render, render_report, report_blocks

__all__ = [
    "RenderLabels",
    "ReportSection",
    "bulleted_list",
    "render",
    "render_report",
    "render_styled",
    "report_blocks",
]
