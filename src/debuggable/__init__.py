# topmark:header:start
#
#   project      : Debuggable
#   file         : __init__.py
#   file_relpath : src/debuggable/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Debuggable package.

Debuggable is a small capability contract for error-like values. A value that
implements it supplies a reason, a stable identifier and optional lists of
possible causes, suggested fixes and reference links; the renderer composes
those fields into one human-readable, multi-line report.

Typical usage:

```python
from debuggable import Debuggable, DebuggableError


class FileError(DebuggableError):
    readable_name = "File Error"

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path

    @property
    def reason(self) -> str:
        return f"file not found: {self.path}"

    @property
    def instance_identifier(self) -> str:
        return "missing"


print(FileError("app.toml").debug_description)
```
"""

from __future__ import annotations

from debuggable.contract import (
    Debuggable,
    DebuggableContractError,
    DebuggableError,
    DebuggableLike,
)
from debuggable.model import DebugReport
from debuggable.rendering import (
    RenderLabels,
    ReportSection,
    bulleted_list,
    render,
    render_report,
    render_styled,
)

__all__ = [
    "DebugReport",
    "Debuggable",
    "DebuggableContractError",
    "DebuggableError",
    "DebuggableLike",
    "RenderLabels",
    "ReportSection",
    "bulleted_list",
    "render",
    "render_report",
    "render_styled",
]
