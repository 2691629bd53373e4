# topmark:header:start
#
#   project      : Debuggable
#   file         : samples.py
#   file_relpath : tests/samples.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sample diagnosable types shared by the test suite."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from debuggable import Debuggable, DebuggableError


class FileError(DebuggableError):
    """Error with an explicit type identifier and one possible cause."""

    readable_name = "File Error"
    type_identifier = "App.FileError"
    possible_causes = ("path misspelled",)

    @property
    def reason(self) -> str:
        return "file not found"

    @property
    def instance_identifier(self) -> str:
        return "missing"


class BareError(DebuggableError):
    """Error relying on every default (derived type identifier, empty lists)."""

    readable_name = "Bare Error"

    def __init__(self, case: str = "plain") -> None:
        super().__init__(case)
        self.case = case

    @property
    def reason(self) -> str:
        return f"something went wrong ({self.case})"

    @property
    def instance_identifier(self) -> str:
        return self.case


class ServiceError(DebuggableError, abstract=True):
    """Intermediate base sharing documentation links across service errors."""

    documentation_links = ("https://docs.example.org/errors",)


class TimeoutError_(ServiceError):
    """Fully populated error: every optional list is non-empty."""

    readable_name = "Service Timeout"

    possible_causes = ("the upstream is overloaded", "the network is down")
    suggested_fixes = ("retry later",)
    external_discussion_links = ("https://stackoverflow.com/q/1",)
    related_issue_links = ("https://github.com/example/service/issues/7",)

    @property
    def reason(self) -> str:
        return "request timed out"

    @property
    def instance_identifier(self) -> str:
        return "timeout"


@dataclass(frozen=True)
class ParseFailure(Debuggable):
    """Dataclass-based diagnosable value with per-instance fields."""

    readable_name: ClassVar[str] = "Parse Failure"

    reason: str
    instance_identifier: str
    suggested_fixes: tuple[str, ...] = field(default=())


class DuckError:
    """Value satisfying `DebuggableLike` without inheriting from `Debuggable`."""

    readable_name = "Duck Error"
    reason = "it quacked"
    instance_identifier = "quack"
