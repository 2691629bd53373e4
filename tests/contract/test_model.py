# topmark:header:start
#
#   project      : Debuggable
#   file         : test_model.py
#   file_relpath : tests/contract/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DebugReport: snapshots of diagnosable values and TOML-style mappings."""

from __future__ import annotations

from typing import Any

import pytest

from debuggable import DebugReport
from debuggable.errors import DebuggableConfigError
from tests.samples import BareError, DuckError, FileError, TimeoutError_


def test_from_value_applies_defaults() -> None:
    """Missing optional members become empty tuples."""
    report = DebugReport.from_value(BareError("x"))

    assert report.readable_name == "Bare Error"
    assert report.reason == "something went wrong (x)"
    assert report.identifier == f"{BareError.type_identifier}.x"
    assert report.possible_causes == ()
    assert report.related_issue_links == ()


def test_from_value_snapshots_lists_as_tuples() -> None:
    """List members are copied into tuples at snapshot time."""
    causes: list[str] = ["first"]

    class Mutable(BareError):
        possible_causes = causes

    report = DebugReport.from_value(Mutable())
    causes.append("second")

    assert report.possible_causes == ("first",)


def test_from_value_on_duck_typed_value_derives_type_identifier() -> None:
    """Duck-typed values get a type identifier from their qualified class name."""
    report = DebugReport.from_value(DuckError())

    assert report.type_identifier == f"{DuckError.__module__}.DuckError"
    assert report.identifier == f"{DuckError.__module__}.DuckError.quack"


def test_from_value_keeps_all_sections() -> None:
    """Every optional list of a populated value is captured in order."""
    report = DebugReport.from_value(TimeoutError_())

    assert report.possible_causes == ("the upstream is overloaded", "the network is down")
    assert report.suggested_fixes == ("retry later",)
    assert report.documentation_links == ("https://docs.example.org/errors",)
    assert report.external_discussion_links == ("https://stackoverflow.com/q/1",)
    assert report.related_issue_links == ("https://github.com/example/service/issues/7",)


def test_from_value_is_identity_on_reports() -> None:
    """A report is its own snapshot."""
    report = DebugReport.from_value(FileError())
    assert DebugReport.from_value(report) is report


def test_direct_construction_derives_identifier() -> None:
    """An empty identifier is derived from the type and instance identifiers."""
    report = DebugReport(
        readable_name="File Error",
        reason="file not found",
        type_identifier="App.FileError",
        instance_identifier="missing",
        possible_causes=["path misspelled"],  # type: ignore[arg-type]
    )

    assert report.identifier == "App.FileError.missing"
    assert report.possible_causes == ("path misspelled",)


def test_bare_string_is_a_single_item() -> None:
    """A string passed as a list field is one item, not a sequence of characters."""
    report = DebugReport("N", "r", "T", "i", suggested_fixes="restart")  # type: ignore[arg-type]
    assert report.suggested_fixes == ("restart",)


def test_from_mapping_reads_kebab_case_keys() -> None:
    """TOML-style mappings use kebab-case keys."""
    report = DebugReport.from_mapping(
        {
            "readable-name": "File Error",
            "reason": "file not found",
            "type-identifier": "App.FileError",
            "instance-identifier": "missing",
            "possible-causes": ["path misspelled"],
            "related-issue-links": ["https://example.org/issues/1"],
        }
    )

    assert report.identifier == "App.FileError.missing"
    assert report.possible_causes == ("path misspelled",)
    assert report.related_issue_links == ("https://example.org/issues/1",)
    assert report.suggested_fixes == ()


def test_from_mapping_explicit_identifier() -> None:
    """An explicit identifier overrides the derived one."""
    report = DebugReport.from_mapping(
        {
            "readable-name": "N",
            "reason": "r",
            "type-identifier": "T",
            "instance-identifier": "i",
            "identifier": "E042",
        }
    )
    assert report.identifier == "E042"


_VALID: dict[str, Any] = {
    "readable-name": "N",
    "reason": "r",
    "type-identifier": "T",
    "instance-identifier": "i",
}


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"reason": ""}, "reason"),
        ({"readable-name": 3}, "readable-name"),
        ({"possible-causes": "not a list"}, "possible-causes"),
        ({"suggested-fixes": [1, 2]}, "suggested-fixes"),
        ({"identifier": 7}, "identifier"),
        ({"severity": "high"}, "severity"),
    ],
)
def test_from_mapping_rejects_invalid_input(overrides: dict[str, Any], message: str) -> None:
    """Malformed descriptions raise `DebuggableConfigError` naming the key."""
    with pytest.raises(DebuggableConfigError, match=message):
        DebugReport.from_mapping({**_VALID, **overrides})


def test_from_mapping_requires_type_identifier() -> None:
    """Plain data has no class to derive a type identifier from."""
    data = dict(_VALID)
    del data["type-identifier"]
    with pytest.raises(DebuggableConfigError, match="type-identifier"):
        DebugReport.from_mapping(data)
