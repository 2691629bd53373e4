# topmark:header:start
#
#   project      : Debuggable
#   file         : test_labels_and_styles.py
#   file_relpath : tests/rendering/test_labels_and_styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render labels and terminal-colored rendering."""

from __future__ import annotations

import re

import pytest
from yachalk import chalk
from yachalk.types import ColorMode

from debuggable import RenderLabels, ReportSection, render, render_styled
from debuggable.errors import DebuggableConfigError
from tests.samples import BareError, FileError, TimeoutError_

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


@pytest.fixture
def full_color() -> object:
    """Force yachalk to emit ANSI codes regardless of the terminal."""
    previous = chalk.get_color_mode()
    chalk.set_color_mode(ColorMode.FullTrueColor)
    yield
    chalk.set_color_mode(previous)


def test_sections_enumerate_in_report_order() -> None:
    """`ReportSection` iteration order is the rendering order."""
    assert [s.value for s in ReportSection] == [
        "possible_causes",
        "suggested_fixes",
        "documentation_links",
        "external_discussion_links",
        "related_issue_links",
    ]


def test_documentation_header_substitutes_project_name() -> None:
    """``{project}`` in the documentation header is the project name."""
    labels = RenderLabels(project_name="Acme")
    assert labels.header(ReportSection.DOCUMENTATION_LINKS) == (
        "Acme's documentation talks about this: "
    )


def test_other_headers_are_verbatim() -> None:
    """Braces in other headers are not treated as placeholders."""
    labels = RenderLabels(fixes_header="Try {this}: ")
    assert labels.header(ReportSection.SUGGESTED_FIXES) == "Try {this}: "


@pytest.mark.parametrize("section", list(ReportSection))
def test_default_headers_end_with_a_space(section: ReportSection) -> None:
    """Every default header line carries its trailing space into the report."""
    assert RenderLabels().header(section).endswith(": ")


@pytest.mark.parametrize("template", ["{name}'s docs: ", "{}: ", "{project"])
def test_invalid_documentation_template_is_rejected(template: str) -> None:
    """Only the ``{project}`` placeholder is allowed in the documentation header."""
    with pytest.raises(DebuggableConfigError):
        RenderLabels(documentation_header=template)


def test_to_dict_lists_every_label() -> None:
    """`to_dict` exposes the unresolved label text for every field."""
    data = RenderLabels().to_dict()
    assert data["project_name"] == "The project"
    assert data["documentation_header"] == "{project}'s documentation talks about this: "
    assert len(data) == 6


@pytest.mark.parametrize("value", [FileError(), BareError(), TimeoutError_()])
def test_styled_render_strips_to_plain_render(full_color: object, value: object) -> None:
    """Removing ANSI codes from the styled report yields the plain report."""
    styled = render_styled(value)

    assert _ANSI_RE.search(styled) is not None
    assert _ANSI_RE.sub("", styled) == render(value)


def test_styled_render_leaves_bullets_unstyled(full_color: object) -> None:
    """Bullet items are emitted without escape codes so links stay copyable."""
    styled = render_styled(FileError())
    assert styled.endswith("\n- path misspelled")
