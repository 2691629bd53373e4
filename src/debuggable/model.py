# topmark:header:start
#
#   project      : Debuggable
#   file         : model.py
#   file_relpath : src/debuggable/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable report snapshots of diagnosable values.

`DebugReport` captures every field the renderer needs, with the documented
defaults applied and list fields converted to tuples. It is both the input of
[`render_report`][debuggable.rendering.text.render_report] and a diagnosable
value in its own right, so code that prefers plain data over subclassing can
build one directly.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from debuggable.config.keys import Toml
from debuggable.config.logging import get_logger
from debuggable.errors import DebuggableConfigError
from debuggable.utils.introspection import qualified_type_name

if TYPE_CHECKING:
    from debuggable.config.logging import DebuggableLogger

logger: DebuggableLogger = get_logger(__name__)

# Optional list members, in report order, mapped to their TOML keys.
LIST_FIELDS: dict[str, str] = {
    "possible_causes": Toml.KEY_POSSIBLE_CAUSES,
    "suggested_fixes": Toml.KEY_SUGGESTED_FIXES,
    "documentation_links": Toml.KEY_DOCUMENTATION_LINKS,
    "external_discussion_links": Toml.KEY_EXTERNAL_DISCUSSION_LINKS,
    "related_issue_links": Toml.KEY_RELATED_ISSUE_LINKS,
}


def _snapshot(items: Iterable[str] | None) -> tuple[str, ...]:
    if items is None:
        return ()
    if isinstance(items, str):
        # A bare string would otherwise be split into characters.
        return (items,)
    return tuple(str(item) for item in items)


@dataclass(frozen=True, slots=True)
class DebugReport:
    """Immutable snapshot of a diagnosable value.

    An empty ``identifier`` is derived as ``"{type_identifier}.{instance_identifier}"``.

    Attributes:
        readable_name: Friendly name of the error's kind.
        reason: What went wrong.
        type_identifier: Stable identifier of the error's kind.
        instance_identifier: Identifier of this case within its kind.
        identifier: Full identifier of this error case.
        possible_causes: Possible causes, in display order.
        suggested_fixes: Suggested fixes, in display order.
        documentation_links: URLs into the project's documentation.
        external_discussion_links: URLs of external discussions (e.g. Q&A sites).
        related_issue_links: URLs of related issue-tracker entries.
    """

    readable_name: str
    reason: str
    type_identifier: str
    instance_identifier: str
    identifier: str = ""
    possible_causes: tuple[str, ...] = ()
    suggested_fixes: tuple[str, ...] = ()
    documentation_links: tuple[str, ...] = ()
    external_discussion_links: tuple[str, ...] = ()
    related_issue_links: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.identifier:
            object.__setattr__(
                self, "identifier", f"{self.type_identifier}.{self.instance_identifier}"
            )
        for attr in LIST_FIELDS:
            object.__setattr__(self, attr, _snapshot(getattr(self, attr)))

    @classmethod
    def from_value(cls, value: object) -> DebugReport:
        """Snapshot any diagnosable value.

        Works for `Debuggable` subclasses and for values that satisfy
        `DebuggableLike` structurally. Missing optional members take their
        defaults; a missing ``type_identifier`` is derived from the value's
        fully-qualified class name.

        Args:
            value: The diagnosable value.

        Returns:
            A `DebugReport` holding the value's fields at call time.
        """
        if isinstance(value, DebugReport):
            return value

        type_identifier: str = getattr(value, "type_identifier", None) or qualified_type_name(
            type(value)
        )
        instance_identifier: str = value.instance_identifier  # type: ignore[attr-defined]
        lists: dict[str, tuple[str, ...]] = {
            attr: _snapshot(getattr(value, attr, None)) for attr in LIST_FIELDS
        }
        report = cls(
            readable_name=value.readable_name,  # type: ignore[attr-defined]
            reason=value.reason,  # type: ignore[attr-defined]
            type_identifier=type_identifier,
            instance_identifier=instance_identifier,
            identifier=getattr(value, "identifier", None) or "",
            **lists,
        )
        logger.trace("Snapshot of %s: %r", qualified_type_name(type(value)), report)
        return report

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> DebugReport:
        """Build a report from a TOML-style mapping with kebab-case keys.

        Required keys: ``readable-name``, ``reason``, ``type-identifier`` and
        ``instance-identifier``. Optional: ``identifier`` and the five list keys
        (``possible-causes``, ``suggested-fixes``, ``documentation-links``,
        ``external-discussion-links``, ``related-issue-links``).

        Args:
            data: The parsed mapping (e.g. a TOML document).

        Returns:
            The resulting report.

        Raises:
            DebuggableConfigError: If a required key is missing, a value has the
                wrong type, or an unknown key is present.
        """
        known: set[str] = {
            Toml.KEY_READABLE_NAME,
            Toml.KEY_REASON,
            Toml.KEY_TYPE_IDENTIFIER,
            Toml.KEY_INSTANCE_IDENTIFIER,
            Toml.KEY_IDENTIFIER,
            *LIST_FIELDS.values(),
        }
        unknown: list[str] = sorted(str(k) for k in data if k not in known)
        if unknown:
            raise DebuggableConfigError(f"Unknown report key(s): {', '.join(unknown)}")

        def _required(key: str) -> str:
            value: object = data.get(key)
            if not isinstance(value, str) or not value:
                raise DebuggableConfigError(f"Report key '{key}' must be a non-empty string")
            return value

        identifier: object = data.get(Toml.KEY_IDENTIFIER, "")
        if not isinstance(identifier, str):
            raise DebuggableConfigError(f"Report key '{Toml.KEY_IDENTIFIER}' must be a string")

        lists: dict[str, tuple[str, ...]] = {}
        for attr, key in LIST_FIELDS.items():
            items: object = data.get(key, [])
            if not isinstance(items, list) or not all(isinstance(i, str) for i in items):
                raise DebuggableConfigError(f"Report key '{key}' must be a list of strings")
            lists[attr] = tuple(items)

        return cls(
            readable_name=_required(Toml.KEY_READABLE_NAME),
            reason=_required(Toml.KEY_REASON),
            type_identifier=_required(Toml.KEY_TYPE_IDENTIFIER),
            instance_identifier=_required(Toml.KEY_INSTANCE_IDENTIFIER),
            identifier=identifier,
            **lists,
        )
