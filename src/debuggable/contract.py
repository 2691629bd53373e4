# topmark:header:start
#
#   project      : Debuggable
#   file         : contract.py
#   file_relpath : src/debuggable/contract.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The Debuggable capability contract.

A *diagnosable value* describes an error condition for humans. It supplies:

- ``readable_name`` (per kind, i.e. a class attribute): a friendly name for the
  category of error, e.g. ``"File Error"``.
- ``reason`` (per instance): what went wrong.
- ``instance_identifier`` (per instance): distinguishes this case within its kind.

and may override the defaults for:

- ``type_identifier`` (per kind): defaults to the fully-qualified class name.
- ``identifier``: defaults to ``"{type_identifier}.{instance_identifier}"``.
- ``possible_causes``, ``suggested_fixes``, ``documentation_links``,
  ``external_discussion_links``, ``related_issue_links``: default to empty.

Sections:
    * DebuggableLike: structural protocol for values that satisfy the contract
      without inheriting from `Debuggable`.
    * Debuggable: mixin base class supplying the defaults and checking the
      required members when a subclass is defined.
    * DebuggableError: `Debuggable` exception base class.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, ClassVar, Final, Protocol, runtime_checkable

from debuggable.config.logging import get_logger
from debuggable.errors import DebuggableContractError
from debuggable.utils.introspection import qualified_type_name

if TYPE_CHECKING:
    from collections.abc import Sequence

    from debuggable.config.logging import DebuggableLogger
    from debuggable.rendering.labels import RenderLabels

logger: DebuggableLogger = get_logger(__name__)

# Members every concrete Debuggable class must provide, in reporting order.
REQUIRED_MEMBERS: Final[tuple[str, ...]] = ("readable_name", "reason", "instance_identifier")

# Members read as plain values when rendering; a method in their place is rejected.
VALUE_MEMBERS: Final[tuple[str, ...]] = (
    "reason",
    "instance_identifier",
    "identifier",
    "possible_causes",
    "suggested_fixes",
    "documentation_links",
    "external_discussion_links",
    "related_issue_links",
)


@runtime_checkable
class DebuggableLike(Protocol):
    """Structural interface for diagnosable values.

    Only the required members are part of the protocol; the optional list
    members and the identifiers are looked up with their documented defaults
    by [`DebugReport.from_value`][debuggable.model.DebugReport.from_value].
    """

    readable_name: str

    @property
    def reason(self) -> str:
        """Human-readable explanation of what went wrong."""
        ...

    @property
    def instance_identifier(self) -> str:
        """Identifier of this specific error case within its kind."""
        ...


class _DerivedIdentifier:
    """Non-data descriptor computing ``"{type_identifier}.{instance_identifier}"``.

    Being a non-data descriptor, an instance attribute (e.g. a dataclass field)
    or a subclass override named ``identifier`` takes precedence.
    """

    def __get__(self, instance: object | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return f"{type(instance).type_identifier}.{instance.instance_identifier}"  # type: ignore[attr-defined]


def _class_provides(cls: type, name: str) -> bool:
    """Return True if a class below `Debuggable` defines or declares ``name``."""
    for base in cls.__mro__:
        if base in (Debuggable, object):
            continue
        if name in vars(base) or name in inspect.get_annotations(base):
            return True
    return False


def _defined_as_method(cls: type, name: str) -> bool:
    """Return True if ``name`` is nearest defined below `Debuggable` as a plain function."""
    for base in cls.__mro__:
        if base in (Debuggable, object):
            continue
        if name in vars(base):
            return inspect.isfunction(vars(base)[name])
    return False


def _is_non_empty_str(value: object) -> bool:
    return isinstance(value, str) and value != ""


class Debuggable:
    """Mixin base class for diagnosable values.

    Subclasses provide ``readable_name`` as a class attribute, and ``reason`` and
    ``instance_identifier`` as properties, attributes, or dataclass fields. The
    remaining members have defaults that subclasses may override in any of
    those forms.

    The required members are checked when the subclass is *defined*: a
    concrete subclass that omits one raises `DebuggableContractError`.
    Intermediate base classes opt out with the ``abstract`` class keyword:

    ```python
    class AppError(DebuggableError, abstract=True):
        documentation_links = ("https://example.org/errors",)
    ```

    ``type_identifier`` is derived from the fully-qualified class name unless a
    class assigns it explicitly; an explicit value is inherited by subclasses.
    """

    readable_name: ClassVar[str]
    type_identifier: ClassVar[str]

    possible_causes: Sequence[str] = ()
    suggested_fixes: Sequence[str] = ()
    documentation_links: Sequence[str] = ()
    external_discussion_links: Sequence[str] = ()
    related_issue_links: Sequence[str] = ()

    identifier: Any = _DerivedIdentifier()

    # False once a class in the hierarchy has assigned `type_identifier` explicitly.
    _type_identifier_derived: ClassVar[bool] = True

    def __init_subclass__(cls, abstract: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        name: str = qualified_type_name(cls)

        own: dict[str, Any] = dict(vars(cls))
        # A class re-created by `dataclass(slots=True)` carries our derived value in its dict.
        if "type_identifier" in own and own.get("_type_identifier_derived") is not True:
            if not _is_non_empty_str(own["type_identifier"]):
                raise DebuggableContractError(
                    f"{name}: 'type_identifier' must be a non-empty string"
                )
            cls._type_identifier_derived = False
        elif "type_identifier" in own or cls._type_identifier_derived:
            cls.type_identifier = name
            cls._type_identifier_derived = True

        if abstract:
            logger.trace("Registered abstract Debuggable base %s", name)
            return

        missing: list[str] = [m for m in REQUIRED_MEMBERS if not _class_provides(cls, m)]
        if missing:
            raise DebuggableContractError(
                f"{name} is not a valid Debuggable: missing required member(s) "
                + ", ".join(repr(m) for m in missing)
                + " (pass abstract=True for intermediate base classes)"
            )

        readable: object = getattr(cls, "readable_name", None)
        if not isinstance(readable, property) and not _is_non_empty_str(readable):
            raise DebuggableContractError(
                f"{name}: 'readable_name' must be a non-empty string class attribute"
            )

        methods: list[str] = [m for m in VALUE_MEMBERS if _defined_as_method(cls, m)]
        if methods:
            raise DebuggableContractError(
                f"{name}: "
                + ", ".join(repr(m) for m in methods)
                + " must be a property, attribute or dataclass field, not a method"
            )

        logger.trace("Registered Debuggable %s (type identifier %r)", name, cls.type_identifier)

    @property
    def printable(self) -> str:
        """Return the rendered report with the default labels.

        See [`render`][debuggable.rendering.text.render] for the layout.
        """
        return self.describe()

    @property
    def debug_description(self) -> str:
        """Alias of `printable`, for use when formatting an error for a human."""
        return self.printable

    def describe(self, labels: RenderLabels | None = None) -> str:
        """Return the rendered report, optionally with custom labels.

        Args:
            labels: Section labels; defaults to `RenderLabels()`.

        Returns:
            The multi-line, human-readable report.
        """
        from debuggable.rendering.text import render

        return render(self, labels)


class DebuggableError(Debuggable, Exception, abstract=True):
    """Base class for exceptions implementing the Debuggable contract.

    ``str(error)`` is the report's first line (``"{readable_name}: {reason}"``);
    use `debug_description` for the full report.
    """

    def __str__(self) -> str:
        return f"{self.readable_name}: {self.reason}"  # type: ignore[attr-defined]
