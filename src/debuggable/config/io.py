# topmark:header:start
#
#   project      : Debuggable
#   file         : io.py
#   file_relpath : src/debuggable/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O for Debuggable label configuration.

Labels can be configured in:

- ``debuggable.toml``, under a ``[labels]`` table, or
- ``pyproject.toml``, under ``[tool.debuggable.labels]``.

Example:
    ```toml
    [tool.debuggable.labels]
    project-name = "Acme"
    issues-header = "See these GitHub issues for discussion on this topic: "
    ```

Discovery walks up from a start directory; the nearest directory holding a
matching file wins, and within a directory ``debuggable.toml`` takes precedence
over ``pyproject.toml``. Files are not merged.

TOML parsing/formatting:
    Parsing and rendering use `tomlkit`; parsed documents are unwrapped into
    plain ``dict`` structures before validation.
"""

from __future__ import annotations

from dataclasses import fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from debuggable.config.keys import Toml
from debuggable.config.logging import get_logger
from debuggable.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME
from debuggable.errors import DebuggableConfigError
from debuggable.rendering.labels import RenderLabels

if TYPE_CHECKING:
    from collections.abc import Mapping

    from debuggable.config.logging import DebuggableLogger

logger: DebuggableLogger = get_logger(__name__)

TomlTable = dict[str, Any]

# TOML key -> RenderLabels field
LABEL_KEYS: Final[dict[str, str]] = {
    Toml.KEY_PROJECT_NAME: "project_name",
    Toml.KEY_CAUSES_HEADER: "causes_header",
    Toml.KEY_FIXES_HEADER: "fixes_header",
    Toml.KEY_DOCUMENTATION_HEADER: "documentation_header",
    Toml.KEY_DISCUSSION_HEADER: "discussion_header",
    Toml.KEY_ISSUES_HEADER: "issues_header",
}


def parse_toml_text(text: str, *, source: str = "<string>") -> TomlTable:
    """Parse TOML text into a plain dict.

    Args:
        text: The TOML document.
        source: Name of the document's origin, used in messages.

    Returns:
        The parsed document.

    Raises:
        DebuggableConfigError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        logger.error("Error decoding TOML from %s: %s", source, exc)
        raise DebuggableConfigError(f"Invalid TOML in {source}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``debuggable.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Raises:
        DebuggableConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Error loading TOML from %s: %s", path, exc)
        raise DebuggableConfigError(f"Cannot read {path}: {exc}") from exc
    return parse_toml_text(text, source=str(path))


def labels_table(data: Mapping[str, Any], *, pyproject: bool = False) -> TomlTable | None:
    """Return the labels table of a parsed config document, if present.

    Args:
        data: The parsed document.
        pyproject: If True, look under ``[tool.debuggable]`` instead of the root.

    Returns:
        The labels table, or None if the document has no Debuggable labels.

    Raises:
        DebuggableConfigError: If the labels entry exists but is not a table.
    """
    root: object = data
    if pyproject:
        tool: object = data.get(Toml.SECTION_TOOL, {})
        root = tool.get(Toml.SECTION_DEBUGGABLE) if isinstance(tool, dict) else None
        if root is None:
            return None
    if not isinstance(root, dict):
        raise DebuggableConfigError("The Debuggable configuration section must be a table")
    table: object = cast("TomlTable", root).get(Toml.SECTION_LABELS)
    if table is None:
        return None
    if not isinstance(table, dict):
        raise DebuggableConfigError(f"'{Toml.SECTION_LABELS}' must be a table")
    return cast("TomlTable", table)


def labels_from_table(table: Mapping[str, Any], base: RenderLabels | None = None) -> RenderLabels:
    """Apply a ``[labels]`` table on top of ``base`` (default labels if None).

    Unknown keys are logged as warnings and ignored.

    Raises:
        DebuggableConfigError: If a value is not a string, or the documentation
            header uses an unknown placeholder.
    """
    overrides: dict[str, str] = {}
    for key, value in table.items():
        attr: str | None = LABEL_KEYS.get(key)
        if attr is None:
            logger.warning("Ignoring unknown label key '%s'", key)
            continue
        if not isinstance(value, str):
            raise DebuggableConfigError(
                f"Label '{key}' must be a string, got {type(value).__name__}"
            )
        overrides[attr] = value
    logger.debug("Label overrides: %s", overrides)
    return replace(base or RenderLabels(), **overrides)


def labels_from_toml_text(text: str, *, pyproject: bool = False) -> RenderLabels:
    """Parse labels from TOML text; default labels if the document has none."""
    table: TomlTable | None = labels_table(parse_toml_text(text), pyproject=pyproject)
    return labels_from_table(table) if table is not None else RenderLabels()


def load_labels(path: Path) -> RenderLabels:
    """Load labels from a ``debuggable.toml`` or ``pyproject.toml`` file.

    A file named ``pyproject.toml`` is read from ``[tool.debuggable.labels]``;
    any other file from ``[labels]``.
    """
    data: TomlTable = load_toml_dict(path)
    table: TomlTable | None = labels_table(data, pyproject=path.name == PYPROJECT_FILE_NAME)
    if table is None:
        logger.info("No labels configured in %s; using defaults", path)
        return RenderLabels()
    return labels_from_table(table)


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest label configuration file at or above ``start``.

    A ``pyproject.toml`` only counts if it has a ``[tool.debuggable]`` table;
    one that cannot be read or parsed is skipped.

    Args:
        start: Directory (or file, whose parent is used) to start from.

    Returns:
        The path of the configuration file, or None if none was found.
    """
    start = start.resolve()
    directory: Path = start if start.is_dir() else start.parent
    for candidate_dir in (directory, *directory.parents):
        config_file: Path = candidate_dir / CONFIG_FILE_NAME
        if config_file.is_file():
            logger.debug("Found %s", config_file)
            return config_file
        pyproject: Path = candidate_dir / PYPROJECT_FILE_NAME
        if pyproject.is_file():
            try:
                data: TomlTable = load_toml_dict(pyproject)
            except DebuggableConfigError as exc:
                logger.debug("Skipping unreadable %s: %s", pyproject, exc)
                continue
            tool: object = data.get(Toml.SECTION_TOOL, {})
            if isinstance(tool, dict) and Toml.SECTION_DEBUGGABLE in tool:
                logger.debug("Found [tool.%s] in %s", Toml.SECTION_DEBUGGABLE, pyproject)
                return pyproject
    return None


def resolve_labels(config_path: Path | None = None, start: Path | None = None) -> RenderLabels:
    """Return the effective labels.

    Args:
        config_path: Explicit configuration file; skips discovery when given.
        start: Discovery start directory; defaults to the current directory.

    Returns:
        The configured labels, or the defaults when no configuration was found.
    """
    path: Path | None = config_path or discover_config_file(start or Path.cwd())
    if path is None:
        logger.debug("No label configuration found; using defaults")
        return RenderLabels()
    return load_labels(path)


def labels_to_toml(labels: RenderLabels) -> str:
    """Render labels as a ``debuggable.toml`` document (``[labels]`` table)."""
    attr_to_key: dict[str, str] = {attr: key for key, attr in LABEL_KEYS.items()}
    table = tomlkit.table()
    for f in fields(labels):
        table.add(attr_to_key[f.name], getattr(labels, f.name))
    doc: tomlkit.TOMLDocument = tomlkit.document()
    doc.add(Toml.SECTION_LABELS, table)
    return tomlkit.dumps(doc)
