# topmark:header:start
#
#   project      : Debuggable
#   file         : introspection.py
#   file_relpath : src/debuggable/utils/introspection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Introspection helpers for Debuggable."""

from __future__ import annotations

from inspect import getmodule


def qualified_type_name(cls: type) -> str:
    """Return the fully-qualified ``module.QualifiedName`` of a class.

    Nested classes keep their dotted ``__qualname__`` (``pkg.mod.Outer.Inner``).
    Falls back to ``inspect.getmodule`` when ``__module__`` is missing, and to the
    bare qualified name when the module cannot be resolved.

    Args:
        cls: The class to describe.

    Returns:
        A string like ``"package.module.QualifiedName"``.
    """
    mod_name: str | None = getattr(cls, "__module__", None)
    type_name: str = getattr(cls, "__qualname__", None) or cls.__name__

    if not mod_name:
        mod = getmodule(cls)
        if mod is not None and getattr(mod, "__name__", None):
            mod_name = mod.__name__

    return f"{mod_name}.{type_name}" if mod_name else type_name
