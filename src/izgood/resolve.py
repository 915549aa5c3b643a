"""Field value resolution over the supported source shapes.

``resolve_value(source, name)`` returns the value a rule should check,
or ``None`` when the field cannot be found. Three shapes are understood:

1. **Form submission** — anything with ``get_list`` (``FormData``, a
   ``MultiDict``): first value for the name, falling back to an uploaded
   file of the same name.
2. **Flat record** — any ``Mapping``: direct key lookup.
3. **Nested record** — a ``Mapping`` whose key is not present directly
   and whose name looks like a path (``user.contact.email``,
   ``user[contact][email]``, ``items[0].sku``): walked segment by
   segment through mappings and lists.

A miss is a normal outcome, never an exception.
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any

from izgood._internal.multimap import MultiValueMapping
from izgood.config import DEFAULT_CONFIG, ValidationConfig

_BRACKET_RE = re.compile(r"\[([^\[\]]*)\]")
_INDEX_RE = re.compile(r"-?[0-9]+")


def split_path(name: str) -> list[str]:
    """Split a dotted/bracketed field name into segments.

    ``"user[contact][email]"`` and ``".user.contact.email"`` both give
    ``["user", "contact", "email"]``. Empty segments are dropped.
    """
    dotted = _BRACKET_RE.sub(r".\1", name).lstrip(".")
    return [segment for segment in dotted.split(".") if segment]


def is_path(name: str) -> bool:
    """True if *name* contains dot or bracket segments."""
    return "." in name or "[" in name


def resolve_path(source: Any, segments: Sequence[str]) -> Any | None:
    """Walk *segments* through nested mappings and lists.

    Returns None as soon as a segment is missing, an index is out of
    range, or the current object is not a keyed structure.
    """
    current = source
    for segment in segments:
        match current:
            case Mapping():
                if segment not in current:
                    return None
                current = current[segment]
            case list() | tuple():
                if _INDEX_RE.fullmatch(segment) is None:
                    return None
                index = int(segment)
                if not -len(current) <= index < len(current):
                    return None
                current = current[index]
            case _:
                return None
    return current


def resolve_value(
    source: Any,
    name: str,
    config: ValidationConfig = DEFAULT_CONFIG,
) -> Any | None:
    """Return the value for field *name* in *source*, or None if absent.

    Args:
        source: A form submission, a flat mapping, a nested mapping, or
            None (treated as empty).
        name: The rule's field name.
        config: Controls nested-path walking and file resolution.
    """
    if source is None:
        return None

    if isinstance(source, MultiValueMapping):
        value = source.get(name)
        if value is None and config.files_as_values:
            files = getattr(source, "files", None)
            if files is not None:
                value = files.get(name)
        return value

    if isinstance(source, Mapping):
        if name in source:
            return source[name]
        if config.nested_paths and is_path(name):
            return resolve_path(source, split_path(name))
        return None

    return None
