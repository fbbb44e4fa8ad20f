"""String coercion helpers shared by quick picks, config and filtering."""

from __future__ import annotations

from typing import Any


def to_string_safe(value: Any, default: Any = "") -> str:
    """
    Convert a value to a string that is never `None`.

    Falsy values (`None`, `""`, `0`, `False`, empty containers) yield `default`.
    Anything else is returned as `str(value)`, untrimmed; callers strip when
    they need to.
    """
    if not value:
        return "" if default is None else str(default)
    text = str(value)
    if not text:
        return "" if default is None else str(default)
    return text


def parse_target_type(value: Any) -> str:
    """Normalize a target type name: trimmed and lower-cased."""
    return to_string_safe(value).lower().strip()


def replace_all_strings(text: Any, search: Any, replacement: Any) -> str:
    """
    Replace every occurrence of `search` in `text`.

    An empty `search` puts `replacement` between every pair of characters,
    the same result as splitting on the empty string and joining.
    """
    text = to_string_safe(text)
    search = to_string_safe(search)
    replacement = to_string_safe(replacement)

    if not search:
        return replacement.join(text)
    return replacement.join(text.split(search))
