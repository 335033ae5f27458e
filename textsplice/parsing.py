"""Shared parsing helpers for configuration and CLI values."""

from __future__ import annotations


_TRUE_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Return a stripped string, or `None` for `None` and blank values."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a boolean token case-insensitively, returning `None` when invalid."""

    if isinstance(value, bool):
        return value

    token = normalize_optional_string(value)
    if token is None:
        return None
    token = token.lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    return None


def parse_required_boolean(value: object, field_name: str) -> bool:
    """Parse a boolean token or raise an actionable error.

    Raises:
        ValueError: If the token is not an accepted boolean spelling.
    """

    parsed = parse_permissive_boolean(value)
    if parsed is None:
        raise ValueError(
            f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
        )
    return parsed


def parse_single_letter(value: object, field_name: str) -> str:
    """Parse a boundary letter: exactly one alphabetic character after trimming.

    Args:
        value: Raw value from CLI, YAML, or environment.
        field_name: Field name used in the error message.

    Raises:
        ValueError: If the value is blank, longer than one character, or not a letter.
    """

    token = normalize_optional_string(value)
    if token is None or len(token) != 1 or not token.isalpha():
        raise ValueError(f"`{field_name}` must be a single letter, got {value!r}.")
    return token
