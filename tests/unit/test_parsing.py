"""Unit tests for shared configuration and CLI parsing helpers."""

import pytest

from textsplice.parsing import (
    normalize_optional_string,
    parse_permissive_boolean,
    parse_required_boolean,
    parse_single_letter,
)


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None
    assert normalize_optional_string("  value  ") == "value"


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("TrUe", True),
        ("  ON ", True),
        ("yes", True),
        ("FALSE", False),
        (" oFf ", False),
        (0, False),
    ],
)
def test_parse_permissive_boolean_accepts_mixed_case_tokens(
    token: object, expected: bool
) -> None:
    """Permissive parsing should accept valid tokens case-insensitively."""

    assert parse_permissive_boolean(token) is expected


@pytest.mark.parametrize("value", ["", "maybe", "2", None])
def test_parse_permissive_boolean_returns_none_for_invalid_tokens(value: object) -> None:
    """Permissive parsing should return `None` for invalid or blank inputs."""

    assert parse_permissive_boolean(value) is None


def test_parse_required_boolean_raises_for_invalid_token() -> None:
    """Strict boolean parsing should name the offending field."""

    with pytest.raises(ValueError, match=r"`ignore_case` must be a boolean value"):
        parse_required_boolean("maybe", "ignore_case")
    assert parse_required_boolean(True, "ignore_case") is True


def test_parse_single_letter_trims_and_accepts_any_alphabet() -> None:
    """Single letters from any script should be accepted after trimming."""

    assert parse_single_letter(" в ", "start_letter") == "в"
    assert parse_single_letter("Q", "end_letter") == "Q"


@pytest.mark.parametrize("value", ["", "  ", "ab", "1", ".", None])
def test_parse_single_letter_rejects_non_letters(value: object) -> None:
    """Blank, multi-character, and non-alphabetic values should be rejected."""

    with pytest.raises(ValueError, match="`start_letter` must be a single letter"):
        parse_single_letter(value, "start_letter")
