"""Single-letter value type."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Letter:
    """One character of a word.

    Attributes:
        value: The character itself.
    """

    value: str

    def __post_init__(self) -> None:
        if len(self.value) != 1:
            raise ValueError(f"Letter requires exactly one character, got {self.value!r}.")

    def equals(self, other: Letter, ignore_case: bool) -> bool:
        """Compare two letters, folding both to lowercase when `ignore_case` is set."""

        if ignore_case:
            return self.value.lower() == other.value.lower()
        return self.value == other.value

    def __str__(self) -> str:
        return self.value
