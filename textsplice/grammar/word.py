"""Word tokens: ordered letters with directional search and splicing.

Responsibilities:
- Hold the letters of one word together with its trailing whitespace count.
- Locate a letter scanning forward or backward.
- Build the word that survives when a span is cut out between two words.
"""

from __future__ import annotations

from dataclasses import dataclass

from .items import SentenceItem
from .letter import Letter


@dataclass(slots=True)
class Word(SentenceItem):
    """A non-empty run of letters inside a sentence.

    Attributes:
        letters: Letters in left-to-right order.
    """

    letters: tuple[Letter, ...]

    def __post_init__(self) -> None:
        if not self.letters:
            raise ValueError("Word requires at least one letter.")

    @classmethod
    def from_string(cls, text: str, trail_space_count: int = 0) -> Word:
        """Build a word from its characters."""

        return cls(
            tuple(Letter(character) for character in text),
            trail_space_count=trail_space_count,
        )

    def __str__(self) -> str:
        return "".join(letter.value for letter in self.letters)

    def __len__(self) -> int:
        return len(self.letters)

    def length(self) -> int:
        """Return the number of letters in the word."""

        return len(self.letters)

    def index_of(
        self,
        target: Letter,
        ignore_case: bool,
        reverse: bool = False,
    ) -> int | None:
        """Return the first index matching `target` in scan order.

        Args:
            target: Letter to look for.
            ignore_case: Compare letters case-insensitively.
            reverse: Scan from the last letter toward the first.

        Returns:
            Index of the first match in scan order, or `None` when absent.
        """

        indices = range(len(self.letters) - 1, -1, -1) if reverse else range(len(self.letters))
        for index in indices:
            if self.letters[index].equals(target, ignore_case):
                return index
        return None

    @staticmethod
    def concat(
        start_word: Word,
        start_to: int,
        end_word: Word,
        end_from: int,
    ) -> Word | None:
        """Join the head of `start_word` with the tail of `end_word`.

        The result holds `start_word[:start_to]` followed by
        `end_word[end_from + 1:]`, so both boundary letters are dropped. It
        inherits the trailing spaces of `end_word`.

        Returns:
            The spliced word, or `None` when the two fragments cancel out.
        """

        if start_to >= start_word.length() or end_from < 0:
            return None

        letters = start_word.letters[:start_to] + end_word.letters[end_from + 1 :]
        if not letters:
            return None
        return Word(letters, trail_space_count=end_word.trail_space_count)
