"""Sentence model: parsing, letter lookup, and span removal.

Responsibilities:
- Split raw sentence characters into words and punctuation while keeping
  every whitespace run as a token-attached count.
- Locate boundary letters across words.
- Rebuild a sentence with the longest start/end letter span removed.

Key types:
- `Sentence`: ordered tokens plus leading whitespace count.
- `LetterPosition`: word index and letter index of a located letter.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import cast

from ..errors import InvalidCharacterError
from .items import SentenceItem
from .letter import Letter
from .punctuation import Punctuation
from .word import Word


@dataclass(frozen=True, slots=True)
class LetterPosition:
    """Location of a letter inside a sentence.

    Attributes:
        item_index: Index of the word among the sentence items.
        letter_index: Index of the letter inside that word.
    """

    item_index: int
    letter_index: int

    def is_after(self, other: LetterPosition) -> bool:
        """Return whether this position lies strictly to the right of `other`."""

        return (self.item_index, self.letter_index) > (other.item_index, other.letter_index)


@dataclass(slots=True)
class Sentence:
    """An ordered sequence of words and punctuation marks.

    Attributes:
        items: Tokens in original left-to-right order.
        lead_space_count: Whitespace characters before the first token.
    """

    items: tuple[SentenceItem, ...] = ()
    lead_space_count: int = 0

    @classmethod
    def parse(cls, raw: str) -> Sentence:
        """Parse raw sentence characters into tokens.

        Raises:
            InvalidCharacterError: If a character is neither a letter,
                punctuation, nor whitespace.
        """

        items: list[SentenceItem] = []
        lead_space_count = 0
        pending_word: list[str] = []

        for character in raw:
            if character.isalpha():
                pending_word.append(character)
                continue

            if pending_word:
                items.append(Word.from_string("".join(pending_word)))
                pending_word.clear()

            if Punctuation.is_punctuation(character):
                items.append(Punctuation(character))
            elif character.isspace():
                if items:
                    items[-1].trail_space_count += 1
                else:
                    lead_space_count += 1
            else:
                raise InvalidCharacterError(character)

        if pending_word:
            items.append(Word.from_string("".join(pending_word)))

        return cls(items=tuple(items), lead_space_count=lead_space_count)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return self.render()

    @property
    def words(self) -> tuple[Word, ...]:
        """Return the word tokens in order."""

        return tuple(item for item in self.items if isinstance(item, Word))

    def render(self) -> str:
        """Serialize tokens with their trailing spaces (leading spaces excluded)."""

        return "".join(item.render() for item in self.items)

    def find_letter(
        self,
        target: Letter,
        ignore_case: bool,
        reverse: bool = False,
    ) -> LetterPosition | None:
        """Locate the first `target` letter in scan order, skipping punctuation."""

        indices = range(len(self.items) - 1, -1, -1) if reverse else range(len(self.items))
        for item_index in indices:
            item = self.items[item_index]
            if not isinstance(item, Word):
                continue
            letter_index = item.index_of(target, ignore_case, reverse=reverse)
            if letter_index is not None:
                return LetterPosition(item_index, letter_index)
        return None

    def without_longest_substr(
        self,
        start_letter: Letter,
        end_letter: Letter,
        ignore_case: bool,
    ) -> Sentence:
        """Return a copy without the longest span from `start_letter` to `end_letter`.

        The span runs from the first occurrence of `start_letter` to the last
        occurrence of `end_letter`, both inclusive. The sentence is returned
        unchanged when either letter is missing or the start lies after the end.
        """

        start = self.find_letter(start_letter, ignore_case)
        end = self.find_letter(end_letter, ignore_case, reverse=True)
        return self._without_span(start, end)

    def _without_span(
        self,
        start: LetterPosition | None,
        end: LetterPosition | None,
    ) -> Sentence:
        if start is None or end is None or start.is_after(end):
            return self

        start_word = cast(Word, self.items[start.item_index])
        end_word = cast(Word, self.items[end.item_index])
        spliced = Word.concat(start_word, start.letter_index, end_word, end.letter_index)

        prefix = list(self.items[: start.item_index])
        suffix = list(self.items[end.item_index + 1 :])
        lead_space_count = self.lead_space_count

        if spliced is not None:
            prefix.append(spliced)
        elif prefix:
            last = prefix[-1]
            prefix[-1] = replace(
                last,
                trail_space_count=last.trail_space_count + end_word.trail_space_count,
            )
        else:
            lead_space_count += end_word.trail_space_count

        return Sentence(items=tuple(prefix + suffix), lead_space_count=lead_space_count)
