"""Text model: validation, whitespace normalization, and sentence splitting.

Responsibilities:
- Reject raw text that cannot be a sequence of sentences.
- Collapse whitespace runs so spacing is carried by token counts only.
- Split normalized text at sentence terminators and re-serialize it.

Key public functions:
- `parse_text`: parse raw text into a `Text`.
- `normalize_whitespace`: collapse whitespace runs to single spaces.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
import re

from ..errors import TextValidationError
from .punctuation import Punctuation
from .sentence import Sentence


def normalize_whitespace(raw: str) -> str:
    """Collapse every run of whitespace characters into one space."""

    return re.sub(r"\s+", " ", raw)


def _validate(raw: str) -> None:
    if not raw:
        raise TextValidationError("text must be a non-empty string")
    if not raw[0].isupper():
        raise TextValidationError("text should start with an uppercase letter")
    if not Punctuation.is_sentence_end(raw[-1]):
        raise TextValidationError(
            "the last character of the text should be a sentence-ending punctuation mark"
        )


class Text:
    """An ordered, non-empty sequence of sentences."""

    def __init__(self, sentences: list[Sentence]) -> None:
        if not sentences:
            raise ValueError("Text requires at least one sentence.")
        self._sentences = list(sentences)

    @classmethod
    def parse(cls, raw: str) -> Text:
        """Validate, normalize, and split raw text into sentences.

        Raises:
            TextValidationError: If the text is empty, does not start with an
                uppercase letter, does not end with a sentence terminator, or
                contains an invalid character.
        """

        _validate(raw)

        sentences: list[Sentence] = []
        pending: list[str] = []
        for character in normalize_whitespace(raw):
            pending.append(character)
            if Punctuation.is_sentence_end(character):
                sentences.append(Sentence.parse("".join(pending)))
                pending.clear()
        return cls(sentences)

    @property
    def sentences(self) -> tuple[Sentence, ...]:
        """Return a snapshot of the current sentences."""

        return tuple(self._sentences)

    def __len__(self) -> int:
        return len(self._sentences)

    def __iter__(self) -> Iterator[Sentence]:
        return iter(tuple(self._sentences))

    def __str__(self) -> str:
        return self.render()

    def apply_to_each_sentence(self, edit: Callable[[Sentence], Sentence]) -> None:
        """Replace every sentence, in order, with `edit(sentence)`."""

        self._sentences = [edit(sentence) for sentence in self._sentences]

    def render(self) -> str:
        """Serialize sentences with their leading spaces and no separator."""

        return "".join(
            f"{' ' * sentence.lead_space_count}{sentence.render()}"
            for sentence in self._sentences
        )


def parse_text(raw: str) -> Text:
    """Parse raw text into a `Text`, raising `TextValidationError` when invalid."""

    return Text.parse(raw)
