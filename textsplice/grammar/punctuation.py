"""Punctuation tokens and character classification."""

from __future__ import annotations

from dataclasses import dataclass
import string

from .items import SentenceItem

_PUNCTUATION_CHARACTERS = frozenset(string.punctuation)
_SENTENCE_END_CHARACTERS = frozenset(".!?")


@dataclass(slots=True)
class Punctuation(SentenceItem):
    """A single punctuation mark inside a sentence."""

    value: str

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def is_punctuation(character: str) -> bool:
        """Return whether `character` is an ASCII punctuation symbol."""

        return character in _PUNCTUATION_CHARACTERS

    @staticmethod
    def is_sentence_end(character: str) -> bool:
        """Return whether `character` terminates a sentence (`.`, `!` or `?`)."""

        return character in _SENTENCE_END_CHARACTERS
