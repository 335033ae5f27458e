"""Per-sentence edit functions applied to a parsed `Text`."""

from __future__ import annotations

from dataclasses import dataclass

from .config import SpliceConfig
from .grammar import Letter, Sentence


@dataclass(frozen=True, slots=True)
class LongestSpanRemoval:
    """Remove the longest span from a start letter to an end letter.

    Attributes:
        start_letter: Letter opening the span (first occurrence is used).
        end_letter: Letter closing the span (last occurrence is used).
        ignore_case: Match boundary letters case-insensitively.
    """

    start_letter: Letter
    end_letter: Letter
    ignore_case: bool = True

    @classmethod
    def from_config(cls, config: SpliceConfig) -> LongestSpanRemoval:
        """Build the edit from validated runtime configuration."""

        return cls(
            start_letter=Letter(config.start_letter),
            end_letter=Letter(config.end_letter),
            ignore_case=config.ignore_case,
        )

    def __call__(self, sentence: Sentence) -> Sentence:
        return sentence.without_longest_substr(
            self.start_letter, self.end_letter, self.ignore_case
        )
