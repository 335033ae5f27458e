"""Grammar model for sentence-level text editing.

This package provides the letter, word, punctuation, sentence, and text types
used to parse raw text, cut letter spans out of sentences, and render the
result back to a string.
"""

from .items import SentenceItem
from .letter import Letter
from .punctuation import Punctuation
from .sentence import LetterPosition, Sentence
from .text import Text, normalize_whitespace, parse_text
from .word import Word

__all__ = [
    "Letter",
    "SentenceItem",
    "Word",
    "Punctuation",
    "Sentence",
    "LetterPosition",
    "Text",
    "parse_text",
    "normalize_whitespace",
]
