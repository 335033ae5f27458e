"""Top-level package for textsplice.

This package parses text into sentences, words, and punctuation, removes the
longest span between two letters from every sentence, and renders the result.
The core entry points are `parse_text` and `Text`; `SplicePipeline` wraps
them with configuration and stage telemetry.
"""

from .editing import LongestSpanRemoval
from .grammar import Sentence, Text, parse_text
from .pipeline import SplicePipeline

__all__ = [
    "LongestSpanRemoval",
    "Sentence",
    "SplicePipeline",
    "Text",
    "parse_text",
    "__version__",
]

__version__ = "0.1.0"
