"""Unit tests for sentence parsing, letter lookup, and span removal."""

from __future__ import annotations

import pytest

from textsplice.errors import InvalidCharacterError, TextValidationError
from textsplice.grammar import Letter, LetterPosition, Punctuation, Sentence, Word

_TOWER_SENTENCE = (
    "Велика вежа стояла на вершині гори, і вид з неї був просто неймовірний!"
)


def test_parse_splits_words_punctuation_and_spacing() -> None:
    """Parsing should attach whitespace runs to the preceding token."""

    sentence = Sentence.parse("Hello,  world!")

    assert [type(item) for item in sentence.items] == [Word, Punctuation, Word, Punctuation]
    assert [str(item) for item in sentence.items] == ["Hello", ",", "world", "!"]
    assert [item.trail_space_count for item in sentence.items] == [0, 2, 0, 0]
    assert sentence.lead_space_count == 0
    assert sentence.render() == "Hello,  world!"


def test_parse_counts_leading_whitespace_separately() -> None:
    """Whitespace before the first token should become the lead space count."""

    sentence = Sentence.parse("  Hi there.")

    assert sentence.lead_space_count == 2
    assert sentence.render() == "Hi there."
    assert [str(word) for word in sentence.words] == ["Hi", "there"]


def test_parse_flushes_trailing_word_without_terminator() -> None:
    """A word at the very end of the input should still become a token."""

    sentence = Sentence.parse("вежа")

    assert len(sentence) == 1
    assert sentence.render() == "вежа"


@pytest.mark.parametrize("character", ["\x07", "7", "«"])
def test_parse_rejects_characters_outside_token_classes(character: str) -> None:
    """Characters that are not letters, punctuation, or whitespace should fail."""

    with pytest.raises(InvalidCharacterError) as exc_info:
        Sentence.parse(f"Bad{character}char.")

    assert exc_info.value.character == character
    assert repr(character) in str(exc_info.value)
    assert isinstance(exc_info.value, TextValidationError)


def test_find_letter_skips_punctuation_and_scans_both_directions() -> None:
    """Lookup should only consider word tokens."""

    sentence = Sentence.parse("Oh, no, go.")

    assert sentence.find_letter(Letter("o"), ignore_case=True) == LetterPosition(0, 0)
    assert sentence.find_letter(Letter("o"), ignore_case=True, reverse=True) == LetterPosition(4, 1)
    assert sentence.find_letter(Letter("z"), ignore_case=True) is None


def test_letter_position_ordering() -> None:
    """Positions compare by word index first, then letter index."""

    assert LetterPosition(1, 0).is_after(LetterPosition(0, 5))
    assert LetterPosition(1, 3).is_after(LetterPosition(1, 2))
    assert not LetterPosition(1, 2).is_after(LetterPosition(1, 2))
    assert not LetterPosition(0, 9).is_after(LetterPosition(1, 0))


def test_removal_is_noop_when_letters_are_absent() -> None:
    """A sentence without either boundary letter should render unchanged."""

    sentence = Sentence.parse("Abc, xyz!")

    result = sentence.without_longest_substr(Letter("q"), Letter("w"), ignore_case=True)

    assert result.render() == "Abc, xyz!"


def test_removal_is_noop_when_end_letter_is_missing() -> None:
    """A word with the start letter but no end letter stays untouched."""

    sentence = Sentence.parse("вежа")

    result = sentence.without_longest_substr(Letter("в"), Letter("т"), ignore_case=True)

    assert result.render() == "вежа"


def test_removal_is_noop_on_inverted_bounds() -> None:
    """Start letter after the end letter should leave the sentence unchanged."""

    sentence = Sentence.parse("Alpha omega.")

    result = sentence.without_longest_substr(Letter("m"), Letter("l"), ignore_case=False)

    assert result.render() == "Alpha omega."


def test_removal_deletes_single_letter_when_bounds_coincide() -> None:
    """Equal start and end positions remove just that letter."""

    sentence = Sentence.parse("Cat.")

    result = sentence.without_longest_substr(Letter("a"), Letter("a"), ignore_case=False)

    assert result.render() == "Ct."


def test_removal_splices_fragments_across_words() -> None:
    """Surviving fragments of the boundary words should merge into one word."""

    sentence = Sentence.parse("Hello world.")

    result = sentence.without_longest_substr(Letter("l"), Letter("o"), ignore_case=False)

    assert result.render() == "Herld."
    assert [str(word) for word in result.words] == ["Herld"]


def test_removal_moves_spacing_to_lead_when_prefix_is_empty() -> None:
    """Cancelled words at sentence start hand their spacing to the lead count."""

    sentence = Sentence.parse(" Big red dog ran.")

    result = sentence.without_longest_substr(Letter("b"), Letter("g"), ignore_case=True)

    assert result.lead_space_count == 2
    assert result.render() == "ran."


def test_removal_merges_spacing_into_prefix_without_mutating_original() -> None:
    """Cancelled words should add spacing to a copy of the preceding token."""

    sentence = Sentence.parse("A big red dog ran.")

    result = sentence.without_longest_substr(Letter("b"), Letter("g"), ignore_case=False)

    assert result.render() == "A  ran."
    assert sentence.render() == "A big red dog ran."
    assert sentence.items[0].trail_space_count == 1


def test_removal_across_tower_sentence_ignoring_case() -> None:
    """First `в` opens the span and the last `т` (in "просто") closes it."""

    sentence = Sentence.parse(_TOWER_SENTENCE)

    result = sentence.without_longest_substr(Letter("в"), Letter("т"), ignore_case=True)

    assert result.render() == "о неймовірний!"
    assert result.lead_space_count == 0
    assert sentence.render() == _TOWER_SENTENCE


def test_removal_across_tower_sentence_case_sensitive() -> None:
    """Case-sensitive search should skip the capital `В` and start in "вежа"."""

    sentence = Sentence.parse(_TOWER_SENTENCE)

    result = sentence.without_longest_substr(Letter("в"), Letter("т"), ignore_case=False)

    assert result.render() == "Велика о неймовірний!"
