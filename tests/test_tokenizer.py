"""Tests for tagcloud.generator.tokenizer module."""

import pytest

from tagcloud.generator.tokenizer import SEPARATORS, is_separator, iter_tokens, next_token


class TestIsSeparator:
    """Tests for is_separator function."""

    def test_whitespace_is_separator(self) -> None:
        """Test that space, tab, newline and carriage return are separators."""
        for char in " \t\n\r":
            assert is_separator(char) is True

    def test_punctuation_is_separator(self) -> None:
        """Test the fixed punctuation set."""
        for char in ",-.!?[]';:/()`*\"":
            assert is_separator(char) is True

    def test_letters_and_digits_are_not_separators(self) -> None:
        """Test that word characters are not separators."""
        for char in "aZ09_&#é":
            assert is_separator(char) is False

    def test_separator_set_size(self) -> None:
        """Test that the separator set holds exactly the expected characters."""
        assert len(SEPARATORS) == 20


class TestNextToken:
    """Tests for next_token function."""

    def test_word_at_start(self) -> None:
        """Test that a word run stops at the first separator."""
        assert next_token("hello, world", 0) == "hello"

    def test_separator_run(self) -> None:
        """Test that a separator run covers all adjacent separators."""
        assert next_token("hello, world", 5) == ", "

    def test_word_runs_to_end_of_text(self) -> None:
        """Test that a run ends at the end of the text."""
        assert next_token("hello, world", 7) == "world"

    def test_mid_word_position(self) -> None:
        """Test starting inside a word returns the rest of it."""
        assert next_token("hello", 2) == "llo"

    def test_single_character_text(self) -> None:
        """Test text of length one."""
        assert next_token("a", 0) == "a"
        assert next_token(".", 0) == "."

    def test_position_past_end_raises(self) -> None:
        """Test that a position at the end of the text is rejected."""
        with pytest.raises(ValueError, match="out of range"):
            next_token("abc", 3)

    def test_negative_position_raises(self) -> None:
        """Test that a negative position is rejected."""
        with pytest.raises(ValueError):
            next_token("abc", -1)

    def test_empty_text_raises(self) -> None:
        """Test that empty text has no valid position."""
        with pytest.raises(ValueError):
            next_token("", 0)


class TestIterTokens:
    """Tests for iter_tokens function."""

    def test_partitions_sentence(self) -> None:
        """Test that tokens alternate between words and separator runs."""
        tokens = list(iter_tokens("the cat sat on the mat."))
        assert tokens == ["the", " ", "cat", " ", "sat", " ", "on", " ", "the", " ", "mat", "."]

    def test_concatenation_reproduces_text(self) -> None:
        """Test that joining the tokens gives back the original text."""
        text = "  Hello--world!! (it's) a\ttest...\r\nend"
        assert "".join(iter_tokens(text)) == text

    def test_tokens_never_mix_kinds(self) -> None:
        """Test that every token is all separators or all word characters."""
        text = "a,b;;c d-e?f*g\"h"
        for token in iter_tokens(text):
            kinds = {is_separator(c) for c in token}
            assert len(kinds) == 1

    def test_apostrophe_splits_words(self) -> None:
        """Test that an apostrophe is a separator."""
        assert list(iter_tokens("don't")) == ["don", "'", "t"]

    def test_empty_text_yields_nothing(self) -> None:
        """Test that empty text produces no tokens."""
        assert list(iter_tokens("")) == []
