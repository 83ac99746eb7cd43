"""Tests for the longest unique substring search."""

import sys
from pathlib import Path

import pytest

# Add src to path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from esctext import ByteRange, InvalidMaxLengthError, longest_unique_substring


def check(text, max_len, expected, expected_range):
    """Assert both the returned range and the text it covers."""
    found = longest_unique_substring(text, max_len)
    assert found == expected_range
    assert found.slice(text) == expected


class TestUnbounded:
    """Test searches without a maximum length."""

    def test_empty(self):
        check("", None, "", ByteRange(0, 0))

    def test_simple_starting(self):
        check("abcdeeeeeeeee", None, "abcde", ByteRange(0, 5))

    def test_single_repeating(self):
        check("aaaaaaaaa", None, "a", ByteRange(0, 1))

    def test_full(self):
        alphabet = "abcdefghijklmnopqrstuvwxyz"
        check(alphabet, None, alphabet, ByteRange(0, 26))

    def test_repeating_first_is_leftmost(self):
        check("abcdeabcde", None, "abcde", ByteRange(0, 5))

    def test_overlapping_current_longest(self):
        check("abcdeafghijkl", None, "bcdeafghijkl", ByteRange(1, 13))

    def test_overlap_after_duplicate(self):
        text = "abc_defgh_ijklmnopqrstuvwxyz"
        assert longest_unique_substring(text).slice(text) == "defgh_ijklmnopqrstuvwxyz"

    def test_stale_chars_leave_the_window(self):
        # The first 'a' is outside the window by the time the last 'a' is seen
        check("abcaba", None, "abc", ByteRange(0, 3))
        check("abcabcbb", None, "abc", ByteRange(0, 3))
        check("pwwkew", None, "wke", ByteRange(2, 5))

    def test_multibyte_offsets(self):
        check("ööö", None, "ö", ByteRange(0, 2))
        check("aöb", None, "aöb", ByteRange(0, 4))
        check("日本日本語", None, "日本語", ByteRange(6, 15))
        check("😀a😀b", None, "a😀b", ByteRange(4, 10))


class TestMaxLength:
    """Test searches capped at a maximum byte length."""

    def test_max_reached(self):
        check("abcdefghijklmnopqrstuvwxyz", 6, "abcdef", ByteRange(0, 6))

    def test_max_reached_end(self):
        check("aaaaabcdef", 6, "abcdef", ByteRange(4, 10))

    def test_max_not_exceeded(self):
        # 'ö' would take the run to 7 bytes; the scan stops there even though
        # "fghijk" further on would fit
        check("abcdeöfghijkl", 6, "abcde", ByteRange(0, 5))

    def test_max_not_exceeded_end(self):
        check("aaaaabcdeö", 6, "abcde", ByteRange(4, 9))

    def test_stop_keeps_longer_recorded_run(self):
        # The run is only "ace" when the 4-byte char stops the scan,
        # but "abcde" was recorded earlier
        check("abcdeace😀", 6, "abcde", ByteRange(0, 5))

    def test_stop_prefers_leftmost_on_tie(self):
        # "ba" is as long as the recorded "ab" when 'ö' stops the scan
        check("abaö", 3, "ab", ByteRange(0, 2))

    def test_max_of_one(self):
        check("abc", 1, "a", ByteRange(0, 1))
        check("öa", 1, "", ByteRange(0, 0))

    def test_max_larger_than_input(self):
        check("abc", 10, "abc", ByteRange(0, 3))
        check("abab", 10, "ab", ByteRange(0, 2))

    def test_result_never_exceeds_max(self):
        text = "the quick brown fox jumps over the lazy dog"
        for max_len in range(1, 20):
            assert len(longest_unique_substring(text, max_len)) <= max_len

    def test_zero_is_rejected(self):
        with pytest.raises(InvalidMaxLengthError):
            longest_unique_substring("abc", 0)

    def test_negative_is_rejected(self):
        with pytest.raises(ValueError, match="positive"):
            longest_unique_substring("abc", -3)

    def test_non_int_is_rejected(self):
        with pytest.raises(TypeError):
            longest_unique_substring("abc", 2.5)
        with pytest.raises(TypeError):
            longest_unique_substring("abc", True)


class TestByteRange:
    """Test the returned range type."""

    def test_len(self):
        assert len(ByteRange(2, 7)) == 5
        assert len(ByteRange(0, 0)) == 0

    def test_char_span(self):
        text = "aöb"
        found = longest_unique_substring(text)
        assert found.char_span(text) == (0, 3)
        assert ByteRange(1, 3).char_span(text) == (1, 2)

    def test_char_span_off_boundary(self):
        with pytest.raises(ValueError):
            ByteRange(0, 1).char_span("öb")
