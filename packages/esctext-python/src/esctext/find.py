"""Searches over text that need more than a plain substring lookup."""

import logging
from collections import OrderedDict

from .errors import InvalidMaxLengthError
from .string_utils import utf8_width
from .types import ByteRange

logger = logging.getLogger(__name__)


def longest_unique_substring(text: str, max_len: int | None = None) -> ByteRange:
    """
    Find the longest run of text in which no char occurs twice.

    Offsets and `max_len` are in UTF-8 bytes. If several runs share the
    maximum length the leftmost one is returned.

    With `max_len` the scan stops as soon as the current run cannot take the
    next char without growing past the limit, and the best run seen so far
    is returned. Runs starting after that point are not considered.

    Args:
        text: The text to search.
        max_len: Optional upper bound on the byte length of the result.

    Returns:
        The byte range of the run, ByteRange(0, 0) for empty text.

    Raises:
        TypeError: If `max_len` is not an int.
        InvalidMaxLengthError: If `max_len` is zero or negative.
    """
    if max_len is not None:
        if isinstance(max_len, bool) or not isinstance(max_len, int):
            raise TypeError(f"max_len must be an int, not {type(max_len).__name__}")
        if max_len <= 0:
            raise InvalidMaxLengthError(max_len)

    # Chars of the current run mapped to their byte offset, oldest first
    seen: OrderedDict[str, int] = OrderedDict()
    start = end = 0
    longest = ByteRange(0, 0)

    # Consider "abcdefghcijklmnopqrstuvwxyz", unique apart from the two 'c':
    #  ^------^                    run until the second 'c'
    #     ^----^                   overlap kept after the second 'c'
    #     ^----------------------^ the longest run
    for char in text:
        width = utf8_width(char)
        offset = end

        if max_len is not None and offset + width - start > max_len:
            logger.debug(f"Run at {start}..{end} reached the limit of {max_len} bytes")
            current = ByteRange(start, end)
            return longest if len(longest) >= len(current) else current

        prev = seen.get(char)
        if prev is not None:
            if end - start > len(longest):
                longest = ByteRange(start, end)
            start = prev + width

            # Everything up to the previous occurrence is now outside the run
            while seen.popitem(last=False)[0] != char:
                pass

        seen[char] = offset
        end = offset + width

    # A recorded run of exactly max_len bytes cannot be beaten
    if max_len is not None and len(longest) == max_len:
        return longest

    current = ByteRange(start, end)
    if len(current) > len(longest):
        return current
    return longest
