"""Escape-aware splitting of text on delimiter characters."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from .errors import EscapeIsDelimiterError, NoDelimitersError
from .sorted import Sorted
from .string_utils import check_char, check_chars
from .types import Cow, CowBuilder, SplitOptions

logger = logging.getLogger(__name__)


def split(text: str, options: SplitOptions | None = None) -> list[Cow] | list[str]:
    """
    Split text on unescaped delimiters.

    Args:
        text: The text to split.
        options: Splitting options.

    Returns:
        Sanitized segments as Cow values, or plain slices when
        `options.sanitize` is False.

    Raises:
        EscapeIsDelimiterError: If the escape is one of the delimiters.
    """
    opts = options or SplitOptions()
    if opts.sanitize:
        return list(split_sanitized(text, opts.escape, opts.delimiters))
    return list(split_unsanitized(text, opts.escape, opts.delimiters))


def split_unsanitized(
    text: str, escape: str, delimiters: str | Iterable[str]
) -> NonEscapedSplit:
    """
    Split text on delimiters that are not preceded by an escape.

    Escapes are kept verbatim in the output, so joining the segments with the
    delimiters that separated them gives back the input:

        >>> list(split_unsanitized("a/:b:c", "/", ":"))
        ['a/:b', 'c']

    Args:
        text: The text to split.
        escape: The escape character.
        delimiters: One or more delimiter characters.

    Returns:
        A lazy iterator over the segments.

    Raises:
        EscapeIsDelimiterError: If `escape` is one of the delimiters.
        NoDelimitersError: If no delimiter was given.
    """
    return NonEscapedSplit(text, escape, delimiters)


def split_sanitized(
    text: str, escape: str, delimiters: Sorted | str | Iterable[str]
) -> SanitizedSplit:
    """
    Split text on unescaped delimiters and remove escapes before significant chars.

    Significant chars are the delimiters and the escape itself. Any other
    escape sequence is kept as is, and a trailing escape counts as an
    ordinary char.

    Args:
        text: The text to split.
        escape: The escape character.
        delimiters: One or more delimiter characters.

    Returns:
        A lazy iterator over Cow segments. A segment is borrowed from `text`
        unless an escape sequence had to be processed while building it.

    Raises:
        EscapeIsDelimiterError: If `escape` is one of the delimiters.
        NoDelimitersError: If no delimiter was given.
    """
    return SanitizedSplit(text, escape, delimiters)


def _check_config(escape: str, delimiters: Iterable[str]) -> tuple[str, list[str]]:
    """Validate the escape and delimiters of a splitter."""
    esc = check_char(escape, "escape")
    delims = check_chars(delimiters, "delimiter")
    if not delims:
        raise NoDelimitersError()
    if esc in delims:
        logger.debug(f"Rejecting splitter: escape {esc!r} is also a delimiter")
        raise EscapeIsDelimiterError(esc)
    return esc, delims


class NonEscapedSplit:
    """Iterator over the segments of a text split on unescaped delimiters."""

    def __init__(self, text: str, escape: str, delimiters: str | Iterable[str]):
        self.escape, delims = _check_config(escape, delimiters)
        self.delimiters = frozenset(delims)
        self.text = text
        # Start of the next segment, None once the last segment was yielded
        self.rest: int | None = 0

    def __iter__(self) -> NonEscapedSplit:
        return self

    def __next__(self) -> str:
        if self.rest is None:
            raise StopIteration

        text = self.text
        start = self.rest
        escaped = False

        for i in range(start, len(text)):
            char = text[i]
            if escaped:
                # Whatever follows an escape loses its meaning, even another escape
                escaped = False
            elif char == self.escape:
                escaped = True
            elif char in self.delimiters:
                self.rest = i + 1
                return text[start:i]

        # No delimiter left, the remainder is the last segment
        self.rest = None
        return text[start:]


class SanitizedSplit:
    """Iterator over sanitized segments of a text split on unescaped delimiters."""

    def __init__(self, text: str, escape: str, delimiters: Sorted | str | Iterable[str]):
        self.escape, delims = _check_config(escape, delimiters)
        if isinstance(delimiters, Sorted):
            self.delimiters = delimiters
        else:
            self.delimiters = Sorted.new_sorted(delims)
        self.text = text
        self.pos = 0
        self.done = False
        # Chars that end a run of text that can be taken over unchanged
        self._special = re.compile(
            "[" + "".join(re.escape(c) for c in (self.escape, *self.delimiters)) + "]"
        )

    def __iter__(self) -> SanitizedSplit:
        return self

    def __next__(self) -> Cow:
        if self.done:
            raise StopIteration

        text = self.text
        length = len(text)
        pos = self.pos
        segment = CowBuilder(text, pos)

        while pos < length:
            char = text[pos]

            # Escape sequence
            if char == self.escape and pos + 1 < length:
                escaped = text[pos + 1]
                buffer = segment.to_mut()
                if escaped != self.escape and escaped not in self.delimiters:
                    buffer.append(self.escape)
                buffer.append(escaped)
                pos += 2
                continue

            # Unescaped delimiter
            if char in self.delimiters:
                self.pos = pos + 1
                return segment.finish()

            # Run of ordinary chars, a trailing escape is one of them
            match = self._special.search(text, pos + 1)
            end = match.start() if match else length
            segment.push_run(pos, end)
            pos = end

        self.pos = pos
        self.done = True
        return segment.finish()
