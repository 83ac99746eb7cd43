"""Escaping and unescaping of a set of chars."""

from collections.abc import Iterable

from .sorted import Sorted
from .string_utils import check_char, check_chars
from .types import Cow, CowBuilder, EscapeOptions


def escape(text: str, options: EscapeOptions | None = None) -> str:
    """
    Escape the configured charset in text.

    Args:
        text: The text to escape.
        options: Escaping options.

    Returns:
        The escaped text.
    """
    opts = options or EscapeOptions()
    return escape_charset(text, opts.escape, opts.charset).into_owned()


def unescape(text: str, options: EscapeOptions | None = None) -> str:
    """
    Reverse `escape` with the same options.

    Args:
        text: The escaped text.
        options: Escaping options.

    Returns:
        The original text.
    """
    opts = options or EscapeOptions()
    return unescape_charset(text, opts.escape, opts.charset).into_owned()


def _prepare(escape: str, charset: Sorted | Iterable[str]) -> tuple[str, Sorted]:
    esc = check_char(escape, "escape")
    if isinstance(charset, Sorted):
        return esc, charset
    return esc, Sorted.new_sorted(check_chars(charset, "charset"))


def escape_charset(text: str, escape: str, charset: Sorted | Iterable[str]) -> Cow:
    """
    Put `escape` in front of every char of `charset` and every `escape` in text.

    The escape itself is always escaped: otherwise an existing escape in
    front of a charset member would pair with the inserted one and leave the
    member unescaped for whatever reads the output.

    Lookups binary search the charset, so the scan takes O(n * log m) for a
    text of length n and a charset of size m.

    Args:
        text: The text to escape.
        escape: The escape character.
        charset: Chars to escape, as a Sorted or any iterable of chars.

    Returns:
        A Cow, borrowed from `text` if nothing had to be escaped.
    """
    esc, chars = _prepare(escape, charset)
    result = CowBuilder(text)
    done = 0

    for i, char in enumerate(text):
        if char == esc or char in chars:
            result.push_run(done, i)
            result.to_mut().extend((esc, char))
            done = i + 1

    result.push_run(done, len(text))
    return result.finish()


def unescape_charset(text: str, escape: str, charset: Sorted | Iterable[str]) -> Cow:
    """
    Remove the escapes that `escape_charset` inserted.

    An escape followed by another escape or a member of `charset` is dropped.
    Other escape sequences and a trailing escape are kept as they are.

    Args:
        text: The escaped text.
        escape: The escape character.
        charset: Chars that were escaped.

    Returns:
        A Cow, borrowed from `text` if no escape was removed.
    """
    esc, chars = _prepare(escape, charset)
    result = CowBuilder(text)
    length = len(text)
    pos = 0

    while True:
        i = text.find(esc, pos)
        if i == -1 or i + 1 >= length:
            break
        escaped = text[i + 1]
        if escaped == esc or escaped in chars:
            result.push_run(pos, i)
            result.to_mut().append(escaped)
        else:
            result.push_run(pos, i + 2)
        pos = i + 2

    result.push_run(pos, length)
    return result.finish()
