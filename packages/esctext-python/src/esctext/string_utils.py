"""String utilities shared by the esctext scanners."""

from collections.abc import Iterable

from .errors import (
    IndexOutOfRangeError,
    InputEmptyError,
    InvalidCharError,
    NotUTF8BoundaryError,
)

# Default escape character for all scanners
DEFAULT_ESCAPE = "\\"

# First code point of each UTF-8 encoded width above one byte
_UTF8_WIDTH_LIMITS = (0x80, 0x800, 0x10000)


def check_char(value: str, name: str = "char") -> str:
    """
    Validate that a value is a single code point.

    Args:
        value: The value to check.
        name: Parameter name used in the error message.

    Returns:
        The value, unchanged.

    Raises:
        TypeError: If the value is not a string.
        InvalidCharError: If the string is not exactly one code point long.
    """
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, not {type(value).__name__}")
    if len(value) != 1:
        raise InvalidCharError(name, value)
    return value


def check_chars(values: Iterable[str], name: str = "chars") -> list[str]:
    """
    Validate an iterable of single code points.

    A plain string is treated as a collection of its characters.

    Args:
        values: The characters to check.
        name: Parameter name used in error messages.

    Returns:
        The characters as a list, in their original order.
    """
    if isinstance(values, str):
        return list(values)
    return [check_char(v, name) for v in values]


def utf8_width(char: str) -> int:
    """Number of bytes the code point takes in UTF-8."""
    point = ord(char)
    width = 1
    for limit in _UTF8_WIDTH_LIMITS:
        if point < limit:
            break
        width += 1
    return width


def byte_offsets(text: str) -> list[int]:
    """
    Map each code-point index of `text` to its UTF-8 byte offset.

    The returned list has `len(text) + 1` entries, the last one being the
    encoded length, so every boundary of the text is present.
    """
    offsets = [0]
    total = 0
    for char in text:
        total += utf8_width(char)
        offsets.append(total)
    return offsets


def char_index(text: str, byte_index: int) -> int | None:
    """
    Convert a UTF-8 byte offset into a code-point index.

    Returns:
        The index, or None if `byte_index` falls inside an encoded char or
        outside the text.
    """
    total = 0
    for i, char in enumerate(text):
        if total == byte_index:
            return i
        if total > byte_index:
            return None
        total += utf8_width(char)
    return len(text) if total == byte_index else None


def char_boundary(text: str, byte_index: int) -> tuple[str, str, str]:
    """
    Split text around the char starting at a UTF-8 byte offset.

    For "aöböc" the valid offsets are 0, 1, 3, 4 and 6, since 'ö' takes
    two bytes; splitting at 3 gives ("aö", "b", "öc").

    Args:
        text: The text to split.
        byte_index: Byte offset of the char to split around.

    Returns:
        A triple of the text before the char, the char, and the text after.

    Raises:
        InputEmptyError: If the text is empty.
        IndexOutOfRangeError: If no char starts at or after the offset.
        NotUTF8BoundaryError: If the offset is inside an encoded char.
    """
    if not text:
        raise InputEmptyError()

    length = len(text.encode("utf-8"))
    if byte_index < 0 or byte_index >= length:
        raise IndexOutOfRangeError(byte_index, length)

    index = char_index(text, byte_index)
    if index is None:
        raise NotUTF8BoundaryError(byte_index)

    return text[:index], text[index], text[index + 1 :]
