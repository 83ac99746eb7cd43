"""
esctext - escape-aware text scanning

Single-pass scanners for splitting, escaping and searching text that keep
their results borrowed from the input for as long as nothing had to change.

Usage:
    import esctext

    # Split on unescaped delimiters, removing the escapes that were used
    parts = esctext.split(r"a\\,b,c")                     # ["a,b", "c"]

    # Keep the escapes, get plain slices
    parts = list(esctext.split_unsanitized(r"a\\,b,c", "\\\\", ","))

    # Escape quotes so they survive another parser
    escaped = esctext.escape("it's")                     # "it\\'s"

    # Longest run without repeated chars, as a UTF-8 byte range
    span = esctext.longest_unique_substring("abcabcbb")   # ByteRange(0, 3)

    # With options
    from esctext import SplitOptions

    parts = esctext.split(text, SplitOptions(escape="^", delimiters="/:"))
"""

__version__ = "0.1.0"

from .errors import (
    CharBoundaryError,
    EscapeIsDelimiterError,
    EsctextError,
    IndexOutOfRangeError,
    InputEmptyError,
    InvalidCharError,
    InvalidMaxLengthError,
    NoDelimitersError,
    NotSortedError,
    NotUTF8BoundaryError,
)
from .escape import escape, escape_charset, unescape, unescape_charset
from .find import longest_unique_substring
from .sorted import Sorted
from .split import (
    NonEscapedSplit,
    SanitizedSplit,
    split,
    split_sanitized,
    split_unsanitized,
)
from .string_utils import DEFAULT_ESCAPE, char_boundary
from .types import ByteRange, Cow, EscapeOptions, SplitOptions

__all__ = [
    # Version
    "__version__",
    # Main API
    "split",
    "split_sanitized",
    "split_unsanitized",
    "escape",
    "unescape",
    "escape_charset",
    "unescape_charset",
    "longest_unique_substring",
    "char_boundary",
    # Options
    "SplitOptions",
    "EscapeOptions",
    "DEFAULT_ESCAPE",
    # Types
    "ByteRange",
    "Cow",
    "Sorted",
    "NonEscapedSplit",
    "SanitizedSplit",
    # Errors
    "EsctextError",
    "EscapeIsDelimiterError",
    "NoDelimitersError",
    "InvalidCharError",
    "InvalidMaxLengthError",
    "NotSortedError",
    "CharBoundaryError",
    "InputEmptyError",
    "IndexOutOfRangeError",
    "NotUTF8BoundaryError",
]
