"""Exception types raised by esctext."""


class EsctextError(Exception):
    """Base class for all esctext errors."""


class EscapeIsDelimiterError(EsctextError, ValueError):
    """The escape character was also given as a delimiter."""

    def __init__(self, escape: str):
        self.escape = escape
        super().__init__(f"A delimiter cannot be its own escape char: {escape!r}")


class NoDelimitersError(EsctextError, ValueError):
    """A splitter was configured without any delimiter."""

    def __init__(self):
        super().__init__("At least one delimiter is required")


class InvalidCharError(EsctextError, ValueError):
    """A parameter that must be a single code point was not."""

    def __init__(self, name: str, value: str):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be a single character, got {value!r}")


class InvalidMaxLengthError(EsctextError, ValueError):
    """A maximum length was given that no non-empty range can satisfy."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Maximum length must be a positive integer, got {value}")


class NotSortedError(EsctextError, ValueError):
    """Items passed to Sorted were not in non-decreasing order."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"The items are not sorted (out of order at index {index})")


class CharBoundaryError(EsctextError, ValueError):
    """Base class for errors of char_boundary."""


class InputEmptyError(CharBoundaryError):
    def __init__(self):
        super().__init__("The input must contain at least one char, but was empty")


class IndexOutOfRangeError(CharBoundaryError):
    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"The index is {index}, but the length is {length}")


class NotUTF8BoundaryError(CharBoundaryError):
    def __init__(self, index: int):
        self.index = index
        super().__init__(f"The index ({index}) is not on a UTF-8 sequence boundary")
