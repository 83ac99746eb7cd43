"""Type definitions for esctext scanners."""

from collections.abc import Iterable
from dataclasses import dataclass

from .string_utils import DEFAULT_ESCAPE, char_index


class Cow:
    """
    Copy-on-write text.

    A borrowed Cow is a view into the text it was scanned from and remembers
    the span it covers; an owned Cow holds a newly built string. Which of the
    two a result is tells the caller whether the scanner had to modify it.
    """

    __slots__ = ("_source", "_start", "_end", "_owned")

    def __init__(self, source: str, start: int, end: int, owned: str | None = None):
        self._source = source
        self._start = start
        self._end = end
        self._owned = owned

    @classmethod
    def borrowed(cls, source: str, start: int = 0, end: int | None = None) -> "Cow":
        """View `source[start:end]` without copying it into the Cow."""
        if end is None:
            end = len(source)
        if not 0 <= start <= end <= len(source):
            raise IndexError(f"Span ({start}, {end}) is outside of the source")
        return cls(source, start, end)

    @classmethod
    def owned(cls, value: str) -> "Cow":
        return cls("", 0, 0, value)

    @property
    def is_borrowed(self) -> bool:
        return self._owned is None

    @property
    def is_owned(self) -> bool:
        return self._owned is not None

    @property
    def span(self) -> tuple[int, int] | None:
        """(start, end) into the source text for borrowed values, None if owned."""
        if self._owned is None:
            return self._start, self._end
        return None

    def into_owned(self) -> str:
        """The text of this value as a plain string."""
        if self._owned is None:
            return self._source[self._start : self._end]
        return self._owned

    def __str__(self) -> str:
        return self.into_owned()

    def __len__(self) -> int:
        if self._owned is None:
            return self._end - self._start
        return len(self._owned)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Cow):
            return self.into_owned() == other.into_owned()
        if isinstance(other, str):
            return self.into_owned() == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.into_owned())

    def __repr__(self) -> str:
        kind = "Borrowed" if self.is_borrowed else "Owned"
        return f"Cow.{kind}({self.into_owned()!r})"


class CowBuilder:
    """
    Accumulator that produces a Cow.

    Starts out as an empty view of the source text at `start` and grows while
    the output matches the source verbatim. The first call to `to_mut`
    copies the view into an owned buffer; from then on all content is
    appended to that buffer.
    """

    __slots__ = ("source", "start", "end", "buffer")

    def __init__(self, source: str, start: int = 0):
        self.source = source
        self.start = start
        self.end = start
        self.buffer: list[str] | None = None

    @property
    def is_borrowed(self) -> bool:
        return self.buffer is None

    def to_mut(self) -> list[str]:
        """Return the owned buffer, copying the borrowed view into it once."""
        if self.buffer is None:
            self.buffer = [self.source[self.start : self.end]]
        return self.buffer

    def push_run(self, start: int, end: int) -> None:
        """Add `source[start:end]` unchanged."""
        if self.buffer is None:
            # Borrowed views only ever grow contiguously
            assert start == self.end, "borrowed run is not contiguous"
            self.end = end
        elif start < end:
            self.buffer.append(self.source[start:end])

    def finish(self) -> Cow:
        if self.buffer is None:
            return Cow.borrowed(self.source, self.start, self.end)
        return Cow.owned("".join(self.buffer))


@dataclass(frozen=True)
class ByteRange:
    """Half-open range of UTF-8 byte offsets into a text."""

    start: int
    """Offset of the first byte in the range."""

    end: int
    """Offset one past the last byte in the range."""

    def __len__(self) -> int:
        return self.end - self.start

    def slice(self, text: str) -> str:
        """Return the part of `text` covered by this range."""
        return text.encode("utf-8")[self.start : self.end].decode("utf-8")

    def char_span(self, text: str) -> tuple[int, int]:
        """
        Convert this range into code-point indices of `text`.

        Raises:
            ValueError: If either end is not on a char boundary of `text`.
        """
        start = char_index(text, self.start)
        end = char_index(text, self.end)
        if start is None or end is None:
            raise ValueError(f"{self} is not on char boundaries of the text")
        return start, end


@dataclass
class SplitOptions:
    """Options for escape-aware splitting."""

    escape: str = DEFAULT_ESCAPE
    """Character that makes the following char lose its meaning."""

    delimiters: str | Iterable[str] = ","
    """Characters that end a segment when not escaped."""

    sanitize: bool = True
    """Remove escapes before delimiters and the escape itself."""


@dataclass
class EscapeOptions:
    """Options for charset escaping and unescaping."""

    escape: str = DEFAULT_ESCAPE
    """Character inserted before every escaped char."""

    charset: str | Iterable[str] = "\"'"
    """Characters that get escaped in addition to the escape itself."""
