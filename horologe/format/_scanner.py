"""Character scanner shared by the text grammars.

Each parser walks its input left to right with a Scanner, consuming
fixed-width digit fields and literal separators. Any deviation (a missing
separator, a non-ASCII digit, a field of the wrong width, leftover text)
raises InvalidFormatError naming the position.

This module is not part of the public API.
"""

from __future__ import annotations

from horologe.errors import InvalidFormatError

# Longest digit run accepted for an unbounded number (duration fields)
_MAX_NUMBER_DIGITS = 18


def _is_digit(c: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits
    return "0" <= c <= "9"


class Scanner:
    """A cursor over a string being parsed.

    Examples:
        >>> sc = Scanner("12:30", "time")
        >>> sc.digits(2, "hour"), sc.expect(":"), sc.digits(2, "minute")
        (12, None, 30)
        >>> sc.finish()
    """

    __slots__ = ("text", "pos", "what")

    def __init__(self, text: str, what: str) -> None:
        if not isinstance(text, str):
            raise InvalidFormatError(f"expected a string, got {type(text).__name__}")
        self.text = text
        self.pos = 0
        self.what = what

    def error(self, message: str) -> InvalidFormatError:
        """Build an InvalidFormatError describing the current position."""
        return InvalidFormatError(
            f"invalid {self.what} {self.text!r}: {message} at position {self.pos}"
        )

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Return the next character, or '' at the end of input."""
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def at_digit(self) -> bool:
        return _is_digit(self.peek())

    def accept(self, literal: str) -> bool:
        """Consume ``literal`` if it comes next."""
        if self.text.startswith(literal, self.pos):
            self.pos += len(literal)
            return True
        return False

    def expect(self, literal: str) -> None:
        """Consume ``literal`` or fail."""
        if not self.accept(literal):
            raise self.error(f"expected {literal!r}")

    def digits(self, count: int, field: str) -> int:
        """Consume exactly ``count`` ASCII digits and return their value."""
        end = self.pos + count
        chunk = self.text[self.pos:end]
        if len(chunk) != count or not all(_is_digit(c) for c in chunk):
            raise self.error(f"expected {count}-digit {field}")
        self.pos = end
        return int(chunk)

    def number(self, field: str) -> int:
        """Consume a run of one or more ASCII digits."""
        start = self.pos
        while self.pos < len(self.text) and _is_digit(self.text[self.pos]):
            self.pos += 1
        if self.pos == start:
            raise self.error(f"expected {field}")
        if self.pos - start > _MAX_NUMBER_DIGITS:
            raise self.error(f"{field} has too many digits")
        return int(self.text[start:self.pos])

    def fraction(self) -> int:
        """Consume 1-9 fractional digits (after the '.') as nanoseconds."""
        start = self.pos
        while self.pos < len(self.text) and _is_digit(self.text[self.pos]):
            self.pos += 1
        count = self.pos - start
        if count == 0:
            raise self.error("expected fractional digits")
        if count > 9:
            raise self.error("more than nine fractional digits")
        return int(self.text[start:self.pos]) * 10 ** (9 - count)

    def take_while(self, allowed: str) -> str:
        """Consume characters from ``allowed`` and return them."""
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in allowed:
            self.pos += 1
        return self.text[start:self.pos]

    def finish(self) -> None:
        """Fail if any input is left."""
        if not self.at_end():
            raise self.error("unexpected trailing text")


def format_fraction(nanos: int) -> str:
    """Return ``.f`` with the fewest digits that keep ``nanos`` exact, or ''.

    Examples:
        >>> format_fraction(500_000_000)
        '.5'
        >>> format_fraction(0)
        ''
    """
    if not nanos:
        return ""
    return "." + f"{nanos:09d}".rstrip("0")


__all__ = ["Scanner", "format_fraction"]
