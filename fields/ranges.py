"""Field range expressions.

Parses the range syntax given on the command line (``N``, ``N:``, ``:M``, ``N:M``) into
:class:`FieldRange` values. Field numbers are 1-based for the user and 0-based internally.
No I/O happens here.
"""

import sys
from dataclasses import dataclass
from typing import Optional

from fields.exceptions import InvalidFormatError

MAX_FIELDS = sys.maxsize

_RADIX_PREFIXES = ("0x", "0o", "0b")


@dataclass(frozen=True)
class FieldRange:
    """Inclusive span of 0-based field indices.

    ``end`` is ``None`` for ranges open towards the end of the line (``N:``). It is resolved
    against the field count of every line separately, since line lengths vary.
    """

    begin: int
    end: Optional[int] = None

    def resolve_end(self, field_count: int) -> int:
        """Return the concrete last index of this range for a line with *field_count* fields."""
        if self.end is None:
            return field_count - 1
        return self.end

    def indices(self, field_count: int) -> range:
        """Indices of this range that exist in a line with *field_count* fields, in ascending order."""
        last = min(self.resolve_end(field_count), field_count - 1)
        return range(self.begin, last + 1)

    def __str__(self) -> str:
        return format_field_range(self)


WHOLE_LINE = FieldRange(0, None)


def parse_field_specifier(text: str) -> int:
    """Parse a 1-based field number and return the matching 0-based index.

    Decimal numbers are accepted, as are the ``0x``, ``0o`` and ``0b`` prefixed forms. Digits
    may be grouped with underscores.

    Args:
        text: Field number as typed by the user

    Returns:
        0-based field index

    Raises:
        InvalidFormatError: If *text* is not a number, or is zero, negative or too large

    Examples:
        >>> parse_field_specifier("1")     # 0
        >>> parse_field_specifier("0x10")  # 15
        >>> parse_field_specifier("0")     # raises InvalidFormatError
    """
    if not text.isascii() or any(ch.isspace() for ch in text):
        raise InvalidFormatError(f"invalid field number '{text}'")

    # int() with base 0 refuses leading zeros in decimals ("007"), so only use it for prefixed forms
    base = 0 if text.lstrip("+-")[:2].lower() in _RADIX_PREFIXES else 10
    try:
        value = int(text, base)
    except ValueError as e:
        raise InvalidFormatError(f"invalid field number '{text}'") from e

    if value < 1:
        raise InvalidFormatError(f"fields are numbered from 1, got '{text}'")
    if value > MAX_FIELDS:
        raise InvalidFormatError(f"field number '{text}' is too large")
    return value - 1


def parse_field_range(text: str) -> FieldRange:
    """Parse a single range expression.

    Args:
        text: One of ``N``, ``N:``, ``:M``, ``N:M`` (or ``:`` for the whole line)

    Returns:
        The parsed range, with ``end=None`` when the range runs to the end of the line

    Raises:
        InvalidFormatError: On malformed numbers, extra colons, or a decreasing range

    Examples:
        >>> parse_field_range("3")    # FieldRange(begin=2, end=2)
        >>> parse_field_range("2:")   # FieldRange(begin=1, end=None)
        >>> parse_field_range(":4")   # FieldRange(begin=0, end=3)
        >>> parse_field_range("5:2")  # raises InvalidFormatError
    """
    split = text.find(":")
    if split < 0:
        field = parse_field_specifier(text)
        return FieldRange(field, field)

    begin = 0 if split == 0 else parse_field_specifier(text[:split])
    end = None if split == len(text) - 1 else parse_field_specifier(text[split + 1 :])

    if begin >= MAX_FIELDS:
        raise InvalidFormatError(f"field range '{text}' starts past the last possible field")
    if end is not None and begin > end:
        raise InvalidFormatError(f"invalid decreasing range '{text}'")

    return FieldRange(begin, end)


def format_field_range(field_range: FieldRange) -> str:
    """Render *field_range* back into 1-based range syntax."""
    if field_range.end is None:
        return f"{field_range.begin + 1}:"
    if field_range.begin == field_range.end:
        return str(field_range.begin + 1)
    return f"{field_range.begin + 1}:{field_range.end + 1}"
