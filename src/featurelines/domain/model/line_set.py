"""Line set: ascending, duplicate-free line numbers.

Line numbers are plain base-10 integers. Zero is accepted, nothing checks
that a line exists in the resource.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from featurelines.domain.exceptions import InvalidLineNumberError

if TYPE_CHECKING:
    from collections.abc import Iterable

# 32-bit signed integer range
MAX_LINE = 2**31 - 1

LINE_SEPARATOR = ":"

_DIGITS = frozenset("0123456789")


def normalize_lines(lines: Iterable[int]) -> tuple[int, ...]:
    """Sort ascending and drop duplicates.

    Args:
        lines: Any collection of line numbers, in any order.

    Returns:
        Immutable ascending tuple without duplicates.
    """
    return tuple(sorted(set(lines)))


def parse_line(segment: str) -> int:
    """Parse one line segment.

    Only ASCII digits are accepted: no sign, whitespace, underscores or
    other unicode digits, all of which int() would otherwise tolerate.

    Raises:
        InvalidLineNumberError: Empty, non-numeric or out of range segment.
    """
    if not segment:
        raise InvalidLineNumberError(segment, "must be non-empty")
    if not _DIGITS.issuperset(segment):
        raise InvalidLineNumberError(segment, "must contain only digits 0-9")

    line = int(segment)
    if line > MAX_LINE:
        raise InvalidLineNumberError(segment, f"must be <= {MAX_LINE}")
    return line


def parse_lines(digits: str) -> tuple[int, ...]:
    """Parse colon separated line segments.

    Examples:
        "3:7:3" → (3, 7)
        "12" → (12,)

    Args:
        digits: Segments joined by ":".

    Returns:
        Ascending tuple without duplicates.

    Raises:
        InvalidLineNumberError: Any segment is invalid. No partial result.
    """
    return normalize_lines(parse_line(segment) for segment in digits.split(LINE_SEPARATOR))


def format_lines(lines: Iterable[int]) -> str:
    """Format lines as ":l1:l2..." suffix, empty string when no lines."""
    return "".join(f"{LINE_SEPARATOR}{line}" for line in lines)
