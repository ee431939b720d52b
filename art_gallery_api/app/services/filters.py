"""
Generic predicate helpers shared by the domain services.

Numeric path parameters are parsed leniently with ``parse_int``: only
an ASCII leading integer is read and anything unparseable becomes ``None``.
``None`` acts as a "not a number" sentinel that fails every numeric
comparison, so a bad id or year yields an empty result rather than an
error.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Iterable, List, Optional, TypeVar

T = TypeVar("T")

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

_MISSING = object()


def parse_int(text: str | None) -> Optional[int]:
    """Parse the leading integer of ``text``.

    ``"42"``, ``" 42"`` and ``"42abc"`` all give ``42``; ``"abc"``, ``""``
    and non-ASCII digits such as ``"١"`` give ``None``.
    """
    if text is None:
        return None
    match = _LEADING_INT.match(text)
    if not match:
        return None
    return int(match.group(1))


def format_number(value: Optional[int]) -> str:
    """Render a parsed parameter for messages; the sentinel prints as ``NaN``."""
    return "NaN" if value is None else str(value)


def select(records: Iterable[T], predicate: Callable[[T], bool]) -> List[T]:
    """Return the records matching ``predicate``, preserving order."""
    return [record for record in records if predicate(record)]


def first(records: Iterable[T], predicate: Callable[[T], bool]) -> Optional[T]:
    for record in records:
        if predicate(record):
            return record
    return None


def nested(record: Any, *keys: str, default: Any = None) -> Any:
    """Follow ``keys`` through nested dictionaries.

    Returns ``default`` as soon as a level is missing or is not a
    mapping, so records with an incomplete structure never match.
    """
    current = record
    for key in keys:
        if not isinstance(current, dict):
            return default
        current = current.get(key, _MISSING)
        if current is _MISSING:
            return default
    return current


def int_equals(value: Any, expected: Optional[int]) -> bool:
    """Numeric equality where the ``None`` sentinel never matches."""
    if expected is None or isinstance(value, bool):
        return False
    return isinstance(value, (int, float)) and value == expected


def in_range(value: Any, low: Optional[int], high: Optional[int]) -> bool:
    """Inclusive range check; any ``None`` bound fails the comparison."""
    if low is None or high is None or isinstance(value, bool):
        return False
    if not isinstance(value, (int, float)):
        return False
    return low <= value <= high


def equals_ignore_case(value: Any, expected: str) -> bool:
    return isinstance(value, str) and value.lower() == expected.lower()


def contains_ignore_case(value: Any, fragment: str) -> bool:
    return isinstance(value, str) and fragment.lower() in value.lower()
