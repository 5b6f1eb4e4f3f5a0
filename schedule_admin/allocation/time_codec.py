"""
Time codec for allocation hours

Canonical (persisted) form: "HH:MM+0000"
Display (editable) form:    "HH:MM"
"""
import re
from typing import Optional

UTC_OFFSET_SUFFIX = '+0000'

_LEADING_DIGITS = re.compile(r'^(\d{2})(\d{2})')


def _insert_colon(value: str) -> str:
    """"2000" -> "20:00"; strings that already have the colon are untouched"""
    return _LEADING_DIGITS.sub(r'\1:\2', value, count=1)


def encode(display: str) -> str:
    """Convert a display time to its canonical form"""
    value = _insert_colon(display)
    if value.endswith(UTC_OFFSET_SUFFIX):
        return value
    return value + UTC_OFFSET_SUFFIX


def decode(canonical: Optional[str]) -> Optional[str]:
    """Convert a canonical time to its display form. Empty values pass through."""
    if not canonical:
        return canonical
    return _insert_colon(canonical).replace(UTC_OFFSET_SUFFIX, '', 1)
