"""util.py

Small, shared helpers used across the project.

This project intentionally uses the Python standard library only.
"""

from __future__ import annotations

import re


_LEADING_INT = re.compile(r'\s*([+-]?\d+)', re.ASCII)


def parse_leading_int(s: str) -> int:
    """Parse the leading base-10 integer of `s`, C `atoi` style.

    - Leading whitespace and a single sign are allowed.
    - Parsing stops at the first non-digit ('101L' -> 101).
    - Anything without a leading digit run parses as 0 ('', 'ABC', '-').
    - Only ASCII digits and whitespace count, so non-ASCII digits also give 0.

    The hash function relies on this being forgiving; it never raises.
    """
    m = _LEADING_INT.match(s or '')
    if not m:
        return 0
    return int(m.group(1))


def normalize_course_number(s: str) -> str:
    """Normalize user-entered course numbers for lookup ('  csci101 ' -> 'CSCI101')."""
    return (s or '').strip().upper()


def join_prerequisites(prerequisites) -> str:
    """Space-join prerequisite numbers for display."""
    return ' '.join(prerequisites)
