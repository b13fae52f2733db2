"""Conversion of NepaliDateTime to and from other representations.

Examples:
    >>> from sambat import NepaliDateTime
    >>> from sambat.convert import to_json, from_json
    >>> restored = from_json(to_json(NepaliDateTime(2080, 1, 15)))
"""

from __future__ import annotations

from sambat.convert.json import from_json, to_json

__all__ = [
    "to_json",
    "from_json",
]
