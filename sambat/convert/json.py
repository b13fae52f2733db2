"""JSON serialization and deserialization for NepaliDateTime.

The JSON form is a tagged dictionary holding the default text form:

    {"_type": "NepaliDateTime", "value": "2080-01-15 10:30:45.123456"}

Examples:
    >>> from sambat import NepaliDateTime
    >>> from sambat.convert import to_json, from_json

    >>> data = to_json(NepaliDateTime(2080, 1, 15, 10, 30))
    >>> data["value"]
    '2080-01-15 10:30:00.000'
    >>> from_json(data) == NepaliDateTime(2080, 1, 15, 10, 30)
    True
"""

from __future__ import annotations

from typing import Any

from sambat.core.datetime import NepaliDateTime
from sambat.errors import InvalidFormatError
from sambat.format.iso8601 import format_default, parse

_TYPE_TAG = "NepaliDateTime"


def to_json(value: NepaliDateTime) -> dict[str, Any]:
    """Convert a NepaliDateTime to a JSON-serializable dictionary.

    Raises:
        TypeError: If value is not a NepaliDateTime.
    """
    if not isinstance(value, NepaliDateTime):
        raise TypeError(f"expected NepaliDateTime, got {type(value).__name__}")
    return {"_type": _TYPE_TAG, "value": format_default(value)}


def from_json(data: dict[str, Any]) -> NepaliDateTime:
    """Create a NepaliDateTime from a dictionary made by :func:`to_json`.

    Raises:
        InvalidFormatError: If the dictionary is malformed or the value
            does not parse.
        OutOfRangeError: If the parsed year is unsupported.
    """
    if not isinstance(data, dict):
        raise InvalidFormatError(f"expected dict, got {type(data).__name__}")

    type_tag = data.get("_type")
    if type_tag != _TYPE_TAG:
        raise InvalidFormatError(f"expected _type {_TYPE_TAG!r}, got {type_tag!r}")

    value = data.get("value")
    if not isinstance(value, str) or not value:
        raise InvalidFormatError(f"missing 'value' field for {_TYPE_TAG}")

    return parse(value)


__all__ = ["to_json", "from_json"]
