"""Tests for JSON conversion."""

from __future__ import annotations

import json

import pytest

from sambat import NepaliDateTime
from sambat.convert import from_json, to_json
from sambat.errors import InvalidFormatError, OutOfRangeError


class TestToJson:
    """Tests for to_json."""

    def test_tagged_dict(self) -> None:
        """Output carries a type tag and the default text form."""
        data = to_json(NepaliDateTime(2080, 1, 15, 10, 30, 45, 123, 456))
        assert data == {"_type": "NepaliDateTime", "value": "2080-01-15 10:30:45.123456"}

    def test_serializable(self) -> None:
        """Output survives json.dumps/json.loads."""
        d = NepaliDateTime(2081, 3, 4, 5, 6, 7)
        assert from_json(json.loads(json.dumps(to_json(d)))) == d

    def test_wrong_type(self) -> None:
        """Only NepaliDateTime is accepted."""
        with pytest.raises(TypeError):
            to_json("2080-01-15")  # type: ignore[arg-type]


class TestFromJson:
    """Tests for from_json."""

    def test_valid(self) -> None:
        """A tagged dict parses."""
        data = {"_type": "NepaliDateTime", "value": "2080-01-15 10:30:00.000"}
        assert from_json(data) == NepaliDateTime(2080, 1, 15, 10, 30)

    @pytest.mark.parametrize(
        "data",
        [
            "2080-01-15",
            {"value": "2080-01-15"},
            {"_type": "DateTime", "value": "2080-01-15"},
            {"_type": "NepaliDateTime"},
            {"_type": "NepaliDateTime", "value": ""},
            {"_type": "NepaliDateTime", "value": 2080},
            {"_type": "NepaliDateTime", "value": "2080/01/15"},
        ],
    )
    def test_malformed(self, data: object) -> None:
        """Malformed payloads raise InvalidFormatError."""
        with pytest.raises(InvalidFormatError):
            from_json(data)  # type: ignore[arg-type]

    def test_out_of_range(self) -> None:
        """Unsupported years raise OutOfRangeError."""
        with pytest.raises(OutOfRangeError):
            from_json({"_type": "NepaliDateTime", "value": "1969-01-01"})
