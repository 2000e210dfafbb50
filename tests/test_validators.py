"""
Tests for shared validation helpers.
"""

from datetime import datetime

import pytest

from transfer_booking.shared.validators import is_blank, missing_fields, parse_datetime


class TestPresence:
    @pytest.mark.parametrize("value", [None, "", "   ", "\n"])
    def test_blank_values(self, value):
        assert is_blank(value)

    @pytest.mark.parametrize("value", ["x", 0, False, " a "])
    def test_present_values(self, value):
        assert not is_blank(value)

    def test_missing_fields_keeps_order(self):
        data = {"name": "Anna", "email": "", "message": None}

        assert missing_fields(data, ("name", "email", "message")) == ["email", "message"]


class TestParseDatetime:
    def test_naive_iso_string(self):
        assert parse_datetime("2026-11-03T09:30") == datetime(2026, 11, 3, 9, 30)

    def test_aware_string_converted_to_utc(self):
        assert parse_datetime("2026-11-03T12:30:00+03:00") == datetime(2026, 11, 3, 9, 30)

    def test_blank_is_none(self):
        assert parse_datetime("") is None
        assert parse_datetime(None) is None

    def test_datetime_passthrough(self):
        value = datetime(2026, 1, 1, 8, 0)
        assert parse_datetime(value) == value

    @pytest.mark.parametrize("value", ["not a date at all", "2026-13-45"])
    def test_malformed_raises_value_error(self, value):
        with pytest.raises(ValueError):
            parse_datetime(value)
