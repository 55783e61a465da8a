"""Tests for CalendarFields."""

from __future__ import annotations

import datetime

import pytest

from nimble_strftime import Date, DateTime, MissingFieldError, Time, Zone
from nimble_strftime.formatting.fields import FIELD_NAMES, CalendarFields


class TestCalendarFieldsOf:
    """Tests for building CalendarFields from supported values."""

    def test_date(self) -> None:
        """A Date publishes only year, month and day."""
        fields = CalendarFields.of(Date(2019, 8, 15))
        assert fields.require("year") == 2019
        assert fields.require("day") == 15
        assert not fields.has("hour")
        assert fields.type_name == "Date"

    def test_time(self) -> None:
        """A Time publishes its fraction with the recorded precision."""
        fields = CalendarFields.of(Time(17, 7, 57, microsecond=1000, precision=3))
        assert fields.fraction() == (1000, 3)
        assert not fields.has("year")

    def test_naive_datetime(self, naive_datetime) -> None:
        """A naive DateTime carries no zone fields."""
        fields = CalendarFields.of(naive_datetime)
        assert fields.has("year") and fields.has("hour")
        assert not fields.is_aware
        assert fields.get("zone_abbr") is None

    def test_aware_datetime(self) -> None:
        """An aware DateTime carries its zone."""
        dt = DateTime(2019, 8, 15, zone=Zone(7200, 3600, "EEST"))
        fields = CalendarFields.of(dt)
        assert fields.is_aware
        assert fields.require("utc_offset") == 7200
        assert fields.require("std_offset") == 3600
        assert fields.require("zone_abbr") == "EEST"

    def test_stdlib_datetime_checked_before_date(self) -> None:
        """A stdlib datetime keeps its time fields."""
        fields = CalendarFields.of(datetime.datetime(2019, 8, 15, 17, 7, 57))
        assert fields.require("hour") == 17
        assert fields.type_name == "datetime"

    def test_stdlib_aware_datetime_with_dst(self) -> None:
        """The stdlib dst() part becomes the daylight-saving offset."""

        class Eest(datetime.tzinfo):
            def utcoffset(self, dt):
                return datetime.timedelta(hours=3)

            def dst(self, dt):
                return datetime.timedelta(hours=1)

            def tzname(self, dt):
                return "EEST"

        value = datetime.datetime(2019, 8, 15, 17, 7, 57, tzinfo=Eest())
        fields = CalendarFields.of(value)
        assert fields.require("utc_offset") == 7200
        assert fields.require("std_offset") == 3600
        assert fields.require("zone_abbr") == "EEST"

    def test_stdlib_date(self) -> None:
        """A stdlib date has no time fields."""
        fields = CalendarFields.of(datetime.date(2019, 8, 15))
        assert fields.day_of_week() == 4
        assert not fields.has("hour")

    def test_stdlib_time(self) -> None:
        """A stdlib time with a fraction is taken at full precision."""
        fields = CalendarFields.of(datetime.time(1, 2, 3, 45))
        assert fields.fraction() == (45, 6)

    def test_mapping(self) -> None:
        """Mappings are read directly and unknown keys are ignored."""
        fields = CalendarFields.of({"month": 2, "calendar": "ISO"})
        assert fields.require("month") == 2
        assert not fields.has("calendar")
        assert fields.type_name == "dict"

    def test_existing_fields_are_reused(self) -> None:
        """Passing CalendarFields returns it unchanged."""
        fields = CalendarFields({"year": 1})
        assert CalendarFields.of(fields) is fields

    def test_object_with_calendar_fields(self) -> None:
        """Any object with calendar_fields() is accepted."""

        class Week:
            def calendar_fields(self):
                return {"year": 2020, "month": 1, "day": 6}

        fields = CalendarFields.of(Week())
        assert fields.day_of_week() == 1
        assert fields.type_name == "Week"

    @pytest.mark.parametrize("value", [None, 42, "2019-08-15", [2019, 8, 15]])
    def test_unsupported(self, value) -> None:
        """Other values raise TypeError."""
        with pytest.raises(TypeError):
            CalendarFields.of(value)


class TestCalendarFieldsAccess:
    """Tests for field access and derived values."""

    def test_require_missing(self) -> None:
        """A missing field raises MissingFieldError naming it."""
        fields = CalendarFields.of(Time(1, 2, 3))
        with pytest.raises(MissingFieldError) as excinfo:
            fields.require("year", "Y")
        assert excinfo.value.field == "year"
        assert excinfo.value.value_type == "Time"
        assert excinfo.value.directive == "Y"
        assert "%Y requires year" in str(excinfo.value)

    def test_require_missing_without_directive(self) -> None:
        """Without a directive the message only names the field."""
        with pytest.raises(MissingFieldError, match="^dict has no month$"):
            CalendarFields.of({}).require("month")

    def test_missing_field_is_lookup_error(self) -> None:
        """MissingFieldError can be caught as LookupError."""
        with pytest.raises(LookupError):
            CalendarFields.of({}).require("day")

    def test_get_default(self) -> None:
        """get() returns the default for missing fields."""
        assert CalendarFields.of({}).get("zone_abbr", "") == ""

    def test_bare_microsecond(self) -> None:
        """A bare integer microsecond is taken at full precision."""
        assert CalendarFields.of({"microsecond": 5}).fraction() == (5, 6)

    def test_quarter_needs_only_month(self) -> None:
        """The quarter is derived from the month alone."""
        assert CalendarFields.of({"month": 10}).quarter() == 4

    def test_day_of_year(self) -> None:
        """Day of the year counts the leap day."""
        assert CalendarFields.of({"year": 2020, "month": 3, "day": 1}).day_of_year() == 61
        assert CalendarFields.of({"year": 2019, "month": 3, "day": 1}).day_of_year() == 60

    def test_aware_needs_both_offsets(self) -> None:
        """A value is aware only with both offset fields."""
        assert not CalendarFields.of({"utc_offset": 0}).is_aware
        assert CalendarFields.of({"utc_offset": 0, "std_offset": 0}).is_aware

    def test_field_names(self) -> None:
        """All published field names are known."""
        assert set(DateTime(2019, 8, 15, zone=Zone.utc()).calendar_fields()) == set(
            FIELD_NAMES
        )
