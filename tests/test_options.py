"""Tests for FormatOptions and NameResolver."""

from __future__ import annotations

import dataclasses

import pytest

from nimble_strftime import (
    Date,
    DateTime,
    FormatOptions,
    Meridiem,
    ValidationError,
    format,
)
from nimble_strftime.formatting.options import (
    DEFAULT_OPTIONS,
    ENV_PREFIX,
    NameResolver,
)

PORTUGUESE_MONTHS = [
    "Janeiro", "Fevereiro", "Março", "Abril", "Maio", "Junho",
    "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro",
]


class TestNameResolver:
    """Tests for NameResolver."""

    def test_table(self) -> None:
        """A table is indexed from 1."""
        resolver = NameResolver(["a", "b", "c"], 3, "letter")
        assert resolver(1) == "a"
        assert resolver(3) == "c"

    def test_callable(self) -> None:
        """A callable receives the 1-based index."""
        resolver = NameResolver(lambda i: str(i * 10), 12, "month")
        assert resolver(12) == "120"

    def test_wrong_table_size(self) -> None:
        """A table of the wrong length is rejected."""
        with pytest.raises(ValidationError, match="exactly 12 entries"):
            NameResolver(["Jan"], 12, "month")

    def test_string_is_not_a_table(self) -> None:
        """A string is not accepted as a name table."""
        with pytest.raises(ValidationError, match="sequence or a callable"):
            NameResolver("abcdefg", 7, "day of week")

    @pytest.mark.parametrize("index", [0, 13, -1, "1"])
    def test_index_out_of_range(self, index) -> None:
        """Indexes outside 1..size are rejected."""
        resolver = NameResolver(lambda i: "x", 12, "month")
        with pytest.raises(ValidationError, match="month index"):
            resolver(index)

    def test_truncated(self) -> None:
        """truncated() cuts names to a prefix."""
        full = NameResolver(PORTUGUESE_MONTHS, 12, "month")
        assert NameResolver.truncated(full, 4)(2) == "Feve"
        assert NameResolver.truncated(full, 0)(2) == ""


class TestFormatOptionsDefaults:
    """Tests for default option values."""

    def test_default_templates(self) -> None:
        """Default preferred templates."""
        options = FormatOptions()
        assert options.preferred_datetime == "%Y-%m-%d %H:%M:%S"
        assert options.preferred_date == "%Y-%m-%d"
        assert options.preferred_time == "%H:%M:%S"

    def test_default_names(self) -> None:
        """Default English names."""
        options = FormatOptions()
        assert options.month_name(1) == "January"
        assert options.month_name_abbreviated(9) == "Sep"
        assert options.day_of_week_name(1) == "Monday"
        assert options.day_of_week_name_abbreviated(7) == "Sun"
        assert options.am_name() == "am"
        assert options.pm_name() == "pm"

    def test_default_instance(self) -> None:
        """DEFAULT_OPTIONS equals a fresh FormatOptions."""
        assert DEFAULT_OPTIONS == FormatOptions()
        assert DEFAULT_OPTIONS.passthrough_unknown is False

    def test_frozen(self) -> None:
        """Options cannot be mutated."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            FormatOptions().preferred_date = "%d"  # type: ignore[misc]


class TestFormatOptionsNames:
    """Tests for configured names."""

    def test_abbreviations_derived_from_full_names(self) -> None:
        """Without an abbreviated table, full names are truncated."""
        options = FormatOptions(month_names=PORTUGUESE_MONTHS)
        assert options.month_name_abbreviated(3) == "Mar"
        assert format({"month": 8}, "%B %b", options) == "Agosto Ago"

    def test_abbreviation_size(self) -> None:
        """abbreviation_size controls derived abbreviations."""
        options = FormatOptions(abbreviation_size=2)
        assert format(Date(2019, 8, 15), "%a %b", options) == "Th Au"

    def test_explicit_abbreviated_table(self) -> None:
        """An explicit abbreviated table is used as given."""
        options = FormatOptions(
            abbreviated_day_of_week_names=["M", "Tu", "W", "Th", "F", "Sa", "Su"]
        )
        assert format(Date(2019, 8, 15), "%a %A", options) == "Th Thursday"

    def test_month_name_callable(self) -> None:
        """Month names may come from a function of the month number."""
        result = format(
            {"month": 8},
            "%B/%b",
            month_names=lambda month: f"month-{month}",
            abbreviated_month_names=lambda month: f"m{month}",
        )
        assert result == "month-8/m8"

    def test_day_of_week_callable(self) -> None:
        """Weekday names may come from a function of the ISO weekday."""
        result = format(Date(2019, 8, 25), "%A", day_of_week_names=lambda d: f"day {d}")
        assert result == "day 7"

    def test_am_pm_pair(self, utc_datetime) -> None:
        """%p upper-cases and %P lower-cases the configured names."""
        result = format(utc_datetime, "%p %P", am_pm_names=("Vorm", "Nachm"))
        assert result == "NACHM nachm"

    def test_am_pm_callable(self, utc_datetime) -> None:
        """An am/pm callable receives a Meridiem."""
        seen = []

        def name(meridiem: Meridiem) -> str:
            seen.append(meridiem)
            return "da" if meridiem is Meridiem.AM else "na"

        assert format(utc_datetime, "%P", am_pm_names=name) == "na"
        assert seen == [Meridiem.PM]

    @pytest.mark.parametrize(
        ("hour", "expected"),
        [(0, "AM"), (11, "AM"), (12, "PM"), (23, "PM")],
    )
    def test_am_pm_boundaries(self, hour, expected) -> None:
        """Midnight is AM and noon is PM."""
        assert format(DateTime(2019, 8, 15, hour, 59), "%p") == expected

    def test_lists_are_stored_as_tuples(self) -> None:
        """Mutable name tables are frozen."""
        options = FormatOptions(month_names=list(PORTUGUESE_MONTHS))
        assert options.month_names == tuple(PORTUGUESE_MONTHS)
        assert hash(options) == hash(FormatOptions(month_names=tuple(PORTUGUESE_MONTHS)))


class TestFormatOptionsValidation:
    """Tests for rejected option values."""

    def test_short_month_table(self) -> None:
        """Month tables need 12 names."""
        with pytest.raises(ValidationError):
            FormatOptions(month_names=["Jan", "Feb"])

    def test_long_day_table(self) -> None:
        """Weekday tables need 7 names."""
        with pytest.raises(ValidationError):
            FormatOptions(abbreviated_day_of_week_names=["x"] * 8)

    @pytest.mark.parametrize("names", [("am",), "ap", ("a", "p", "x"), None])
    def test_bad_am_pm_names(self, names) -> None:
        """am_pm_names must be a pair or a callable."""
        with pytest.raises(ValidationError, match="am_pm_names"):
            FormatOptions(am_pm_names=names)

    @pytest.mark.parametrize("size", [-1, 1.5, True])
    def test_bad_abbreviation_size(self, size) -> None:
        """abbreviation_size must be a non-negative int."""
        with pytest.raises(ValidationError, match="abbreviation_size"):
            FormatOptions(abbreviation_size=size)

    def test_template_must_be_string(self) -> None:
        """Preferred templates must be strings."""
        with pytest.raises(ValidationError, match="preferred_time"):
            FormatOptions(preferred_time=None)  # type: ignore[arg-type]

    def test_unknown_field(self) -> None:
        """Unknown option names raise TypeError."""
        with pytest.raises(TypeError):
            FormatOptions(preferred_weekday="%A")  # type: ignore[call-arg]


class TestFormatOptionsReplace:
    """Tests for FormatOptions.replace."""

    def test_replace_returns_copy(self) -> None:
        """replace() leaves the original untouched."""
        options = FormatOptions()
        changed = options.replace(preferred_date="%d/%m/%Y")
        assert changed.preferred_date == "%d/%m/%Y"
        assert options.preferred_date == "%Y-%m-%d"

    def test_replace_rebuilds_resolvers(self) -> None:
        """Replaced names are used by the resolvers."""
        options = FormatOptions().replace(month_names=PORTUGUESE_MONTHS)
        assert options.month_name(4) == "Abril"
        assert options.month_name_abbreviated(4) == "Abr"

    def test_replace_validates(self) -> None:
        """replace() validates the new values."""
        with pytest.raises(ValidationError):
            FormatOptions().replace(month_names=["Jan"])

    def test_preferred_template(self) -> None:
        """preferred_template() maps directives to options."""
        options = FormatOptions(preferred_time="%H")
        assert options.preferred_template("X") == "%H"
        assert options.preferred_template("x") == "%Y-%m-%d"
        assert options.preferred_template("c") == "%Y-%m-%d %H:%M:%S"


class TestFormatOptionsFromEnv:
    """Tests for FormatOptions.from_env."""

    def test_empty_environment(self) -> None:
        """No variables gives the defaults."""
        assert FormatOptions.from_env({}) == FormatOptions()

    def test_reads_preferred_templates(self) -> None:
        """Preferred templates are read from prefixed variables."""
        options = FormatOptions.from_env(
            {
                ENV_PREFIX + "PREFERRED_DATETIME": "%c?",
                ENV_PREFIX + "PREFERRED_DATE": "%d/%m/%Y",
                ENV_PREFIX + "PREFERRED_TIME": "%I %p",
                "UNRELATED": "x",
            }
        )
        assert options.preferred_datetime == "%c?"
        assert options.preferred_date == "%d/%m/%Y"
        assert options.preferred_time == "%I %p"

    def test_reads_abbreviation_size(self) -> None:
        """The abbreviation size is parsed as an integer."""
        options = FormatOptions.from_env({ENV_PREFIX + "ABBREVIATION_SIZE": "2"})
        assert options.abbreviation_size == 2
        assert options.month_name_abbreviated(1) == "Ja"

    def test_bad_abbreviation_size(self) -> None:
        """A non-integer abbreviation size raises ValidationError."""
        with pytest.raises(ValidationError, match="ABBREVIATION_SIZE"):
            FormatOptions.from_env({ENV_PREFIX + "ABBREVIATION_SIZE": "two"})

    def test_overrides_win(self) -> None:
        """Keyword overrides take precedence over the environment."""
        options = FormatOptions.from_env(
            {ENV_PREFIX + "PREFERRED_DATE": "%d/%m/%Y"}, preferred_date="%Y"
        )
        assert options.preferred_date == "%Y"

    def test_reads_os_environ(self, monkeypatch) -> None:
        """Without a mapping, os.environ is read."""
        monkeypatch.setenv(ENV_PREFIX + "PREFERRED_TIME", "%H.%M")
        assert FormatOptions.from_env().preferred_time == "%H.%M"
