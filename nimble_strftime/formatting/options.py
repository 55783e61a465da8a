"""Formatting options: preferred templates and naming resolvers.

FormatOptions is the immutable configuration a format call runs with. It
holds the templates %c, %x and %X expand to, and the names used for
months, weekdays and the two halves of the day.

Names can be supplied either as an ordered table or as a function from a
1-based index to a name; both are wrapped in a NameResolver.

Examples:
    >>> options = FormatOptions(month_names=["Janeiro", "Fevereiro", "Março",
    ...     "Abril", "Maio", "Junho", "Julho", "Agosto", "Setembro",
    ...     "Outubro", "Novembro", "Dezembro"])
    >>> options.month_name(8)
    'Agosto'
    >>> options.month_name_abbreviated(8)
    'Ago'
"""

from __future__ import annotations

import dataclasses
import logging
import os
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from nimble_strftime._internal.constants import (
    ABBREVIATION_SIZE,
    AM_PM_NAMES,
    DAY_OF_WEEK_NAMES,
    MONTH_NAMES,
    PREFERRED_DATE,
    PREFERRED_DATETIME,
    PREFERRED_TIME,
)
from nimble_strftime.errors import ValidationError
from nimble_strftime.units.meridiem import Meridiem

logger = logging.getLogger(__name__)

NameSource = Union[Callable[[int], str], Sequence[str]]
AmPmSource = Union[Callable[[Meridiem], str], Sequence[str]]

ENV_PREFIX = "NIMBLE_STRFTIME_"

# Option name for each preferred directive
PREFERRED_OPTIONS: dict[str, str] = {
    "c": "preferred_datetime",
    "x": "preferred_date",
    "X": "preferred_time",
}


class NameResolver:
    """Map a 1-based index to a name, from a table or a function.

    Examples:
        >>> months = NameResolver(["Jan", "Feb", "Mar", "Apr", "May", "Jun",
        ...     "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"], 12, "month")
        >>> months(2)
        'Feb'

        >>> days = NameResolver(lambda i: f"day-{i}", 7, "day of week")
        >>> days(7)
        'day-7'
    """

    __slots__ = ("_table", "_lookup", "_size", "_label")

    def __init__(self, source: NameSource, size: int, label: str) -> None:
        """Create a resolver.

        Args:
            source: A sequence of exactly ``size`` names, or a callable
                taking an index in 1..size.
            size: Number of names (12 for months, 7 for weekdays).
            label: What is being named, for error messages.

        Raises:
            ValidationError: If source is a table of the wrong length or
                neither a table nor a callable.
        """
        self._size = size
        self._label = label
        if callable(source):
            self._table: tuple[str, ...] | None = None
            self._lookup: Callable[[int], str] | None = source
        elif isinstance(source, Sequence) and not isinstance(source, str):
            if len(source) != size:
                raise ValidationError(
                    f"{label} names must have exactly {size} entries, got {len(source)}"
                )
            self._table = tuple(source)
            self._lookup = None
        else:
            raise ValidationError(
                f"{label} names must be a sequence or a callable, "
                f"got {type(source).__name__}"
            )

    @classmethod
    def truncated(cls, full: NameResolver, length: int) -> NameResolver:
        """Return a resolver giving the first ``length`` characters of ``full``."""
        return cls(lambda index: full(index)[:length], full._size, full._label)

    def __call__(self, index: int) -> str:
        if not isinstance(index, int) or not (1 <= index <= self._size):
            raise ValidationError(
                f"{self._label} index must be between 1 and {self._size}, got {index}"
            )
        if self._table is not None:
            return self._table[index - 1]
        return self._lookup(index)  # type: ignore[misc]

    def __repr__(self) -> str:
        source = self._table if self._table is not None else self._lookup
        return f"NameResolver({source!r}, {self._size}, {self._label!r})"


def _frozen(source: Any) -> Any:
    """Turn a mutable name table into a tuple, leave callables alone."""
    if isinstance(source, Sequence) and not isinstance(source, (str, tuple)):
        return tuple(source)
    return source


@dataclass(frozen=True)
class FormatOptions:
    """Immutable configuration for a format call.

    Attributes:
        preferred_datetime: Template %c expands to.
        preferred_date: Template %x expands to.
        preferred_time: Template %X expands to.
        am_pm_names: An (am, pm) pair, or a callable taking a Meridiem.
        month_names: Twelve month names, or a callable taking 1-12.
        abbreviated_month_names: Same shape; defaults to month_names cut to
            abbreviation_size characters.
        day_of_week_names: Seven weekday names (Monday first), or a
            callable taking 1-7.
        abbreviated_day_of_week_names: Same shape; defaults to
            day_of_week_names cut to abbreviation_size characters.
        abbreviation_size: Length of derived abbreviated names.
        passthrough_unknown: Copy unknown directives to the output verbatim
            instead of raising MalformedDirectiveError.
    """

    preferred_datetime: str = PREFERRED_DATETIME
    preferred_date: str = PREFERRED_DATE
    preferred_time: str = PREFERRED_TIME
    am_pm_names: AmPmSource = AM_PM_NAMES
    month_names: NameSource = MONTH_NAMES
    abbreviated_month_names: NameSource | None = None
    day_of_week_names: NameSource = DAY_OF_WEEK_NAMES
    abbreviated_day_of_week_names: NameSource | None = None
    abbreviation_size: int = ABBREVIATION_SIZE
    passthrough_unknown: bool = False

    _months: NameResolver = field(init=False, repr=False, compare=False)
    _months_abbreviated: NameResolver = field(init=False, repr=False, compare=False)
    _days: NameResolver = field(init=False, repr=False, compare=False)
    _days_abbreviated: NameResolver = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for name in PREFERRED_OPTIONS.values():
            template = getattr(self, name)
            if not isinstance(template, str):
                raise ValidationError(
                    f"{name} must be a string, got {type(template).__name__}"
                )

        size = self.abbreviation_size
        if not isinstance(size, int) or isinstance(size, bool) or size < 0:
            raise ValidationError(
                f"abbreviation_size must be a non-negative integer, got {size!r}"
            )

        am_pm = self.am_pm_names
        if not callable(am_pm):
            if (
                not isinstance(am_pm, Sequence)
                or isinstance(am_pm, str)
                or len(am_pm) != 2
            ):
                raise ValidationError(
                    "am_pm_names must be an (am, pm) pair or a callable, "
                    f"got {am_pm!r}"
                )

        for name in (
            "am_pm_names",
            "month_names",
            "abbreviated_month_names",
            "day_of_week_names",
            "abbreviated_day_of_week_names",
        ):
            object.__setattr__(self, name, _frozen(getattr(self, name)))

        months = NameResolver(self.month_names, 12, "month")
        days = NameResolver(self.day_of_week_names, 7, "day of week")
        if self.abbreviated_month_names is None:
            months_abbreviated = NameResolver.truncated(months, size)
        else:
            months_abbreviated = NameResolver(self.abbreviated_month_names, 12, "month")
        if self.abbreviated_day_of_week_names is None:
            days_abbreviated = NameResolver.truncated(days, size)
        else:
            days_abbreviated = NameResolver(
                self.abbreviated_day_of_week_names, 7, "day of week"
            )

        object.__setattr__(self, "_months", months)
        object.__setattr__(self, "_months_abbreviated", months_abbreviated)
        object.__setattr__(self, "_days", days)
        object.__setattr__(self, "_days_abbreviated", days_abbreviated)

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **overrides: Any
    ) -> FormatOptions:
        """Build options whose defaults come from environment variables.

        Reads NIMBLE_STRFTIME_PREFERRED_DATETIME, NIMBLE_STRFTIME_PREFERRED_DATE,
        NIMBLE_STRFTIME_PREFERRED_TIME and NIMBLE_STRFTIME_ABBREVIATION_SIZE.
        Keyword overrides win over the environment.

        Args:
            environ: Mapping to read instead of os.environ.
            **overrides: Any FormatOptions field.

        Raises:
            ValidationError: If NIMBLE_STRFTIME_ABBREVIATION_SIZE is not an integer.

        Examples:
            >>> FormatOptions.from_env({"NIMBLE_STRFTIME_PREFERRED_DATE": "%d/%m/%Y"}).preferred_date
            '%d/%m/%Y'
        """
        if environ is None:
            environ = os.environ

        settings: dict[str, Any] = {}
        for name in PREFERRED_OPTIONS.values():
            value = environ.get(ENV_PREFIX + name.upper())
            if value is not None:
                settings[name] = value

        size = environ.get(ENV_PREFIX + "ABBREVIATION_SIZE")
        if size is not None:
            try:
                settings["abbreviation_size"] = int(size)
            except ValueError:
                raise ValidationError(
                    f"{ENV_PREFIX}ABBREVIATION_SIZE must be an integer, got {size!r}"
                ) from None

        if settings:
            logger.debug("format options from environment: %s", sorted(settings))
        settings.update(overrides)
        return cls(**settings)

    def replace(self, **changes: Any) -> FormatOptions:
        """Return a copy with the given fields replaced.

        Examples:
            >>> FormatOptions().replace(preferred_time="%I:%M %p").preferred_time
            '%I:%M %p'
        """
        return dataclasses.replace(self, **changes)

    def preferred_template(self, directive: str) -> str:
        """Return the template a preferred directive (c, x or X) expands to."""
        return getattr(self, PREFERRED_OPTIONS[directive])

    def am_pm_name(self, meridiem: Meridiem) -> str:
        """Return the configured name for a half of the day."""
        if callable(self.am_pm_names):
            return self.am_pm_names(meridiem)
        return self.am_pm_names[meridiem.index]

    def am_name(self) -> str:
        """Return the configured name for AM."""
        return self.am_pm_name(Meridiem.AM)

    def pm_name(self) -> str:
        """Return the configured name for PM."""
        return self.am_pm_name(Meridiem.PM)

    def month_name(self, index: int) -> str:
        """Return the full name of month ``index`` (1-12)."""
        return self._months(index)

    def month_name_abbreviated(self, index: int) -> str:
        """Return the abbreviated name of month ``index`` (1-12)."""
        return self._months_abbreviated(index)

    def day_of_week_name(self, index: int) -> str:
        """Return the full name of ISO weekday ``index`` (1=Monday)."""
        return self._days(index)

    def day_of_week_name_abbreviated(self, index: int) -> str:
        """Return the abbreviated name of ISO weekday ``index`` (1=Monday)."""
        return self._days_abbreviated(index)


DEFAULT_OPTIONS = FormatOptions()


__all__ = [
    "NameResolver",
    "FormatOptions",
    "DEFAULT_OPTIONS",
    "PREFERRED_OPTIONS",
    "ENV_PREFIX",
]
