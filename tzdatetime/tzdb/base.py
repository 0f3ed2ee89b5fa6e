"""
Timezone database interface and the shapes of its answers.

A database maps a zone identifier plus either a wall-clock datetime or a UTC
instant onto the period (offsets and abbreviation) in effect. Wall-clock
lookups have more than one possible answer around transitions, so each answer
is its own class and callers branch with `match`.
"""

import abc
import datetime
import typing as T

import attr

ISO_CALENDAR = 'iso'


def calendar_of(value: datetime.datetime) -> str:
    """Name of the calendar a datetime value is expressed in."""
    return getattr(value, 'calendar', ISO_CALENDAR)


@attr.define(frozen=True)
class ZonePeriod:
    """Offsets in effect for a zone during one period of its history."""

    utc_offset: int
    """Standard offset from UTC, in seconds."""
    std_offset: int
    """Daylight/seasonal adjustment on top of utc_offset, in seconds."""
    zone_abbr: str

    @property
    def total_offset(self) -> int:
        return self.utc_offset + self.std_offset


@attr.define(frozen=True)
class GapLimit:
    period: ZonePeriod
    wall: datetime.datetime
    """
    Naive wall time at which `period` stops (before a gap) or starts (after
    a gap).
    """


@attr.define(frozen=True)
class Unique:
    period: ZonePeriod


@attr.define(frozen=True)
class Ambiguous:
    # Ordered by time: `first` was in effect before the transition.
    first: ZonePeriod
    second: ZonePeriod


@attr.define(frozen=True)
class Gap:
    before: GapLimit
    after: GapLimit


@attr.define(frozen=True)
class IncompatibleCalendar:
    calendar: str


@attr.define(frozen=True)
class ZoneNotFound:
    zone_id: T.Any


@attr.define(frozen=True)
class Found:
    period: ZonePeriod


WallPeriods = Unique | Ambiguous | Gap | IncompatibleCalendar | ZoneNotFound
UtcPeriod = Found | ZoneNotFound


class TimeZoneDatabase(abc.ABC):
    @abc.abstractmethod
    def periods_from_wall(
        self, naive: datetime.datetime, zone_id: str
    ) -> WallPeriods:
        """Periods a naive wall-clock datetime can belong to in `zone_id`."""

    @abc.abstractmethod
    def period_from_utc(self, utc: datetime.datetime, zone_id: str) -> UtcPeriod:
        """Period in effect in `zone_id` at an aware instant."""
