import datetime
from datetime import UTC, timedelta

from tzdatetime.tzdb._api import ZonePeriod


class PeriodTimeZone(datetime.tzinfo):
    """
    Fixed tzinfo for one period of a named zone.

    Datetimes handed to callers keep the zone name, both offsets and the
    abbreviation of the period they were resolved in, independent of whatever
    the zone's rules say later.
    """

    def __init__(self, zone_id: str, period: ZonePeriod):
        self.zone_id = zone_id
        self.period = period

    def utcoffset(self, dt):
        return timedelta(seconds=self.period.total_offset)

    def dst(self, dt):
        return timedelta(seconds=self.period.std_offset)

    def tzname(self, dt):
        return self.period.zone_abbr

    def __eq__(self, other):
        if not isinstance(other, PeriodTimeZone):
            return NotImplemented
        return (self.zone_id, self.period) == (other.zone_id, other.period)

    def __hash__(self):
        return hash((self.zone_id, self.period))

    def __repr__(self):
        return f'PeriodTimeZone({self.zone_id!r}, {self.period!r})'


def complete_offset(aware: datetime.datetime) -> int:
    """Standard plus daylight offset of an aware datetime, in seconds."""
    offset = aware.utcoffset()
    if offset is None:
        raise TypeError(f'Expected an aware datetime, got {aware!r}')
    return int(offset.total_seconds())


def datetime_from_wall(
    naive: datetime.datetime, zone_id: str, period: ZonePeriod
) -> datetime.datetime:
    return naive.replace(tzinfo=PeriodTimeZone(zone_id, period), fold=0)


def datetime_from_utc(
    utc: datetime.datetime, zone_id: str, period: ZonePeriod
) -> datetime.datetime:
    if utc.tzinfo is None:
        # Stored without tzinfo, but always UTC
        utc = utc.replace(tzinfo=UTC)
    return utc.astimezone(PeriodTimeZone(zone_id, period))


def latest_before(
    limit: datetime.datetime, resolution_of: datetime.datetime
) -> datetime.datetime:
    """
    The last wall time before `limit`, at the resolution of the input:
    seconds for inputs without microseconds, microseconds otherwise.
    """
    if resolution_of.microsecond:
        return limit - timedelta(microseconds=1)
    return limit - timedelta(seconds=1)
