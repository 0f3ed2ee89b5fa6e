import datetime

from tzdatetime.tzdb.base import (
    ISO_CALENDAR,
    Found,
    IncompatibleCalendar,
    TimeZoneDatabase,
    Unique,
    UtcPeriod,
    WallPeriods,
    ZoneNotFound,
    ZonePeriod,
    calendar_of,
)

UTC_ZONE_ID = 'Etc/UTC'
UTC_PERIOD = ZonePeriod(utc_offset=0, std_offset=0, zone_abbr='UTC')


class UTCOnlyDatabase(TimeZoneDatabase):
    """Knows `Etc/UTC` and nothing else. Only useful for tests and as a fallback."""

    def periods_from_wall(
        self, naive: datetime.datetime, zone_id: str
    ) -> WallPeriods:
        calendar = calendar_of(naive)
        if calendar != ISO_CALENDAR:
            return IncompatibleCalendar(calendar)
        if zone_id != UTC_ZONE_ID:
            return ZoneNotFound(zone_id)
        return Unique(UTC_PERIOD)

    def period_from_utc(self, utc: datetime.datetime, zone_id: str) -> UtcPeriod:
        if zone_id != UTC_ZONE_ID:
            return ZoneNotFound(zone_id)
        return Found(UTC_PERIOD)
