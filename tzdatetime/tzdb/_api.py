from .base import (
    ISO_CALENDAR,
    Ambiguous,
    Found,
    Gap,
    GapLimit,
    IncompatibleCalendar,
    TimeZoneDatabase,
    Unique,
    UtcPeriod,
    WallPeriods,
    ZoneNotFound,
    ZonePeriod,
    calendar_of,
)
from .factory import make_time_zone_database
from .utc_only import UTC_ZONE_ID, UTCOnlyDatabase
from .zoneinfo_db import ZoneInfoDatabase

__all__ = [
    'ISO_CALENDAR',
    'Ambiguous',
    'Found',
    'Gap',
    'GapLimit',
    'IncompatibleCalendar',
    'TimeZoneDatabase',
    'Unique',
    'UtcPeriod',
    'WallPeriods',
    'ZoneNotFound',
    'ZonePeriod',
    'calendar_of',
    'make_time_zone_database',
    'UTC_ZONE_ID',
    'UTCOnlyDatabase',
    'ZoneInfoDatabase',
]
