import logging

from tzdatetime.tzdb.base import TimeZoneDatabase
from tzdatetime.tzdb.utc_only import UTCOnlyDatabase
from tzdatetime.tzdb.zoneinfo_db import ZoneInfoDatabase

log = logging.getLogger(__name__)


def make_time_zone_database(name: str) -> TimeZoneDatabase:
    if name == 'zoneinfo':
        return ZoneInfoDatabase()
    if name == 'utc_only':
        log.warning(
            'It seems like no real time zone database is configured. '
            'The utc_only database only supports the Etc/UTC time zone.'
        )
        return UTCOnlyDatabase()
    raise ValueError(f'Unknown time zone database: {name!r}')
