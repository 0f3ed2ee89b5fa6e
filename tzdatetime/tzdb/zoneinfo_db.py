"""
Timezone database backed by the IANA data shipped through `zoneinfo`.

`zoneinfo` resolves wall times with the PEP 495 `fold` attribute: fold=0 picks
the offset in effect before a transition, fold=1 the one after. Comparing both
tells apart unique, ambiguous (offset decreased) and skipped (offset
increased) wall times. `zoneinfo` does not expose its transition list, so the
limits of a gap are located by bisecting over UTC seconds.
"""

import datetime
import functools
import logging
import math
import zoneinfo
from datetime import UTC, timedelta

from tzdatetime.tzdb.base import (
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

log = logging.getLogger(__name__)

# Identifiers come from user input, keep the number of remembered ones bounded
ZONE_CACHE_SIZE = 512


@functools.lru_cache(maxsize=ZONE_CACHE_SIZE)
def load_zone(zone_id: str) -> zoneinfo.ZoneInfo | None:
    try:
        return zoneinfo.ZoneInfo(zone_id)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError):
        log.debug(f'Unknown time zone {zone_id!r}')
        return None


def period_of(aware: datetime.datetime) -> ZonePeriod:
    total = aware.utcoffset() or timedelta(0)
    dst = aware.dst() or timedelta(0)
    return ZonePeriod(
        utc_offset=int((total - dst).total_seconds()),
        std_offset=int(dst.total_seconds()),
        zone_abbr=aware.tzname() or '',
    )


class ZoneInfoDatabase(TimeZoneDatabase):
    def _zone(self, zone_id: str) -> zoneinfo.ZoneInfo | None:
        if not isinstance(zone_id, str) or not zone_id:
            return None
        return load_zone(zone_id)

    def periods_from_wall(
        self, naive: datetime.datetime, zone_id: str
    ) -> WallPeriods:
        calendar = calendar_of(naive)
        if calendar != ISO_CALENDAR:
            return IncompatibleCalendar(calendar)

        zone = self._zone(zone_id)
        if zone is None:
            return ZoneNotFound(zone_id)

        earlier = naive.replace(tzinfo=zone, fold=0)
        later = naive.replace(tzinfo=zone, fold=1)
        offset_before = earlier.utcoffset()
        offset_after = later.utcoffset()

        if offset_before == offset_after:
            return Unique(period_of(earlier))
        if offset_before > offset_after:
            return Ambiguous(period_of(earlier), period_of(later))

        # Wall time skipped. Interpreted with the later (larger) offset it is
        # before the transition, with the earlier offset it is after it.
        wall = naive.replace(tzinfo=None, fold=0)
        lo = math.floor((wall - offset_after).replace(tzinfo=UTC).timestamp()) - 1
        hi = math.ceil((wall - offset_before).replace(tzinfo=UTC).timestamp()) + 1
        transition = self._find_transition(zone, lo, hi)

        last_before = datetime.datetime.fromtimestamp(transition - 1, zone)
        first_after = datetime.datetime.fromtimestamp(transition, zone)
        utc_transition = datetime.datetime.fromtimestamp(transition, UTC).replace(
            tzinfo=None
        )
        return Gap(
            before=GapLimit(
                period=period_of(last_before),
                wall=utc_transition + last_before.utcoffset(),
            ),
            after=GapLimit(
                period=period_of(first_after),
                wall=utc_transition + first_after.utcoffset(),
            ),
        )

    @staticmethod
    def _find_transition(zone: zoneinfo.ZoneInfo, lo: int, hi: int) -> int:
        """First UTC second in (lo, hi] using a different offset than lo."""

        def offset_at(timestamp: int) -> timedelta | None:
            return datetime.datetime.fromtimestamp(timestamp, zone).utcoffset()

        start = offset_at(lo)
        while hi - lo > 1:
            mid = (lo + hi) // 2
            if offset_at(mid) == start:
                lo = mid
            else:
                hi = mid
        return hi

    def period_from_utc(self, utc: datetime.datetime, zone_id: str) -> UtcPeriod:
        zone = self._zone(zone_id)
        if zone is None:
            return ZoneNotFound(zone_id)
        if utc.tzinfo is None:
            utc = utc.replace(tzinfo=UTC)
        return Found(period_of(utc.astimezone(zone)))
