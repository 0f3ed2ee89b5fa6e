"""
Recover the wall time a stored instant was meant to be.

Zone definitions change, including between storing a future datetime and
reading it back. Comparing the offset stored at resolution time with the
offset the zone's current rules give for the stored instant shows whether the
two still agree:

    match original_datetime(appointment, tzdb=tzdb):
        case Original(datetime=dt):
            ...
        case Diverged(current=by_current_rules, original=by_stored_offset):
            # Ask whether to keep the wall time or the instant
            ...
        case DatetimeError(reason=reason):
            ...
"""

import datetime
import logging
import typing as T
from collections.abc import Mapping
from datetime import UTC, timedelta

import attr

from tzdatetime.core.fields import DEFAULT_FIELDS, Fields
from tzdatetime.core.periods import complete_offset, datetime_from_utc
from tzdatetime.tzdb._api import Found, TimeZoneDatabase, ZoneNotFound

log = logging.getLogger(__name__)

TIME_ZONE_NOT_FOUND = 'time_zone_not_found'
NOT_RESOLVED = 'not_resolved'


@attr.define(frozen=True)
class Original:
    datetime: datetime.datetime


@attr.define(frozen=True)
class Diverged:
    current: datetime.datetime
    """The stored instant, in the zone's current rules."""
    original: datetime.datetime
    """The instant that shows the originally intended wall time."""


@attr.define(frozen=True)
class DatetimeError:
    reason: str
    zone_id: T.Any = None


Reconstructed = Original | Diverged | DatetimeError


def _read(record: T.Any, name: str) -> T.Any:
    if isinstance(record, Mapping):
        return record[name]
    return getattr(record, name)


def original_datetime(
    record: T.Any, *, tzdb: TimeZoneDatabase, fields: Fields | None = None
) -> Reconstructed:
    if fields is None:
        fields = DEFAULT_FIELDS

    stored = _read(record, fields.datetime)
    zone_id = _read(record, fields.time_zone)
    original_offset = _read(record, fields.original_offset)
    if stored is None or zone_id is None or original_offset is None:
        return DatetimeError(NOT_RESOLVED, zone_id)
    if stored.tzinfo is None:
        stored = stored.replace(tzinfo=UTC)

    current = _in_zone(tzdb, stored, zone_id)
    if current is None:
        return DatetimeError(TIME_ZONE_NOT_FOUND, zone_id)

    diff = original_offset - complete_offset(current)
    if diff == 0:
        return Original(current)

    log.debug(
        f'Offset for {stored} in {zone_id} changed from {original_offset}s '
        f'to {complete_offset(current)}s'
    )
    shifted = _in_zone(tzdb, stored + timedelta(seconds=diff), zone_id)
    if shifted is None:
        return DatetimeError(TIME_ZONE_NOT_FOUND, zone_id)
    return Diverged(current=current, original=shifted)


def _in_zone(
    tzdb: TimeZoneDatabase, utc: datetime.datetime, zone_id: str
) -> datetime.datetime | None:
    match tzdb.period_from_utc(utc, zone_id):
        case Found(period=period):
            return datetime_from_utc(utc, zone_id, period)
        case ZoneNotFound():
            return None
        case other:
            raise TypeError(f'Unexpected time zone database answer: {other!r}')
