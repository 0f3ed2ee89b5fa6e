"""
Resolve a wall-clock datetime in a named time zone into a UTC instant.

The input is two fields on a changeset, a naive datetime and a zone
identifier. On success two other fields are set together: the instant in UTC
and the total offset used to get there. The offset is what lets
`original_datetime` notice later that the zone's rules changed.

A wall time can exist twice in a zone (clocks set back) or not at all (clocks
set forward). Neither has a correct answer in general, so both are handed to
a behaviour object supplied by the caller:

    class AppointmentBehaviour:
        def when_ambiguous(self, changeset, dt1, dt2, fields):
            return dt1

        def when_gap(self, changeset, dt1, dt2, fields):
            return changeset.add_error(
                fields.datetime, 'does not exist for the selected timezone'
            )

Candidates are always passed in chronological order of the periods they
belong to. Callbacks return either an aware datetime to apply or a changeset
to use as-is.
"""

import datetime
import logging
import typing as T
from datetime import UTC

from tzdatetime.changeset._api import Changeset
from tzdatetime.core.fields import DEFAULT_FIELDS, Fields
from tzdatetime.core.periods import complete_offset, datetime_from_wall, latest_before
from tzdatetime.tzdb._api import (
    Ambiguous,
    Gap,
    IncompatibleCalendar,
    TimeZoneDatabase,
    Unique,
    ZoneNotFound,
)

log = logging.getLogger(__name__)

CallbackResult = Changeset | datetime.datetime


class TzDatetimeBehaviour(T.Protocol):
    """
    Business rules for wall times that don't map to exactly one instant.

    Implementations may also define
    `when_incompatible_calendar(changeset, fields) -> CallbackResult`, called
    when the input datetime uses a calendar the zone can't interpret. Without
    it an error is added to the time zone field.
    """

    def when_ambiguous(
        self,
        changeset: Changeset,
        dt1: datetime.datetime,
        dt2: datetime.datetime,
        fields: Fields,
    ) -> CallbackResult: ...

    def when_gap(
        self,
        changeset: Changeset,
        dt1: datetime.datetime,
        dt2: datetime.datetime,
        fields: Fields,
    ) -> CallbackResult: ...


def handle_datetime(
    changeset: Changeset,
    behaviour: TzDatetimeBehaviour,
    *,
    tzdb: TimeZoneDatabase,
    fields: Fields | None = None,
) -> Changeset:
    """
    Set the datetime and original_offset fields from input_datetime and
    time_zone.

    Does nothing unless at least one of the two inputs changed, neither
    carries an error, and both have a value.
    """
    if fields is None:
        fields = DEFAULT_FIELDS

    if changeset.has_error(fields.input_datetime) or changeset.has_error(
        fields.time_zone
    ):
        return changeset
    if not (
        changeset.changed(fields.input_datetime) or changeset.changed(fields.time_zone)
    ):
        return changeset

    naive = changeset.get_field(fields.input_datetime)
    zone_id = changeset.get_field(fields.time_zone)
    if naive is None or zone_id is None:
        return changeset

    return _resolve(changeset, behaviour, tzdb, fields, naive, zone_id)


def _resolve(
    changeset: Changeset,
    behaviour: TzDatetimeBehaviour,
    tzdb: TimeZoneDatabase,
    fields: Fields,
    naive: datetime.datetime,
    zone_id: str,
) -> Changeset:
    match tzdb.periods_from_wall(naive, zone_id):
        case Unique(period=period):
            log.debug(f'{naive} is unique in {zone_id}')
            return apply_datetime(
                changeset, datetime_from_wall(naive, zone_id, period), fields
            )

        case Ambiguous(first=first, second=second):
            log.debug(f'{naive} is ambiguous in {zone_id}')
            result = behaviour.when_ambiguous(
                changeset,
                datetime_from_wall(naive, zone_id, first),
                datetime_from_wall(naive, zone_id, second),
                fields,
            )
            return _handle_callback_result(changeset, result, fields)

        case Gap(before=before, after=after):
            log.debug(f'{naive} falls into a gap in {zone_id}')
            result = behaviour.when_gap(
                changeset,
                datetime_from_wall(
                    latest_before(before.wall, naive), zone_id, before.period
                ),
                datetime_from_wall(after.wall, zone_id, after.period),
                fields,
            )
            return _handle_callback_result(changeset, result, fields)

        case IncompatibleCalendar(calendar=calendar):
            log.debug(f'{naive} uses the {calendar} calendar, {zone_id} needs iso')
            handler = getattr(behaviour, 'when_incompatible_calendar', None)
            if handler is None:
                return changeset.add_error(
                    fields.time_zone,
                    'is incompatible with the input datetime calendar',
                    calendar=calendar,
                )
            return _handle_callback_result(
                changeset, handler(changeset, fields), fields
            )

        case ZoneNotFound():
            log.debug(f'Time zone {zone_id!r} not found')
            return changeset.add_error(fields.time_zone, 'is invalid')

        case other:
            raise TypeError(f'Unexpected time zone database answer: {other!r}')


def _handle_callback_result(
    changeset: Changeset, result: CallbackResult, fields: Fields
) -> Changeset:
    if isinstance(result, Changeset):
        return result
    if isinstance(result, datetime.datetime):
        if result.utcoffset() is None:
            raise TypeError(f'Behaviour returned a naive datetime: {result!r}')
        return apply_datetime(changeset, result, fields)
    raise TypeError(
        f'Behaviour must return a Changeset or an aware datetime, got {result!r}'
    )


def apply_datetime(
    changeset: Changeset, aware: datetime.datetime, fields: Fields
) -> Changeset:
    """Store the instant in UTC with the offset it was resolved with."""
    return changeset.put_change(fields.datetime, aware.astimezone(UTC)).put_change(
        fields.original_offset, complete_offset(aware)
    )
