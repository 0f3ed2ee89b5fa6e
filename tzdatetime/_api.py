"""
Datetimes in a named time zone, stored as UTC plus the offset used.

Storing only a UTC instant loses the wall time a user entered once the zone's
rules change before that instant arrives, e.g. when a country stops observing
daylight saving time. Storing only the wall time makes instants hard to
compare. tzdatetime keeps both comparable and recoverable by spreading one
datetime over several fields:

    input_datetime   naive wall time, virtual
    time_zone        zone identifier, e.g. Europe/Berlin
    datetime         the instant in UTC
    original_offset  total offset in seconds used to resolve it

`handle_datetime` fills the last two from the first two on a changeset;
`original_datetime` reads them back and reports whether the zone's rules
still give the same wall time.
"""

from tzdatetime.changeset._api import Changeset, ChangesetInvalid, FieldError
from tzdatetime.core._api import (
    DatetimeError,
    Diverged,
    FieldConfigError,
    Fields,
    Original,
    TzDatetime,
    TzDatetimeBehaviour,
    fields_from_opts,
    handle_datetime,
    original_datetime,
)
from tzdatetime.db._api import TzDatetimeMixin
from tzdatetime.injector.app.app_injector import (
    create_app_injector,
    teardown_app_injector,
)
from tzdatetime.settings._api import TzDatetimeSettings, load_settings
from tzdatetime.tzdb._api import TimeZoneDatabase, UTCOnlyDatabase, ZoneInfoDatabase

__all__ = [
    'Changeset',
    'ChangesetInvalid',
    'FieldError',
    'DatetimeError',
    'Diverged',
    'FieldConfigError',
    'Fields',
    'Original',
    'TzDatetime',
    'TzDatetimeBehaviour',
    'fields_from_opts',
    'handle_datetime',
    'original_datetime',
    'TzDatetimeMixin',
    'create_app_injector',
    'teardown_app_injector',
    'TzDatetimeSettings',
    'load_settings',
    'TimeZoneDatabase',
    'UTCOnlyDatabase',
    'ZoneInfoDatabase',
]
