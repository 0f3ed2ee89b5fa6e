import datetime as dt
from datetime import UTC, datetime, timedelta, timezone

import attr
import pytest

from tests.helpers import Appointment
from tzdatetime.changeset._api import Changeset, ChangesetInvalid, FieldError

TYPES = {
    'input_datetime': 'naive_datetime',
    'time_zone': 'string',
    'datetime': 'utc_datetime',
    'original_offset': 'integer',
}


@attr.define(frozen=True)
class Event:
    input_datetime: dt.datetime | None = None
    time_zone: str | None = None
    datetime: dt.datetime | None = None
    original_offset: int | None = None


def test_cast_takes_only_permitted():
    changeset = Changeset.cast(
        {},
        {'input_datetime': '2019-01-01T10:00:00', 'time_zone': 'Europe/Berlin'},
        ['input_datetime'],
        TYPES,
    )

    assert changeset.changes == {'input_datetime': datetime(2019, 1, 1, 10)}
    assert changeset.valid


def test_cast_uses_record_types():
    changeset = Changeset.cast(
        Appointment(), {'original_offset': '3600'}, ['original_offset']
    )

    assert changeset.get_change('original_offset') == 3600


@pytest.mark.parametrize(
    'field, value',
    [
        ('input_datetime', 'not a date'),
        ('input_datetime', datetime(2019, 1, 1, tzinfo=UTC)),
        ('input_datetime', 20190101),
        ('time_zone', 3),
        ('datetime', datetime(2019, 1, 1)),
        ('original_offset', True),
        ('original_offset', '1.5'),
    ],
)
def test_cast_errors(field, value):
    changeset = Changeset.cast({}, {field: value}, [field], TYPES)

    assert not changeset.valid
    assert not changeset.changed(field)
    assert changeset.errors == (
        FieldError(field=field, message='is invalid', context={'type': TYPES[field]}),
    )


def test_cast_utc_datetime_normalises():
    changeset = Changeset.cast(
        {},
        {'datetime': datetime(2019, 1, 1, 12, tzinfo=timezone(timedelta(hours=2)))},
        ['datetime'],
        TYPES,
    )

    assert changeset.get_change('datetime') == datetime(2019, 1, 1, 10, tzinfo=UTC)
    assert changeset.get_change('datetime').tzinfo is UTC


def test_empty_string_is_none():
    changeset = Changeset.cast(
        {'time_zone': 'Europe/Berlin'}, {'time_zone': ''}, ['time_zone'], TYPES
    )

    assert changeset.changed('time_zone')
    assert changeset.get_field('time_zone') is None


def test_undeclared_type():
    with pytest.raises(KeyError):
        Changeset.cast({}, {'title': 'dentist'}, ['title'], TYPES)


def test_put_change_skips_stored_value():
    changeset = Changeset(data={'time_zone': 'Europe/Berlin'})

    assert not changeset.put_change('time_zone', 'Europe/Berlin').changed('time_zone')
    changed = changeset.put_change('time_zone', 'Europe/Paris')
    assert changed.get_field('time_zone') == 'Europe/Paris'
    assert not changed.put_change('time_zone', 'Europe/Berlin').changed('time_zone')
    # The original changeset is untouched
    assert changeset.changes == {}


def test_validate_required():
    changeset = Changeset.cast(
        {},
        {'input_datetime': 'nope', 'time_zone': '  '},
        ['input_datetime', 'time_zone'],
        TYPES,
    ).validate_required(['input_datetime', 'time_zone', 'original_offset'])

    assert changeset.errors_on('input_datetime') == ['is invalid']
    assert changeset.errors_on('time_zone') == ["can't be blank"]
    assert changeset.errors_on('original_offset') == ["can't be blank"]
    assert changeset.errors[-1].context == {'validation': 'required'}


def test_apply_action_on_mapping():
    data = {'time_zone': 'Europe/Berlin', 'title': 'dentist'}
    changeset = Changeset(data=data).put_change('time_zone', 'Europe/Paris')

    result = changeset.apply_action('update')

    assert result == {'time_zone': 'Europe/Paris', 'title': 'dentist'}
    assert data['time_zone'] == 'Europe/Berlin'


def test_apply_action_on_attrs_record():
    event = Event(time_zone='Europe/Berlin')

    result = Changeset(data=event).put_change('original_offset', 3600).apply_action(
        'update'
    )

    assert result == Event(time_zone='Europe/Berlin', original_offset=3600)
    assert event.original_offset is None


def test_apply_action_on_mapped_record():
    appointment = Appointment(title='dentist')

    result = Changeset(data=appointment).put_change('time_zone', 'UTC').apply_action(
        'insert'
    )

    assert result is appointment
    assert appointment.time_zone == 'UTC'


def test_apply_action_when_invalid():
    changeset = Changeset(data={}).add_error('time_zone', 'is invalid')

    with pytest.raises(ChangesetInvalid, match='Cannot insert') as exc_info:
        changeset.apply_action('insert')

    assert exc_info.value.changeset is changeset
    assert exc_info.value.action == 'insert'
    assert 'time_zone is invalid' in str(exc_info.value)
