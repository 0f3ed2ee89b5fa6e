import pytest
from cattrs.errors import ClassValidationError

from tzdatetime.core._api import FieldConfigError, Fields
from tzdatetime.settings._api import (
    TzDatetimeSettings,
    load_settings,
    save_settings,
    settings_from_nt,
    settings_to_nt,
)

SETTINGS_NT = """
tzdatetime:
  debug: true
  time_zone_database: utc_only
  database_url: sqlite:///appointments.db
  fields:
    datetime: starts_at
    original_offset: starts_at_offset
"""


def test_defaults():
    settings = settings_from_nt('')

    assert settings == TzDatetimeSettings()
    assert settings.time_zone_database == 'zoneinfo'
    assert settings.fields == Fields()
    assert settings.database_url is None


def test_from_nestedtext():
    settings = settings_from_nt(SETTINGS_NT)

    assert settings.debug is True
    assert settings.time_zone_database == 'utc_only'
    assert settings.database_url == 'sqlite:///appointments.db'
    assert settings.fields == Fields(
        datetime='starts_at', original_offset='starts_at_offset'
    )


def test_other_sections_are_ignored():
    settings = settings_from_nt('other:\n  debug: true\n')

    assert settings == TzDatetimeSettings()


def test_unknown_database_is_rejected():
    with pytest.raises(ClassValidationError):
        settings_from_nt('tzdatetime:\n  time_zone_database: pytz\n')


def test_bad_field_name_is_rejected():
    with pytest.raises(ClassValidationError) as exc_info:
        settings_from_nt('tzdatetime:\n  fields:\n    time_zone: time zone\n')

    assert exc_info.group_contains(FieldConfigError)


def test_dump_skips_unset_values():
    text = settings_to_nt(TzDatetimeSettings())

    assert text.startswith('tzdatetime:')
    assert 'debug: false' in text
    assert 'database_url' not in text


def test_file_round_trip(tmp_path):
    path = tmp_path / 'settings.nt'
    settings = TzDatetimeSettings(
        debug=True,
        time_zone_database='utc_only',
        fields=Fields(time_zone='zone'),
        database_url='sqlite://',
    )

    save_settings(settings, path)

    assert load_settings(path) == settings
