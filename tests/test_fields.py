import pytest

from tzdatetime.core._api import (
    DEFAULT_FIELDS,
    FIELD_PURPOSES,
    FieldConfigError,
    Fields,
    fields_from_opts,
)


def test_defaults_name_themselves():
    assert FIELD_PURPOSES == (
        'input_datetime',
        'time_zone',
        'datetime',
        'original_offset',
    )
    for purpose in FIELD_PURPOSES:
        assert getattr(DEFAULT_FIELDS, purpose) == purpose


def test_partial_override():
    fields = fields_from_opts(time_zone='zone', datetime='starts_at')

    assert fields == Fields(
        input_datetime='input_datetime',
        time_zone='zone',
        datetime='starts_at',
        original_offset='original_offset',
    )


def test_unknown_purpose():
    with pytest.raises(FieldConfigError, match='timezone'):
        fields_from_opts(timezone='zone')


@pytest.mark.parametrize('name', ['', 'starts at', '1st', 'class', 42, None])
def test_bad_names(name):
    with pytest.raises(FieldConfigError):
        Fields(datetime=name)


def test_wiring_error_is_a_type_error():
    assert issubclass(FieldConfigError, TypeError)
