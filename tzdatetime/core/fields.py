"""
Mapping of field purposes to the actual field names on a record.
"""

import keyword

import attr


class FieldConfigError(TypeError):
    """A field mapping that can't name fields on a record. Wiring bug."""


def _check_identifier(instance, attribute, value):
    if (
        not isinstance(value, str)
        or not value.isidentifier()
        or keyword.iskeyword(value)
    ):
        raise FieldConfigError(
            f'Field name for "{attribute.name}" must be an identifier, got {value!r}'
        )


@attr.define(frozen=True)
class Fields:
    input_datetime: str = attr.ib(default='input_datetime', validator=_check_identifier)
    time_zone: str = attr.ib(default='time_zone', validator=_check_identifier)
    datetime: str = attr.ib(default='datetime', validator=_check_identifier)
    original_offset: str = attr.ib(
        default='original_offset', validator=_check_identifier
    )


FIELD_PURPOSES = tuple(a.name for a in attr.fields(Fields))

DEFAULT_FIELDS = Fields()


def fields_from_opts(**opts: str) -> Fields:
    """Build a mapping, overriding the default name of any purpose given."""
    unknown = sorted(set(opts) - set(FIELD_PURPOSES))
    if unknown:
        raise FieldConfigError(f'Unknown field purposes: {", ".join(unknown)}')
    return Fields(**opts)
