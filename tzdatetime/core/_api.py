from .fields import (
    DEFAULT_FIELDS,
    FIELD_PURPOSES,
    FieldConfigError,
    Fields,
    fields_from_opts,
)
from .periods import (
    PeriodTimeZone,
    complete_offset,
    datetime_from_utc,
    datetime_from_wall,
)
from .reconstruct import (
    NOT_RESOLVED,
    TIME_ZONE_NOT_FOUND,
    DatetimeError,
    Diverged,
    Original,
    Reconstructed,
    original_datetime,
)
from .resolve import (
    CallbackResult,
    TzDatetimeBehaviour,
    apply_datetime,
    handle_datetime,
)
from .service import TzDatetime

__all__ = [
    'DEFAULT_FIELDS',
    'FIELD_PURPOSES',
    'FieldConfigError',
    'Fields',
    'fields_from_opts',
    'PeriodTimeZone',
    'complete_offset',
    'datetime_from_utc',
    'datetime_from_wall',
    'NOT_RESOLVED',
    'TIME_ZONE_NOT_FOUND',
    'DatetimeError',
    'Diverged',
    'Original',
    'Reconstructed',
    'original_datetime',
    'CallbackResult',
    'TzDatetimeBehaviour',
    'apply_datetime',
    'handle_datetime',
    'TzDatetime',
]
