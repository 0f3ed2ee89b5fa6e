import logging
import typing as T
from pathlib import Path

import attr

from tzdatetime.core.fields import Fields
from tzdatetime.util.nestedtext import (
    config_to_file,
    config_to_nt,
    sco_from_file,
    sco_from_nt,
)

log = logging.getLogger(__name__)

TIME_ZONE_DATABASES = ('zoneinfo', 'utc_only')


@attr.define(frozen=True)
class TzDatetimeSettings:
    __settings_key__ = 'tzdatetime'

    debug: bool = attr.ib(default=False)
    time_zone_database: T.Literal['zoneinfo', 'utc_only'] = attr.ib(
        default='zoneinfo', validator=attr.validators.in_(TIME_ZONE_DATABASES)
    )
    """
    Which database resolves zone identifiers.
    - zoneinfo
        IANA data through the standard library (or the tzdata package).
    - utc_only
        Only Etc/UTC. A warning is logged when the app starts with this.
    """
    fields: Fields = attr.ib(factory=Fields)
    """
    Default field names used by the TzDatetime service.
    """
    database_url: str | None = attr.ib(default=None)
    """
    SQLAlchemy URL for Db. In-memory SQLite when not set.
    """


def settings_from_nt(nestedtext: str) -> TzDatetimeSettings:
    return sco_from_nt(
        nestedtext, TzDatetimeSettings, TzDatetimeSettings.__settings_key__
    )


def load_settings(filepath: str | Path) -> TzDatetimeSettings:
    log.debug(f'Loading settings from {filepath}')
    return sco_from_file(
        filepath, TzDatetimeSettings, TzDatetimeSettings.__settings_key__
    )


def settings_to_nt(settings: TzDatetimeSettings) -> str:
    return config_to_nt(settings, TzDatetimeSettings.__settings_key__)


def save_settings(settings: TzDatetimeSettings, filepath: str | Path) -> None:
    config_to_file(settings, filepath, TzDatetimeSettings.__settings_key__)
