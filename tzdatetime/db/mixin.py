"""
Columns for storing a datetime together with the zone it was entered in.
"""

import datetime as dt
import typing as T

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column


class TzDatetimeMixin:
    """
    Adds the default tzdatetime fields to a mapped class.

    `input_datetime` is virtual: a plain attribute, never a column. The
    resolved instant and the offset used are stored; the wall time is
    recovered later with `original_datetime`.
    """

    changeset_types: T.ClassVar[dict[str, str]] = {
        'input_datetime': 'naive_datetime',
        'time_zone': 'string',
        'datetime': 'utc_datetime',
        'original_offset': 'integer',
    }

    input_datetime = None

    time_zone: Mapped[str | None] = mapped_column(String(64), default=None)
    datetime: Mapped[dt.datetime | None] = mapped_column(default=None)
    original_offset: Mapped[int | None] = mapped_column(default=None)
