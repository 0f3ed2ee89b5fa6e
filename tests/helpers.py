import datetime as dt

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from tzdatetime.changeset._api import Changeset
from tzdatetime.db._api import Base, TzDatetimeMixin
from tzdatetime.tzdb._api import Found, TimeZoneDatabase, ZoneNotFound, ZonePeriod

TEST_ZONE = 'TzDatetime/Test'

TZT = ZonePeriod(utc_offset=3600, std_offset=0, zone_abbr='TZT')
TZST = ZonePeriod(utc_offset=3600, std_offset=3600, zone_abbr='TZST')

PERMITTED = ('input_datetime', 'time_zone')


class Appointment(TzDatetimeMixin, Base):
    __tablename__ = 'appointments'

    title: Mapped[str] = mapped_column(String(200), default='')


class StubDatabase(TimeZoneDatabase):
    """Answers every lookup for one zone with fixed results."""

    def __init__(self, wall=None, utc: ZonePeriod | None = None, zone_id=TEST_ZONE):
        self.wall = wall
        self.utc = utc
        self.zone_id = zone_id
        self.wall_calls: list[tuple[dt.datetime, str]] = []
        self.utc_calls: list[tuple[dt.datetime, str]] = []

    def periods_from_wall(self, naive, zone_id):
        self.wall_calls.append((naive, zone_id))
        if zone_id != self.zone_id:
            return ZoneNotFound(zone_id)
        return self.wall

    def period_from_utc(self, utc, zone_id):
        self.utc_calls.append((utc, zone_id))
        if zone_id != self.zone_id:
            return ZoneNotFound(zone_id)
        return Found(self.utc)


class PickFirst:
    def __init__(self):
        self.calls = []

    def when_ambiguous(self, changeset, dt1, dt2, fields):
        self.calls.append(('ambiguous', dt1, dt2, fields))
        return dt1

    def when_gap(self, changeset, dt1, dt2, fields):
        self.calls.append(('gap', dt1, dt2, fields))
        return dt1


class PickSecond(PickFirst):
    def when_ambiguous(self, changeset, dt1, dt2, fields):
        super().when_ambiguous(changeset, dt1, dt2, fields)
        return dt2

    def when_gap(self, changeset, dt1, dt2, fields):
        super().when_gap(changeset, dt1, dt2, fields)
        return dt2


def cast_appointment(params, appointment=None, required=True) -> Changeset:
    changeset = Changeset.cast(
        appointment if appointment is not None else Appointment(), params, PERMITTED
    )
    if required:
        changeset = changeset.validate_required(PERMITTED)
    return changeset

