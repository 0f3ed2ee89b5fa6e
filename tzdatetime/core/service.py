import typing as T

from tzdatetime.changeset._api import Changeset
from tzdatetime.core.fields import Fields
from tzdatetime.core.reconstruct import Reconstructed, original_datetime
from tzdatetime.core.resolve import TzDatetimeBehaviour, handle_datetime
from tzdatetime.injector._api import app_scope, inject
from tzdatetime.settings._api import TzDatetimeSettings
from tzdatetime.tzdb._api import TimeZoneDatabase


@app_scope
class TzDatetime:
    """handle_datetime and original_datetime bound to the app's time zone
    database and configured field names."""

    @inject
    def __init__(self, tzdb: TimeZoneDatabase, settings: TzDatetimeSettings):
        self.tzdb = tzdb
        self.fields = settings.fields

    def handle_datetime(
        self,
        changeset: Changeset,
        behaviour: TzDatetimeBehaviour,
        fields: Fields | None = None,
    ) -> Changeset:
        return handle_datetime(
            changeset, behaviour, tzdb=self.tzdb, fields=fields or self.fields
        )

    def original_datetime(
        self, record: T.Any, fields: Fields | None = None
    ) -> Reconstructed:
        return original_datetime(record, tzdb=self.tzdb, fields=fields or self.fields)
