import pytest

from tests.helpers import Appointment  # noqa: F401  registers the table
from tzdatetime.db._api import Db
from tzdatetime.settings._api import TzDatetimeSettings


@pytest.fixture
def db():
    database = Db(TzDatetimeSettings())
    yield database
    database.teardown()
