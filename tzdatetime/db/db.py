import logging
import sqlite3
import traceback
from datetime import datetime
from weakref import WeakKeyDictionary

from sqlalchemy import MetaData, create_engine, event
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, registry

from tzdatetime.db.custom_types._api import UTCDateTime
from tzdatetime.settings._api import TzDatetimeSettings

log = logging.getLogger(__name__)

naming_convention = {
    'ix': 'ix_%(column_0_label)s',
    'uq': 'uq_%(table_name)s_%(column_0_name)s',
    'ck': 'ck_%(table_name)s_%(constraint_name)s',
    'fk': 'fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s',
    'pk': 'pk_%(table_name)s',
}

metadata = MetaData(naming_convention=naming_convention)

reg = registry(
    metadata=metadata,
    type_annotation_map={
        datetime: UTCDateTime,
    },
)


class BaseNoId(DeclarativeBase):
    registry = reg


class Base(BaseNoId):
    __abstract__ = True

    id: Mapped[int] = mapped_column(primary_key=True, sort_order=-1)


ECHO = False  # True

IN_MEMORY_URL = 'sqlite://'


class Db:
    def __init__(
        self,
        settings: TzDatetimeSettings,
        engine_path: str | None = None,
        echo: bool | None = None,
    ):
        self.settings = settings
        self.engine_path = engine_path
        self.echo = echo
        if self.engine_path is None:
            self.engine_path = settings.database_url or IN_MEMORY_URL
        if echo is None:
            self.echo = ECHO

        self.engine = create_engine(self.engine_path, echo=self.echo)
        self.is_sqlite = self.engine.dialect.name == 'sqlite'

        if settings.debug:
            # Keep track of the traceback when a session is created
            # This is useful for debugging session leaks
            self._session_tracebacks: WeakKeyDictionary[
                Session, traceback.StackSummary
            ] = WeakKeyDictionary()

        self.total_connections = 0

        @event.listens_for(self.engine, 'connect')
        def _on_connect(dbapi_conn, conn_record):
            self.total_connections += 1
            if self.is_sqlite:
                # enable foreign key enforcement, needs to be done on each connection
                cursor = dbapi_conn.cursor()
                cursor.execute('PRAGMA foreign_keys=ON')
                cursor.close()

        @event.listens_for(self.engine, 'close')
        def _on_close(dbapi_conn, conn_record):
            self.total_connections -= 1

        if self.is_sqlite:
            sqlite3.enable_callback_tracebacks(True)
            with self.engine.connect() as conn:
                cursor = conn.connection.cursor()
                cursor.execute('PRAGMA encoding="UTF-8"')
                cursor.execute('PRAGMA synchronous=full')
                cursor.execute('PRAGMA temp_store=memory')
                cursor.execute('PRAGMA journal_mode=WAL')
                cursor.execute('PRAGMA busy_timeout=5000')  # 5 seconds
                cursor.close()

        reg.metadata.create_all(self.engine)

    def session(self, *, expire_on_commit=False, **kwargs) -> Session:
        sess = Session(self.engine, expire_on_commit=expire_on_commit, **kwargs)
        if self.settings.debug:
            # Keep a weak reference to the session
            self._session_tracebacks[sess] = traceback.extract_stack()
        return sess

    def teardown(self):
        """Cleans up the database connection."""
        log.debug('Closing database connection.')

        if self.engine:
            log.debug('Disposing engine to close all connections...')
            self.engine.dispose()
            self.engine = None

        if self.total_connections > 0:
            warning = f'There are still {self.total_connections} open connections at teardown! '
            warning += 'This may indicate a session leak. '
            if not self.settings.debug:
                warning += 'Enable debug mode to see tracebacks of when sessions were allocated.'
            else:
                warning += 'Check the session tracebacks for more information.'
            log.warning(warning)
            if self.settings.debug:
                for sess, tb in self._session_tracebacks.items():
                    if not sess.is_active:
                        continue
                    log.warning(
                        f'Session {sess} created at:\n{"".join(traceback.format_list(tb))}'
                    )

        log.debug('Database teardown complete')
