"""UTC DateTime type for SQLAlchemy that ensures timezone-aware datetime objects."""

from datetime import UTC

from sqlalchemy import DateTime, TypeDecorator


class UTCDateTime(TypeDecorator):
    """Platform-independent UTC datetime type.

    Stores datetime as naive UTC in the database and returns timezone-aware
    datetime objects with UTC timezone when loaded from the database.

    Aware values in any zone are converted first, so a resolved datetime
    carrying its period's offset is stored as the same instant.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        """Convert datetime to UTC before storing in database."""
        if value is not None:
            if value.tzinfo is None:
                # Assume naive datetime is already in UTC
                return value
            else:
                return value.astimezone(UTC).replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        """Convert datetime from database to UTC timezone-aware datetime."""
        if value is not None:
            if value.tzinfo is None:
                # SQLite stores as naive datetime, but we know it's UTC
                return value.replace(tzinfo=UTC)
            return value.astimezone(UTC)
        return value
