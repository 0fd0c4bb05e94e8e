"""
Cross-database compatible GUID/UUID SQLAlchemy type.

Uses PostgreSQL's native UUID column when available and a CHAR(36)
string column everywhere else (SQLite in development and tests).
"""

import uuid

from sqlalchemy import types
from sqlalchemy.dialects.postgresql import UUID as PostgresUUID


class GUID(types.TypeDecorator):
    """Platform-independent GUID type."""

    impl = types.CHAR
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(PostgresUUID(as_uuid=True))
        return dialect.type_descriptor(types.CHAR(36))

    def process_bind_param(self, value, dialect):
        """
        Normalize the bound value to a UUID (PostgreSQL) or its string form.

        Raises:
            ValueError: If ``value`` is not a UUID or a UUID string
        """
        if value is None:
            return value
        if not isinstance(value, uuid.UUID):
            try:
                value = uuid.UUID(str(value))
            except ValueError as e:
                raise ValueError(f"Invalid UUID: {value}") from e
        if dialect.name == "postgresql":
            return value
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None or isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(value)
