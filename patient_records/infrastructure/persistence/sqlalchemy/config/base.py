"""
SQLAlchemy base configuration.

This module provides the declarative base for SQLAlchemy models.
Follows SQLAlchemy 2.0 typing patterns.
"""

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase

# Single metadata instance shared by every model so create_all sees them all
metadata = MetaData()


class Base(DeclarativeBase, AsyncAttrs):
    """
    SQLAlchemy 2.0 declarative base with async support.

    Combines DeclarativeBase for proper typing with AsyncAttrs for async
    attribute loading.
    """

    metadata = metadata

    def __repr__(self) -> str:
        attrs = [
            f"{column.key}={getattr(self, column.key, None)!r}"
            for column in self.__table__.columns
        ]
        return f"{self.__class__.__name__}({', '.join(attrs)})"
