"""SQLAlchemy declarative base."""
