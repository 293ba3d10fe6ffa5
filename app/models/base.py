"""SQLAlchemy declarative Base shared by the user and finance tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base; Base.metadata.create_all builds the whole schema."""
