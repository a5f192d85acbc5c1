"""Declarative base classes for ORM models."""

from __future__ import annotations

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base for tables this service owns and migrates."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class ExternalBase(DeclarativeBase):
    """Base for tables owned by other systems; never created or migrated here."""

    metadata = MetaData()
