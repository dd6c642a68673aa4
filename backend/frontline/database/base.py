"""Declarative base shared by all Frontline tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
