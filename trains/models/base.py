"""Base database model with common functionality."""

from sqlalchemy import DateTime
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import DeclarativeBase


# TIMESTAMP(6) on MariaDB/MySQL keeps microseconds
PreciseTimestamp = DateTime().with_variant(mysql.TIMESTAMP(fsp=6), "mysql", "mariadb")


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass
