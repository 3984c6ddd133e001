"""Database connection and session management."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy import Table, create_engine, inspect, text
from sqlalchemy.engine import Engine, URL, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool
from sqlalchemy.schema import CreateSchema


logger = logging.getLogger(__name__)


class DataAccessError(Exception):
    """Raised when a statement against the train database fails."""


class DataIntegrityError(DataAccessError):
    """Raised when an expected row is missing from the train database."""


@contextmanager
def translate_errors(action: str, log: Optional[logging.Logger] = None) -> Iterator[None]:
    """Wrap SQLAlchemy failures into a `DataAccessError` prefixed with `action`."""
    try:
        yield
    except SQLAlchemyError as exc:
        message = f"{action}: {exc}"
        (log or logger).error(message)
        raise DataAccessError(message) from exc


def _is_memory_sqlite(url: URL) -> bool:
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


class Database:
    """Connection to the relational store holding the train model."""

    def __init__(self, url: str, echo: bool = False, log: Optional[logging.Logger] = None):
        self._log = log or logger
        self._echo = echo
        self.url = make_url(url)

        self._log.info("Connecting to database with url: %s", self.url.render_as_string(hide_password=True))
        with translate_errors("Failed connecting to database", self._log):
            self.engine = self._create_engine(self.url)
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))

        self.session_factory = self._create_session_factory()

    def _create_engine(self, url: URL) -> Engine:
        if _is_memory_sqlite(url):
            # Every session must see the same in-memory database
            return create_engine(
                url,
                echo=self._echo,
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )
        return create_engine(url, echo=self._echo, pool_pre_ping=True)

    def _create_session_factory(self) -> sessionmaker:
        return sessionmaker(
            self.engine,
            class_=Session,
            expire_on_commit=False,
            autoflush=False,
        )

    @property
    def dialect_name(self) -> str:
        return self.engine.dialect.name

    @property
    def supports_schemas(self) -> bool:
        """SQLite treats the connected file as the database."""
        return self.dialect_name != "sqlite"

    def schema_names(self) -> List[str]:
        """Return the databases visible in the system catalog."""
        with translate_errors("Failed listing databases", self._log):
            return inspect(self.engine).get_schema_names()

    def create_schema(self, name: str) -> None:
        """Create the database `name`."""
        with translate_errors(f"Failed creating database {name}", self._log):
            with self.engine.begin() as conn:
                conn.execute(CreateSchema(name, if_not_exists=True))

    def use(self, name: str) -> None:
        """Bind all further statements to the database `name`."""
        if not self.supports_schemas or self.url.database == name:
            return

        self._log.debug("Switching to database %s", name)
        with translate_errors(f"Failed to use {name}", self._log):
            engine = self._create_engine(self.url.set(database=name))
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))

        self.engine.dispose()
        self.engine = engine
        self.url = engine.url
        self.session_factory = self._create_session_factory()

    def table_names(self) -> List[str]:
        """Return the tables present in the current database."""
        with translate_errors("Failed listing tables", self._log):
            return inspect(self.engine).get_table_names()

    def create_table(self, table: Table) -> None:
        """Create `table` unless it already exists."""
        with translate_errors(f"Failed creating table {table.name}", self._log):
            table.create(self.engine, checkfirst=True)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session that commits on success and rolls back on failure."""
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self) -> None:
        """Close every pooled connection."""
        self._log.info("Disconnecting from database")
        self.engine.dispose()
