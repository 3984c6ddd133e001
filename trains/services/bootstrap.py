"""Idempotent creation and seeding of the train database."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import inspect

from ..database import Database, DataAccessError, translate_errors
from ..models import Base, MODELS_BY_TABLE
from ..seed_data import SEED_DATA, SeedData

logger = logging.getLogger(__name__)

EXPECTED_TABLES = frozenset(MODELS_BY_TABLE)


@dataclass(frozen=True)
class BootstrapReport:
    """What a bootstrap run changed."""

    database_created: bool
    tables_created: bool
    rows_seeded: int


class SchemaBootstrapper:
    """Make sure the train database, its seven tables and reference rows exist.

    This is not a migration system: tables are only (re)created and seeded when
    the number of expected tables present differs from seven, and existing
    tables or rows are never dropped or altered.
    """

    def __init__(
        self,
        db: Database,
        database_name: str,
        seed: Optional[SeedData] = None,
        log: Optional[logging.Logger] = None,
    ):
        self._db = db
        self._database_name = database_name
        self._seed = SEED_DATA if seed is None else seed
        self._log = log or logger

    def run(self) -> BootstrapReport:
        """Create whatever is missing and report what was done."""
        self._log.info("Initializing train system in database %s", self._database_name)

        database_created = self.ensure_database()
        self._db.use(self._database_name)

        present = self.count_expected_tables()
        if present == len(EXPECTED_TABLES):
            self._log.info("All %d tables present, skipping table creation", present)
            return BootstrapReport(database_created, tables_created=False, rows_seeded=0)

        self._log.info("Found %d of %d tables, creating tables", present, len(EXPECTED_TABLES))
        self.create_tables()
        rows_seeded = self.insert_initial_data()
        return BootstrapReport(database_created, tables_created=True, rows_seeded=rows_seeded)

    def ensure_database(self) -> bool:
        """Create the target database if the catalog does not list it."""
        if not self._db.supports_schemas:
            return False
        if self._database_name in self._db.schema_names():
            return False

        self._log.info("Creating database %s", self._database_name)
        self._db.create_schema(self._database_name)
        return True

    def count_expected_tables(self) -> int:
        return len(EXPECTED_TABLES.intersection(self._db.table_names()))

    def create_tables(self) -> None:
        for table in Base.metadata.sorted_tables:
            self._db.create_table(table)

    def insert_initial_data(self) -> int:
        """Insert every seed row whose primary key is not taken yet."""
        unknown = sorted(set(self._seed) - set(MODELS_BY_TABLE))
        if unknown:
            raise DataAccessError(f"Failed inserting seed data: unknown table {', '.join(unknown)}")

        inserted = 0
        # Parents before children, whatever order the seed mapping uses
        for table_name, model in MODELS_BY_TABLE.items():
            rows = self._seed.get(table_name)
            if not rows:
                continue

            mapper = inspect(model)
            key_attrs = [mapper.get_property_by_column(column).key for column in mapper.primary_key]

            with translate_errors(f"Failed inserting initial data into {table_name}", self._log):
                with self._db.session() as session:
                    for row in rows:
                        identity = tuple(row[attr] for attr in key_attrs)
                        if session.get(model, identity) is not None:
                            continue
                        session.add(model(**row))
                        inserted += 1
                    session.flush()

            self._log.debug("Seeded table %s", table_name)

        self._log.info("Inserted %d initial rows", inserted)
        return inserted
