"""Tests for database bootstrapping."""

import pytest
from sqlalchemy import func, select, update

from trains.database import DataAccessError
from trains.models import Base, ScheduledRoute, Station
from trains.seed_data import SEED_DATA
from trains.services.bootstrap import EXPECTED_TABLES, SchemaBootstrapper


def _row_counts(db):
    with db.session() as session:
        return {
            table.name: session.execute(select(func.count()).select_from(table)).scalar_one()
            for table in Base.metadata.sorted_tables
        }


def test_expected_tables():
    assert EXPECTED_TABLES == {
        "station",
        "city",
        "platform",
        "traintype",
        "train",
        "train_has_platform",
        "route",
    }


def test_first_run_creates_and_seeds(db):
    report = SchemaBootstrapper(db, "trains").run()

    assert report.database_created is False
    assert report.tables_created is True
    assert report.rows_seeded == sum(len(rows) for rows in SEED_DATA.values())
    assert set(db.table_names()) >= EXPECTED_TABLES
    assert _row_counts(db) == {
        "station": 3,
        "city": 3,
        "platform": 6,
        "traintype": 3,
        "train": 3,
        "train_has_platform": 6,
        "route": 6,
    }


def test_second_run_changes_nothing(seeded_db):
    with seeded_db.session() as session:
        session.execute(update(Station).where(Station.id == 1).values(name="renamed"))
    counts = _row_counts(seeded_db)

    report = SchemaBootstrapper(seeded_db, "trains").run()

    assert report.tables_created is False
    assert report.rows_seeded == 0
    assert _row_counts(seeded_db) == counts
    with seeded_db.session() as session:
        assert session.get(Station, 1).name == "renamed"


def test_missing_table_is_recreated_without_touching_others(seeded_db):
    with seeded_db.session() as session:
        session.execute(update(Station).where(Station.id == 1).values(name="renamed"))
    ScheduledRoute.__table__.drop(seeded_db.engine)

    report = SchemaBootstrapper(seeded_db, "trains").run()

    assert report.tables_created is True
    assert report.rows_seeded == len(SEED_DATA["route"])
    assert _row_counts(seeded_db)["route"] == 6
    with seeded_db.session() as session:
        assert session.get(Station, 1).name == "renamed"


def test_custom_seed_data(db):
    seed = {"station": [{"id": 5, "name": "hbf-graz"}]}

    report = SchemaBootstrapper(db, "trains", seed=seed).run()

    assert report.rows_seeded == 1
    with db.session() as session:
        assert session.get(Station, 5).name == "hbf-graz"
        assert session.execute(select(func.count()).select_from(ScheduledRoute)).scalar_one() == 0


def test_unknown_seed_table_raises(db):
    with pytest.raises(DataAccessError, match="unknown table depot"):
        SchemaBootstrapper(db, "trains", seed={"depot": [{"id": 1}]}).run()


def test_unknown_seed_table_is_rejected_before_inserting(db):
    seed = {"station": [{"id": 5, "name": "hbf-graz"}], "depot": [{"id": 1}]}

    with pytest.raises(DataAccessError, match="unknown table depot"):
        SchemaBootstrapper(db, "trains", seed=seed).run()

    assert _row_counts(db)["station"] == 0


def test_seed_rows_follow_foreign_key_order(db):
    with db.engine.connect() as connection:
        connection.exec_driver_sql("PRAGMA foreign_keys=ON")
    seed = {
        "city": [{"id": 1, "name": "graz", "station_id": 1}],
        "platform": [{"id": 1, "number": "1", "station_id": 1}],
        "station": [{"id": 1, "name": "hbf-graz"}],
    }

    report = SchemaBootstrapper(db, "trains", seed=seed).run()

    assert report.rows_seeded == 3
    counts = _row_counts(db)
    assert counts["station"] == 1
    assert counts["city"] == 1
    assert counts["platform"] == 1


def test_failed_seed_statement_is_wrapped(db):
    seed = {"station": [{"id": 1, "name": None}]}

    with pytest.raises(DataAccessError, match="Failed inserting initial data into station"):
        SchemaBootstrapper(db, "trains", seed=seed).run()


class FakeServerDatabase:
    """Server-style database without the target schema."""

    supports_schemas = True

    def __init__(self, schemas, tables):
        self.schemas = list(schemas)
        self.tables = list(tables)
        self.created = []
        self.used = []

    def schema_names(self):
        return self.schemas

    def create_schema(self, name):
        self.created.append(name)
        self.schemas.append(name)

    def use(self, name):
        self.used.append(name)

    def table_names(self):
        return self.tables


def test_missing_database_is_created():
    fake = FakeServerDatabase(schemas=["information_schema"], tables=EXPECTED_TABLES)

    report = SchemaBootstrapper(fake, "trains").run()

    assert report.database_created is True
    assert report.tables_created is False
    assert fake.created == ["trains"]
    assert fake.used == ["trains"]


def test_existing_database_is_reused():
    fake = FakeServerDatabase(schemas=["information_schema", "trains"], tables=EXPECTED_TABLES)

    report = SchemaBootstrapper(fake, "trains").run()

    assert report.database_created is False
    assert fake.created == []
    assert fake.used == ["trains"]
