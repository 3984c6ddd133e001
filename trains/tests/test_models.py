"""Tests for database models."""

from datetime import date, datetime

import pytest
from sqlalchemy import inspect, select
from sqlalchemy.exc import IntegrityError

from trains.models import (
    Base,
    City,
    Platform,
    ScheduledRoute,
    Station,
    Train,
    TrainPlatform,
    TrainType,
)


@pytest.fixture
def session(db):
    Base.metadata.create_all(db.engine)
    with db.session_factory() as session:
        yield session


def _add_train(session):
    station = Station(id=1, name="hbf-salzburg")
    train_type = TrainType(id=1, name="REX")
    session.add_all([station, train_type])
    session.flush()

    platform = Platform(id=1, number="2", station_id=station.id)
    train = Train(number=1, train_type_id=train_type.id, acquisition_date=date(2020, 9, 4))
    session.add_all([platform, train])
    session.commit()
    return station, platform, train


def test_table_and_column_names(db):
    """Test that the fixed table and column names are used."""
    Base.metadata.create_all(db.engine)
    inspector = inspect(db.engine)

    assert set(inspector.get_table_names()) == {
        "station",
        "city",
        "platform",
        "traintype",
        "train",
        "train_has_platform",
        "route",
    }
    route_columns = {column["name"] for column in inspector.get_columns("route")}
    assert route_columns == {"idroute", "arrival", "departure", "train_nrtrain", "direction"}
    assignment_columns = {column["name"] for column in inspector.get_columns("train_has_platform")}
    assert assignment_columns == {"train_nrtrain", "platform_idplatform", "start"}


def test_create_station_with_city(session):
    """Test creating a station and the city it belongs to."""
    station = Station(name="hbf-wien")
    session.add(station)
    session.flush()

    session.add(City(name="wien", station_id=station.id))
    session.commit()
    session.refresh(station)

    assert station.id is not None
    assert [city.name for city in station.cities] == ["wien"]


def test_train_relationships(session):
    """Test the train type and platform assignment relationships."""
    _, platform, train = _add_train(session)
    session.add(TrainPlatform(train_number=train.number, platform_id=platform.id, is_start=True))
    session.commit()
    session.refresh(train)

    assert train.train_type.name == "REX"
    assert len(train.assignments) == 1
    assert train.assignments[0].platform.number == "2"
    assert train.assignments[0].is_start is True


def test_assignment_primary_key_is_train_and_platform(session):
    """Test that a train can be assigned to a platform only once."""
    _, platform, train = _add_train(session)
    session.add(TrainPlatform(train_number=train.number, platform_id=platform.id, is_start=True))
    session.commit()

    session.expunge_all()
    session.add(TrainPlatform(train_number=train.number, platform_id=platform.id, is_start=False))
    with pytest.raises(IntegrityError):
        session.commit()


def test_route_defaults_and_autoincrement(session):
    """Test that a route gets an id and defaults to the reverse direction."""
    _, _, train = _add_train(session)
    route = ScheduledRoute(
        train_number=train.number,
        departure=datetime(2023, 12, 4, 8, 0),
        arrival=datetime(2023, 12, 4, 9, 30, 0, 556000),
    )
    session.add(route)
    session.commit()

    session.expire_all()
    stored = session.execute(select(ScheduledRoute)).scalar_one()
    assert stored.id is not None
    assert stored.direction is False
    assert stored.arrival == datetime(2023, 12, 4, 9, 30, 0, 556000)
    assert stored.train.number == 1
