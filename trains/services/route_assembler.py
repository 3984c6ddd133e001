"""Assemble `Route` aggregates from raw route rows."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy import select

from ..database import Database, DataIntegrityError, translate_errors
from ..models import Train, TrainType
from .platform_resolver import PlatformResolver, PlatformSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Route:
    """One scheduled trip of a train, resolved to its two endpoint platforms."""

    id: int
    train_number: int
    train_type: str
    direction: bool
    departure: PlatformSnapshot
    arrival: PlatformSnapshot

    @property
    def departure_timestamp(self) -> Optional[datetime]:
        return self.departure.timestamp

    @property
    def arrival_timestamp(self) -> Optional[datetime]:
        return self.arrival.timestamp

    def __str__(self) -> str:
        return "\n".join([
            f"Route: {self.id}",
            f"Train: {self.train_type} {self.train_number}",
            f"Departure: {self.departure}",
            f"Arrival: {self.arrival}",
        ]) + "\n"


class RouteAssembler:
    """Builds `Route` snapshots with the help of a `PlatformResolver`."""

    def __init__(
        self,
        db: Database,
        resolver: Optional[PlatformResolver] = None,
        log: Optional[logging.Logger] = None,
    ):
        self._db = db
        self._log = log or logger
        self._resolver = resolver or PlatformResolver(db, log=self._log)

    def train_type(self, train_number: int) -> str:
        """Return the type name of a train."""
        statement = (
            select(TrainType.name)
            .join(Train, Train.train_type_id == TrainType.id)
            .where(Train.number == train_number)
            .limit(1)
        )
        with translate_errors("Failed selecting train-types", self._log):
            with self._db.session() as session:
                name = session.execute(statement).scalar_one_or_none()

        if name is None:
            raise DataIntegrityError(f"Failed selecting train-types: no type for train {train_number}")
        return name

    def build_route(
        self,
        route_id: int,
        departure: datetime,
        arrival: datetime,
        train_number: int,
        direction: bool,
    ) -> Route:
        """
        Resolve both endpoints of a route row.

        The arrival side is the `want_start=True` lookup and the departure side
        the `want_start=False` one.

        Raises:
            DataIntegrityError: If the train type or a platform is missing.
        """
        train_type = self.train_type(train_number)

        self._log.info(
            "Creating route %s for train %s %s in %s direction",
            route_id,
            train_type,
            train_number,
            "forwards" if direction else "reverse",
        )

        arrival_platform = self._resolver.resolve_platform(train_number, direction, True, arrival)
        departure_platform = self._resolver.resolve_platform(train_number, direction, False, departure)

        return Route(
            id=route_id,
            train_number=train_number,
            train_type=train_type,
            direction=bool(direction),
            departure=departure_platform,
            arrival=arrival_platform,
        )
