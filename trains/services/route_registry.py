"""In-memory registry of routes, refreshed from the database."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import select

from ..config import settings
from ..database import Database, DataAccessError, translate_errors
from ..models import ScheduledRoute, Train, TrainType
from .console import Console
from .platform_resolver import PlatformResolver
from .route_assembler import Route, RouteAssembler

logger = logging.getLogger(__name__)

DIRECTION_LETTERS = {"f": True, "b": False}


class RouteRegistry:
    """Maps route ids to `Route` snapshots loaded from storage."""

    def __init__(
        self,
        db: Database,
        assembler: Optional[RouteAssembler] = None,
        resolver: Optional[PlatformResolver] = None,
        timestamp_format: Optional[str] = None,
        log: Optional[logging.Logger] = None,
    ):
        self._db = db
        self._log = log or logger
        self._resolver = resolver or PlatformResolver(db, log=self._log)
        self._assembler = assembler or RouteAssembler(db, resolver=self._resolver, log=self._log)
        self._timestamp_format = timestamp_format or settings.timestamp_format
        self._routes: Dict[int, Route] = {}

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, route_id: object) -> bool:
        return route_id in self._routes

    @property
    def routes(self) -> List[Route]:
        """Loaded routes ordered by id, without touching the database."""
        return [self._routes[route_id] for route_id in sorted(self._routes)]

    def get(self, route_id: int) -> Optional[Route]:
        return self._routes.get(route_id)

    def reload(self) -> List[Route]:
        """
        Replace every loaded route with a fresh copy from the database.

        The previous routes are kept if any row fails to load.
        """
        statement = select(
            ScheduledRoute.id.label("id"),
            ScheduledRoute.departure.label("departure"),
            ScheduledRoute.arrival.label("arrival"),
            ScheduledRoute.train_number.label("train_number"),
            ScheduledRoute.direction.label("direction"),
        ).order_by(ScheduledRoute.id)

        with translate_errors("Failed selecting routes", self._log):
            with self._db.session() as session:
                rows = session.execute(statement).all()

        fresh: Dict[int, Route] = {}
        for row in rows:
            fresh[row.id] = self._assembler.build_route(
                row.id,
                row.departure,
                row.arrival,
                row.train_number,
                bool(row.direction),
            )

        self._routes = fresh
        self._log.info("Loaded %d routes", len(fresh))
        return self.routes

    def list_trains(self) -> Dict[int, str]:
        """Return every train number with its type name."""
        statement = (
            select(Train.number, TrainType.name)
            .join(TrainType, Train.train_type_id == TrainType.id)
            .order_by(Train.number)
        )
        with translate_errors("Failed selecting trains", self._log):
            with self._db.session() as session:
                return {number: type_name for number, type_name in session.execute(statement).all()}

    def add_route(
        self,
        train_number: int,
        direction: bool,
        departure: datetime,
        arrival: datetime,
    ) -> Route:
        """Insert a route row, reload and return the stored route."""
        record = ScheduledRoute(
            train_number=train_number,
            direction=direction,
            departure=departure,
            arrival=arrival,
        )
        with translate_errors(f"Failed inserting route for train {train_number}", self._log):
            with self._db.session() as session:
                session.add(record)
                session.flush()
                route_id = record.id

        self._log.info("Inserted route %s for train %s", route_id, train_number)
        self.reload()

        route = self.get(route_id)
        if route is None:
            raise DataAccessError(f"Route {route_id} was inserted but could not be reloaded")
        return route

    def create_route_interactive(self, console: Console) -> Route:
        """
        Ask for train, direction and times, then store the new route.

        Invalid answers are asked again; only database failures raise.
        """
        train_number = self._prompt_train(console)
        direction = self._prompt_direction(console, train_number)
        departure = self._prompt_timestamp(console, "Departure")
        arrival = self._prompt_timestamp(console, "Arrival", not_before=departure)
        return self.add_route(train_number, direction, departure, arrival)

    def _prompt_train(self, console: Console) -> int:
        trains = self.list_trains()
        console.show("Available trains:")
        for number, type_name in trains.items():
            console.show(f"  {number}: {type_name}")

        while True:
            answer = console.prompt("Train number: ")
            try:
                number = int(answer)
            except ValueError:
                console.show(f"'{answer}' is not a number.")
                continue
            if number in trains:
                return number
            console.show(f"There is no train {number}.")

    def _prompt_direction(self, console: Console, train_number: int) -> bool:
        pair = self._resolver.platform_pair(train_number)
        console.show("Directions:")
        for letter, direction in DIRECTION_LETTERS.items():
            console.show(f"  {letter}: {self._resolver.direction_label(pair, direction)}")

        while True:
            answer = console.prompt("Direction (f/b): ").lower()
            if answer in DIRECTION_LETTERS:
                return DIRECTION_LETTERS[answer]
            console.show("Please enter 'f' or 'b'.")

    def _prompt_timestamp(
        self,
        console: Console,
        label: str,
        not_before: Optional[datetime] = None,
    ) -> datetime:
        example = datetime(2023, 12, 4, 8, 0).strftime(self._timestamp_format)
        while True:
            answer = console.prompt(f"{label} time (e.g. {example}): ", pause=True)
            try:
                value = datetime.strptime(answer, self._timestamp_format)
            except ValueError:
                console.show(f"'{answer}' does not match the format {self._timestamp_format}.")
                continue
            if not_before is not None and value < not_before:
                console.show(f"{label} time must not be before {not_before}.")
                continue
            return value
