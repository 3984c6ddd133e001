"""Resolve which terminus platform a train uses for a given trip direction."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional

from sqlalchemy import select

from ..database import Database, DataIntegrityError, translate_errors
from ..models import City, Platform, Station, TrainPlatform

logger = logging.getLogger(__name__)


def matches_start(want_start: bool, direction: bool) -> bool:
    """Return the `is_start` flag of the assignment matching a request.

    Travelling forwards the start assignment answers `want_start`; in reverse
    the mapping flips.
    """
    return (want_start and direction) or (not want_start and not direction)


@dataclass(frozen=True)
class PlatformSnapshot:
    """Platform, station and city of one route endpoint, captured at load time."""

    platform_number: str
    station_name: str
    city_name: Optional[str]
    timestamp: Optional[datetime] = None

    @property
    def location(self) -> str:
        return f"{self.station_name} ({self.city_name}) platform {self.platform_number}"

    def __str__(self) -> str:
        return (
            f"platform {self.platform_number} from station {self.station_name} "
            f"in {self.city_name} at {self.timestamp}"
        )


class PlatformResolver:
    """Looks up the departure/arrival platform of a train."""

    def __init__(self, db: Database, log: Optional[logging.Logger] = None):
        self._db = db
        self._log = log or logger

    @staticmethod
    def _platform_query(train_number: int):
        return (
            select(
                TrainPlatform.is_start.label("is_start"),
                Platform.number.label("number"),
                Station.name.label("station"),
                City.name.label("city"),
            )
            .select_from(TrainPlatform)
            .join(Platform, TrainPlatform.platform_id == Platform.id)
            .join(Station, Platform.station_id == Station.id)
            .outerjoin(City, City.station_id == Station.id)
            .where(TrainPlatform.train_number == train_number)
        )

    def resolve_platform(
        self,
        train_number: int,
        direction: bool,
        want_start: bool,
        timestamp: Optional[datetime],
    ) -> PlatformSnapshot:
        """
        Return the platform a train uses at one end of a route.

        Args:
            train_number: Number of an existing train.
            direction: True for a forwards trip.
            want_start: True for the start-side lookup, see `matches_start`.
            timestamp: Instant attached to the snapshot as-is.

        Raises:
            DataIntegrityError: If the train has no matching platform assignment.
        """
        self._log.info(
            "Finding %s platform for train: %s",
            "starting" if want_start else "ending",
            train_number,
        )
        is_start = matches_start(want_start, direction)

        statement = (
            self._platform_query(train_number)
            .where(TrainPlatform.is_start == is_start)
            .limit(1)
        )
        with translate_errors(f"Failed selecting platform for train {train_number}", self._log):
            with self._db.session() as session:
                row = session.execute(statement).first()

        if row is None:
            raise DataIntegrityError(
                f"Train {train_number} has no platform assignment with start={is_start}"
            )

        return PlatformSnapshot(
            platform_number=row.number,
            station_name=row.station,
            city_name=row.city,
            timestamp=timestamp,
        )

    def platform_pair(self, train_number: int) -> Dict[bool, PlatformSnapshot]:
        """Return both termini of a train keyed by their `is_start` flag."""
        with translate_errors(f"Failed selecting platforms for train {train_number}", self._log):
            with self._db.session() as session:
                rows = session.execute(self._platform_query(train_number)).all()

        pair: Dict[bool, PlatformSnapshot] = {}
        for row in rows:
            pair.setdefault(
                bool(row.is_start),
                PlatformSnapshot(
                    platform_number=row.number,
                    station_name=row.station,
                    city_name=row.city,
                ),
            )

        if set(pair) != {True, False}:
            raise DataIntegrityError(
                f"Train {train_number} needs one start and one end platform, found {len(rows)} assignments"
            )
        return pair

    @staticmethod
    def direction_label(pair: Dict[bool, PlatformSnapshot], direction: bool) -> str:
        """Describe a trip as `<departure-side> --> <arrival-side>`.

        Sides are paired the same way `RouteAssembler.build_route` pairs them.
        """
        departure = pair[matches_start(False, direction)]
        arrival = pair[matches_start(True, direction)]
        return f"{departure.location} --> {arrival.location}"
