"""Station models: stations, the cities they serve and their platforms."""

from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import List, TYPE_CHECKING

from .base import Base

if TYPE_CHECKING:
    from .train import TrainPlatform


class Station(Base):
    """Represents a railway station."""

    __tablename__ = "station"

    id: Mapped[int] = mapped_column("idstation", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(45), nullable=False)

    # Relationships
    cities: Mapped[List["City"]] = relationship("City", back_populates="station")
    platforms: Mapped[List["Platform"]] = relationship("Platform", back_populates="station")

    def __repr__(self) -> str:
        return f"<Station(id={self.id}, name={self.name})>"


class City(Base):
    """City a station is located in."""

    __tablename__ = "city"

    id: Mapped[int] = mapped_column("idcity", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(45), nullable=False)

    station_id: Mapped[int] = mapped_column(
        "station_idstation",
        Integer,
        ForeignKey("station.idstation", name="fk_city_station1"),
        nullable=False,
        index=True
    )

    station: Mapped["Station"] = relationship("Station", back_populates="cities")

    def __repr__(self) -> str:
        return f"<City(id={self.id}, name={self.name}, station_id={self.station_id})>"


class Platform(Base):
    """A numbered platform belonging to exactly one station."""

    __tablename__ = "platform"

    id: Mapped[int] = mapped_column("idplatform", Integer, primary_key=True, autoincrement=True)
    number: Mapped[str] = mapped_column("nr", String(45), nullable=False)

    station_id: Mapped[int] = mapped_column(
        "station_idstation",
        Integer,
        ForeignKey("station.idstation", name="fk_platform_station1"),
        nullable=False,
        index=True
    )

    # Relationships
    station: Mapped["Station"] = relationship("Station", back_populates="platforms")
    assignments: Mapped[List["TrainPlatform"]] = relationship("TrainPlatform", back_populates="platform")

    def __repr__(self) -> str:
        return f"<Platform(id={self.id}, number={self.number}, station_id={self.station_id})>"
