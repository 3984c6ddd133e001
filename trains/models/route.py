"""Scheduled route rows: one trip of a train in a given direction."""

from sqlalchemy import Integer, Boolean, ForeignKey, false, func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import datetime
from typing import TYPE_CHECKING

from .base import Base, PreciseTimestamp

if TYPE_CHECKING:
    from .train import Train


class ScheduledRoute(Base):
    """Persisted route row; see `trains.services.route_assembler.Route` for the loaded form."""

    __tablename__ = "route"

    id: Mapped[int] = mapped_column("idroute", Integer, primary_key=True, autoincrement=True)

    arrival: Mapped[datetime] = mapped_column(
        PreciseTimestamp,
        nullable=False,
        server_default=func.now()
    )

    departure: Mapped[datetime] = mapped_column(
        PreciseTimestamp,
        nullable=False,
        server_default=func.now()
    )

    train_number: Mapped[int] = mapped_column(
        "train_nrtrain",
        Integer,
        ForeignKey("train.nrtrain", name="fk_route_train1"),
        nullable=False,
        index=True
    )

    direction: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false()
    )

    train: Mapped["Train"] = relationship("Train", back_populates="routes")

    def __repr__(self) -> str:
        return (
            f"<ScheduledRoute(id={self.id}, train_number={self.train_number}, "
            f"direction={self.direction}, departure={self.departure}, arrival={self.arrival})>"
        )
