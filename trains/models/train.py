"""Train models: rolling-stock types, trains and their terminus platforms."""

from datetime import date
from sqlalchemy import String, Integer, Boolean, Date, ForeignKey, false
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import List, TYPE_CHECKING

from .base import Base

if TYPE_CHECKING:
    from .route import ScheduledRoute
    from .station import Platform


class TrainType(Base):
    """Rolling-stock category (ICE, S-Bahn, REX, ...)."""

    __tablename__ = "traintype"

    id: Mapped[int] = mapped_column("idtraintype", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(45), nullable=False)

    trains: Mapped[List["Train"]] = relationship("Train", back_populates="train_type")

    def __repr__(self) -> str:
        return f"<TrainType(id={self.id}, name={self.name})>"


class Train(Base):
    """A single train identified by its number."""

    __tablename__ = "train"

    number: Mapped[int] = mapped_column("nrtrain", Integer, primary_key=True, autoincrement=True)

    train_type_id: Mapped[int] = mapped_column(
        "traintype_idtraintype",
        Integer,
        ForeignKey("traintype.idtraintype", name="fk_train_traintype"),
        nullable=False,
        index=True
    )

    acquisition_date: Mapped[date] = mapped_column("acquisition", Date, nullable=False)

    # Relationships
    train_type: Mapped["TrainType"] = relationship("TrainType", back_populates="trains")
    assignments: Mapped[List["TrainPlatform"]] = relationship("TrainPlatform", back_populates="train")
    routes: Mapped[List["ScheduledRoute"]] = relationship("ScheduledRoute", back_populates="train")

    def __repr__(self) -> str:
        return f"<Train(number={self.number}, train_type_id={self.train_type_id})>"


class TrainPlatform(Base):
    """Association between a train and one of the two termini of its line."""

    __tablename__ = "train_has_platform"

    train_number: Mapped[int] = mapped_column(
        "train_nrtrain",
        Integer,
        ForeignKey("train.nrtrain", name="fk_train_has_platform_train1"),
        primary_key=True,
        index=True
    )

    platform_id: Mapped[int] = mapped_column(
        "platform_idplatform",
        Integer,
        ForeignKey("platform.idplatform", name="fk_train_has_platform_platform1"),
        primary_key=True,
        index=True
    )

    is_start: Mapped[bool] = mapped_column(
        "start",
        Boolean,
        nullable=False,
        default=False,
        server_default=false()
    )

    # Relationships
    train: Mapped["Train"] = relationship("Train", back_populates="assignments")
    platform: Mapped["Platform"] = relationship("Platform", back_populates="assignments")

    def __repr__(self) -> str:
        return (
            f"<TrainPlatform(train_number={self.train_number}, "
            f"platform_id={self.platform_id}, is_start={self.is_start})>"
        )
