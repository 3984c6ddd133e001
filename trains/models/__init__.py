"""Database models for the train system."""

from .base import Base
from .station import Station, City, Platform
from .train import TrainType, Train, TrainPlatform
from .route import ScheduledRoute

# Creation and seeding order; foreign keys only point backwards in this tuple.
MODELS_BY_TABLE = {
    model.__tablename__: model
    for model in (Station, City, Platform, TrainType, Train, TrainPlatform, ScheduledRoute)
}

__all__ = [
    "Base",
    "Station",
    "City",
    "Platform",
    "TrainType",
    "Train",
    "TrainPlatform",
    "ScheduledRoute",
    "MODELS_BY_TABLE",
]
