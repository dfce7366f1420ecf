"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.venue_reservation.driven_adapter.model.occupancy_model import (
    OccupancyModel,
    WalkInModel,
)
from src.service.venue_reservation.driven_adapter.model.reservation_model import ReservationModel
from src.service.venue_reservation.driven_adapter.model.resource_model import ChairModel, SpaceModel
from src.service.venue_reservation.driven_adapter.model.user_model import UserModel

__all__ = [
    'ChairModel',
    'OccupancyModel',
    'ReservationModel',
    'SpaceModel',
    'UserModel',
    'WalkInModel',
]
