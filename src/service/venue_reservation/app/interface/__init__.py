"""Application layer interfaces (ports)"""

from src.service.venue_reservation.app.interface.i_clock import IClock
from src.service.venue_reservation.app.interface.i_occupancy_repo import IOccupancyRepo
from src.service.venue_reservation.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.venue_reservation.app.interface.i_reservation_query_repo import (
    IReservationQueryRepo,
)
from src.service.venue_reservation.app.interface.i_resource_query_repo import IResourceQueryRepo
from src.service.venue_reservation.app.interface.i_user_query_repo import IUserQueryRepo

__all__ = [
    'IClock',
    'IOccupancyRepo',
    'IReservationCommandRepo',
    'IReservationQueryRepo',
    'IResourceQueryRepo',
    'IUserQueryRepo',
]
