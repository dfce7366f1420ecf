"""Venue Reservation Domain Enums"""

from src.service.venue_reservation.domain.enum.entity_state import EntityState
from src.service.venue_reservation.domain.enum.reservation_status import (
    OCCUPYING_STATUSES,
    ReservationStatus,
)
from src.service.venue_reservation.domain.enum.resource_kind import ResourceKind
from src.service.venue_reservation.domain.enum.utilization_status import UtilizationStatus

__all__ = [
    'EntityState',
    'OCCUPYING_STATUSES',
    'ReservationStatus',
    'ResourceKind',
    'UtilizationStatus',
]
