"""Application layer DTOs"""

from src.service.venue_reservation.app.dto.reservation_dto import (
    ConflictProjection,
    ReservationSlice,
    ReservationSummary,
)

__all__ = ['ConflictProjection', 'ReservationSlice', 'ReservationSummary']
