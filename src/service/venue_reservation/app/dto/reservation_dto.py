"""Reservation read-model DTOs handed to the driving adapters."""

from datetime import datetime
from typing import List, Optional

import attrs

from src.service.venue_reservation.domain.entity.reservation_entity import Reservation
from src.service.venue_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.venue_reservation.domain.value_object.resource_ref import ResourceRef


@attrs.define(frozen=True)
class ConflictProjection:
    """A reservation occupying a resource, stripped down to what a seat map needs"""

    reservation_id: int
    resource: ResourceRef
    start_schedule: datetime
    end_schedule: datetime
    status: ReservationStatus

    @classmethod
    def from_reservation(cls, reservation: Reservation) -> 'ConflictProjection':
        return cls(
            reservation_id=reservation.id or 0,
            resource=reservation.resource,
            start_schedule=reservation.start_schedule,
            end_schedule=reservation.end_schedule,
            status=reservation.status,
        )


@attrs.define(frozen=True)
class ReservationSummary:
    reservation_id: int
    resource: ResourceRef
    start_schedule: datetime
    end_schedule: datetime
    status: ReservationStatus
    created_at: Optional[datetime] = None

    @classmethod
    def from_reservation(cls, reservation: Reservation) -> 'ReservationSummary':
        return cls(
            reservation_id=reservation.id or 0,
            resource=reservation.resource,
            start_schedule=reservation.start_schedule,
            end_schedule=reservation.end_schedule,
            status=reservation.status,
            created_at=reservation.created_at,
        )


@attrs.define(frozen=True)
class ReservationSlice:
    """One page of results plus whether another page follows"""

    items: List[ReservationSummary]
    page: int
    size: int
    has_next: bool

    @property
    def is_first(self) -> bool:
        return self.page == 0

    @property
    def is_last(self) -> bool:
        return not self.has_next
