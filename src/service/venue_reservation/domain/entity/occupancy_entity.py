"""
Occupancy (utilization) of a resource.

An occupancy is the actual use of a seat. It originates either from a
reservation or from a walk-in; ``source`` is a tagged variant holding exactly
one of the two, while schedule and status live on the occupancy itself.
"""

from datetime import datetime
from typing import Any, Optional, Union

import attrs

from src.platform.exception.exceptions import (
    InvalidReservationWindowError,
    InvalidUtilizationStatusError,
)
from src.platform.logging.loguru_io import Logger
from src.service.venue_reservation.domain.conflict_window import day_limit
from src.service.venue_reservation.domain.entity.reservation_entity import Reservation
from src.service.venue_reservation.domain.enum.entity_state import EntityState
from src.service.venue_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.venue_reservation.domain.enum.utilization_status import UtilizationStatus
from src.service.venue_reservation.domain.value_object.resource_ref import ResourceRef


@attrs.define(frozen=True)
class ReservationSource:
    reservation_id: int


@attrs.define(frozen=True)
class WalkInSource:
    walk_in_id: int


OccupancySource = Union[ReservationSource, WalkInSource]


@attrs.define
class WalkIn:
    """Seat taken on the spot, without a prior reservation"""

    user_id: int
    resource: ResourceRef
    start_schedule: datetime = attrs.field()
    end_schedule: datetime = attrs.field()
    state: EntityState = EntityState.ACTIVE
    id: Optional[int] = None

    @end_schedule.validator
    def _check_window(self, attribute: 'attrs.Attribute[Any]', value: datetime) -> None:
        if not self.start_schedule < value:
            raise InvalidReservationWindowError('end_schedule must be after the walk-in starts')

    @classmethod
    @Logger.io
    def start_now(
        cls, *, user_id: int, resource: ResourceRef, end_schedule: datetime, now: datetime
    ) -> 'WalkIn':
        """A walk-in starts immediately and ends by midnight of the same day."""
        if end_schedule > day_limit(now):
            raise InvalidReservationWindowError('A walk-in must end on the day it starts')
        return cls(user_id=user_id, resource=resource, start_schedule=now, end_schedule=end_schedule)


@attrs.define
class Occupancy:
    source: OccupancySource = attrs.field(
        validator=attrs.validators.instance_of((ReservationSource, WalkInSource))
    )
    resource: ResourceRef
    start_schedule: datetime
    end_schedule: datetime
    status: UtilizationStatus = UtilizationStatus.CHECK_IN
    state: EntityState = EntityState.ACTIVE
    id: Optional[int] = None

    @property
    def is_reservation_backed(self) -> bool:
        return isinstance(self.source, ReservationSource)

    @property
    def is_walk_in_backed(self) -> bool:
        return isinstance(self.source, WalkInSource)

    @classmethod
    @Logger.io
    def check_in_from_reservation(cls, reservation: Reservation) -> 'Occupancy':
        if reservation.id is None:
            raise ValueError('Reservation must be persisted before check-in')
        if reservation.status != ReservationStatus.APPROVED:
            raise InvalidUtilizationStatusError('Only approved reservations can be checked in')
        return cls(
            source=ReservationSource(reservation_id=reservation.id),
            resource=reservation.resource,
            start_schedule=reservation.start_schedule,
            end_schedule=reservation.end_schedule,
            status=UtilizationStatus.CHECK_IN,
        )

    @classmethod
    def check_in_from_walk_in(cls, walk_in: WalkIn) -> 'Occupancy':
        if walk_in.id is None:
            raise ValueError('Walk-in must be persisted before check-in')
        return cls(
            source=WalkInSource(walk_in_id=walk_in.id),
            resource=walk_in.resource,
            start_schedule=walk_in.start_schedule,
            end_schedule=walk_in.end_schedule,
            status=UtilizationStatus.CHECK_IN,
        )

    @Logger.io
    def force_check_out(
        self,
        *,
        now: datetime,
        status: UtilizationStatus = UtilizationStatus.FORCED_CHECK_OUT,
    ) -> 'Occupancy':
        """End the occupancy immediately: set the status and stamp end_schedule with now."""
        if self.status != UtilizationStatus.CHECK_IN:
            raise InvalidUtilizationStatusError('Only checked-in utilizations can be checked out')
        return attrs.evolve(self, status=status, end_schedule=now)
