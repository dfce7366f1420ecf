from datetime import datetime
from typing import Any, Optional

import attrs

from src.platform.exception.exceptions import InvalidReservationWindowError
from src.platform.logging.loguru_io import Logger
from src.service.venue_reservation.domain.enum.entity_state import EntityState
from src.service.venue_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.venue_reservation.domain.value_object.resource_ref import ResourceRef


@attrs.define
class Reservation:
    user_id: int
    resource: ResourceRef = attrs.field(validator=attrs.validators.instance_of(ResourceRef))
    start_schedule: datetime = attrs.field(validator=attrs.validators.instance_of(datetime))
    end_schedule: datetime = attrs.field(validator=attrs.validators.instance_of(datetime))
    status: ReservationStatus = attrs.field(
        default=ReservationStatus.PENDING,
        validator=attrs.validators.instance_of(ReservationStatus),
    )
    state: EntityState = EntityState.ACTIVE
    id: Optional[int] = None  # None until persisted
    version: Optional[int] = None  # row version read from the store
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @end_schedule.validator
    def _check_window(self, attribute: 'attrs.Attribute[Any]', value: datetime) -> None:
        if not self.start_schedule < value:
            raise InvalidReservationWindowError('start_schedule must be before end_schedule')

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        user_id: int,
        resource: ResourceRef,
        start_schedule: datetime,
        end_schedule: datetime,
        now: datetime,
    ) -> 'Reservation':
        return cls(
            user_id=user_id,
            resource=resource,
            start_schedule=start_schedule,
            end_schedule=end_schedule,
            status=ReservationStatus.PENDING,
            state=EntityState.ACTIVE,
            created_at=now,
            updated_at=now,
        )

    def mark_as(self, status: ReservationStatus, *, now: datetime) -> 'Reservation':
        return attrs.evolve(self, status=status, updated_at=now)
