from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, NaiveDatetime

from src.service.venue_reservation.app.dto.reservation_dto import (
    ConflictProjection,
    ReservationSlice,
    ReservationSummary,
)
from src.service.venue_reservation.domain.entity.reservation_entity import Reservation
from src.service.venue_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.venue_reservation.domain.enum.resource_kind import ResourceKind
from src.service.venue_reservation.domain.value_object.resource_ref import ResourceRef


class ReservationCreateRequest(BaseModel):
    resource_kind: ResourceKind
    resource_id: int = Field(..., gt=0)
    # Schedules are venue-local wall-clock times; offsets are rejected
    start_schedule: NaiveDatetime
    end_schedule: NaiveDatetime

    class Config:
        json_schema_extra = {
            'example': {
                'resource_kind': 'CHAIR',
                'resource_id': 3,
                'start_schedule': '2025-01-10T14:00:00',
                'end_schedule': '2025-01-10T15:30:00',
            }
        }

    def resource_ref(self) -> ResourceRef:
        return ResourceRef(kind=self.resource_kind, id=self.resource_id)


class ReservationStatusUpdateRequest(BaseModel):
    status: ReservationStatus  # APPROVED | REJECTED | COMPLETED

    class Config:
        json_schema_extra = {'example': {'status': 'APPROVED'}}


class ReservationResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'id': 1,
                'user_id': 2,
                'resource_kind': 'CHAIR',
                'resource_id': 3,
                'start_schedule': '2025-01-10T14:00:00',
                'end_schedule': '2025-01-10T15:30:00',
                'status': 'PENDING',
                'created_at': '2025-01-10T09:12:00',
            }
        },
    }

    id: int
    user_id: int
    resource_kind: ResourceKind
    resource_id: int
    start_schedule: datetime
    end_schedule: datetime
    status: ReservationStatus
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, reservation: Reservation) -> 'ReservationResponse':
        return cls(
            id=reservation.id or 0,
            user_id=reservation.user_id,
            resource_kind=reservation.resource.kind,
            resource_id=reservation.resource.id,
            start_schedule=reservation.start_schedule,
            end_schedule=reservation.end_schedule,
            status=reservation.status,
            created_at=reservation.created_at,
        )


class ReservationSummaryResponse(BaseModel):
    reservation_id: int
    resource_kind: ResourceKind
    resource_id: int
    start_schedule: datetime
    end_schedule: datetime
    status: ReservationStatus
    created_at: Optional[datetime] = None

    @classmethod
    def from_summary(cls, summary: ReservationSummary) -> 'ReservationSummaryResponse':
        return cls(
            reservation_id=summary.reservation_id,
            resource_kind=summary.resource.kind,
            resource_id=summary.resource.id,
            start_schedule=summary.start_schedule,
            end_schedule=summary.end_schedule,
            status=summary.status,
            created_at=summary.created_at,
        )


class ReservationSliceResponse(BaseModel):
    items: List[ReservationSummaryResponse]
    page: int
    size: int
    has_next: bool
    is_first: bool
    is_last: bool

    @classmethod
    def from_slice(cls, reservation_slice: ReservationSlice) -> 'ReservationSliceResponse':
        return cls(
            items=[ReservationSummaryResponse.from_summary(item) for item in reservation_slice.items],
            page=reservation_slice.page,
            size=reservation_slice.size,
            has_next=reservation_slice.has_next,
            is_first=reservation_slice.is_first,
            is_last=reservation_slice.is_last,
        )


class ConflictResponse(BaseModel):
    reservation_id: int
    resource_kind: ResourceKind
    resource_id: int
    start_schedule: datetime
    end_schedule: datetime
    status: ReservationStatus

    @classmethod
    def from_projection(cls, projection: ConflictProjection) -> 'ConflictResponse':
        return cls(
            reservation_id=projection.reservation_id,
            resource_kind=projection.resource.kind,
            resource_id=projection.resource.id,
            start_schedule=projection.start_schedule,
            end_schedule=projection.end_schedule,
            status=projection.status,
        )
