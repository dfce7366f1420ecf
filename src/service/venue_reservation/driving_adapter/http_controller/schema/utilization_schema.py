from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, NaiveDatetime

from src.service.venue_reservation.domain.entity.occupancy_entity import (
    Occupancy,
    ReservationSource,
    WalkInSource,
)
from src.service.venue_reservation.domain.enum.resource_kind import ResourceKind
from src.service.venue_reservation.domain.enum.utilization_status import UtilizationStatus
from src.service.venue_reservation.domain.value_object.resource_ref import ResourceRef


class CheckInRequest(BaseModel):
    reservation_id: int = Field(..., gt=0)

    class Config:
        json_schema_extra = {'example': {'reservation_id': 1}}


class WalkInRequest(BaseModel):
    resource_kind: ResourceKind
    resource_id: int = Field(..., gt=0)
    end_schedule: NaiveDatetime

    class Config:
        json_schema_extra = {
            'example': {
                'resource_kind': 'CHAIR',
                'resource_id': 3,
                'end_schedule': '2025-01-10T18:00:00',
            }
        }

    def resource_ref(self) -> ResourceRef:
        return ResourceRef(kind=self.resource_kind, id=self.resource_id)


class UtilizationResponse(BaseModel):
    id: int
    reservation_id: Optional[int] = None
    walk_in_id: Optional[int] = None
    resource_kind: ResourceKind
    resource_id: int
    start_schedule: datetime
    end_schedule: datetime
    status: UtilizationStatus

    @classmethod
    def from_entity(cls, occupancy: Occupancy) -> 'UtilizationResponse':
        source = occupancy.source
        return cls(
            id=occupancy.id or 0,
            reservation_id=source.reservation_id if isinstance(source, ReservationSource) else None,
            walk_in_id=source.walk_in_id if isinstance(source, WalkInSource) else None,
            resource_kind=occupancy.resource.kind,
            resource_id=occupancy.resource.id,
            start_schedule=occupancy.start_schedule,
            end_schedule=occupancy.end_schedule,
            status=occupancy.status,
        )
