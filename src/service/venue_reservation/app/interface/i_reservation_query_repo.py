from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from src.service.venue_reservation.domain.entity.reservation_entity import Reservation
from src.service.venue_reservation.domain.enum.entity_state import EntityState
from src.service.venue_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.venue_reservation.domain.value_object.resource_ref import ResourceRef


class IReservationQueryRepo(ABC):
    """Repository interface for reservation read operations"""

    @abstractmethod
    async def get_by_id_and_state(
        self, *, reservation_id: int, state: EntityState
    ) -> Optional[Reservation]:
        pass

    @abstractmethod
    async def list_by_user_and_status(
        self, *, user_id: int, status: ReservationStatus, state: EntityState
    ) -> List[Reservation]:
        """All matching reservations, unpaginated (used by the expiry sweep)"""
        pass

    @abstractmethod
    async def list_by_user_and_status_ordered_by_start_desc(
        self,
        *,
        user_id: int,
        status: ReservationStatus,
        state: EntityState,
        offset: int,
        limit: int,
    ) -> List[Reservation]:
        pass

    @abstractmethod
    async def list_by_resource_and_status_in_and_end_between(
        self,
        *,
        resource: ResourceRef,
        statuses: Sequence[ReservationStatus],
        end_after: datetime,
        end_before: datetime,
        state: EntityState,
    ) -> List[Reservation]:
        """
        Reservations made directly against ``resource`` whose end_schedule lies
        strictly between ``end_after`` and ``end_before``.
        """
        pass

    @abstractmethod
    async def list_overlapping(
        self,
        *,
        resource: ResourceRef,
        statuses: Sequence[ReservationStatus],
        start: datetime,
        end: datetime,
        state: EntityState,
    ) -> List[Reservation]:
        """Reservations made directly against ``resource`` intersecting [start, end)"""
        pass
