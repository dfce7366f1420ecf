from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from src.service.venue_reservation.domain.entity.occupancy_entity import Occupancy, WalkIn
from src.service.venue_reservation.domain.enum.entity_state import EntityState
from src.service.venue_reservation.domain.value_object.resource_ref import ResourceRef


class IOccupancyRepo(ABC):
    @abstractmethod
    async def get_by_id_and_state(
        self, *, occupancy_id: int, state: EntityState
    ) -> Optional[Occupancy]:
        pass

    @abstractmethod
    async def get_by_reservation_id_and_state(
        self, *, reservation_id: int, state: EntityState
    ) -> Optional[Occupancy]:
        pass

    @abstractmethod
    async def list_checked_in_overlapping(
        self, *, resources: Sequence[ResourceRef], start: datetime, end: datetime
    ) -> List[Occupancy]:
        """ACTIVE CHECK_IN occupancies on any of ``resources`` intersecting [start, end)"""
        pass

    @abstractmethod
    async def create(self, *, occupancy: Occupancy) -> Occupancy:
        pass

    @abstractmethod
    async def check_in_walk_in(self, *, walk_in: WalkIn) -> Occupancy:
        """Persist the walk-in and its CHECK_IN occupancy in one transaction"""
        pass

    @abstractmethod
    async def update(self, *, occupancy: Occupancy) -> Occupancy:
        """Persist status and end_schedule of an existing occupancy"""
        pass
