from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.venue_reservation.domain.entity.resource_entity import Chair, Space
from src.service.venue_reservation.domain.enum.entity_state import EntityState


class IResourceQueryRepo(ABC):
    @abstractmethod
    async def get_chair_by_id_and_state(
        self, *, chair_id: int, state: EntityState
    ) -> Optional[Chair]:
        pass

    @abstractmethod
    async def get_space_by_id_and_state(
        self, *, space_id: int, state: EntityState
    ) -> Optional[Space]:
        pass

    @abstractmethod
    async def list_chairs_by_space_and_state(
        self, *, space_id: int, state: EntityState
    ) -> List[Chair]:
        pass
