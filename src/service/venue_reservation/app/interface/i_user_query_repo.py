from abc import ABC, abstractmethod
from typing import Optional

from src.service.venue_reservation.domain.entity.user_entity import UserEntity
from src.service.venue_reservation.domain.enum.entity_state import EntityState


class IUserQueryRepo(ABC):
    @abstractmethod
    async def get_by_email_and_state(
        self, *, email: str, state: EntityState
    ) -> Optional[UserEntity]:
        pass
