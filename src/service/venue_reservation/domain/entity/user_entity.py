from typing import Optional

import attrs

from src.service.venue_reservation.domain.enum.entity_state import EntityState


@attrs.define
class UserEntity:
    email: str
    nickname: str = ''
    id: Optional[int] = None
    state: EntityState = EntityState.ACTIVE
