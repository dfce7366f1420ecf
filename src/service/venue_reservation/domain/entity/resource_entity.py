from typing import Optional

import attrs

from src.service.venue_reservation.domain.enum.entity_state import EntityState
from src.service.venue_reservation.domain.value_object.resource_ref import ResourceRef


@attrs.define
class Space:
    """Area of a store; owns zero or more chairs"""

    id: int
    name: str
    state: EntityState = EntityState.ACTIVE

    @property
    def ref(self) -> ResourceRef:
        return ResourceRef.space(self.id)


@attrs.define
class Chair:
    id: int
    manage_id: str
    space_id: Optional[int] = None
    state: EntityState = EntityState.ACTIVE

    @property
    def ref(self) -> ResourceRef:
        return ResourceRef.chair(self.id)
