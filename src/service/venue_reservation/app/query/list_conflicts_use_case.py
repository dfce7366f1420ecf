from datetime import datetime
from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.venue_reservation.app.dto.reservation_dto import ConflictProjection
from src.service.venue_reservation.app.interface.i_clock import IClock
from src.service.venue_reservation.app.interface.i_resource_query_repo import IResourceQueryRepo
from src.service.venue_reservation.app.query.conflict_resolver import ConflictResolver
from src.service.venue_reservation.domain.enum.entity_state import EntityState


class ListConflictsUseCase:
    """Reservations still occupying a chair or a space until the end of the reference day"""

    def __init__(
        self,
        *,
        resource_query_repo: IResourceQueryRepo,
        conflict_resolver: ConflictResolver,
        clock: IClock,
    ) -> None:
        self.resource_query_repo = resource_query_repo
        self.conflict_resolver = conflict_resolver
        self.clock = clock

    @classmethod
    @inject
    def depends(
        cls,
        resource_query_repo: IResourceQueryRepo = Depends(Provide[Container.resource_query_repo]),
        conflict_resolver: ConflictResolver = Depends(Provide[Container.conflict_resolver]),
        clock: IClock = Depends(Provide[Container.clock]),
    ) -> Self:
        return cls(
            resource_query_repo=resource_query_repo,
            conflict_resolver=conflict_resolver,
            clock=clock,
        )

    @Logger.io
    async def for_chair(
        self, *, chair_id: int, reference: Optional[datetime] = None
    ) -> List[ConflictProjection]:
        chair = await self.resource_query_repo.get_chair_by_id_and_state(
            chair_id=chair_id, state=EntityState.ACTIVE
        )
        if not chair:
            raise NotFoundError('Chair not found')

        reservations = await self.conflict_resolver.for_chair(
            chair=chair, reference=reference or self.clock.now()
        )
        return [ConflictProjection.from_reservation(reservation) for reservation in reservations]

    @Logger.io
    async def for_space(
        self, *, space_id: int, reference: Optional[datetime] = None
    ) -> List[ConflictProjection]:
        space = await self.resource_query_repo.get_space_by_id_and_state(
            space_id=space_id, state=EntityState.ACTIVE
        )
        if not space:
            raise NotFoundError('Space not found')

        reservations = await self.conflict_resolver.for_space(
            space=space, reference=reference or self.clock.now()
        )
        return [ConflictProjection.from_reservation(reservation) for reservation in reservations]
