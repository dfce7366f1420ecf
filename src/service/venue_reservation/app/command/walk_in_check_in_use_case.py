from datetime import datetime
from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.venue_reservation.app.interface.i_clock import IClock
from src.service.venue_reservation.app.interface.i_occupancy_repo import IOccupancyRepo
from src.service.venue_reservation.app.interface.i_resource_query_repo import IResourceQueryRepo
from src.service.venue_reservation.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.venue_reservation.app.query.conflict_resolver import ConflictResolver
from src.service.venue_reservation.domain.entity.occupancy_entity import Occupancy, WalkIn
from src.service.venue_reservation.domain.enum.entity_state import EntityState
from src.service.venue_reservation.domain.value_object.resource_ref import ResourceRef


class WalkInCheckInUseCase:
    """Seat a guest on the spot: no reservation, the occupancy starts now."""

    def __init__(
        self,
        *,
        user_query_repo: IUserQueryRepo,
        resource_query_repo: IResourceQueryRepo,
        occupancy_repo: IOccupancyRepo,
        conflict_resolver: ConflictResolver,
        clock: IClock,
    ) -> None:
        self.user_query_repo = user_query_repo
        self.resource_query_repo = resource_query_repo
        self.occupancy_repo = occupancy_repo
        self.conflict_resolver = conflict_resolver
        self.clock = clock

    @classmethod
    @inject
    def depends(
        cls,
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        resource_query_repo: IResourceQueryRepo = Depends(Provide[Container.resource_query_repo]),
        occupancy_repo: IOccupancyRepo = Depends(Provide[Container.occupancy_repo]),
        conflict_resolver: ConflictResolver = Depends(Provide[Container.conflict_resolver]),
        clock: IClock = Depends(Provide[Container.clock]),
    ) -> Self:
        return cls(
            user_query_repo=user_query_repo,
            resource_query_repo=resource_query_repo,
            occupancy_repo=occupancy_repo,
            conflict_resolver=conflict_resolver,
            clock=clock,
        )

    async def _blocking_resources(self, resource: ResourceRef) -> List[ResourceRef]:
        """The resource plus whatever shares its seats: a chair's space, or a space's chairs."""
        if resource.is_chair:
            chair = await self.resource_query_repo.get_chair_by_id_and_state(
                chair_id=resource.id, state=EntityState.ACTIVE
            )
            if not chair:
                raise NotFoundError('Chair not found')
            if chair.space_id is None:
                return [resource]
            return [resource, ResourceRef.space(chair.space_id)]

        space = await self.resource_query_repo.get_space_by_id_and_state(
            space_id=resource.id, state=EntityState.ACTIVE
        )
        if not space:
            raise NotFoundError('Space not found')
        chairs = await self.resource_query_repo.list_chairs_by_space_and_state(
            space_id=space.id, state=EntityState.ACTIVE
        )
        return [resource, *(chair.ref for chair in chairs)]

    @Logger.io
    async def execute(
        self, *, user_email: str, resource: ResourceRef, end_schedule: datetime
    ) -> Occupancy:
        """
        Raises:
            NotFoundError: unknown user or resource
            InvalidReservationWindowError: end_schedule not later today
            ConflictError: a reservation or a checked-in guest holds the seat meanwhile
        """
        user = await self.user_query_repo.get_by_email_and_state(
            email=user_email, state=EntityState.ACTIVE
        )
        if not user or user.id is None:
            raise NotFoundError('User not found')

        blocking = await self._blocking_resources(resource)

        walk_in = WalkIn.start_now(
            user_id=user.id, resource=resource, end_schedule=end_schedule, now=self.clock.now()
        )

        parent_space_id = None
        if resource.is_chair:
            parent_space_id = next((ref.id for ref in blocking if ref.is_space), None)
        reserved = await self.conflict_resolver.find_overlapping(
            resource=resource,
            start=walk_in.start_schedule,
            end=walk_in.end_schedule,
            parent_space_id=parent_space_id,
        )
        if reserved:
            raise ConflictError(f'{resource} is reserved before {end_schedule:%H:%M}')

        occupied = await self.occupancy_repo.list_checked_in_overlapping(
            resources=blocking, start=walk_in.start_schedule, end=walk_in.end_schedule
        )
        if occupied:
            raise ConflictError(f'{resource} is already in use')

        return await self.occupancy_repo.check_in_walk_in(walk_in=walk_in)
