from datetime import datetime
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.venue_reservation.app.interface.i_clock import IClock
from src.service.venue_reservation.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.venue_reservation.app.interface.i_resource_query_repo import IResourceQueryRepo
from src.service.venue_reservation.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.venue_reservation.app.query.conflict_resolver import ConflictResolver
from src.service.venue_reservation.domain.entity.reservation_entity import Reservation
from src.service.venue_reservation.domain.enum.entity_state import EntityState
from src.service.venue_reservation.domain.time_rules_engine import TimeRulesEngine
from src.service.venue_reservation.domain.value_object.resource_ref import ResourceRef


class CreateReservationUseCase:
    def __init__(
        self,
        *,
        user_query_repo: IUserQueryRepo,
        resource_query_repo: IResourceQueryRepo,
        reservation_command_repo: IReservationCommandRepo,
        conflict_resolver: ConflictResolver,
        time_rules_engine: TimeRulesEngine,
        clock: IClock,
    ) -> None:
        self.user_query_repo = user_query_repo
        self.resource_query_repo = resource_query_repo
        self.reservation_command_repo = reservation_command_repo
        self.conflict_resolver = conflict_resolver
        self.time_rules_engine = time_rules_engine
        self.clock = clock

    @classmethod
    @inject
    def depends(
        cls,
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        resource_query_repo: IResourceQueryRepo = Depends(Provide[Container.resource_query_repo]),
        reservation_command_repo: IReservationCommandRepo = Depends(
            Provide[Container.reservation_command_repo]
        ),
        conflict_resolver: ConflictResolver = Depends(Provide[Container.conflict_resolver]),
        time_rules_engine: TimeRulesEngine = Depends(Provide[Container.time_rules_engine]),
        clock: IClock = Depends(Provide[Container.clock]),
    ) -> Self:
        return cls(
            user_query_repo=user_query_repo,
            resource_query_repo=resource_query_repo,
            reservation_command_repo=reservation_command_repo,
            conflict_resolver=conflict_resolver,
            time_rules_engine=time_rules_engine,
            clock=clock,
        )

    async def _resolve_parent_space(self, resource: ResourceRef) -> Optional[int]:
        """Make sure the resource exists; for a chair, return the space it belongs to."""
        if resource.is_chair:
            chair = await self.resource_query_repo.get_chair_by_id_and_state(
                chair_id=resource.id, state=EntityState.ACTIVE
            )
            if not chair:
                raise NotFoundError('Chair not found')
            return chair.space_id

        space = await self.resource_query_repo.get_space_by_id_and_state(
            space_id=resource.id, state=EntityState.ACTIVE
        )
        if not space:
            raise NotFoundError('Space not found')
        return None

    @Logger.io
    async def execute(
        self,
        *,
        user_email: str,
        resource: ResourceRef,
        start_schedule: datetime,
        end_schedule: datetime,
    ) -> Reservation:
        user = await self.user_query_repo.get_by_email_and_state(
            email=user_email, state=EntityState.ACTIVE
        )
        if not user or user.id is None:
            raise NotFoundError('User not found')

        parent_space_id = await self._resolve_parent_space(resource)

        now = self.clock.now()
        self.time_rules_engine.validate_window(start=start_schedule, end=end_schedule, now=now)

        overlapping = await self.conflict_resolver.find_overlapping(
            resource=resource,
            start=start_schedule,
            end=end_schedule,
            parent_space_id=parent_space_id,
        )
        if overlapping:
            raise ConflictError(f'{resource} is already reserved during the requested time')

        reservation = Reservation.create(
            user_id=user.id,
            resource=resource,
            start_schedule=start_schedule,
            end_schedule=end_schedule,
            now=now,
        )
        return await self.reservation_command_repo.create(reservation=reservation)
