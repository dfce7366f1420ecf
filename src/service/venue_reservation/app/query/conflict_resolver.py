"""
Conflict Resolver

Finds the reservations that still occupy a chair or a space during the
calendar day of a reference time.

A space reservation blocks every chair of that space, so the result for a
space is the union of reservations made on the space itself and on each of
its chairs. A chair reservation only counts for that chair.
"""

from datetime import datetime
from typing import List

from src.platform.logging.loguru_io import Logger
from src.service.venue_reservation.app.interface.i_reservation_query_repo import (
    IReservationQueryRepo,
)
from src.service.venue_reservation.app.interface.i_resource_query_repo import IResourceQueryRepo
from src.service.venue_reservation.domain.conflict_window import (
    day_limit,
    merge_by_start_schedule,
)
from src.service.venue_reservation.domain.entity.reservation_entity import Reservation
from src.service.venue_reservation.domain.entity.resource_entity import Chair, Space
from src.service.venue_reservation.domain.enum.entity_state import EntityState
from src.service.venue_reservation.domain.enum.reservation_status import OCCUPYING_STATUSES
from src.service.venue_reservation.domain.value_object.resource_ref import ResourceRef


class ConflictResolver:
    def __init__(
        self,
        *,
        reservation_query_repo: IReservationQueryRepo,
        resource_query_repo: IResourceQueryRepo,
    ) -> None:
        self.reservation_query_repo = reservation_query_repo
        self.resource_query_repo = resource_query_repo

    async def _direct_reservations(
        self, resource: ResourceRef, reference: datetime
    ) -> List[Reservation]:
        return await self.reservation_query_repo.list_by_resource_and_status_in_and_end_between(
            resource=resource,
            statuses=OCCUPYING_STATUSES,
            end_after=reference,
            end_before=day_limit(reference),
            state=EntityState.ACTIVE,
        )

    @Logger.io
    async def for_chair(self, *, chair: Chair, reference: datetime) -> List[Reservation]:
        return merge_by_start_schedule(await self._direct_reservations(chair.ref, reference))

    @Logger.io
    async def for_space(self, *, space: Space, reference: datetime) -> List[Reservation]:
        groups = [await self._direct_reservations(space.ref, reference)]
        chairs = await self.resource_query_repo.list_chairs_by_space_and_state(
            space_id=space.id, state=EntityState.ACTIVE
        )
        for chair in chairs:
            groups.append(await self._direct_reservations(chair.ref, reference))
        return merge_by_start_schedule(*groups)

    @Logger.io
    async def find_overlapping(
        self,
        *,
        resource: ResourceRef,
        start: datetime,
        end: datetime,
        parent_space_id: int | None = None,
    ) -> List[Reservation]:
        """
        Reservations whose window intersects [start, end) on the resource.

        For a chair, reservations on its parent space count as well, because the
        space booking blocks the chair.
        """
        targets = [resource]
        if resource.is_space:
            chairs = await self.resource_query_repo.list_chairs_by_space_and_state(
                space_id=resource.id, state=EntityState.ACTIVE
            )
            targets.extend(chair.ref for chair in chairs)
        elif parent_space_id is not None:
            targets.append(ResourceRef.space(parent_space_id))

        groups = [
            await self.reservation_query_repo.list_overlapping(
                resource=target,
                statuses=OCCUPYING_STATUSES,
                start=start,
                end=end,
                state=EntityState.ACTIVE,
            )
            for target in targets
        ]
        return merge_by_start_schedule(*groups)
