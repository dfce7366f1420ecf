from datetime import datetime
from typing import AsyncContextManager, Callable, List, Optional, Sequence

import attrs
from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.venue_reservation.app.interface.i_occupancy_repo import IOccupancyRepo
from src.service.venue_reservation.domain.entity.occupancy_entity import (
    Occupancy,
    OccupancySource,
    ReservationSource,
    WalkIn,
    WalkInSource,
)
from src.service.venue_reservation.domain.enum.entity_state import EntityState
from src.service.venue_reservation.domain.enum.resource_kind import ResourceKind
from src.service.venue_reservation.domain.enum.utilization_status import UtilizationStatus
from src.service.venue_reservation.domain.value_object.resource_ref import ResourceRef
from src.service.venue_reservation.driven_adapter.model.occupancy_model import (
    OccupancyModel,
    WalkInModel,
)


class OccupancyRepoImpl(IOccupancyRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _to_entity(db_occupancy: OccupancyModel) -> Occupancy:
        source: OccupancySource
        if db_occupancy.reservation_id is not None:
            source = ReservationSource(reservation_id=db_occupancy.reservation_id)
        elif db_occupancy.walk_in_id is not None:
            source = WalkInSource(walk_in_id=db_occupancy.walk_in_id)
        else:
            raise ValueError(f'Occupancy {db_occupancy.id} has neither reservation nor walk-in')

        return Occupancy(
            source=source,
            resource=ResourceRef(
                kind=ResourceKind(db_occupancy.resource_kind), id=db_occupancy.resource_id
            ),
            start_schedule=db_occupancy.start_schedule,
            end_schedule=db_occupancy.end_schedule,
            status=UtilizationStatus(db_occupancy.status),
            state=EntityState(db_occupancy.state),
            id=db_occupancy.id,
        )

    async def _get_one(self, *conditions) -> Optional[Occupancy]:
        async with self.session_factory() as session:
            result = await session.execute(select(OccupancyModel).where(*conditions))
            db_occupancy = result.scalar_one_or_none()
            return self._to_entity(db_occupancy) if db_occupancy else None

    @Logger.io
    async def get_by_id_and_state(
        self, *, occupancy_id: int, state: EntityState
    ) -> Optional[Occupancy]:
        return await self._get_one(
            OccupancyModel.id == occupancy_id, OccupancyModel.state == state.value
        )

    @Logger.io
    async def get_by_reservation_id_and_state(
        self, *, reservation_id: int, state: EntityState
    ) -> Optional[Occupancy]:
        return await self._get_one(
            OccupancyModel.reservation_id == reservation_id, OccupancyModel.state == state.value
        )

    @Logger.io
    async def list_checked_in_overlapping(
        self, *, resources: Sequence[ResourceRef], start: datetime, end: datetime
    ) -> List[Occupancy]:
        if not resources:
            return []

        async with self.session_factory() as session:
            result = await session.execute(
                select(OccupancyModel)
                .where(
                    or_(
                        *(
                            and_(
                                OccupancyModel.resource_kind == resource.kind.value,
                                OccupancyModel.resource_id == resource.id,
                            )
                            for resource in resources
                        )
                    ),
                    OccupancyModel.status == UtilizationStatus.CHECK_IN.value,
                    OccupancyModel.state == EntityState.ACTIVE.value,
                    OccupancyModel.start_schedule < end,
                    OccupancyModel.end_schedule > start,
                )
                .order_by(OccupancyModel.start_schedule, OccupancyModel.id)
            )
            return [self._to_entity(db_occupancy) for db_occupancy in result.scalars().all()]

    @staticmethod
    def _to_model(occupancy: Occupancy) -> OccupancyModel:
        source = occupancy.source
        return OccupancyModel(
            reservation_id=source.reservation_id if isinstance(source, ReservationSource) else None,
            walk_in_id=source.walk_in_id if isinstance(source, WalkInSource) else None,
            resource_kind=occupancy.resource.kind.value,
            resource_id=occupancy.resource.id,
            start_schedule=occupancy.start_schedule,
            end_schedule=occupancy.end_schedule,
            status=occupancy.status.value,
            state=occupancy.state.value,
        )

    @Logger.io
    async def create(self, *, occupancy: Occupancy) -> Occupancy:
        async with self.session_factory() as session:
            db_occupancy = self._to_model(occupancy)
            session.add(db_occupancy)
            await session.commit()
            await session.refresh(db_occupancy)

            return self._to_entity(db_occupancy)

    @Logger.io
    async def check_in_walk_in(self, *, walk_in: WalkIn) -> Occupancy:
        async with self.session_factory() as session:
            db_walk_in = WalkInModel(
                user_id=walk_in.user_id,
                resource_kind=walk_in.resource.kind.value,
                resource_id=walk_in.resource.id,
                start_schedule=walk_in.start_schedule,
                end_schedule=walk_in.end_schedule,
                state=walk_in.state.value,
            )
            session.add(db_walk_in)
            # Flush for the walk-in id; both rows commit together
            await session.flush()

            occupancy = Occupancy.check_in_from_walk_in(attrs.evolve(walk_in, id=db_walk_in.id))
            db_occupancy = self._to_model(occupancy)
            session.add(db_occupancy)
            await session.commit()
            await session.refresh(db_occupancy)

            return self._to_entity(db_occupancy)

    @Logger.io
    async def update(self, *, occupancy: Occupancy) -> Occupancy:
        async with self.session_factory() as session:
            db_occupancy = await session.get(OccupancyModel, occupancy.id)
            if not db_occupancy:
                raise NotFoundError('Utilization not found')

            db_occupancy.status = occupancy.status.value
            db_occupancy.end_schedule = occupancy.end_schedule
            await session.commit()
            await session.refresh(db_occupancy)

            return self._to_entity(db_occupancy)
