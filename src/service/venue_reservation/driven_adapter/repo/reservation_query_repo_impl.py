from datetime import datetime
from typing import AsyncContextManager, Callable, List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.venue_reservation.app.interface.i_reservation_query_repo import (
    IReservationQueryRepo,
)
from src.service.venue_reservation.domain.entity.reservation_entity import Reservation
from src.service.venue_reservation.domain.enum.entity_state import EntityState
from src.service.venue_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.venue_reservation.domain.enum.resource_kind import ResourceKind
from src.service.venue_reservation.domain.value_object.resource_ref import ResourceRef
from src.service.venue_reservation.driven_adapter.model.reservation_model import (
    ReservationModel,
)


class ReservationQueryRepoImpl(IReservationQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _to_entity(db_reservation: ReservationModel) -> Reservation:
        return Reservation(
            user_id=db_reservation.user_id,
            resource=ResourceRef(
                kind=ResourceKind(db_reservation.resource_kind), id=db_reservation.resource_id
            ),
            start_schedule=db_reservation.start_schedule,
            end_schedule=db_reservation.end_schedule,
            status=ReservationStatus(db_reservation.status),
            state=EntityState(db_reservation.state),
            id=db_reservation.id,
            version=db_reservation.version,
            created_at=db_reservation.created_at,
            updated_at=db_reservation.updated_at,
        )

    @staticmethod
    def _on_resource(resource: ResourceRef):
        return (
            ReservationModel.resource_kind == resource.kind.value,
            ReservationModel.resource_id == resource.id,
        )

    @Logger.io
    async def get_by_id_and_state(
        self, *, reservation_id: int, state: EntityState
    ) -> Optional[Reservation]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(ReservationModel).where(
                    ReservationModel.id == reservation_id,
                    ReservationModel.state == state.value,
                )
            )
            db_reservation = result.scalar_one_or_none()
            return self._to_entity(db_reservation) if db_reservation else None

    @Logger.io
    async def list_by_user_and_status(
        self, *, user_id: int, status: ReservationStatus, state: EntityState
    ) -> List[Reservation]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(ReservationModel)
                .where(
                    ReservationModel.user_id == user_id,
                    ReservationModel.status == status.value,
                    ReservationModel.state == state.value,
                )
                .order_by(ReservationModel.id)
            )
            return [self._to_entity(row) for row in result.scalars().all()]

    @Logger.io
    async def list_by_user_and_status_ordered_by_start_desc(
        self,
        *,
        user_id: int,
        status: ReservationStatus,
        state: EntityState,
        offset: int,
        limit: int,
    ) -> List[Reservation]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(ReservationModel)
                .where(
                    ReservationModel.user_id == user_id,
                    ReservationModel.status == status.value,
                    ReservationModel.state == state.value,
                )
                .order_by(ReservationModel.start_schedule.desc(), ReservationModel.id.desc())
                .offset(offset)
                .limit(limit)
            )
            return [self._to_entity(row) for row in result.scalars().all()]

    @Logger.io
    async def list_by_resource_and_status_in_and_end_between(
        self,
        *,
        resource: ResourceRef,
        statuses: Sequence[ReservationStatus],
        end_after: datetime,
        end_before: datetime,
        state: EntityState,
    ) -> List[Reservation]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(ReservationModel)
                .where(
                    *self._on_resource(resource),
                    ReservationModel.status.in_([status.value for status in statuses]),
                    ReservationModel.end_schedule > end_after,
                    ReservationModel.end_schedule < end_before,
                    ReservationModel.state == state.value,
                )
                .order_by(ReservationModel.start_schedule, ReservationModel.id)
            )
            return [self._to_entity(row) for row in result.scalars().all()]

    @Logger.io
    async def list_overlapping(
        self,
        *,
        resource: ResourceRef,
        statuses: Sequence[ReservationStatus],
        start: datetime,
        end: datetime,
        state: EntityState,
    ) -> List[Reservation]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(ReservationModel)
                .where(
                    *self._on_resource(resource),
                    ReservationModel.status.in_([status.value for status in statuses]),
                    ReservationModel.start_schedule < end,
                    ReservationModel.end_schedule > start,
                    ReservationModel.state == state.value,
                )
                .order_by(ReservationModel.start_schedule, ReservationModel.id)
            )
            return [self._to_entity(row) for row in result.scalars().all()]
