from datetime import datetime
from typing import AsyncContextManager, Callable, Sequence

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.venue_reservation.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.venue_reservation.domain.entity.reservation_entity import Reservation
from src.service.venue_reservation.domain.enum.entity_state import EntityState
from src.service.venue_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.venue_reservation.domain.enum.resource_kind import ResourceKind
from src.service.venue_reservation.domain.value_object.resource_ref import ResourceRef
from src.service.venue_reservation.driven_adapter.model.reservation_model import (
    ReservationModel,
)


class ReservationCommandRepoImpl(IReservationCommandRepo):
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

    @Logger.io
    async def create(self, *, reservation: Reservation) -> Reservation:
        async with self.session_factory() as session:
            db_reservation = ReservationModel(
                user_id=reservation.user_id,
                resource_kind=reservation.resource.kind.value,
                resource_id=reservation.resource.id,
                start_schedule=reservation.start_schedule,
                end_schedule=reservation.end_schedule,
                status=reservation.status.value,
                state=reservation.state.value,
            )
            # Left unset, the columns fall back to the database clock
            if reservation.created_at is not None:
                db_reservation.created_at = reservation.created_at
            if reservation.updated_at is not None:
                db_reservation.updated_at = reservation.updated_at
            session.add(db_reservation)
            await session.commit()
            await session.refresh(db_reservation)

            return self._to_entity(db_reservation)

    @Logger.io
    async def update_status(self, *, reservation: Reservation) -> Reservation:
        values = {
            'status': reservation.status.value,
            'version': ReservationModel.version + 1,
        }
        if reservation.updated_at is not None:
            values['updated_at'] = reservation.updated_at

        async with self.session_factory() as session:
            # Compare-and-set on the version the caller decided from
            result = await session.execute(
                update(ReservationModel)
                .where(
                    ReservationModel.id == reservation.id,
                    ReservationModel.version == reservation.version,
                )
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                await session.rollback()
                if await session.get(ReservationModel, reservation.id) is None:
                    raise NotFoundError('Reservation not found')
                raise ConflictError('Reservation was modified concurrently, please retry')

            await session.commit()
            db_reservation = await session.get(ReservationModel, reservation.id)

            return self._to_entity(db_reservation)

    @Logger.io
    async def reject_pending(self, *, reservation_ids: Sequence[int], now: datetime) -> int:
        if not reservation_ids:
            return 0

        async with self.session_factory() as session:
            # The status filter makes a repeated sweep a no-op
            result = await session.execute(
                update(ReservationModel)
                .where(
                    ReservationModel.id.in_(list(reservation_ids)),
                    ReservationModel.status == ReservationStatus.PENDING.value,
                )
                .values(
                    status=ReservationStatus.REJECTED.value,
                    updated_at=now,
                    version=ReservationModel.version + 1,
                )
                .execution_options(synchronize_session=False)
            )
            await session.commit()
            return result.rowcount
