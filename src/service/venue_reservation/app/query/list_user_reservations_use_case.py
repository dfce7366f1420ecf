from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.venue_reservation.app.dto.reservation_dto import (
    ReservationSlice,
    ReservationSummary,
)
from src.service.venue_reservation.app.interface.i_clock import IClock
from src.service.venue_reservation.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.venue_reservation.app.interface.i_reservation_query_repo import (
    IReservationQueryRepo,
)
from src.service.venue_reservation.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.venue_reservation.domain.entity.user_entity import UserEntity
from src.service.venue_reservation.domain.enum.entity_state import EntityState
from src.service.venue_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.venue_reservation.domain.reservation_status_machine import (
    ReservationStatusMachine,
)


class ListUserReservationsUseCase:
    """
    List a user's reservations of one status, newest start first.

    Listing PENDING first rejects every pending reservation whose window has
    already ended, so expired requests never show up as pending.
    """

    def __init__(
        self,
        *,
        user_query_repo: IUserQueryRepo,
        reservation_query_repo: IReservationQueryRepo,
        reservation_command_repo: IReservationCommandRepo,
        status_machine: ReservationStatusMachine,
        clock: IClock,
    ) -> None:
        self.user_query_repo = user_query_repo
        self.reservation_query_repo = reservation_query_repo
        self.reservation_command_repo = reservation_command_repo
        self.status_machine = status_machine
        self.clock = clock

    @classmethod
    @inject
    def depends(
        cls,
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        reservation_query_repo: IReservationQueryRepo = Depends(
            Provide[Container.reservation_query_repo]
        ),
        reservation_command_repo: IReservationCommandRepo = Depends(
            Provide[Container.reservation_command_repo]
        ),
        status_machine: ReservationStatusMachine = Depends(
            Provide[Container.reservation_status_machine]
        ),
        clock: IClock = Depends(Provide[Container.clock]),
    ) -> Self:
        return cls(
            user_query_repo=user_query_repo,
            reservation_query_repo=reservation_query_repo,
            reservation_command_repo=reservation_command_repo,
            status_machine=status_machine,
            clock=clock,
        )

    async def _reject_expired_pending(self, user: UserEntity) -> int:
        pending = await self.reservation_query_repo.list_by_user_and_status(
            user_id=user.id or 0, status=ReservationStatus.PENDING, state=EntityState.ACTIVE
        )
        now = self.clock.now()
        expired = self.status_machine.sweep_expired(pending, now=now)
        if not expired:
            return 0

        rejected = await self.reservation_command_repo.reject_pending(
            reservation_ids=[reservation.id for reservation in expired if reservation.id],
            now=now,
        )
        Logger.base.info(f'⌛ [LIST] Rejected {rejected} expired pending reservation(s) of user {user.id}')
        return rejected

    @Logger.io
    async def execute(
        self, *, user_email: str, status: ReservationStatus, page: int, size: int
    ) -> ReservationSlice:
        if page < 0 or size < 1:
            raise ValueError('page must be >= 0 and size must be >= 1')

        user = await self.user_query_repo.get_by_email_and_state(
            email=user_email, state=EntityState.ACTIVE
        )
        if not user:
            raise NotFoundError('User not found')

        if status == ReservationStatus.PENDING:
            await self._reject_expired_pending(user)

        # One extra row tells whether another page exists
        rows = await self.reservation_query_repo.list_by_user_and_status_ordered_by_start_desc(
            user_id=user.id or 0,
            status=status,
            state=EntityState.ACTIVE,
            offset=page * size,
            limit=size + 1,
        )
        return ReservationSlice(
            items=[ReservationSummary.from_reservation(reservation) for reservation in rows[:size]],
            page=page,
            size=size,
            has_next=len(rows) > size,
        )
