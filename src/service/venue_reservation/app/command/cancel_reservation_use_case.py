from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.venue_reservation.app.interface.i_clock import IClock
from src.service.venue_reservation.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.venue_reservation.app.interface.i_reservation_query_repo import (
    IReservationQueryRepo,
)
from src.service.venue_reservation.domain.entity.reservation_entity import Reservation
from src.service.venue_reservation.domain.enum.entity_state import EntityState
from src.service.venue_reservation.domain.reservation_status_machine import (
    ReservationStatusMachine,
)


class CancelReservationUseCase:
    def __init__(
        self,
        *,
        reservation_query_repo: IReservationQueryRepo,
        reservation_command_repo: IReservationCommandRepo,
        status_machine: ReservationStatusMachine,
        clock: IClock,
    ) -> None:
        self.reservation_query_repo = reservation_query_repo
        self.reservation_command_repo = reservation_command_repo
        self.status_machine = status_machine
        self.clock = clock

    @classmethod
    @inject
    def depends(
        cls,
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
            reservation_query_repo=reservation_query_repo,
            reservation_command_repo=reservation_command_repo,
            status_machine=status_machine,
            clock=clock,
        )

    @Logger.io
    async def execute(self, *, reservation_id: int) -> Reservation:
        """
        Cancel a PENDING or APPROVED reservation whose window has not ended.

        Raises:
            NotFoundError: no ACTIVE reservation with this id
            InvalidReservationStatusError: status is not PENDING/APPROVED
            InvalidTimeToModifyStatusError: end_schedule already passed
        """
        reservation = await self.reservation_query_repo.get_by_id_and_state(
            reservation_id=reservation_id, state=EntityState.ACTIVE
        )
        if not reservation:
            raise NotFoundError('Reservation not found')

        canceled = self.status_machine.cancel(reservation, now=self.clock.now())
        return await self.reservation_command_repo.update_status(reservation=canceled)
