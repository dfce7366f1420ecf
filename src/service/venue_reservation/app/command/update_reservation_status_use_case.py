from typing import Callable, Mapping, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import InvalidReservationStatusError, NotFoundError
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
from src.service.venue_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.venue_reservation.domain.reservation_status_machine import (
    ReservationStatusMachine,
)


class UpdateReservationStatusUseCase:
    """Store-side decision on a reservation: approve, reject or complete it"""

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

    def _transitions(self) -> Mapping[ReservationStatus, Callable[..., Reservation]]:
        return {
            ReservationStatus.APPROVED: self.status_machine.approve,
            ReservationStatus.REJECTED: self.status_machine.reject,
            ReservationStatus.COMPLETED: self.status_machine.complete,
        }

    @Logger.io
    async def execute(self, *, reservation_id: int, status: ReservationStatus) -> Reservation:
        transition = self._transitions().get(status)
        if transition is None:
            # CANCELED goes through the cancel endpoint; PENDING is never a target
            raise InvalidReservationStatusError(f'Status cannot be set to {status}')

        reservation = await self.reservation_query_repo.get_by_id_and_state(
            reservation_id=reservation_id, state=EntityState.ACTIVE
        )
        if not reservation:
            raise NotFoundError('Reservation not found')

        updated = transition(reservation, now=self.clock.now())
        return await self.reservation_command_repo.update_status(reservation=updated)
