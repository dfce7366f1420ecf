from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.venue_reservation.app.interface.i_occupancy_repo import IOccupancyRepo
from src.service.venue_reservation.app.interface.i_reservation_query_repo import (
    IReservationQueryRepo,
)
from src.service.venue_reservation.domain.entity.occupancy_entity import Occupancy
from src.service.venue_reservation.domain.enum.entity_state import EntityState


class CheckInUseCase:
    def __init__(
        self,
        *,
        reservation_query_repo: IReservationQueryRepo,
        occupancy_repo: IOccupancyRepo,
    ) -> None:
        self.reservation_query_repo = reservation_query_repo
        self.occupancy_repo = occupancy_repo

    @classmethod
    @inject
    def depends(
        cls,
        reservation_query_repo: IReservationQueryRepo = Depends(
            Provide[Container.reservation_query_repo]
        ),
        occupancy_repo: IOccupancyRepo = Depends(Provide[Container.occupancy_repo]),
    ) -> Self:
        return cls(reservation_query_repo=reservation_query_repo, occupancy_repo=occupancy_repo)

    @Logger.io
    async def execute(self, *, reservation_id: int) -> Occupancy:
        reservation = await self.reservation_query_repo.get_by_id_and_state(
            reservation_id=reservation_id, state=EntityState.ACTIVE
        )
        if not reservation:
            raise NotFoundError('Reservation not found')

        existing = await self.occupancy_repo.get_by_reservation_id_and_state(
            reservation_id=reservation_id, state=EntityState.ACTIVE
        )
        if existing:
            raise ConflictError('Reservation is already checked in')

        occupancy = Occupancy.check_in_from_reservation(reservation)
        return await self.occupancy_repo.create(occupancy=occupancy)
