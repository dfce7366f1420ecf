from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.venue_reservation.app.interface.i_clock import IClock
from src.service.venue_reservation.app.interface.i_occupancy_repo import IOccupancyRepo
from src.service.venue_reservation.domain.entity.occupancy_entity import Occupancy
from src.service.venue_reservation.domain.enum.entity_state import EntityState


class ForceCheckOutUseCase:
    def __init__(self, *, occupancy_repo: IOccupancyRepo, clock: IClock) -> None:
        self.occupancy_repo = occupancy_repo
        self.clock = clock

    @classmethod
    @inject
    def depends(
        cls,
        occupancy_repo: IOccupancyRepo = Depends(Provide[Container.occupancy_repo]),
        clock: IClock = Depends(Provide[Container.clock]),
    ) -> Self:
        return cls(occupancy_repo=occupancy_repo, clock=clock)

    @Logger.io
    async def execute(self, *, occupancy_id: int) -> Occupancy:
        occupancy = await self.occupancy_repo.get_by_id_and_state(
            occupancy_id=occupancy_id, state=EntityState.ACTIVE
        )
        if not occupancy:
            raise NotFoundError('Utilization not found')

        checked_out = occupancy.force_check_out(now=self.clock.now())
        return await self.occupancy_repo.update(occupancy=checked_out)
