from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.venue_reservation.app.interface.i_resource_query_repo import IResourceQueryRepo
from src.service.venue_reservation.domain.entity.resource_entity import Chair, Space
from src.service.venue_reservation.domain.enum.entity_state import EntityState
from src.service.venue_reservation.driven_adapter.model.resource_model import (
    ChairModel,
    SpaceModel,
)


class ResourceQueryRepoImpl(IResourceQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _chair_to_entity(db_chair: ChairModel) -> Chair:
        return Chair(
            id=db_chair.id,
            manage_id=db_chair.manage_id,
            space_id=db_chair.space_id,
            state=EntityState(db_chair.state),
        )

    @Logger.io
    async def get_chair_by_id_and_state(
        self, *, chair_id: int, state: EntityState
    ) -> Optional[Chair]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(ChairModel).where(ChairModel.id == chair_id, ChairModel.state == state.value)
            )
            db_chair = result.scalar_one_or_none()
            return self._chair_to_entity(db_chair) if db_chair else None

    @Logger.io
    async def get_space_by_id_and_state(
        self, *, space_id: int, state: EntityState
    ) -> Optional[Space]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(SpaceModel).where(SpaceModel.id == space_id, SpaceModel.state == state.value)
            )
            db_space = result.scalar_one_or_none()
            if not db_space:
                return None
            return Space(id=db_space.id, name=db_space.name, state=EntityState(db_space.state))

    @Logger.io
    async def list_chairs_by_space_and_state(
        self, *, space_id: int, state: EntityState
    ) -> List[Chair]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(ChairModel)
                .where(ChairModel.space_id == space_id, ChairModel.state == state.value)
                .order_by(ChairModel.id)
            )
            return [self._chair_to_entity(row) for row in result.scalars().all()]
