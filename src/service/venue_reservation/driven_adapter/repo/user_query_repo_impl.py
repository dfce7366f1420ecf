from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.venue_reservation.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.venue_reservation.domain.entity.user_entity import UserEntity
from src.service.venue_reservation.domain.enum.entity_state import EntityState
from src.service.venue_reservation.driven_adapter.model.user_model import UserModel


class UserQueryRepoImpl(IUserQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_email_and_state(
        self, *, email: str, state: EntityState
    ) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(UserModel).where(UserModel.email == email, UserModel.state == state.value)
            )
            user_model = result.scalar_one_or_none()

            if not user_model:
                return None

            return self._model_to_entity(user_model)

    def _model_to_entity(self, user_model: UserModel) -> UserEntity:
        return UserEntity(
            id=user_model.id,
            email=user_model.email,
            nickname=user_model.nickname,
            state=EntityState(user_model.state),
        )
