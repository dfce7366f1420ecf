from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import NotFoundError
from src.service.venue_reservation.app.dto.reservation_dto import ConflictProjection
from src.service.venue_reservation.app.query.list_conflicts_use_case import (
    ListConflictsUseCase,
)
from src.service.venue_reservation.domain.entity.resource_entity import Chair, Space
from src.service.venue_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.venue_reservation.domain.value_object.resource_ref import ResourceRef


pytestmark = pytest.mark.unit


class TestListConflicts:
    @pytest.fixture(autouse=True)
    def setup(self, fixed_clock):
        self.resource_query_repo = AsyncMock()
        self.conflict_resolver = AsyncMock()
        self.use_case = ListConflictsUseCase(
            resource_query_repo=self.resource_query_repo,
            conflict_resolver=self.conflict_resolver,
            clock=fixed_clock,
        )
        self.now = fixed_clock.now()

    @pytest.mark.asyncio
    async def test_chair_conflicts_are_projected(self, make_reservation):
        chair = Chair(id=7, manage_id='A-7')
        self.resource_query_repo.get_chair_by_id_and_state.return_value = chair
        self.conflict_resolver.for_chair.return_value = [
            make_reservation(id=3, resource=chair.ref, status=ReservationStatus.APPROVED)
        ]

        result = await self.use_case.for_chair(chair_id=7)

        assert result == [
            ConflictProjection(
                reservation_id=3,
                resource=ResourceRef.chair(7),
                start_schedule=datetime(2025, 1, 15, 14, 0),
                end_schedule=datetime(2025, 1, 15, 16, 0),
                status=ReservationStatus.APPROVED,
            )
        ]
        # No reference given: the current time is used
        self.conflict_resolver.for_chair.assert_awaited_once_with(chair=chair, reference=self.now)

    @pytest.mark.asyncio
    async def test_space_conflicts_use_given_reference(self):
        space = Space(id=2, name='Bar')
        self.resource_query_repo.get_space_by_id_and_state.return_value = space
        self.conflict_resolver.for_space.return_value = []
        reference = datetime(2025, 1, 20, 8, 0)

        result = await self.use_case.for_space(space_id=2, reference=reference)

        assert result == []
        self.conflict_resolver.for_space.assert_awaited_once_with(space=space, reference=reference)

    @pytest.mark.asyncio
    async def test_unknown_chair_raises_not_found(self):
        self.resource_query_repo.get_chair_by_id_and_state.return_value = None

        with pytest.raises(NotFoundError):
            await self.use_case.for_chair(chair_id=7)

        self.conflict_resolver.for_chair.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_space_raises_not_found(self):
        self.resource_query_repo.get_space_by_id_and_state.return_value = None

        with pytest.raises(NotFoundError):
            await self.use_case.for_space(space_id=2)
