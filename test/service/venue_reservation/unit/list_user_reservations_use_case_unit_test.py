"""
Unit tests for ListUserReservationsUseCase

Test Coverage:
1. Unknown user
2. Expiry sweep on PENDING listings (and only there)
3. Pagination via one extra row
"""

from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import NotFoundError
from src.service.venue_reservation.app.query.list_user_reservations_use_case import (
    ListUserReservationsUseCase,
)
from src.service.venue_reservation.domain.entity.user_entity import UserEntity
from src.service.venue_reservation.domain.enum.entity_state import EntityState
from src.service.venue_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.venue_reservation.domain.reservation_status_machine import (
    ReservationStatusMachine,
)


pytestmark = pytest.mark.unit

USER_EMAIL = 'guest@example.com'


class TestListUserReservations:
    @pytest.fixture(autouse=True)
    def setup(self, fixed_clock):
        self.user_query_repo = AsyncMock()
        self.reservation_query_repo = AsyncMock()
        self.reservation_command_repo = AsyncMock()
        self.user_query_repo.get_by_email_and_state.return_value = UserEntity(
            email=USER_EMAIL, id=5
        )
        self.reservation_query_repo.list_by_user_and_status.return_value = []
        self.reservation_query_repo.list_by_user_and_status_ordered_by_start_desc.return_value = []

        self.use_case = ListUserReservationsUseCase(
            user_query_repo=self.user_query_repo,
            reservation_query_repo=self.reservation_query_repo,
            reservation_command_repo=self.reservation_command_repo,
            status_machine=ReservationStatusMachine(),
            clock=fixed_clock,
        )
        self.now = fixed_clock.now()

    @pytest.mark.asyncio
    async def test_unknown_user_raises_not_found(self):
        self.user_query_repo.get_by_email_and_state.return_value = None

        with pytest.raises(NotFoundError):
            await self.use_case.execute(
                user_email=USER_EMAIL, status=ReservationStatus.PENDING, page=0, size=10
            )

        self.reservation_query_repo.list_by_user_and_status_ordered_by_start_desc.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_pending_listing_rejects_expired_first(self, make_reservation):
        """
        Given: two PENDING reservations, one whose window already ended
        When: the user lists PENDING reservations
        Then: only the elapsed one is rejected, in a single write, before the page is read
        """
        elapsed = make_reservation(
            id=1, user_id=5, start=datetime(2025, 1, 14, 10, 0), end=datetime(2025, 1, 14, 12, 0)
        )
        upcoming = make_reservation(id=2, user_id=5)
        self.reservation_query_repo.list_by_user_and_status.return_value = [elapsed, upcoming]
        self.reservation_query_repo.list_by_user_and_status_ordered_by_start_desc.return_value = [
            upcoming
        ]
        self.reservation_command_repo.reject_pending.return_value = 1

        result = await self.use_case.execute(
            user_email=USER_EMAIL, status=ReservationStatus.PENDING, page=0, size=10
        )

        self.reservation_command_repo.reject_pending.assert_awaited_once_with(
            reservation_ids=[1], now=self.now
        )
        assert [item.reservation_id for item in result.items] == [2]
        assert result.has_next is False

    @pytest.mark.asyncio
    async def test_nothing_expired_means_no_write(self, make_reservation):
        self.reservation_query_repo.list_by_user_and_status.return_value = [
            make_reservation(id=2, user_id=5)
        ]

        await self.use_case.execute(
            user_email=USER_EMAIL, status=ReservationStatus.PENDING, page=0, size=10
        )

        self.reservation_command_repo.reject_pending.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'status',
        [ReservationStatus.APPROVED, ReservationStatus.REJECTED, ReservationStatus.CANCELED],
    )
    async def test_other_statuses_skip_the_sweep(self, status):
        await self.use_case.execute(user_email=USER_EMAIL, status=status, page=0, size=10)

        self.reservation_query_repo.list_by_user_and_status.assert_not_awaited()
        self.reservation_command_repo.reject_pending.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_page_reads_one_extra_row_for_has_next(self, make_reservation):
        rows = [make_reservation(id=i, user_id=5) for i in range(1, 4)]
        self.reservation_query_repo.list_by_user_and_status_ordered_by_start_desc.return_value = rows

        result = await self.use_case.execute(
            user_email=USER_EMAIL, status=ReservationStatus.APPROVED, page=1, size=2
        )

        self.reservation_query_repo.list_by_user_and_status_ordered_by_start_desc.assert_awaited_once_with(
            user_id=5,
            status=ReservationStatus.APPROVED,
            state=EntityState.ACTIVE,
            offset=2,
            limit=3,
        )
        assert [item.reservation_id for item in result.items] == [1, 2]
        assert result.has_next is True
        assert result.is_first is False
        assert result.is_last is False

    @pytest.mark.asyncio
    async def test_last_page(self, make_reservation):
        self.reservation_query_repo.list_by_user_and_status_ordered_by_start_desc.return_value = [
            make_reservation(id=1, user_id=5)
        ]

        result = await self.use_case.execute(
            user_email=USER_EMAIL, status=ReservationStatus.APPROVED, page=0, size=2
        )

        assert result.is_first is True
        assert result.is_last is True

    @pytest.mark.asyncio
    async def test_negative_page_is_rejected(self):
        with pytest.raises(ValueError):
            await self.use_case.execute(
                user_email=USER_EMAIL, status=ReservationStatus.APPROVED, page=-1, size=10
            )
