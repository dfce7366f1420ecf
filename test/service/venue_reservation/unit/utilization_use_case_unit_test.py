"""
Unit tests for Occupancy and the check-in, walk-in and force check-out use cases
"""

from datetime import datetime
from unittest.mock import AsyncMock

import attrs
import pytest

from src.platform.exception.exceptions import (
    ConflictError,
    InvalidReservationWindowError,
    InvalidUtilizationStatusError,
    NotFoundError,
)
from src.service.venue_reservation.app.command.check_in_use_case import CheckInUseCase
from src.service.venue_reservation.app.command.force_check_out_use_case import (
    ForceCheckOutUseCase,
)
from src.service.venue_reservation.app.command.walk_in_check_in_use_case import (
    WalkInCheckInUseCase,
)
from src.service.venue_reservation.domain.entity.occupancy_entity import (
    Occupancy,
    ReservationSource,
    WalkIn,
    WalkInSource,
)
from src.service.venue_reservation.domain.entity.resource_entity import Chair, Space
from src.service.venue_reservation.domain.entity.user_entity import UserEntity
from src.service.venue_reservation.domain.enum.reservation_status import ReservationStatus
from src.service.venue_reservation.domain.enum.utilization_status import UtilizationStatus
from src.service.venue_reservation.domain.value_object.resource_ref import ResourceRef


pytestmark = pytest.mark.unit


class TestOccupancy:
    def test_check_in_from_approved_reservation(self, make_reservation):
        reservation = make_reservation(id=4, status=ReservationStatus.APPROVED)

        occupancy = Occupancy.check_in_from_reservation(reservation)

        assert occupancy.source == ReservationSource(reservation_id=4)
        assert occupancy.is_reservation_backed
        assert not occupancy.is_walk_in_backed
        assert occupancy.status == UtilizationStatus.CHECK_IN
        assert occupancy.start_schedule == reservation.start_schedule
        assert occupancy.end_schedule == reservation.end_schedule

    def test_pending_reservation_cannot_check_in(self, make_reservation):
        with pytest.raises(InvalidUtilizationStatusError):
            Occupancy.check_in_from_reservation(make_reservation())

    def test_check_in_from_walk_in(self):
        walk_in = WalkIn(
            id=9,
            user_id=5,
            resource=ResourceRef.chair(7),
            start_schedule=datetime(2025, 1, 15, 10, 0),
            end_schedule=datetime(2025, 1, 15, 12, 0),
        )

        occupancy = Occupancy.check_in_from_walk_in(walk_in)

        assert occupancy.source == WalkInSource(walk_in_id=9)
        assert occupancy.is_walk_in_backed

    def test_walk_in_starts_now(self, now):
        walk_in = WalkIn.start_now(
            user_id=5,
            resource=ResourceRef.chair(7),
            end_schedule=datetime(2025, 1, 15, 12, 0),
            now=now,
        )

        assert walk_in.start_schedule == now
        assert walk_in.id is None

    @pytest.mark.parametrize(
        'end',
        [
            pytest.param(datetime(2025, 1, 15, 9, 10), id='ends_now'),
            pytest.param(datetime(2025, 1, 15, 8, 0), id='ends_in_the_past'),
            pytest.param(datetime(2025, 1, 16, 0, 30), id='runs_past_midnight'),
        ],
    )
    def test_walk_in_window_must_end_later_today(self, now, end):
        with pytest.raises(InvalidReservationWindowError):
            WalkIn.start_now(user_id=5, resource=ResourceRef.chair(7), end_schedule=end, now=now)

    def test_force_check_out_stamps_end_with_now(self, make_reservation, now):
        occupancy = Occupancy.check_in_from_reservation(
            make_reservation(status=ReservationStatus.APPROVED)
        )

        checked_out = occupancy.force_check_out(now=now)

        assert checked_out.status == UtilizationStatus.FORCED_CHECK_OUT
        assert checked_out.end_schedule == now
        assert checked_out.start_schedule == occupancy.start_schedule

    def test_force_check_out_twice_raises(self, make_reservation, now):
        occupancy = Occupancy.check_in_from_reservation(
            make_reservation(status=ReservationStatus.APPROVED)
        ).force_check_out(now=now)

        with pytest.raises(InvalidUtilizationStatusError):
            occupancy.force_check_out(now=now)


class TestCheckInUseCase:
    def setup_method(self):
        self.reservation_query_repo = AsyncMock()
        self.occupancy_repo = AsyncMock()
        self.occupancy_repo.get_by_reservation_id_and_state.return_value = None
        self.occupancy_repo.create.side_effect = lambda *, occupancy: occupancy
        self.use_case = CheckInUseCase(
            reservation_query_repo=self.reservation_query_repo,
            occupancy_repo=self.occupancy_repo,
        )

    @pytest.mark.asyncio
    async def test_check_in_approved_reservation(self, make_reservation):
        self.reservation_query_repo.get_by_id_and_state.return_value = make_reservation(
            id=4, status=ReservationStatus.APPROVED
        )

        occupancy = await self.use_case.execute(reservation_id=4)

        assert occupancy.source == ReservationSource(reservation_id=4)
        self.occupancy_repo.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_second_check_in_raises_conflict(self, make_reservation):
        reservation = make_reservation(id=4, status=ReservationStatus.APPROVED)
        self.reservation_query_repo.get_by_id_and_state.return_value = reservation
        self.occupancy_repo.get_by_reservation_id_and_state.return_value = (
            Occupancy.check_in_from_reservation(reservation)
        )

        with pytest.raises(ConflictError):
            await self.use_case.execute(reservation_id=4)

        self.occupancy_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_reservation_raises_not_found(self):
        self.reservation_query_repo.get_by_id_and_state.return_value = None

        with pytest.raises(NotFoundError):
            await self.use_case.execute(reservation_id=4)


class TestForceCheckOutUseCase:
    @pytest.fixture(autouse=True)
    def setup(self, fixed_clock):
        self.occupancy_repo = AsyncMock()
        self.occupancy_repo.update.side_effect = lambda *, occupancy: occupancy
        self.use_case = ForceCheckOutUseCase(occupancy_repo=self.occupancy_repo, clock=fixed_clock)
        self.now = fixed_clock.now()

    @pytest.mark.asyncio
    async def test_force_check_out(self, make_reservation):
        self.occupancy_repo.get_by_id_and_state.return_value = Occupancy.check_in_from_reservation(
            make_reservation(status=ReservationStatus.APPROVED)
        )

        result = await self.use_case.execute(occupancy_id=1)

        assert result.status == UtilizationStatus.FORCED_CHECK_OUT
        assert result.end_schedule == self.now

    @pytest.mark.asyncio
    async def test_missing_occupancy_raises_not_found(self):
        self.occupancy_repo.get_by_id_and_state.return_value = None

        with pytest.raises(NotFoundError):
            await self.use_case.execute(occupancy_id=1)


class TestWalkInCheckInUseCase:
    @pytest.fixture(autouse=True)
    def setup(self, fixed_clock):
        self.user_query_repo = AsyncMock()
        self.resource_query_repo = AsyncMock()
        self.occupancy_repo = AsyncMock()
        self.conflict_resolver = AsyncMock()

        self.user_query_repo.get_by_email_and_state.return_value = UserEntity(
            email='guest@example.com', id=5
        )
        self.resource_query_repo.get_chair_by_id_and_state.return_value = Chair(
            id=7, manage_id='A-7', space_id=2
        )
        self.conflict_resolver.find_overlapping.return_value = []
        self.occupancy_repo.list_checked_in_overlapping.return_value = []

        async def check_in_walk_in(*, walk_in):
            return Occupancy.check_in_from_walk_in(attrs.evolve(walk_in, id=11))

        self.occupancy_repo.check_in_walk_in.side_effect = check_in_walk_in

        self.use_case = WalkInCheckInUseCase(
            user_query_repo=self.user_query_repo,
            resource_query_repo=self.resource_query_repo,
            occupancy_repo=self.occupancy_repo,
            conflict_resolver=self.conflict_resolver,
            clock=fixed_clock,
        )
        self.now = fixed_clock.now()
        self.end = datetime(2025, 1, 15, 12, 0)

    @pytest.mark.asyncio
    async def test_walk_in_on_chair_checks_in_immediately(self):
        occupancy = await self.use_case.execute(
            user_email='guest@example.com', resource=ResourceRef.chair(7), end_schedule=self.end
        )

        assert occupancy.source == WalkInSource(walk_in_id=11)
        assert occupancy.status == UtilizationStatus.CHECK_IN
        assert occupancy.start_schedule == self.now
        self.conflict_resolver.find_overlapping.assert_awaited_once_with(
            resource=ResourceRef.chair(7), start=self.now, end=self.end, parent_space_id=2
        )
        self.occupancy_repo.list_checked_in_overlapping.assert_awaited_once_with(
            resources=[ResourceRef.chair(7), ResourceRef.space(2)], start=self.now, end=self.end
        )

    @pytest.mark.asyncio
    async def test_walk_in_on_space_is_blocked_by_its_chairs(self):
        self.resource_query_repo.get_space_by_id_and_state.return_value = Space(id=2, name='Bar')
        self.resource_query_repo.list_chairs_by_space_and_state.return_value = [
            Chair(id=7, manage_id='A-7', space_id=2)
        ]

        await self.use_case.execute(
            user_email='guest@example.com', resource=ResourceRef.space(2), end_schedule=self.end
        )

        self.occupancy_repo.list_checked_in_overlapping.assert_awaited_once_with(
            resources=[ResourceRef.space(2), ResourceRef.chair(7)], start=self.now, end=self.end
        )

    @pytest.mark.asyncio
    async def test_reserved_seat_raises_conflict(self, make_reservation):
        self.conflict_resolver.find_overlapping.return_value = [make_reservation()]

        with pytest.raises(ConflictError):
            await self.use_case.execute(
                user_email='guest@example.com', resource=ResourceRef.chair(7), end_schedule=self.end
            )

        self.occupancy_repo.check_in_walk_in.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_seat_in_use_raises_conflict(self, make_reservation):
        self.occupancy_repo.list_checked_in_overlapping.return_value = [
            Occupancy.check_in_from_reservation(
                make_reservation(id=4, status=ReservationStatus.APPROVED)
            )
        ]

        with pytest.raises(ConflictError):
            await self.use_case.execute(
                user_email='guest@example.com', resource=ResourceRef.chair(7), end_schedule=self.end
            )

        self.occupancy_repo.check_in_walk_in.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_chair_raises_not_found(self):
        self.resource_query_repo.get_chair_by_id_and_state.return_value = None

        with pytest.raises(NotFoundError):
            await self.use_case.execute(
                user_email='guest@example.com', resource=ResourceRef.chair(99), end_schedule=self.end
            )
