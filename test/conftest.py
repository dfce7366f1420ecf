"""
Test Configuration and Fixtures

- Environment setup before any application module reads settings
- Fixed clock and entity builders shared by unit and integration tests
- In-memory SQLite database for repository and HTTP integration tests
"""

# =============================================================================
# Environment setup MUST happen before any src imports: settings and the
# loguru sinks are built at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('SERVICE_NAME', 'venue-reservation-test')


_early_setup_test_environment()

from collections.abc import AsyncGenerator, Callable  # noqa: E402
from datetime import datetime  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from src.platform.database.orm_db_setting import Database  # noqa: E402
from src.service.venue_reservation.app.interface.i_clock import IClock  # noqa: E402
from src.service.venue_reservation.domain.entity.reservation_entity import (  # noqa: E402
    Reservation,
)
from src.service.venue_reservation.domain.enum.reservation_status import (  # noqa: E402
    ReservationStatus,
)
from src.service.venue_reservation.domain.value_object.resource_ref import (  # noqa: E402
    ResourceRef,
)

# Importing the model package registers every table on Base.metadata
from src.service.venue_reservation.driven_adapter.model import (  # noqa: E402
    ChairModel,
    SpaceModel,
    UserModel,
)


# Wednesday morning; most scenarios are built around this instant
DEFAULT_NOW = datetime(2025, 1, 15, 9, 10)


class FixedClock(IClock):
    def __init__(self, now: datetime = DEFAULT_NOW) -> None:
        self.current = now

    def now(self) -> datetime:
        return self.current


@pytest.fixture
def now() -> datetime:
    return DEFAULT_NOW


@pytest.fixture
def fixed_clock(now: datetime) -> FixedClock:
    return FixedClock(now)


@pytest.fixture
def make_reservation() -> Callable[..., Reservation]:
    def _make(
        *,
        id: int | None = 1,
        user_id: int = 1,
        resource: ResourceRef | None = None,
        start: datetime = datetime(2025, 1, 15, 14, 0),
        end: datetime = datetime(2025, 1, 15, 16, 0),
        status: ReservationStatus = ReservationStatus.PENDING,
        **kwargs: Any,
    ) -> Reservation:
        return Reservation(
            id=id,
            user_id=user_id,
            resource=resource or ResourceRef.chair(1),
            start_schedule=start,
            end_schedule=end,
            status=status,
            **kwargs,
        )

    return _make


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Fresh in-memory SQLite database per test"""
    # StaticPool keeps every session on the one in-memory connection
    db = Database(url='sqlite+aiosqlite:///:memory:', poolclass=StaticPool)
    await db.create_tables()
    yield db
    await db.dispose()


GUEST_EMAIL = 'guest@example.com'


async def _seed_venue(db: Database) -> None:
    """One user; space 2 with chairs 7 and 8; standalone chair 9; inactive chair 10"""
    async with db.session() as session:
        session.add(UserModel(id=5, email=GUEST_EMAIL, nickname='guest', state='ACTIVE'))
        session.add(SpaceModel(id=2, name='Window Bar', state='ACTIVE'))
        await session.flush()
        session.add_all(
            [
                ChairModel(id=7, manage_id='A-7', space_id=2, state='ACTIVE'),
                ChairModel(id=8, manage_id='A-8', space_id=2, state='ACTIVE'),
                ChairModel(id=9, manage_id='B-1', space_id=None, state='ACTIVE'),
                ChairModel(id=10, manage_id='A-10', space_id=2, state='INACTIVE'),
            ]
        )
        await session.commit()


@pytest.fixture
def seed_venue() -> Callable[[Database], Any]:
    return _seed_venue
