"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.service.venue_reservation.app.query.conflict_resolver import ConflictResolver
from src.service.venue_reservation.domain.reservation_status_machine import (
    ReservationStatusMachine,
)
from src.service.venue_reservation.domain.time_rules_engine import TimeRulesEngine
from src.service.venue_reservation.driven_adapter.clock.system_clock import SystemClock
from src.service.venue_reservation.driven_adapter.repo.occupancy_repo_impl import (
    OccupancyRepoImpl,
)
from src.service.venue_reservation.driven_adapter.repo.reservation_command_repo_impl import (
    ReservationCommandRepoImpl,
)
from src.service.venue_reservation.driven_adapter.repo.reservation_query_repo_impl import (
    ReservationQueryRepoImpl,
)
from src.service.venue_reservation.driven_adapter.repo.resource_query_repo_impl import (
    ResourceQueryRepoImpl,
)
from src.service.venue_reservation.driven_adapter.repo.user_query_repo_impl import (
    UserQueryRepoImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (uses AsyncEngineManager with settings from config_service)
    database = providers.Singleton(Database)

    clock = providers.Singleton(SystemClock)

    # Domain services (pure, configured once from settings)
    time_rules_engine = providers.Singleton(
        TimeRulesEngine,
        time_unit=config_service.provided.UTILIZATION_TIME_UNIT,
        min_lead_hours=config_service.provided.MIN_HOURS_FOR_SAME_DAY_RESERVATION,
    )
    reservation_status_machine = providers.Singleton(ReservationStatusMachine)

    # Repositories (stateless - use session_factory per-request)
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl, session_factory=database.provided.session
    )
    resource_query_repo = providers.Singleton(
        ResourceQueryRepoImpl, session_factory=database.provided.session
    )
    reservation_query_repo = providers.Singleton(
        ReservationQueryRepoImpl, session_factory=database.provided.session
    )
    reservation_command_repo = providers.Singleton(
        ReservationCommandRepoImpl, session_factory=database.provided.session
    )
    occupancy_repo = providers.Singleton(
        OccupancyRepoImpl, session_factory=database.provided.session
    )

    conflict_resolver = providers.Singleton(
        ConflictResolver,
        reservation_query_repo=reservation_query_repo,
        resource_query_repo=resource_query_repo,
    )


container = Container()
