"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.venue_reservation.app.command import (
    cancel_reservation_use_case,
    check_in_use_case,
    create_reservation_use_case,
    force_check_out_use_case,
    update_reservation_status_use_case,
    walk_in_check_in_use_case,
)
from src.service.venue_reservation.app.query import (
    get_reservation_use_case,
    list_conflicts_use_case,
    list_user_reservations_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    create_reservation_use_case,
    cancel_reservation_use_case,
    update_reservation_status_use_case,
    check_in_use_case,
    walk_in_check_in_use_case,
    force_check_out_use_case,
    get_reservation_use_case,
    list_user_reservations_use_case,
    list_conflicts_use_case,
]
