"""
Reservation Status Machine

PENDING  -> APPROVED | REJECTED | CANCELED
APPROVED -> CANCELED | COMPLETED
REJECTED, CANCELED, COMPLETED are terminal.

Every transition returns a new Reservation; a failed guard raises before
anything is changed.
"""

from datetime import datetime
from typing import Mapping

from src.platform.exception.exceptions import (
    InvalidReservationStatusError,
    InvalidTimeToModifyStatusError,
)
from src.platform.logging.loguru_io import Logger
from src.service.venue_reservation.domain.entity.reservation_entity import Reservation
from src.service.venue_reservation.domain.enum.reservation_status import ReservationStatus


ALLOWED_TRANSITIONS: Mapping[ReservationStatus, frozenset[ReservationStatus]] = {
    ReservationStatus.PENDING: frozenset(
        {ReservationStatus.APPROVED, ReservationStatus.REJECTED, ReservationStatus.CANCELED}
    ),
    ReservationStatus.APPROVED: frozenset(
        {ReservationStatus.CANCELED, ReservationStatus.COMPLETED}
    ),
    ReservationStatus.REJECTED: frozenset(),
    ReservationStatus.CANCELED: frozenset(),
    ReservationStatus.COMPLETED: frozenset(),
}


class ReservationStatusMachine:
    @staticmethod
    def can_transition(current: ReservationStatus, target: ReservationStatus) -> bool:
        return target in ALLOWED_TRANSITIONS[current]

    @staticmethod
    def is_expired(reservation: Reservation, now: datetime) -> bool:
        return now > reservation.end_schedule

    @staticmethod
    def is_modifiable_at(reservation: Reservation, now: datetime) -> bool:
        return now < reservation.end_schedule

    def _check_status(self, reservation: Reservation, target: ReservationStatus) -> None:
        if not self.can_transition(reservation.status, target):
            raise InvalidReservationStatusError(
                f'Cannot change reservation status from {reservation.status} to {target}'
            )

    def _check_time(self, reservation: Reservation, now: datetime) -> None:
        if not self.is_modifiable_at(reservation, now):
            raise InvalidTimeToModifyStatusError(
                'Reservation time has already passed; its status can no longer be modified'
            )

    def _guarded(
        self, reservation: Reservation, target: ReservationStatus, now: datetime
    ) -> Reservation:
        # Status is checked before time
        self._check_status(reservation, target)
        self._check_time(reservation, now)
        return reservation.mark_as(target, now=now)

    @Logger.io
    def cancel(self, reservation: Reservation, *, now: datetime) -> Reservation:
        return self._guarded(reservation, ReservationStatus.CANCELED, now)

    @Logger.io
    def approve(self, reservation: Reservation, *, now: datetime) -> Reservation:
        return self._guarded(reservation, ReservationStatus.APPROVED, now)

    @Logger.io
    def reject(self, reservation: Reservation, *, now: datetime) -> Reservation:
        return self._guarded(reservation, ReservationStatus.REJECTED, now)

    @Logger.io
    def complete(self, reservation: Reservation, *, now: datetime) -> Reservation:
        self._check_status(reservation, ReservationStatus.COMPLETED)
        return reservation.mark_as(ReservationStatus.COMPLETED, now=now)

    def expire(self, reservation: Reservation, *, now: datetime) -> Reservation:
        """
        Auto-reject a PENDING reservation whose window has passed.

        Anything else, including an already REJECTED one, comes back unchanged.
        """
        if reservation.status == ReservationStatus.PENDING and self.is_expired(reservation, now):
            return reservation.mark_as(ReservationStatus.REJECTED, now=now)
        return reservation

    @Logger.io
    def sweep_expired(self, reservations: list[Reservation], *, now: datetime) -> list[Reservation]:
        """Return the reservations that expire() turned into REJECTED."""
        return [
            expired
            for reservation in reservations
            if (expired := self.expire(reservation, now=now)) is not reservation
        ]
