from abc import ABC, abstractmethod
from datetime import datetime
from typing import Sequence

from src.service.venue_reservation.domain.entity.reservation_entity import Reservation


class IReservationCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, reservation: Reservation) -> Reservation:
        """Persist a new reservation and return it with id assigned"""
        pass

    @abstractmethod
    async def update_status(self, *, reservation: Reservation) -> Reservation:
        """
        Persist ``reservation.status``.

        Raises:
            NotFoundError: reservation row does not exist
            ConflictError: row version differs from ``reservation.version``,
                i.e. it changed since the caller read it
        """
        pass

    @abstractmethod
    async def reject_pending(self, *, reservation_ids: Sequence[int], now: datetime) -> int:
        """
        Set REJECTED on the given reservations that are still PENDING.

        Rows already rejected are left alone, so repeating the call is a no-op.
        Returns the number of rows changed.
        """
        pass
