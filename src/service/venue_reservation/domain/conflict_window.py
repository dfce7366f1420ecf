from datetime import datetime, time, timedelta
from itertools import chain
from typing import Iterable

from src.service.venue_reservation.domain.entity.reservation_entity import Reservation


def day_limit(reference: datetime) -> datetime:
    """Exclusive upper bound of the reference's calendar day: midnight of the next day."""
    return datetime.combine(reference.date() + timedelta(days=1), time.min, tzinfo=reference.tzinfo)


def merge_by_start_schedule(*groups: Iterable[Reservation]) -> list[Reservation]:
    # sorted() is stable: ties keep retrieval order
    return sorted(chain.from_iterable(groups), key=lambda reservation: reservation.start_schedule)
