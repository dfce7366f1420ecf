from enum import StrEnum


class ReservationStatus(StrEnum):
    PENDING = 'PENDING'
    APPROVED = 'APPROVED'
    REJECTED = 'REJECTED'
    CANCELED = 'CANCELED'
    COMPLETED = 'COMPLETED'


# Statuses that can still turn into an actual occupancy of the seat
OCCUPYING_STATUSES: tuple[ReservationStatus, ...] = (
    ReservationStatus.PENDING,
    ReservationStatus.APPROVED,
)
