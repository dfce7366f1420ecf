"""
Time Rules Engine

Pure predicates over reservation schedules. Nothing here reads the clock:
``now`` is always passed in by the caller.
"""

from datetime import datetime

import attrs

from src.platform.exception.exceptions import (
    InvalidLeadTimeError,
    InvalidReservationWindowError,
    InvalidTimeUnitError,
)
from src.platform.logging.loguru_io import Logger


@attrs.define(frozen=True)
class TimeRulesEngine:
    time_unit: int = 30  # minutes past the hour a schedule may land on, besides :00
    min_lead_hours: int = 3  # same-day reservations must start this many hours ahead

    def __attrs_post_init__(self) -> None:
        if not 0 < self.time_unit < 60:
            raise ValueError('time_unit must be between 1 and 59 minutes')
        if self.min_lead_hours < 0:
            raise ValueError('min_lead_hours must not be negative')

    def is_aligned_to_time_unit(self, start: datetime, end: datetime) -> bool:
        return start.minute in (0, self.time_unit) and end.minute in (0, self.time_unit)

    @staticmethod
    def is_same_day(start: datetime, now: datetime) -> bool:
        return start.date() == now.date()

    def is_lead_time_satisfied(self, start: datetime, now: datetime) -> bool:
        """
        Same-day lead-time policy, bucketed on the minute of ``now``.

        The four buckets are kept exactly as the booking policy defines them,
        including the asymmetry between the ``== unit`` and ``< unit`` buckets.
        """
        unit = self.time_unit
        earliest_hour = now.hour + self.min_lead_hours

        if now.minute == 0:
            return start.hour >= earliest_hour

        if now.minute == unit:
            if start.hour == earliest_hour:
                return start.minute == unit
            return start.hour > earliest_hour

        if now.minute > unit:
            return start.hour >= earliest_hour + 1

        # 0 < now.minute < unit
        if start.hour == earliest_hour:
            return start.minute == unit
        return start.hour > earliest_hour

    @Logger.io
    def validate_window(self, *, start: datetime, end: datetime, now: datetime) -> None:
        """
        Raises:
            InvalidTimeUnitError: start or end not on :00 / :unit
            InvalidReservationWindowError: start is not before end
            InvalidLeadTimeError: start in the past, or too soon for a same-day booking
        """
        if not self.is_aligned_to_time_unit(start, end):
            raise InvalidTimeUnitError(
                f'Reservation must start and end on minute 0 or {self.time_unit}'
            )
        if not start < end:
            raise InvalidReservationWindowError('start_schedule must be before end_schedule')
        if start < now:
            raise InvalidLeadTimeError('Reservation cannot start in the past')
        if self.is_same_day(start, now) and not self.is_lead_time_satisfied(start, now):
            raise InvalidLeadTimeError(
                f'Same-day reservations must start at least {self.min_lead_hours} hours from now'
            )
