"""
Unit tests for TimeRulesEngine

Test Coverage:
1. Time-unit alignment of start/end minutes
2. Same-day lead time, one class per minute-of-hour bucket of ``now``
3. validate_window error ordering
"""

from datetime import datetime

import pytest

from src.platform.exception.exceptions import (
    InvalidLeadTimeError,
    InvalidReservationWindowError,
    InvalidTimeUnitError,
)
from src.service.venue_reservation.domain.time_rules_engine import TimeRulesEngine


pytestmark = pytest.mark.unit


def at(hour: int, minute: int = 0, day: int = 15) -> datetime:
    return datetime(2025, 1, day, hour, minute)


class TestTimeUnitAlignment:
    def setup_method(self):
        self.engine = TimeRulesEngine(time_unit=30, min_lead_hours=3)

    @pytest.mark.parametrize(
        'start_minute,end_minute',
        [(0, 0), (0, 30), (30, 0), (30, 30)],
    )
    def test_minutes_on_zero_or_unit_are_aligned(self, start_minute, end_minute):
        assert self.engine.is_aligned_to_time_unit(at(14, start_minute), at(16, end_minute))

    @pytest.mark.parametrize(
        'start_minute,end_minute',
        [(15, 0), (0, 45), (1, 30), (30, 59)],
    )
    def test_any_other_minute_is_not_aligned(self, start_minute, end_minute):
        assert not self.engine.is_aligned_to_time_unit(at(14, start_minute), at(16, end_minute))

    def test_alignment_follows_configured_unit(self):
        engine = TimeRulesEngine(time_unit=15)

        assert engine.is_aligned_to_time_unit(at(14, 15), at(15, 0))
        assert not engine.is_aligned_to_time_unit(at(14, 30), at(15, 0))

    @pytest.mark.parametrize('time_unit', [0, 60, -30])
    def test_time_unit_out_of_range_is_rejected(self, time_unit):
        with pytest.raises(ValueError):
            TimeRulesEngine(time_unit=time_unit)


class TestLeadTimeNowOnTheHour:
    """now = 09:00, L = 3 -> earliest hour 12"""

    def setup_method(self):
        self.engine = TimeRulesEngine(time_unit=30, min_lead_hours=3)
        self.now = at(9, 0)

    def test_start_at_now_plus_lead_is_valid(self):
        assert self.engine.is_lead_time_satisfied(at(12, 0), self.now)
        assert self.engine.is_lead_time_satisfied(at(12, 30), self.now)

    def test_start_one_hour_short_is_invalid(self):
        assert not self.engine.is_lead_time_satisfied(at(11, 0), self.now)
        assert not self.engine.is_lead_time_satisfied(at(11, 30), self.now)


class TestLeadTimeNowOnTheUnit:
    """now = 09:30 -> at hour 12 only :30 is accepted"""

    def setup_method(self):
        self.engine = TimeRulesEngine(time_unit=30, min_lead_hours=3)
        self.now = at(9, 30)

    def test_same_hour_requires_unit_minute(self):
        assert self.engine.is_lead_time_satisfied(at(12, 30), self.now)
        assert not self.engine.is_lead_time_satisfied(at(12, 0), self.now)

    def test_later_hour_is_valid(self):
        assert self.engine.is_lead_time_satisfied(at(13, 0), self.now)

    def test_earlier_hour_is_invalid(self):
        assert not self.engine.is_lead_time_satisfied(at(11, 30), self.now)


class TestLeadTimeNowPastTheUnit:
    """now = 09:45 -> the lead time rounds up to the next full hour"""

    def setup_method(self):
        self.engine = TimeRulesEngine(time_unit=30, min_lead_hours=3)
        self.now = at(9, 45)

    def test_start_at_next_full_hour_is_valid(self):
        assert self.engine.is_lead_time_satisfied(at(13, 0), self.now)

    def test_start_within_lead_hour_is_invalid(self):
        assert not self.engine.is_lead_time_satisfied(at(12, 30), self.now)
        assert not self.engine.is_lead_time_satisfied(at(12, 0), self.now)


class TestLeadTimeNowBeforeTheUnit:
    """now = 09:10 -> at hour 12 only :30 is accepted"""

    def setup_method(self):
        self.engine = TimeRulesEngine(time_unit=30, min_lead_hours=3)
        self.now = at(9, 10)

    def test_same_hour_requires_unit_minute(self):
        assert self.engine.is_lead_time_satisfied(at(12, 30), self.now)
        assert not self.engine.is_lead_time_satisfied(at(12, 0), self.now)

    def test_later_hour_is_valid(self):
        assert self.engine.is_lead_time_satisfied(at(13, 0), self.now)

    def test_earlier_hour_is_invalid(self):
        assert not self.engine.is_lead_time_satisfied(at(11, 30), self.now)


class TestValidateWindow:
    def setup_method(self):
        self.engine = TimeRulesEngine(time_unit=30, min_lead_hours=3)
        self.now = at(9, 10)

    def test_valid_same_day_window_passes(self):
        self.engine.validate_window(start=at(12, 30), end=at(14, 0), now=self.now)

    def test_next_day_window_skips_lead_time(self):
        # Tomorrow 06:00 is less than 24h away but not same-day
        self.engine.validate_window(start=at(6, 0, day=16), end=at(7, 0, day=16), now=self.now)

    def test_misaligned_minute_raises_time_unit_error(self):
        with pytest.raises(InvalidTimeUnitError):
            self.engine.validate_window(start=at(14, 15), end=at(15, 0), now=self.now)

    def test_alignment_is_checked_before_order(self):
        with pytest.raises(InvalidTimeUnitError):
            self.engine.validate_window(start=at(15, 0), end=at(14, 45), now=self.now)

    @pytest.mark.parametrize('end', [at(14, 0), at(13, 30)])
    def test_end_not_after_start_raises_window_error(self, end):
        with pytest.raises(InvalidReservationWindowError):
            self.engine.validate_window(start=at(14, 0), end=end, now=self.now)

    def test_start_in_the_past_raises_lead_time_error(self):
        with pytest.raises(InvalidLeadTimeError):
            self.engine.validate_window(start=at(10, 0, day=14), end=at(11, 0, day=14), now=self.now)

    def test_same_day_start_too_soon_raises_lead_time_error(self):
        with pytest.raises(InvalidLeadTimeError):
            self.engine.validate_window(start=at(12, 0), end=at(13, 0), now=self.now)
