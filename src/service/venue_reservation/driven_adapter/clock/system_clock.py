from datetime import datetime

from src.service.venue_reservation.app.interface.i_clock import IClock


class SystemClock(IClock):
    """Local wall-clock time, naive like every schedule stored by the service"""

    def now(self) -> datetime:
        return datetime.now()
