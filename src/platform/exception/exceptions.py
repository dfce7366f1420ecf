class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class InvalidReservationStatusError(DomainError):
    """Current reservation status does not allow the requested transition"""


class InvalidTimeToModifyStatusError(DomainError):
    """Reservation window already elapsed"""


class InvalidTimeUnitError(DomainError):
    """Start or end minute is not aligned to the utilization time unit"""


class InvalidLeadTimeError(DomainError):
    """Start is in the past or too close to now for a same-day reservation"""


class InvalidReservationWindowError(DomainError):
    pass


class InvalidUtilizationStatusError(DomainError):
    pass
