from enum import StrEnum


class UtilizationStatus(StrEnum):
    CHECK_IN = 'CHECK_IN'
    CHECK_OUT = 'CHECK_OUT'
    FORCED_CHECK_OUT = 'FORCED_CHECK_OUT'
