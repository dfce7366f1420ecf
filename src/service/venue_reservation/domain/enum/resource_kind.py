from enum import StrEnum


class ResourceKind(StrEnum):
    CHAIR = 'CHAIR'
    SPACE = 'SPACE'
