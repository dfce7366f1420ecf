from abc import ABC, abstractmethod
from datetime import datetime


class IClock(ABC):
    """Source of the current date-time, injected wherever a rule depends on 'now'"""

    @abstractmethod
    def now(self) -> datetime:
        pass
