"""Injectable source of the current restaurant-local time"""

from abc import ABC, abstractmethod
from datetime import date, datetime
from zoneinfo import ZoneInfo

from reservations_api.config import settings


class Clock(ABC):
    """Abstract clock"""

    @abstractmethod
    def now(self) -> datetime:
        """Current naive local date and time"""
        pass

    def today(self) -> date:
        return self.now().date()


class SystemClock(Clock):
    """Wall clock in the restaurant's timezone"""

    def __init__(self, timezone: str):
        self.timezone = ZoneInfo(timezone)

    def now(self) -> datetime:
        return datetime.now(self.timezone).replace(tzinfo=None)


class FixedClock(Clock):
    """Clock frozen at a given moment"""

    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


def get_clock() -> Clock:
    """FastAPI dependency returning the system clock"""
    return SystemClock(settings.restaurant_timezone)
