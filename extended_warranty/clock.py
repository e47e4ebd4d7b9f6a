"""Time sources for warranty request dates."""

from datetime import datetime
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current local date and time."""
    return datetime.now()


def fixed_clock(moment: datetime) -> Clock:
    """Clock that always returns the same moment. Used by tests and the demo runner."""
    return lambda: moment
