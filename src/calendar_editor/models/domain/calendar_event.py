import copy
from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass
class CalendarEvent:
    """Модель события календаря."""

    id: str
    title: str
    start_time: datetime
    end_time: datetime
    note: str = ""
    location: str = ""
    all_day: bool = False

    @property
    def duration(self) -> timedelta:
        """Длительность события."""
        return self.end_time - self.start_time

    def copy(self) -> 'CalendarEvent':
        """Независимый снимок события."""
        return copy.deepcopy(self)
