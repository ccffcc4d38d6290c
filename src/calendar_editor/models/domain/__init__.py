"""Domain models - чистые модели данных без зависимостей от UI."""

from .calendar_event import CalendarEvent

__all__ = ['CalendarEvent']
