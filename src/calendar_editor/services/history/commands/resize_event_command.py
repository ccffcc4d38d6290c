from datetime import datetime
from enum import Enum
from typing import List

from calendar_editor.models.domain.calendar_event import CalendarEvent
from ..command_interface import CommandType
from .event_command import EventCommand


class ResizeEdge(Enum):
    START = "start_time"
    END = "end_time"


class ResizeEventCommand(EventCommand):
    """Команда изменения длительности события.

    По умолчанию тянется нижняя граница (конец события); с edge=ResizeEdge.START
    команда меняет начало.
    """

    command_type = CommandType.RESIZE

    def __init__(self, event_id: str, title: str,
                 old_time: datetime, new_time: datetime,
                 edge: ResizeEdge = ResizeEdge.END):
        if not event_id:
            raise ValueError("event_id is required")
        super().__init__(f'Resize "{title}"')
        self.event_id = event_id
        self.title = title
        self.old_time = old_time
        self.new_time = new_time
        self.edge = edge

    def execute(self, events: List[CalendarEvent]) -> List[CalendarEvent]:
        """Установить новую границу."""
        return self._set_fields(events, self.event_id, **{self.edge.value: self.new_time})

    def undo(self, events: List[CalendarEvent]) -> List[CalendarEvent]:
        """Вернуть прежнюю границу."""
        return self._set_fields(events, self.event_id, **{self.edge.value: self.old_time})
