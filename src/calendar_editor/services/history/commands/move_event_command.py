from datetime import datetime
from typing import List

from calendar_editor.models.domain.calendar_event import CalendarEvent
from ..command_interface import CommandType
from .event_command import EventCommand


class MoveEventCommand(EventCommand):
    """Команда перемещения события (меняет начало и конец)."""

    command_type = CommandType.MOVE

    def __init__(self, event_id: str, title: str,
                 old_start: datetime, old_end: datetime,
                 new_start: datetime, new_end: datetime):
        if not event_id:
            raise ValueError("event_id is required")
        super().__init__(f'Move "{title}"')
        self.event_id = event_id
        self.title = title
        self.old_start = old_start
        self.old_end = old_end
        self.new_start = new_start
        self.new_end = new_end

    def execute(self, events: List[CalendarEvent]) -> List[CalendarEvent]:
        """Переместить событие на новое время."""
        return self._set_fields(events, self.event_id,
                                start_time=self.new_start, end_time=self.new_end)

    def undo(self, events: List[CalendarEvent]) -> List[CalendarEvent]:
        """Вернуть событие на прежнее время."""
        return self._set_fields(events, self.event_id,
                                start_time=self.old_start, end_time=self.old_end)
