from typing import List

from calendar_editor.models.domain.calendar_event import CalendarEvent
from ..command_interface import CommandType
from .event_command import EventCommand


class CreateEventCommand(EventCommand):
    """Команда создания события."""

    command_type = CommandType.CREATE

    def __init__(self, event: CalendarEvent):
        super().__init__(f'Create "{event.title}"')
        self.event_id = event.id
        self.event = event.copy()

    def execute(self, events: List[CalendarEvent]) -> List[CalendarEvent]:
        """Добавить событие."""
        return self._append(events, self.event)

    def undo(self, events: List[CalendarEvent]) -> List[CalendarEvent]:
        """Удалить событие."""
        return self._remove(events, self.event.id)
