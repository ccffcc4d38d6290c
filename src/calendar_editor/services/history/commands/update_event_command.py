from typing import List

from calendar_editor.models.domain.calendar_event import CalendarEvent
from ..command_interface import CommandType
from .event_command import EventCommand


class UpdateEventCommand(EventCommand):
    """Команда изменения события (полная замена состояния)."""

    command_type = CommandType.UPDATE

    def __init__(self, old_event: CalendarEvent, new_event: CalendarEvent):
        if old_event.id != new_event.id:
            raise ValueError(
                f"Cannot update event {old_event.id!r} with state of {new_event.id!r}"
            )
        super().__init__(f'Update "{new_event.title}"')
        self.event_id = old_event.id
        self.old_event = old_event.copy()
        self.new_event = new_event.copy()

    def execute(self, events: List[CalendarEvent]) -> List[CalendarEvent]:
        """Применить новое состояние."""
        return self._replace(events, self.new_event)

    def undo(self, events: List[CalendarEvent]) -> List[CalendarEvent]:
        """Восстановить старое состояние."""
        return self._replace(events, self.old_event)
