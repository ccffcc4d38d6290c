from typing import FrozenSet, List, Sequence

from calendar_editor.models.domain.calendar_event import CalendarEvent
from ..command_interface import Command, CommandType


class BatchCommand(Command):
    """Составная команда: одна запись в истории для нескольких команд."""

    command_type = CommandType.BATCH

    def __init__(self, commands: Sequence[Command], description: str):
        if not commands:
            raise ValueError("BatchCommand requires at least one command")
        super().__init__(description)
        self.commands = tuple(commands)

    @property
    def event_ids(self) -> FrozenSet[str]:
        """Объединение id всех вложенных команд."""
        return frozenset().union(*(command.event_ids for command in self.commands))

    def execute(self, events: List[CalendarEvent]) -> List[CalendarEvent]:
        """Выполнить все команды по порядку."""
        for command in self.commands:
            events = command.execute(events)
        return events

    def undo(self, events: List[CalendarEvent]) -> List[CalendarEvent]:
        """Отменить все команды в обратном порядке."""
        for command in reversed(self.commands):
            events = command.undo(events)
        return events

    def __len__(self) -> int:
        return len(self.commands)
