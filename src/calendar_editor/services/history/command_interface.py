import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
from typing import FrozenSet, List

from calendar_editor.models.domain.calendar_event import CalendarEvent


class CommandType(Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    MOVE = "move"
    RESIZE = "resize"
    BATCH = "batch"


class Command(ABC):
    """Абстрактный базовый класс для команд.

    Команда не хранит ссылку на коллекцию событий: execute() и undo()
    получают текущий список и возвращают новый, входной список не меняется.
    """

    command_type: CommandType

    def __init__(self, description: str = ""):
        self.id = uuid.uuid4().hex
        self.timestamp = datetime.now()
        self.description = description

    @property
    def type(self) -> CommandType:
        return self.command_type

    @property
    def event_ids(self) -> FrozenSet[str]:
        """Id событий, которые затрагивает команда."""
        return frozenset()

    @abstractmethod
    def execute(self, events: List[CalendarEvent]) -> List[CalendarEvent]:
        """Выполнить команду."""
        pass

    @abstractmethod
    def undo(self, events: List[CalendarEvent]) -> List[CalendarEvent]:
        """Отменить команду."""
        pass

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.type.value} {self.description!r}>"
