import logging
from typing import List, NamedTuple, Optional

from PySide6.QtCore import QObject, Signal

from calendar_editor.models.config.history_settings import HistorySettings
from calendar_editor.models.domain.calendar_event import CalendarEvent
from .command_interface import Command

logger = logging.getLogger(__name__)


class HistoryResult(NamedTuple):
    """Результат undo/redo: новое состояние и команда (для подписи в UI)."""

    events: List[CalendarEvent]
    command: Command


class HistoryManager(QObject):
    """Менеджер истории команд для undo/redo.

    Два стека (undo и redo). Стек отмены ограничен max_stack_size,
    при переполнении удаляется самая старая команда.
    """

    history_changed = Signal()
    history_cleared = Signal()
    command_executed = Signal(object)
    command_undone = Signal(object)
    command_redone = Signal(object)

    def __init__(self, max_stack_size: int = 50, parent: Optional[QObject] = None):
        super().__init__(parent)
        if max_stack_size < 1:
            raise ValueError(f"max_stack_size must be positive, got {max_stack_size}")
        self.undo_stack: List[Command] = []
        self.redo_stack: List[Command] = []
        self._max_stack_size = max_stack_size
        self._revision = 0

    @classmethod
    def from_settings(cls, settings: HistorySettings) -> 'HistoryManager':
        """Создать менеджер по настройкам."""
        return cls(max_stack_size=settings.max_stack_size)

    @property
    def max_stack_size(self) -> int:
        return self._max_stack_size

    @property
    def undo_count(self) -> int:
        return len(self.undo_stack)

    @property
    def redo_count(self) -> int:
        return len(self.redo_stack)

    @property
    def revision(self) -> int:
        """Счётчик изменений стеков."""
        return self._revision

    def execute_command(self, command: Command, events: List[CalendarEvent]) -> List[CalendarEvent]:
        """Выполнить команду и добавить в историю."""
        new_events = command.execute(events)
        self.undo_stack.append(command)

        # Новое действие делает отменённое будущее недостижимым
        self.redo_stack.clear()

        # Ограничить размер истории
        if len(self.undo_stack) > self._max_stack_size:
            evicted = self.undo_stack.pop(0)
            logger.debug("Evicted oldest command from history: %r", evicted)

        logger.debug("Executed %r (undo=%d)", command, len(self.undo_stack))
        self.command_executed.emit(command)
        self._changed()
        return new_events

    def undo(self, events: List[CalendarEvent]) -> Optional[HistoryResult]:
        """Отменить последнюю команду."""
        if not self.can_undo():
            return None

        # Стеки меняются только после успешного undo команды
        command = self.undo_stack[-1]
        new_events = command.undo(events)
        self.undo_stack.pop()
        self.redo_stack.append(command)

        logger.debug("Undid %r (undo=%d, redo=%d)",
                     command, len(self.undo_stack), len(self.redo_stack))
        self.command_undone.emit(command)
        self._changed()
        return HistoryResult(new_events, command)

    def redo(self, events: List[CalendarEvent]) -> Optional[HistoryResult]:
        """Повторить отменённую команду."""
        if not self.can_redo():
            return None

        command = self.redo_stack[-1]
        new_events = command.execute(events)
        self.redo_stack.pop()
        self.undo_stack.append(command)

        logger.debug("Redid %r (undo=%d, redo=%d)",
                     command, len(self.undo_stack), len(self.redo_stack))
        self.command_redone.emit(command)
        self._changed()
        return HistoryResult(new_events, command)

    def can_undo(self, event_id: Optional[str] = None) -> bool:
        """Проверить, можно ли отменить (для всех событий или для одного)."""
        if event_id is None:
            return len(self.undo_stack) > 0
        return self.get_undo_count(event_id) > 0

    def can_redo(self, event_id: Optional[str] = None) -> bool:
        """Проверить, можно ли повторить (для всех событий или для одного)."""
        if event_id is None:
            return len(self.redo_stack) > 0
        return self.get_redo_count(event_id) > 0

    def get_undo_count(self, event_id: str) -> int:
        """Число команд в стеке отмены, затрагивающих событие."""
        return sum(1 for command in self.undo_stack if event_id in command.event_ids)

    def get_redo_count(self, event_id: str) -> int:
        """Число команд в стеке повтора, затрагивающих событие."""
        return sum(1 for command in self.redo_stack if event_id in command.event_ids)

    def get_last_command(self, event_id: str) -> Optional[Command]:
        """Последняя выполненная команда, затрагивающая событие."""
        for command in reversed(self.undo_stack):
            if event_id in command.event_ids:
                return command
        return None

    def get_undo_description(self) -> Optional[str]:
        """Описание команды, которая будет отменена."""
        return self.undo_stack[-1].description if self.undo_stack else None

    def get_redo_description(self) -> Optional[str]:
        """Описание команды, которая будет повторена."""
        return self.redo_stack[-1].description if self.redo_stack else None

    def get_undo_descriptions(self) -> List[str]:
        """Описания стека отмены, от новых к старым."""
        return [command.description for command in reversed(self.undo_stack)]

    def get_redo_descriptions(self) -> List[str]:
        """Описания стека повтора, от новых к старым."""
        return [command.description for command in reversed(self.redo_stack)]

    def clear(self):
        """Очистить всю историю."""
        self.undo_stack.clear()
        self.redo_stack.clear()
        logger.debug("History cleared")
        self.history_cleared.emit()
        self._changed()

    def _changed(self):
        self._revision += 1
        self.history_changed.emit()
