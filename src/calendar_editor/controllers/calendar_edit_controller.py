"""Calendar edit controller - сессия прямого редактирования событий календаря.

Owns the current event list and an explicit HistoryManager instance, turns
user edits (create, drag, resize, edit, delete) into commands and exposes
undo/redo for toolbar buttons and keyboard shortcuts.
"""

import logging
import uuid
from dataclasses import fields, replace
from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Set

from PySide6.QtCore import QObject, Signal

from calendar_editor.models.config.history_settings import HistorySettings
from calendar_editor.models.domain.calendar_event import CalendarEvent
from calendar_editor.services.history import (
    BatchCommand,
    Command,
    CreateEventCommand,
    DeleteEventCommand,
    HistoryManager,
    MoveEventCommand,
    ResizeEdge,
    ResizeEventCommand,
    UpdateEventCommand
)

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = {f.name for f in fields(CalendarEvent)} - {'id'}


class CalendarEditController(QObject):
    """Контроллер сессии редактирования календаря."""

    # Сигналы для UI обновления
    events_changed = Signal()
    history_state_changed = Signal(bool, bool)  # can_undo, can_redo
    dirty_changed = Signal(bool)  # есть несохранённые изменения

    def __init__(self, events: Optional[Iterable[CalendarEvent]] = None,
                 history_manager: Optional[HistoryManager] = None,
                 settings: Optional[HistorySettings] = None):
        super().__init__()
        self.settings = settings or HistorySettings()
        self.history_manager = history_manager or HistoryManager.from_settings(self.settings)
        self._events: List[CalendarEvent] = [event.copy() for event in events or []]
        # Состояние на начало сессии (для cancel)
        self._initial_events: List[CalendarEvent] = [event.copy() for event in self._events]
        self._dirty = False

        self.history_manager.history_changed.connect(self._on_history_changed)

    @property
    def events(self) -> List[CalendarEvent]:
        """Текущие события (новый список, сами события не копируются)."""
        return list(self._events)

    def get_dirty_event_ids(self) -> Set[str]:
        """Id событий, изменённых относительно начала сессии."""
        current = {event.id: event for event in self._events}
        initial = {event.id: event for event in self._initial_events}
        return {
            event_id for event_id in current.keys() | initial.keys()
            if current.get(event_id) != initial.get(event_id)
        }

    def has_unsaved_changes(self) -> bool:
        """Есть ли изменения, не зафиксированные через save()."""
        return bool(self.get_dirty_event_ids())

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    def find_event(self, event_id: str) -> Optional[CalendarEvent]:
        """Найти событие по id."""
        for event in self._events:
            if event.id == event_id:
                return event
        return None

    # --- Редактирование ---

    def add_event(self, title: str, start_time: datetime,
                  end_time: Optional[datetime] = None, note: str = "") -> CalendarEvent:
        """Создать событие (длительность по умолчанию, если конец не указан)."""
        if end_time is None:
            end_time = start_time + timedelta(minutes=self.settings.default_event_duration_minutes)

        event = CalendarEvent(
            id=uuid.uuid4().hex,
            title=title,
            start_time=start_time,
            end_time=end_time,
            note=note
        )
        self._execute(CreateEventCommand(event))
        return event

    def update_event(self, event_id: str, **changes) -> bool:
        """Изменить поля события."""
        unknown = set(changes) - _EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown event fields: {', '.join(sorted(unknown))}")

        event = self.find_event(event_id)
        if event is None:
            return False

        self._execute(UpdateEventCommand(event, replace(event, **changes)))
        return True

    def move_event(self, event_id: str, new_start: datetime,
                   new_end: Optional[datetime] = None) -> bool:
        """Переместить событие (без нового конца длительность сохраняется)."""
        event = self.find_event(event_id)
        if event is None:
            return False

        if new_end is None:
            new_end = new_start + event.duration

        self._execute(MoveEventCommand(
            event.id, event.title,
            event.start_time, event.end_time,
            new_start, new_end
        ))
        return True

    def resize_event(self, event_id: str, new_end: datetime) -> bool:
        """Изменить конец события."""
        event = self.find_event(event_id)
        if event is None:
            return False

        self._execute(ResizeEventCommand(event.id, event.title, event.end_time, new_end))
        return True

    def resize_event_start(self, event_id: str, new_start: datetime) -> bool:
        """Изменить начало события."""
        event = self.find_event(event_id)
        if event is None:
            return False

        self._execute(ResizeEventCommand(
            event.id, event.title, event.start_time, new_start, edge=ResizeEdge.START
        ))
        return True

    def delete_event(self, event_id: str) -> bool:
        """Удалить событие."""
        event = self.find_event(event_id)
        if event is None:
            return False

        self._execute(DeleteEventCommand(event))
        return True

    def delete_events(self, event_ids: Iterable[str], description: Optional[str] = None) -> bool:
        """Удалить несколько событий одной записью в истории."""
        commands: List[Command] = [
            DeleteEventCommand(event)
            for event in self._find_events(event_ids)
        ]
        if not commands:
            return False

        self._execute(BatchCommand(commands, description or f"Delete {len(commands)} events"))
        return True

    def shift_events(self, event_ids: Iterable[str], delta: timedelta) -> bool:
        """Сдвинуть несколько событий на delta одной записью в истории."""
        commands: List[Command] = [
            MoveEventCommand(
                event.id, event.title,
                event.start_time, event.end_time,
                event.start_time + delta, event.end_time + delta
            )
            for event in self._find_events(event_ids)
        ]
        if not commands:
            return False

        self._execute(BatchCommand(commands, f"Move {len(commands)} events"))
        return True

    # --- Undo / Redo ---

    def undo(self) -> bool:
        """Отменить последнюю команду."""
        result = self.history_manager.undo(self._events)
        if result is None:
            return False
        self._set_events(result.events)
        return True

    def redo(self) -> bool:
        """Повторить последнюю отменённую команду."""
        result = self.history_manager.redo(self._events)
        if result is None:
            return False
        self._set_events(result.events)
        return True

    def get_undo_text(self) -> Optional[str]:
        """Подпись для кнопки Undo."""
        description = self.history_manager.get_undo_description()
        return f"Undo: {description}" if description is not None else None

    def get_redo_text(self) -> Optional[str]:
        """Подпись для кнопки Redo."""
        description = self.history_manager.get_redo_description()
        return f"Redo: {description}" if description is not None else None

    # --- Завершение сессии ---

    def save(self) -> List[CalendarEvent]:
        """Зафиксировать изменения и очистить историю."""
        logger.info("Saving edit session: %d events, %d history entries",
                    len(self._events), self.history_manager.undo_count)
        self._initial_events = [event.copy() for event in self._events]
        self.history_manager.clear()
        self._update_dirty()
        return self.events

    def cancel(self) -> List[CalendarEvent]:
        """Отменить все изменения сессии и очистить историю."""
        logger.info("Cancelling edit session, discarding %d history entries",
                    self.history_manager.undo_count)
        self.history_manager.clear()
        self._set_events([event.copy() for event in self._initial_events])
        return self.events

    # --- Внутреннее ---

    def _find_events(self, event_ids: Iterable[str]) -> List[CalendarEvent]:
        wanted = set(event_ids)
        return [event for event in self._events if event.id in wanted]

    def _execute(self, command: Command):
        self._set_events(self.history_manager.execute_command(command, self._events))

    def _set_events(self, events: List[CalendarEvent]):
        self._events = events
        self.events_changed.emit()
        self._update_dirty()

    def _update_dirty(self):
        dirty = self.has_unsaved_changes()
        if dirty != self._dirty:
            self._dirty = dirty
            self.dirty_changed.emit(dirty)

    def _on_history_changed(self):
        self.history_state_changed.emit(
            self.history_manager.can_undo(),
            self.history_manager.can_redo()
        )
