from dataclasses import replace
from typing import Callable, FrozenSet, List

from calendar_editor.models.domain.calendar_event import CalendarEvent
from ..command_interface import Command


class EventCommand(Command):
    """Базовый класс для команд операций с событиями.

    Поиск события только по id; если события с таким id нет,
    коллекция возвращается без изменений.
    """

    event_id: str

    @property
    def event_ids(self) -> FrozenSet[str]:
        return frozenset((self.event_id,))

    @staticmethod
    def _append(events: List[CalendarEvent], snapshot: CalendarEvent) -> List[CalendarEvent]:
        # Копия, чтобы правки в возвращённом списке не портили снимок команды
        return list(events) + [snapshot.copy()]

    @staticmethod
    def _remove(events: List[CalendarEvent], event_id: str) -> List[CalendarEvent]:
        return [event for event in events if event.id != event_id]

    @staticmethod
    def _map(events: List[CalendarEvent], event_id: str,
             transform: Callable[[CalendarEvent], CalendarEvent]) -> List[CalendarEvent]:
        return [transform(event) if event.id == event_id else event for event in events]

    @classmethod
    def _replace(cls, events: List[CalendarEvent], snapshot: CalendarEvent) -> List[CalendarEvent]:
        return cls._map(events, snapshot.id, lambda _: snapshot.copy())

    @classmethod
    def _set_fields(cls, events: List[CalendarEvent], event_id: str, **fields) -> List[CalendarEvent]:
        return cls._map(events, event_id, lambda event: replace(event, **fields))
