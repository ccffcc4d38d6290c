"""History System - паттерн Command для Undo/Redo."""

from .command_interface import Command, CommandType
from .commands import (
    CreateEventCommand,
    UpdateEventCommand,
    DeleteEventCommand,
    MoveEventCommand,
    ResizeEdge,
    ResizeEventCommand,
    BatchCommand
)
from .history_manager import HistoryManager, HistoryResult

__all__ = [
    'Command',
    'CommandType',
    'CreateEventCommand',
    'UpdateEventCommand',
    'DeleteEventCommand',
    'MoveEventCommand',
    'ResizeEdge',
    'ResizeEventCommand',
    'BatchCommand',
    'HistoryManager',
    'HistoryResult'
]
