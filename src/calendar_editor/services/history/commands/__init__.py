"""
Command classes for undo/redo functionality.
"""

from .event_command import EventCommand
from .create_event_command import CreateEventCommand
from .update_event_command import UpdateEventCommand
from .delete_event_command import DeleteEventCommand
from .move_event_command import MoveEventCommand
from .resize_event_command import ResizeEdge, ResizeEventCommand
from .batch_command import BatchCommand

__all__ = [
    'EventCommand',
    'CreateEventCommand',
    'UpdateEventCommand',
    'DeleteEventCommand',
    'MoveEventCommand',
    'ResizeEdge',
    'ResizeEventCommand',
    'BatchCommand'
]
