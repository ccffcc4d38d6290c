"""Controllers - сессии редактирования, связующее звено между UI и историей."""

from .calendar_edit_controller import CalendarEditController

__all__ = ['CalendarEditController']
