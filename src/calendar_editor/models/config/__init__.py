"""Config models - настройки истории и сессии редактирования."""

from .history_settings import HistorySettings

__all__ = ['HistorySettings']
