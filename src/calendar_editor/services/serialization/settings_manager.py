"""
Settings Manager - сервис для загрузки и сохранения настроек истории.

Отвечает за сериализацию/десериализацию настроек в JSON формате.
"""

import json
import logging
import os
from typing import Optional

from calendar_editor.models.config.history_settings import HistorySettings

logger = logging.getLogger(__name__)


# Global instance
_settings_manager: Optional['SettingsManager'] = None


def get_settings_manager() -> 'SettingsManager':
    """Get or create global SettingsManager instance."""
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
    return _settings_manager


class SettingsManager:
    """Сервис для загрузки и сохранения настроек истории."""

    def __init__(self, config_path: str = "calendar_editor.json"):
        self.config_path = config_path

    def load_settings(self) -> Optional[HistorySettings]:
        """Загрузить настройки из файла."""
        if not os.path.exists(self.config_path):
            return None
        return self.import_settings(self.config_path)

    def load_or_default(self) -> HistorySettings:
        """Загрузить настройки или вернуть значения по умолчанию."""
        return self.load_settings() or HistorySettings()

    def save_settings(self, settings: HistorySettings) -> bool:
        """Сохранить настройки в файл."""
        return self.export_settings(settings, self.config_path)

    def export_settings(self, settings: HistorySettings, file_path: str) -> bool:
        """Экспортировать настройки в указанный файл."""
        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                json.dump(settings.to_dict(), f, indent=4, ensure_ascii=False)
            return True
        except OSError as e:
            logger.error("Error saving settings to %s: %s", file_path, e)
            return False

    def import_settings(self, file_path: str) -> Optional[HistorySettings]:
        """Импортировать настройки из файла."""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            # ValueError покрывает JSONDecodeError и UnicodeDecodeError
            logger.error("Error loading settings from %s: %s", file_path, e)
            return None

        if not isinstance(data, dict):
            logger.error("Error loading settings from %s: expected a JSON object", file_path)
            return None
        return HistorySettings.from_dict(data)
