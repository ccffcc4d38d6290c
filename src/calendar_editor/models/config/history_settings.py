import logging
from dataclasses import dataclass
from typing import Any, Dict

logger = logging.getLogger(__name__)


def _positive_int(data: Dict, key: str, default: int) -> int:
    """Прочитать положительное целое, иначе вернуть значение по умолчанию."""
    value = data.get(key, default)
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        number = 0
    if isinstance(value, bool) or number < 1:
        logger.warning("Invalid %s in settings: %r, using %d", key, value, default)
        return default
    return number


@dataclass
class HistorySettings:
    """Модель настроек истории редактирования."""

    # Размер стека отмены
    max_stack_size: int = 50

    # Длительность нового события, если конец не указан
    default_event_duration_minutes: int = 60

    def to_dict(self) -> Dict[str, Any]:
        """Конвертировать в словарь."""
        return {
            'max_stack_size': self.max_stack_size,
            'default_event_duration_minutes': self.default_event_duration_minutes,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'HistorySettings':
        """Создать из словаря (некорректные значения заменяются значениями по умолчанию)."""
        return cls(
            max_stack_size=_positive_int(data, 'max_stack_size', cls.max_stack_size),
            default_event_duration_minutes=_positive_int(
                data, 'default_event_duration_minutes', cls.default_event_duration_minutes
            ),
        )
