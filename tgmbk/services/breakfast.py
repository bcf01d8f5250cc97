"""
Определение места завтрака по дню недели.
Чистые функции без состояния: одинаковый вход всегда дает одинаковый ответ.
"""

from datetime import date
from typing import Optional, Sequence

from tgmbk.utils.weekday import index_from_monday


TOMORROW_KEYWORD = "tomorrow"
# Индексы >= 6 (воскресенье и переход за неделю) не имеют места завтрака
NO_BREAKFAST_INDEX = 6


def is_tomorrow_query(text: Optional[str]) -> bool:
    """Спрашивают ли про завтра (поиск подстроки без учета регистра)"""
    if not text:
        return False
    return TOMORROW_KEYWORD in text.lower()


def no_breakfast_message(tomorrow: bool) -> str:
    day = "tomorrow" if tomorrow else "today"
    return f"No breakfast for you {day} :)"


def resolve_location(index: int, tomorrow: bool, locations: Sequence[str]) -> str:
    """
    Возвращает место завтрака для дня недели.

    Args:
        index: Индекс дня с понедельника (0..6)
        tomorrow: Сдвинуть индекс на один день вперед
        locations: Места по дням недели, Пн..Вс

    Returns:
        Место из списка или сообщение, что завтрака нет
    """
    effective_index = index + 1 if tomorrow else index
    if effective_index < NO_BREAKFAST_INDEX and effective_index < len(locations):
        return locations[effective_index]
    return no_breakfast_message(tomorrow)


def derive_reply(text: Optional[str], moment: date, locations: Sequence[str]) -> str:
    """Текст ответа на сообщение пользователя в момент moment"""
    return resolve_location(index_from_monday(moment), is_tomorrow_query(text), locations)
