import logging
from datetime import date, datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


logger = logging.getLogger(__name__)


def index_from_monday(moment: date) -> int:
    """
    Индекс дня недели с понедельника: Пн=0 ... Пт=4, Сб=5, Вс=6.

    Принимает date или datetime (для datetime берется день в его собственной зоне).
    """
    return moment.weekday()


def load_timezone(name: str) -> tzinfo:
    """
    Загружает часовой пояс IANA.

    Ошибка загрузки не фатальна: пишем в лог и считаем время в UTC.
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.error(f"Не удалось загрузить часовой пояс {name!r}: {e}")
        return timezone.utc


def now_in_timezone(tz: tzinfo) -> datetime:
    return datetime.now(tz=tz)
