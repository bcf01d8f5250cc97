"""
Конфигурация логирования для tgmbk.

INFO и DEBUG идут в stdout, WARNING и выше в stderr.
Секреты (токен бота) вырезаются из всех сообщений, включая логи uvicorn.
"""

import logging
import logging.config
from typing import Any, Dict, Iterable


LOG_FORMAT = '[%(asctime)s] [PID %(process)d] [%(threadName)s] [%(name)s] [%(levelname)s] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
REDACTED = "***"


class MaxLevelFilter(logging.Filter):
    """Пропускает записи не выше заданного уровня."""

    def __init__(self, level: int = logging.INFO):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self.level


class RedactFilter(logging.Filter):
    """Заменяет секреты в тексте записи на ***."""

    def __init__(self, secrets: Iterable[str] = ()):
        super().__init__()
        self.secrets = tuple(secret for secret in secrets if secret)

    def filter(self, record: logging.LogRecord) -> bool:
        if not self.secrets:
            return True
        message = record.getMessage()
        if any(secret in message for secret in self.secrets):
            for secret in self.secrets:
                message = message.replace(secret, REDACTED)
            record.msg = message
            record.args = None
        return True


def build_logging_config(log_level: str = "INFO", secrets: Iterable[str] = ()) -> Dict[str, Any]:
    """
    Конфигурация в формате dictConfig для логгеров tgmbk и uvicorn.

    Args:
        log_level: Уровень логирования (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        secrets: Строки, которые не должны попасть в логи
    """
    level = log_level.upper()
    handlers = ['stdout', 'stderr']

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'detailed': {'format': LOG_FORMAT, 'datefmt': DATE_FORMAT},
        },
        'filters': {
            'info_and_below': {'()': MaxLevelFilter, 'level': logging.INFO},
            'redact': {'()': RedactFilter, 'secrets': list(secrets)},
        },
        'handlers': {
            'stdout': {
                'class': 'logging.StreamHandler',
                'level': 'DEBUG',
                'formatter': 'detailed',
                'filters': ['info_and_below', 'redact'],
                'stream': 'ext://sys.stdout',
            },
            'stderr': {
                'class': 'logging.StreamHandler',
                'level': 'WARNING',
                'formatter': 'detailed',
                'filters': ['redact'],
                'stream': 'ext://sys.stderr',
            },
        },
        'loggers': {
            'tgmbk': {'level': level, 'handlers': handlers, 'propagate': False},
            'uvicorn': {'level': level, 'handlers': handlers, 'propagate': False},
            # Строка запроса содержит секретный путь webhook
            'uvicorn.access': {'level': 'WARNING', 'handlers': [], 'propagate': False},
            'httpx': {'level': 'WARNING'},
            'httpcore': {'level': 'WARNING'},
        },
    }


def setup_logging(log_level: str = "INFO", secrets: Iterable[str] = ()) -> None:
    logging.config.dictConfig(build_logging_config(log_level, secrets))


def setup_test_logging(log_level: str = "INFO") -> None:
    """
    Настройка логирования для тестов.
    В тестах используем propagate=True чтобы caplog мог ловить сообщения.
    """
    app_logger = logging.getLogger("tgmbk")
    app_logger.handlers.clear()
    app_logger.setLevel(getattr(logging, log_level.upper()))
    app_logger.propagate = True
