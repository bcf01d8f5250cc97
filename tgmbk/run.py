#!/usr/bin/env python3
"""
Запуск webhook сервера tgmbk

Usage:
    tgmbk
    python -m tgmbk.run

Требования:
    - PORT, TGMBK_TOKEN, TGMBK_LOCATIONS должны быть заданы (окружение или .env)
"""

import logging
import sys

import uvicorn
from pydantic import ValidationError

from tgmbk.core.config import load_settings
from tgmbk.core.logging_config import setup_logging
from tgmbk.main import create_app


def main():
    """Основная функция запуска сервера"""
    setup_logging()
    logger = logging.getLogger("tgmbk.run")

    try:
        settings = load_settings()
    except ValidationError as e:
        logger.critical(f"Неверная конфигурация окружения:\n{e}")
        sys.exit(1)

    setup_logging(settings.log_level, secrets=(settings.tgmbk_token,))
    app = create_app(settings)

    logger.info(f"Listening on port {settings.port}")
    # Логирование уже настроено, access log выключен: путь запроса содержит токен
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
        access_log=False,
    )


if __name__ == "__main__":
    main()
