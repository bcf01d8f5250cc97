from fastapi import FastAPI
from typing import Optional

from tgmbk.core.config import Settings, load_settings
from tgmbk.routers import system, webhook
from tgmbk.services.telegram_client import TelegramClient
from tgmbk.utils.weekday import load_timezone


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Собирает приложение FastAPI.

    Настройки, часовой пояс и клиент Telegram создаются один раз
    и хранятся в app.state только для чтения.
    """
    if settings is None:
        settings = load_settings()

    app = FastAPI(
        title="tgmbk API",
        description="Telegram бот, который подсказывает, где сегодня завтрак",
        version="1.0.0",
    )

    app.state.settings = settings
    app.state.timezone = load_timezone(settings.timezone)
    app.state.telegram_client = TelegramClient(
        settings.tgmbk_token,
        api_url=settings.telegram_api_url,
        timeout=settings.request_timeout,
    )

    app.include_router(system.router, tags=["system"])
    app.include_router(webhook.router, prefix=f"/{settings.tgmbk_token}", tags=["webhook"])
    return app


__all__ = ["create_app"]
