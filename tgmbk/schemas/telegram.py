"""
Telegram API модели для tgmbk.
Содержит Pydantic модели входящего webhook обновления и его разбор.
"""

from pydantic import BaseModel, ValidationError
from typing import Optional


class TelegramChat(BaseModel):
    """Модель чата Telegram (используется только id)"""
    id: int
    type: Optional[str] = None
    title: Optional[str] = None
    username: Optional[str] = None


class TelegramMessage(BaseModel):
    """Модель сообщения Telegram"""
    message_id: int
    chat: TelegramChat
    text: Optional[str] = None


class TelegramUpdate(BaseModel):
    """Модель обновления от Telegram"""
    update_id: int
    message: Optional[TelegramMessage] = None


class UpdateDecodeError(Exception):
    """Тело запроса не является обновлением Telegram с сообщением"""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Не удалось разобрать обновление: {reason}")


def decode_update(raw: bytes) -> TelegramUpdate:
    """
    Разбирает тело webhook запроса в TelegramUpdate.

    Raises:
        UpdateDecodeError: Невалидный JSON, неверная структура или нет поля message
    """
    try:
        update = TelegramUpdate.model_validate_json(raw)
    except ValidationError as e:
        raise UpdateDecodeError(str(e)) from e

    if update.message is None:
        raise UpdateDecodeError(f"в обновлении {update.update_id} нет message")
    return update
