"""
Telegram Bot API Client для отправки ответов
"""
import httpx
import logging
from typing import Optional, Dict, Any


logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 4096


class EmptyMessageError(ValueError):
    """Нечего отправлять: текст ответа пустой"""


class TelegramSendError(Exception):
    """Ошибка отправки сообщения: сбой сети или не-2xx статус ответа"""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class TelegramClient:
    """Клиент для работы с Telegram Bot API"""

    def __init__(self, bot_token: str, api_url: str = "https://api.telegram.org", timeout: float = 30.0):
        self.bot_token = bot_token
        self.base_url = f"{api_url.rstrip('/')}/bot{self.bot_token}"
        self.timeout = timeout

    async def send_message(self, chat_id: int, text: str, reply_to_message_id: int) -> Dict[str, Any]:
        """
        Отправляет ответ на сообщение через Telegram Bot API (form-encoded POST)

        Args:
            chat_id: ID чата для отправки
            text: Текст сообщения (до 4096 символов)
            reply_to_message_id: ID сообщения, на которое отвечаем

        Returns:
            Dict с результатом API запроса

        Raises:
            EmptyMessageError: Пустой текст сообщения
            TelegramSendError: Сетевая ошибка или статус ответа вне 2xx
        """
        if not text or not text.strip():
            raise EmptyMessageError("Текст сообщения не может быть пустым")

        # Обрезаем сообщение если слишком длинное
        if len(text) > MAX_MESSAGE_LENGTH:
            text = text[:MAX_MESSAGE_LENGTH - 3] + "..."
            logger.warning(f"Сообщение обрезано до {MAX_MESSAGE_LENGTH} символов для чата {chat_id}")

        form = {
            "chat_id": str(chat_id),
            "text": text,
            "reply_to_message_id": str(reply_to_message_id),
        }
        url = f"{self.base_url}/sendMessage"

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                logger.debug(f"Отправка ответа в чат {chat_id}: {text[:100]}")

                response = await client.post(url, data=form)
                response.raise_for_status()

                logger.info(f"Ответ успешно отправлен в чат {chat_id}")
                try:
                    return response.json()
                except ValueError:
                    # Статус 2xx: сообщение доставлено, тело ответа не важно
                    logger.debug(f"Ответ Telegram для чата {chat_id} не JSON, тело пропущено")
                    return {}

            except httpx.HTTPStatusError as e:
                status_code = e.response.status_code
                body = e.response.text
                logger.error(f"Telegram API вернул статус {status_code} для чата {chat_id}: {body}")
                raise TelegramSendError(
                    f"Telegram API вернул статус {status_code}",
                    status_code=status_code,
                    body=body,
                ) from e
            except httpx.HTTPError as e:
                # str(e) может содержать URL с токеном, пишем только тип ошибки
                logger.error(f"HTTP ошибка при отправке сообщения в чат {chat_id}: {type(e).__name__}")
                raise TelegramSendError(f"Сетевая ошибка: {type(e).__name__}") from e
