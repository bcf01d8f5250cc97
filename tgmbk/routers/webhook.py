from datetime import tzinfo
from fastapi import APIRouter, Depends, Request, Response, status
import logging

from tgmbk.core.config import Settings
from tgmbk.schemas.telegram import UpdateDecodeError, decode_update
from tgmbk.services.breakfast import derive_reply
from tgmbk.services.telegram_client import EmptyMessageError, TelegramClient, TelegramSendError
from tgmbk.utils.weekday import now_in_timezone


logger = logging.getLogger(__name__)
router = APIRouter()


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_timezone(request: Request) -> tzinfo:
    return request.app.state.timezone


def get_telegram_client(request: Request) -> TelegramClient:
    return request.app.state.telegram_client


# Путь роутера пустой: секретный токен подставляется как prefix в create_app
@router.post("",
    summary="Telegram Webhook",
    description="Обработчик webhook-ов от Telegram Bot API. Отвечает, где сегодня (или завтра) завтрак.",
    response_description="Ответ отправлен в чат",
    include_in_schema=False,
)
async def telegram_webhook(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    tz: tzinfo = Depends(get_timezone),
    telegram: TelegramClient = Depends(get_telegram_client),
) -> Response:
    """
    Обработчик webhook от Telegram.
    Разбирает update, вычисляет место завтрака и отвечает в чат.
    Ошибки не повторяются: пишем в лог и возвращаем код ошибки.
    """
    raw = await request.body()
    try:
        update = decode_update(raw)
    except UpdateDecodeError as e:
        logger.warning(f"Отклонено обновление от Telegram: {e.reason}")
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    message = update.message
    logger.info(f"Получено обновление от Telegram: update_id={update.update_id}, chat_id={message.chat.id}")

    reply = derive_reply(message.text, now_in_timezone(tz), settings.locations)

    try:
        await telegram.send_message(
            chat_id=message.chat.id,
            text=reply,
            reply_to_message_id=message.message_id,
        )
    except TelegramSendError as e:
        logger.error(f"Ответ на update_id={update.update_id} не отправлен: {e} (status={e.status_code}, body={e.body!r})")
        return Response(status_code=status.HTTP_502_BAD_GATEWAY)
    except EmptyMessageError as e:
        logger.error(f"Ответ на update_id={update.update_id} не отправлен: {e}")
        return Response(status_code=status.HTTP_502_BAD_GATEWAY)

    return Response(status_code=status.HTTP_200_OK)
