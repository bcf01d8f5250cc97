from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


router = APIRouter()

GREETING = "Hello World :)"


@router.api_route("/",
    methods=["GET", "POST"],
    response_class=PlainTextResponse,
    summary="Root",
    description="Публичная проверка доступности сервиса.",
)
async def root() -> str:
    return GREETING
