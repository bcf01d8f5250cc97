import pytest
import os
import sys
from datetime import datetime, timedelta, timezone
from unittest.mock import patch
from fastapi.testclient import TestClient

# Добавляем корневую директорию проекта в путь Python
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from tgmbk.core.config import Settings
from tgmbk.core.logging_config import setup_test_logging
from tgmbk.main import create_app


TEST_TOKEN = "123456:test-token"
TEST_LOCATIONS = "L0,L1,L2,L3,L4,L5,L6"
HONG_KONG = timezone(timedelta(hours=8))


def pytest_configure(config):
    """Регистрируем кастомные маркеры"""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (may be slow)"
    )


@pytest.fixture(scope="session", autouse=True)
def test_logging():
    setup_test_logging("DEBUG")


@pytest.fixture
def settings():
    """Настройки без чтения .env"""
    return Settings(
        _env_file=None,
        port=8080,
        tgmbk_token=TEST_TOKEN,
        tgmbk_locations=TEST_LOCATIONS,
        timezone="Asia/Hong_Kong",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """FastAPI test client."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def webhook_path():
    return f"/{TEST_TOKEN}"


@pytest.fixture
def freeze_day():
    """Фиксирует текущее время обработчика на 08:00 указанного дня в Гонконге"""
    patchers = []

    def _freeze(year: int, month: int, day: int):
        moment = datetime(year, month, day, 8, 0, tzinfo=HONG_KONG)
        patcher = patch("tgmbk.routers.webhook.now_in_timezone", return_value=moment)
        patchers.append(patcher)
        return patcher.start()

    yield _freeze
    for patcher in patchers:
        patcher.stop()


@pytest.fixture
def wednesday(freeze_day):
    """Среда 2024-01-03"""
    return freeze_day(2024, 1, 3)
