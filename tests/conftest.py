"""共享 fixture: 通过 dependency_overrides 注入假的 Twilio 客户端"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from api.config import Settings, get_settings
from api.dependencies import create_twilio_client
from api.routes import get_sms_ops
from api.sms_operations import SmsOperations
from main import app

FROM_NUMBER = "+15550000001"
TO_NUMBER = "+15550000002"


@pytest.fixture()
def valid_alert() -> dict:
    return {
        "symbol": "AAPL",
        "action": "BUY",
        "price": 150.25,
        "timestamp": "2024-01-01T00:00:00Z",
    }


@pytest.fixture()
def fake_twilio() -> MagicMock:
    """替代 ``twilio.rest.Client``, 记录 ``messages.create`` 的调用"""
    client = MagicMock()
    client.messages.create.return_value = MagicMock(sid="SM0123456789")
    return client


def make_settings(**overrides) -> Settings:
    values = {
        "TWILIO_ACCOUNT_SID": "AC_test",
        "TWILIO_AUTH_TOKEN": "token_test",
        "TWILIO_PHONE_NUMBER": FROM_NUMBER,
        "TO_PHONE_NUMBER": TO_NUMBER,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture()
def settings_factory():
    return make_settings


@pytest.fixture()
def relay_settings() -> Settings:
    return make_settings()


@pytest.fixture()
def client(fake_twilio, relay_settings):
    """短信发送使用 ``fake_twilio`` 与 ``relay_settings`` 的 TestClient

    不进入 lifespan, 因此不需要真实凭证
    """
    app.dependency_overrides[get_sms_ops] = lambda: SmsOperations(
        lambda: fake_twilio, relay_settings
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def reset_caches():
    get_settings.cache_clear()
    create_twilio_client.cache_clear()
    yield
    get_settings.cache_clear()
    create_twilio_client.cache_clear()
