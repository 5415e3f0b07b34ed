from functools import lru_cache

from twilio.rest import Client

from api.config import get_settings
from api.exceptions import MissingCredentialsError
from api.logger import logger


@lru_cache()
def create_twilio_client() -> Client:
    # 从环境变量获取Twilio凭证, 缺失则直接失败
    settings = get_settings()
    missing = [
        name
        for name in ("TWILIO_ACCOUNT_SID", "TWILIO_AUTH_TOKEN")
        if not getattr(settings, name)
    ]
    if missing:
        raise MissingCredentialsError(missing)

    logger.info("Twilio 客户端已初始化")
    return Client(settings.TWILIO_ACCOUNT_SID, settings.TWILIO_AUTH_TOKEN)
