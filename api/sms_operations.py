from typing import Callable, Optional

from fastapi.concurrency import run_in_threadpool
from twilio.rest import Client

from api.config import Settings
from api.exceptions import MissingPhoneNumberError
from api.logger import logger


class SmsOperations:
    """Twilio 短信发送封装, 客户端由工厂函数提供 (测试时可替换)"""

    def __init__(self, client_factory: Callable[[], Client], settings: Settings):
        self.client_factory = client_factory
        self.settings = settings

    def resolve_numbers(self) -> tuple[str, str]:
        from_ = self.settings.TWILIO_PHONE_NUMBER
        to = self.settings.TO_PHONE_NUMBER

        missing = []
        if not from_:
            missing.append("TWILIO_PHONE_NUMBER")
        if not to:
            missing.append("TO_PHONE_NUMBER")
        if missing:
            raise MissingPhoneNumberError(missing)

        return from_, to

    async def send_sms(self, body: str, from_: Optional[str] = None, to: Optional[str] = None):
        if from_ is None or to is None:
            from_, to = self.resolve_numbers()

        client = self.client_factory()
        # twilio SDK 是同步的, 放到线程池里执行
        message = await run_in_threadpool(
            client.messages.create,
            body=body,
            from_=from_,
            to=to,
        )
        logger.info(f"短信已发送: to={to} sid={getattr(message, 'sid', None)}")
        return message
