# api/config.py
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """从环境变量 (或 .env) 读取的进程级配置"""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Twilio 凭证, 缺失时进程无法启动
    TWILIO_ACCOUNT_SID: Optional[str] = None
    TWILIO_AUTH_TOKEN: Optional[str] = None

    # 发送方 / 接收方号码, 缺失时每个请求返回 500
    TWILIO_PHONE_NUMBER: Optional[str] = None
    TO_PHONE_NUMBER: Optional[str] = None

    LOG_LEVEL: str = "INFO"

    HOST: str = "0.0.0.0"
    PORT: int = 8000


@lru_cache()
def get_settings() -> Settings:
    return Settings()
