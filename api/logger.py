# api/logger.py
import logging
import sys

from api.config import get_settings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def setup_logging(name: str = "relay") -> logging.Logger:
    level = getattr(logging, get_settings().LOG_LEVEL.upper(), logging.INFO)

    log = logging.getLogger(name)
    log.setLevel(level)

    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)

    # uvicorn 会给 root 挂自己的 handler, 防止重复输出
    log.propagate = False
    return log


logger = setup_logging()
