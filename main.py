from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.config import get_settings
from api.dependencies import create_twilio_client
from api.logger import logger
from api.routes import router as api_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 启动前先创建 Twilio 客户端, 凭证缺失时进程直接退出
    create_twilio_client()
    logger.info("服务已启动, webhook 地址: /api/webhook")
    yield


app = FastAPI(title="TradingView SMS Relay", lifespan=lifespan)

app.include_router(api_router, prefix="/api")


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    # 路由未注册的方法 (TRACE 等) 也返回统一的 405 格式
    if exc.status_code == 405:
        return JSONResponse(status_code=405, content={"error": "Method not allowed"})
    return await http_exception_handler(request, exc)


@app.get("/")
async def root():
    return {"message": "TradingView SMS relay", "webhook": "/api/webhook"}


# 这个条件语句确保在本地运行时才执行uvicorn.run()
# Vercel会自动处理应用的运行，不需要这部分代码
if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
