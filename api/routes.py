import json

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from api.config import Settings, get_settings
from api.dependencies import create_twilio_client
from api.exceptions import MissingPhoneNumberError
from api.logger import logger
from api.models import TradingAlert
from api.sms_operations import SmsOperations

router = APIRouter()

# 所有方法都注册到同一个路由, 由 webhook 自己返回 405
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def get_sms_ops(settings: Settings = Depends(get_settings)) -> SmsOperations:
    return SmsOperations(create_twilio_client, settings)


def error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error})


async def parse_alert(request: Request):
    raw = await request.body()
    if not raw.strip():
        return None

    try:
        payload = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None

    if not isinstance(payload, dict):
        return None

    try:
        return TradingAlert.model_validate(payload)
    except ValidationError:
        return None


@router.api_route("/webhook", methods=ALL_METHODS)
async def webhook(request: Request, sms_ops: SmsOperations = Depends(get_sms_ops)):
    if request.method != "POST":
        return error_response(405, "Method not allowed")

    alert = await parse_alert(request)
    if alert is None:
        logger.warning("无法解析 Webhook 请求体")
        return error_response(400, "Invalid request body")

    logger.info(f"收到 Webhook 请求: {alert.model_dump()}")

    try:
        if not alert.has_required_fields():
            logger.warning(f"Webhook 请求缺少必填字段: {alert.model_dump()}")
            return error_response(400, "Missing required fields")

        message = alert.to_sms()

        try:
            from_, to = sms_ops.resolve_numbers()
        except MissingPhoneNumberError as e:
            logger.error(str(e))
            return error_response(500, "Missing phone number environment variables")

        await sms_ops.send_sms(message, from_, to)
        return {"success": True, "message": "SMS sent"}

    except Exception:
        logger.exception("发送短信时发生错误")
        return error_response(500, "Failed to send SMS")
