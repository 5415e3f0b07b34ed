# api/models.py
import math
from decimal import Decimal
from typing import Optional, Union

from pydantic import BaseModel, StrictFloat, StrictInt, StrictStr, field_validator


def format_number(value: Union[int, float]) -> str:
    # 按 TradingView (JS) 的数字打印方式输出, 避免出现 150.0 / nan / 1e-05
    if isinstance(value, int):
        if abs(value) < 10**21:
            return str(value)
        value = float(value)

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    if 1e-6 <= abs(value) < 1e21:
        # Decimal(repr) 保留最短表示, 再转成定点格式
        text = format(Decimal(repr(value)), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text

    mantissa, exponent = repr(value).split("e")
    exponent = int(exponent)
    return f"{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"


class TradingAlert(BaseModel):
    # 字段都允许缺省, 由 webhook 自己判断 "Missing required fields"
    symbol: Optional[str] = None
    action: Optional[str] = None
    # TradingView 模板里 "{{close}}" 常被加引号, 数字字符串原样转发
    price: Optional[Union[StrictInt, StrictFloat, StrictStr]] = None
    timestamp: Optional[str] = None

    @field_validator("price")
    @classmethod
    def price_must_be_numeric(cls, value):
        if isinstance(value, str):
            value = value.strip()
            if value and not math.isfinite(float(value)):
                raise ValueError("price must be a finite number")
        return value

    def price_value(self) -> float:
        if self.price is None or self.price == "":
            return 0.0
        return float(self.price)

    def has_required_fields(self) -> bool:
        # price 为 0 或 NaN 同样视为缺失
        price = self.price_value()
        return bool(self.symbol and self.action and price and not math.isnan(price))

    def format_price(self) -> str:
        if isinstance(self.price, str):
            return self.price
        return format_number(self.price)

    def to_sms(self) -> str:
        return f"🚨 {self.symbol} {self.action} at ${self.format_price()}"
