# api/exceptions.py


class MissingCredentialsError(RuntimeError):
    """TWILIO_ACCOUNT_SID / TWILIO_AUTH_TOKEN 未配置"""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(
            "Missing required Twilio environment variables: " + " and ".join(missing)
        )
        self.missing = missing


class MissingPhoneNumberError(RuntimeError):
    """发送方或接收方号码未配置"""

    def __init__(self, missing: list[str]) -> None:
        super().__init__("Missing phone number environment variables: " + ", ".join(missing))
        self.missing = missing
