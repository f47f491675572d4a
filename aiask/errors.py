from __future__ import annotations

USAGE = (
    "Usage:\n"
    "  ask \"question\"\n"
    "  echo \"question\" | ask\n"
    "  cat file | ask \"question\""
)


class AskError(RuntimeError):
    """Base class for everything the CLI reports and exits on."""


class ConfigError(AskError):
    pass


class UsageError(AskError):
    def __init__(self, message: str = USAGE):
        super().__init__(message)


class ChatError(AskError):
    pass


class APIError(ChatError):
    def __init__(self, status: int, reason: str, body: str):
        self.status = status
        self.reason = reason
        self.body = body
        status_text = f"{status} {reason}".strip()
        super().__init__(f"API error: {status_text} - {body}")


class TransportError(ChatError):
    pass


class DecodeError(ChatError):
    pass


class RenderError(AskError):
    pass
