from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Protocol
import http.client, json, logging
import urllib.error
import urllib.request

from ..errors import APIError, DecodeError, TransportError

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Message:
    role: str       # "system" | "user"
    content: str

@dataclass
class ChatRequest:
    model: str
    messages: List[Message] = field(default_factory=list)
    stream: bool = False

    def to_json(self) -> bytes:
        return json.dumps(asdict(self), ensure_ascii=False).encode("utf-8")

@dataclass
class HTTPResponse:
    status: int
    reason: str
    body: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

class Transport(Protocol):
    def post_json(self, url: str, headers: Dict[str, str], body: bytes) -> HTTPResponse: ...

class UrllibTransport:
    """POST through urllib; HTTP error statuses come back as responses, not exceptions."""

    def post_json(self, url: str, headers: Dict[str, str], body: bytes) -> HTTPResponse:
        try:
            req = urllib.request.Request(url, data=body, headers=headers, method="POST")
            with urllib.request.urlopen(req) as resp:
                return HTTPResponse(resp.status, resp.reason or "", resp.read())
        except urllib.error.HTTPError as e:
            try:
                payload = e.read()
            except OSError:
                payload = b""
            return HTTPResponse(e.code, e.reason or "", payload or b"")
        except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as e:
            raise TransportError(str(getattr(e, "reason", e))) from e

def parse_content(body: bytes) -> Optional[str]:
    """choices[0].message.content, or None when the model returned no choices."""
    try:
        data = json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        raise DecodeError(f"invalid JSON in response: {e}") from e
    if not isinstance(data, dict):
        raise DecodeError("response is not a JSON object")
    choices = data.get("choices")
    if choices is None:
        choices = []
    if not isinstance(choices, list):
        raise DecodeError("'choices' is not a list")
    if not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        raise DecodeError("'choices[0]' is not an object")
    message = first.get("message")
    if message is None:
        message = {}
    if not isinstance(message, dict):
        raise DecodeError("'choices[0].message' is not an object")
    content = message.get("content")
    if content is None:
        return ""
    if not isinstance(content, str):
        raise DecodeError("'choices[0].message.content' is not a string")
    return content

class ChatClient:
    def __init__(self, base_url: str, api_key: str, model: str, transport: Transport | None = None):
        self.base_url = base_url
        self.api_key = api_key
        self.model = model
        self.transport = transport or UrllibTransport()

    @property
    def url(self) -> str:
        return self.base_url + "/chat/completions"

    def send(self, system_prompt: str, question: str) -> Optional[str]:
        req = ChatRequest(
            model=self.model,
            messages=[Message("system", system_prompt), Message("user", question)],
        )
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        logger.debug("POST %s model=%s", self.url, self.model)
        resp = self.transport.post_json(self.url, headers, req.to_json())
        logger.debug("response %s %s (%d bytes)", resp.status, resp.reason, len(resp.body))
        if not resp.ok:
            raise APIError(resp.status, resp.reason, resp.text())
        return parse_content(resp.body)
