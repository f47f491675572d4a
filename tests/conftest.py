import json
import logging

import pytest

from aiask.llm.chat import HTTPResponse


class FakeTransport:
    def __init__(self, status=200, body=None, reason="OK"):
        self.status = status
        self.reason = reason
        self.body = body if body is not None else b'{"choices": []}'
        self.calls = []

    def post_json(self, url, headers, body):
        self.calls.append({"url": url, "headers": headers, "body": json.loads(body)})
        return HTTPResponse(self.status, self.reason, self.body)


def reply(content):
    return json.dumps({"choices": [{"message": {"role": "assistant", "content": content}}]}).encode()


@pytest.fixture
def ask_env(monkeypatch):
    monkeypatch.setenv("AI_ASK_BASE_URL", "http://llm.test/v1")
    monkeypatch.setenv("AI_ASK_API_KEY", "sk-test")
    monkeypatch.setenv("AI_ASK_MODEL", "test-model")
    monkeypatch.setenv("SHELL", "/bin/zsh")
    monkeypatch.delenv("AI_ASK_LOG_LEVEL", raising=False)


@pytest.fixture
def os_release(tmp_path):
    def write(text):
        p = tmp_path / "os-release"
        p.write_text(text, encoding="utf-8")
        return str(p)
    return write


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("aiask")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
