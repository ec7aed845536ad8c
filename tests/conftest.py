# ===============================================
# Shared fixtures: fake HTTP transport, clean env
# ===============================================

import json
import logging

import pytest

from promptgen.generate.clients import gemini_client


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code


class FakePost:
    """Stands in for requests.post; records every call and replays one body."""

    def __init__(self, body: str, status_code: int = 200):
        self.body = body
        self.status_code = status_code
        self.calls = []

    def __call__(self, url, data=None, headers=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "data": data, "headers": headers, "timeout": timeout})
        return FakeResponse(self.body, self.status_code)

    @property
    def last_payload(self) -> dict:
        return json.loads(self.calls[-1]["data"])


def gemini_body(text: str) -> str:
    return json.dumps({"candidates": [{"content": {"parts": [{"text": text}]}}]})


@pytest.fixture
def fake_post(monkeypatch):
    """Install a FakePost; call the returned factory with the response body."""

    def install(body: str, status_code: int = 200) -> FakePost:
        fp = FakePost(body, status_code)
        monkeypatch.setattr(gemini_client.requests, "post", fp)
        return fp

    return install


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory (no .env) with no API settings in the environment."""
    for name in (
        "GEMINI_API_KEY",
        "GEMINI_BASE_URL",
        "AI_TEMPERATURE",
        "AI_TOP_P",
        "AI_MAX_TOKENS",
        "AI_NUM_RESULTS",
        "AI_TIMEOUT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_promptgen_logger():
    yield
    logger = logging.getLogger("promptgen")
    for h in list(logger.handlers):
        logger.removeHandler(h)
