"""Shared fixtures: in-memory token provider and recording transport."""

import time

import pytest

from wecom_api.auth.token import AccessToken
from wecom_api.core.sdk import WeComAPI
from wecom_api.utils.config import ApiConfig

PREFIX = "https://qyapi.example.com/cgi-bin/"
TOKEN = "tok_abc123"


class RecordingTransport:
    """Records every (url, options) pair and returns a canned result."""

    def __init__(self, result=None):
        self.calls = []
        self.result = result if result is not None else {"errcode": 0, "errmsg": "ok"}

    async def __call__(self, url, options=None):
        self.calls.append((url, options))
        return self.result


class FakeTokenProvider:
    def __init__(self, token=TOKEN, error=None):
        self.token = token
        self.error = error
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return AccessToken(access_token=self.token, expires_at=time.time() + 7200)


@pytest.fixture
def config() -> ApiConfig:
    return ApiConfig(corpid="ww_corp", agentid="1000002", prefix=PREFIX)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def token_provider() -> FakeTokenProvider:
    return FakeTokenProvider()


@pytest.fixture
def api(config, token_provider, transport) -> WeComAPI:
    return WeComAPI(config, token_provider, transport)
