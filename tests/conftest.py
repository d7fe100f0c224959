from unittest.mock import MagicMock, patch

import pytest
from loguru import logger

from data.config import LOGIN_ENDPOINT, SCORE_ENDPOINT, SIGN_ENDPOINT

KEY_ONE = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
KEY_TWO = "0x" + "11" * 32


def make_response(payload):
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


class FakeClient:
    def __init__(self, api, proxy):
        self.api = api
        self.proxy = proxy
        self.headers = {}

    def post(self, endpoint, data=None):
        self.api.calls.append((endpoint, data, dict(self.headers)))
        queued = self.api.responses[endpoint]
        payload = queued.pop(0) if isinstance(queued, list) else queued
        if isinstance(payload, Exception):
            raise payload
        return make_response(payload)


class FakeCoreSky:
    """Stands in for the remote API at the create_session seam."""

    def __init__(self):
        self.calls = []
        self.clients = []
        self.responses = {
            LOGIN_ENDPOINT: {"code": 200, "message": "ok", "debug": {"token": "tok-123"}},
            SIGN_ENDPOINT: {"code": 200, "message": "ok", "debug": {"isSign": 1, "signDay": 7}},
            SCORE_ENDPOINT: {"code": 200, "message": "ok", "debug": {"score": 1234}},
        }

    def create_session(self, proxy=None):
        client = FakeClient(self, proxy)
        self.clients.append(client)
        return client

    def endpoints(self):
        return [endpoint for endpoint, _, _ in self.calls]


@pytest.fixture
def coresky_api():
    api = FakeCoreSky()
    with patch("core.checkin.create_session", side_effect=api.create_session) as factory:
        api.factory = factory
        yield api


@pytest.fixture(autouse=True)
def sleep():
    with patch("time.sleep") as mocked:
        yield mocked


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
