"""Shared fixtures for z.ai MCP server tests."""

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from zai_mcp_server.client import ZaiClient
from zai_mcp_server.config import AppConfig, ZaiConfig
from zai_mcp_server.dispatcher import ToolDispatcher

BASE_URL = "https://api.zai.test"
API_KEY = "test-key"


class RecordingUpstream:
    """Mocked z.ai API that records every request it receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last_body(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(zai=ZaiConfig(api_key=API_KEY, base_url=BASE_URL)).validate()


@pytest.fixture
def make_dispatcher(config):
    """Build a dispatcher whose upstream answers through ``handler``."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]):
        upstream = RecordingUpstream(handler)
        client = ZaiClient(config.zai, transport=httpx.MockTransport(upstream))
        return ToolDispatcher(config, client=client), upstream

    return _make
