"""
Pytest configuration and shared fixtures for kotoba_service tests.
"""

import asyncio
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from kotoba_service.core import dependencies
from kotoba_service.core.settings import Settings
from kotoba_service.core.startup import build_http_client
from kotoba_service.main import create_app
from kotoba_service.services.word_detail_service import WordDetailService
from tests.helpers import DEFAULT_URL, UpstreamStub


@pytest.fixture
def upstream():
    return UpstreamStub(
        body={
            "id": "chatcmpl-1",
            "object": "chat.completion",
            "choices": [
                {
                    "index": 0,
                    "message": {"role": "assistant", "content": "{\"originalWord\": \"食べた\"}"},
                    "finish_reason": "stop",
                }
            ],
        }
    )


@pytest.fixture
def make_service():
    """Builds services on the production client settings, closing every client afterwards."""
    clients: List[httpx.AsyncClient] = []

    def _make(stub: UpstreamStub, api_key: str = "server-key", api_url: str = DEFAULT_URL,
              default_model: str = "default-model") -> WordDetailService:
        http_client = build_http_client(Settings(_env_file=None), transport=httpx.MockTransport(stub))
        clients.append(http_client)
        return WordDetailService(http_client, api_key=api_key, api_url=api_url, default_model=default_model)

    yield _make

    # A private loop, so the loop pytest-asyncio manages is left alone
    loop = asyncio.new_event_loop()
    try:
        for http_client in clients:
            loop.run_until_complete(http_client.aclose())
    finally:
        loop.close()


@pytest.fixture
def make_client(make_service) -> Callable[..., TestClient]:
    def _make(stub: UpstreamStub, api_key: str = "server-key") -> TestClient:
        settings = Settings(_env_file=None, API_KEY=api_key, API_URL=DEFAULT_URL, DEFAULT_MODEL="default-model")
        app = create_app(settings)
        service = make_service(stub, api_key=api_key)
        app.dependency_overrides[dependencies.get_word_detail_service] = lambda: service
        return TestClient(app)

    return _make


@pytest.fixture
def sample_request() -> dict:
    return {
        "word": "食べた",
        "pos": "動詞",
        "sentence": "昨日、寿司を食べた。",
        "furigana": "たべた",
        "romaji": "tabeta",
    }
