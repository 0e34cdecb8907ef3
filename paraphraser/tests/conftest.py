"""Shared test fixtures."""

import httpx
import pytest
from fastapi.testclient import TestClient

from paraphraser.main import create_app
from paraphraser.services.openai_service import AsyncOpenAIService
from paraphraser.settings import Settings
from paraphraser.tests.stubs import TEST_API_KEY, RecordingStub


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key=TEST_API_KEY, openai_base_url="https://api.openai.com/v1", debug=True)


@pytest.fixture
def provider() -> RecordingStub:
    return RecordingStub()


@pytest.fixture
def make_client(settings):
    def _make(stub: RecordingStub) -> TestClient:
        llm_service = AsyncOpenAIService(settings, http_client=httpx.AsyncClient(transport=stub.transport()))
        return TestClient(create_app(settings, llm_service=llm_service))

    return _make


@pytest.fixture
def client(make_client, provider) -> TestClient:
    with make_client(provider) as test_client:
        yield test_client
