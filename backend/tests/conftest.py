"""Pytest fixtures for the code review service."""

import asyncio
import os

# Keep the real LLM backend out of every test run
os.environ["OPENAI_API_KEY"] = ""
os.environ["ENRICHMENT_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.code_review import CodeReviewService, get_code_review_service
from app.services.enrichment import EnrichmentAdapter


class StubMessage:
    def __init__(self, content):
        self.content = content


class StubLLM:
    """Stands in for ChatOpenAI: returns a canned reply, raises, or stalls."""

    def __init__(self, content=None, error: Exception | None = None, delay: float = 0.0):
        self.content = content
        self.error = error
        self.delay = delay
        self.calls = []

    async def ainvoke(self, messages):
        self.calls.append(list(messages))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return StubMessage(self.content)


def make_adapter(llm: StubLLM, **kwargs) -> EnrichmentAdapter:
    kwargs.setdefault("enabled", True)
    kwargs.setdefault("timeout_seconds", 1.0)
    kwargs.setdefault("min_code_length", 10)
    return EnrichmentAdapter(api_key="", llm=llm, **kwargs)


@pytest.fixture()
def heuristic_service() -> CodeReviewService:
    """Service with enrichment switched off."""
    return CodeReviewService(enrichment=EnrichmentAdapter(enabled=False))


@pytest.fixture()
def client(heuristic_service):
    app.dependency_overrides[get_code_review_service] = lambda: heuristic_service
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
