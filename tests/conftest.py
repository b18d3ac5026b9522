"""Pytest configuration and fixtures."""

import os

import pytest
from langchain_core.messages import AIMessage
from langchain_core.runnables import RunnableLambda


def pytest_configure(config):
    """Set up test environment variables before tests run."""
    os.environ.setdefault("GEMINI_API_KEY", "test-api-key")
    os.environ.setdefault("LLM_MODEL", "gemini-test")
    # Keep Secret Manager out of unit tests
    os.environ.pop("GOOGLE_PROJECT_ID", None)


@pytest.fixture
def mock_settings():
    """Provide mock settings for testing."""
    from src.config import Settings

    return Settings(
        gemini_api_key="test-api-key",
        llm_model="gemini-test",
        _env_file=None,
    )


@pytest.fixture
def fake_llm():
    """Factory for a chat-model stand-in that records the messages it receives.

    Returns (llm, calls); ``calls`` holds one list of messages per invocation.
    """

    def factory(response: str = "", error: Exception | None = None):
        calls: list = []

        def respond(prompt_value):
            calls.append(prompt_value.to_messages())
            if error is not None:
                raise error
            return AIMessage(content=response)

        return RunnableLambda(respond), calls

    return factory


class StubGenerator:
    """Content generator returning a canned answer and recording requests."""

    def __init__(self, response: str = "", error: Exception | None = None):
        self.response = response
        self.error = error
        self.requests: list = []

    def generate(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response

    async def agenerate(self, request):
        return self.generate(request)


@pytest.fixture
def stub_generator():
    """Factory for StubGenerator instances."""
    return StubGenerator
