"""Pytest configuration and fixtures for test suite."""

import httpx
import pytest
from fastapi.testclient import TestClient

from addin.host import AsyncResult, Clipboard, HostError, ItemType, MailItem

SERVICE_MODULES = (
    "services.summarize",
    "services.actions",
    "services.draft",
    "services.improve",
    "services.reply",
)


class FakeLLM:
    """Stands in for services.llm.complete and records every call."""

    def __init__(self):
        self.calls = []
        self.text = "Mocked response"
        self.error = None

    async def __call__(self, system, prompt):
        self.calls.append((system, prompt))
        if self.error is not None:
            raise self.error
        return self.text


class FakeMailItem(MailItem):
    def __init__(self, subject="Q3 plan", body="Please review the budget by Friday.",
                 item_type=ItemType.MESSAGE, has_body=True, read_error=None, write_error=None):
        self.subject = subject
        self.body = body
        self.item_type = item_type
        self.has_body = has_body
        self.read_error = read_error
        self.write_error = write_error
        self.written = []

    async def get_body(self, coercion=None):
        if self.read_error is not None:
            return AsyncResult.failed(self.read_error)
        return AsyncResult.succeeded(self.body)

    async def set_body(self, content, coercion=None):
        if self.write_error is not None:
            return AsyncResult.failed(self.write_error)
        self.written.append((content, coercion))
        return AsyncResult.succeeded()


class FakeClipboard(Clipboard):
    def __init__(self):
        self.text = None

    async def write_text(self, text):
        self.text = text


@pytest.fixture
def fake_llm(monkeypatch):
    """Patch the model call in every operation module."""
    fake = FakeLLM()
    for name in SERVICE_MODULES:
        monkeypatch.setattr(f"{name}.complete", fake)
    return fake


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setattr("services.llm.GEMINI_API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.setattr("services.llm.GEMINI_API_KEY", None)


@pytest.fixture
def test_client():
    """Create a test client for FastAPI."""
    from main import app

    return TestClient(app)


class GeminiCalls(list):
    """Requests sent to Gemini, plus the keyword arguments of each client."""

    def __init__(self):
        super().__init__()
        self.client_kwargs = []

    def client(self, real_client, transport, kwargs):
        self.client_kwargs.append(kwargs)
        return real_client(transport=transport, **kwargs)


@pytest.fixture
def mock_gemini(monkeypatch):
    """Route the Gemini HTTP call through an httpx.MockTransport handler."""
    import services.llm as llm

    real_client = httpx.AsyncClient
    seen = GeminiCalls()

    def install(handler):
        def record(request):
            seen.append(request)
            return handler(request)

        monkeypatch.setattr(
            llm.httpx,
            "AsyncClient",
            lambda **kw: seen.client(real_client, httpx.MockTransport(record), kw),
        )
        return seen

    return install


@pytest.fixture
def mail_item():
    return FakeMailItem()


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def host_error():
    return HostError("Mailbox is busy", code=9002, name="GenericResponseError")
