import json

import httpx
import pytest

from genderlator.services.gemini_translator import GeminiTranslator, ProviderConfig


class StubProvider:
    """Заглушка Gemini: отдаёт заданный ответ и считает вызовы."""

    def __init__(self, status_code=200, payload=None, text=None, exc=None):
        self.status_code = status_code
        self.payload = payload
        self.text = text
        self.exc = exc
        self.requests = []

    @property
    def calls(self):
        return len(self.requests)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def last_body(self):
        return json.loads(self.requests[-1].content)


def gemini_payload(text):
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


@pytest.fixture
def stub_provider():
    return StubProvider(payload=gemini_payload("  Jestem zła  "))


@pytest.fixture
def provider_config():
    return ProviderConfig(api_key="test-key", model="gemini-test", timeout=5.0)


@pytest.fixture
def make_gemini(provider_config):
    def factory(stub, config=None):
        return GeminiTranslator(config or provider_config, transport=stub.transport())

    return factory
