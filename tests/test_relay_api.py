"""Relay HTTP surface: /api/translate and /api/health."""

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from conftest import StubProvider, gemini_payload
from genderlator.core.config import Settings
from genderlator.core.deps import build_translator, get_translator
from genderlator.main import app
from genderlator.services.gemini_translator import GeminiTranslator, ProviderConfig
from genderlator.services.phrasebook import PhrasebookTranslator


@pytest.fixture
def relay():
    """Клиент relay с подменённым провайдером."""

    def install(stub, api_key="test-key"):
        config = ProviderConfig(api_key=api_key, timeout=5.0)
        app.dependency_overrides[get_translator] = lambda: GeminiTranslator(
            config, transport=stub.transport()
        )
        return TestClient(app)

    yield install
    app.dependency_overrides.clear()


def test_translate_round_trip(relay):
    stub = StubProvider(payload=gemini_payload("Jestem zła"))
    client = relay(stub)

    response = client.post(
        "/api/translate", json={"text": "Nic mi nie jest", "mode": "female-to-male"}
    )

    assert response.status_code == 200
    assert response.json() == {
        "translation": "Jestem zła",
        "mode": "female-to-male",
        "originalText": "Nic mi nie jest",
    }
    assert stub.calls == 1


@pytest.mark.parametrize(
    "body",
    [
        {"mode": "female-to-male"},
        {"text": "", "mode": "female-to-male"},
        {"text": 12, "mode": "female-to-male"},
        {"text": "Dobra"},
        {"text": "Dobra", "mode": "sideways"},
    ],
)
def test_invalid_input_is_400(relay, body):
    stub = StubProvider(payload=gemini_payload("x"))
    response = relay(stub).post("/api/translate", json=body)

    assert response.status_code == 400
    assert "error" in response.json()
    assert stub.calls == 0


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"content": "not json", "headers": {"content-type": "application/json"}},
        {"json": "hello"},
        {"json": []},
    ],
    ids=["no-body", "malformed-json", "string-body", "list-body"],
)
def test_unusable_body_is_400(relay, kwargs):
    stub = StubProvider(payload=gemini_payload("x"))
    response = relay(stub).post("/api/translate", **kwargs)

    assert response.status_code == 400
    assert response.json() == {"error": 'Missing or invalid "text" field'}
    assert stub.calls == 0


def test_missing_key_is_500(relay):
    stub = StubProvider(payload=gemini_payload("x"))
    response = relay(stub, api_key=None).post(
        "/api/translate", json={"text": "Dobra", "mode": "male-to-female"}
    )

    assert response.status_code == 500
    assert response.json() == {"error": "API key not configured"}
    assert stub.calls == 0


@pytest.mark.parametrize("status", [429, 503])
def test_provider_status_is_mirrored(relay, status):
    stub = StubProvider(status_code=status, text="quota exceeded")
    response = relay(stub).post(
        "/api/translate", json={"text": "Dobra", "mode": "male-to-female"}
    )

    assert response.status_code == status
    assert response.json() == {
        "error": "Translation service error",
        "details": "quota exceeded",
    }


def test_empty_provider_reply_is_500(relay):
    stub = StubProvider(payload={"candidates": []})
    response = relay(stub).post(
        "/api/translate", json={"text": "Dobra", "mode": "male-to-female"}
    )

    assert response.status_code == 500
    assert response.json() == {"error": "No translation received from AI"}


def test_unexpected_failure_is_500(relay):
    stub = StubProvider(exc=RuntimeError("boom"))
    response = relay(stub).post(
        "/api/translate", json={"text": "Dobra", "mode": "male-to-female"}
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error", "message": "boom"}


def test_health_does_not_touch_provider(relay):
    stub = StubProvider(status_code=500, text="down")
    response = relay(stub).get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["timestamp"]
    assert stub.calls == 0


class TestTranslatorSelection:
    def test_gemini_is_default(self):
        translator = build_translator(Settings(GOOGLE_AI_API_KEY="k", _env_file=None))
        assert isinstance(translator, GeminiTranslator)
        assert translator.config.api_key == "k"

    def test_phrasebook_only_when_selected(self):
        translator = build_translator(
            Settings(TRANSLATOR_BACKEND="phrasebook", _env_file=None)
        )
        assert isinstance(translator, PhrasebookTranslator)

    def test_unknown_backend_fails_when_settings_load(self):
        with pytest.raises(ValidationError):
            Settings(TRANSLATOR_BACKEND="openai", _env_file=None)

    def test_settings_feed_provider_config(self):
        config = ProviderConfig.from_settings(
            Settings(
                GOOGLE_AI_MODEL="gemini-x",
                GOOGLE_AI_TEMPERATURE=1.3,
                REQUEST_TIMEOUT_SECONDS=3,
                _env_file=None,
            )
        )
        assert config.model == "gemini-x"
        assert config.generation.temperature == 1.3
        assert config.generation.max_output_tokens == 256
        assert config.timeout == 3
