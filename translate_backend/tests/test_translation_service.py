import os
import unittest
from unittest.mock import MagicMock, patch

from translate_backend.config.settings import Settings
from translate_backend.errors import (
    RATE_LIMITED_MESSAGE,
    DefaultServiceUnavailable,
    MissingCredentialError,
    ProviderHTTPError,
    ValidationError,
)
from translate_backend.models.provider_model import ProviderFamily
from translate_backend.services.provider_client_service import ProviderClient
from translate_backend.services.translation_service import PROVIDER_CALLERS, to_error_response, translate_text
from translate_backend.utils.validators import validate_translate_payload

NO_GATEWAY_ENV = {"TRANSLATE_GATEWAY_API_KEY": "", "LOVABLE_API_KEY": ""}


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        return self._payload


def chat_response(content):
    return FakeResponse(payload={"choices": [{"message": {"content": content}}]})


def make_client(response, raw=None):
    http = MagicMock()
    http.post.return_value = response
    return ProviderClient(settings=Settings(raw=raw or {}), http=http), http


class TestTranslateText(unittest.TestCase):

    def test_translate_text_calls_client(self):
        mock_client = MagicMock(spec=ProviderClient)
        mock_client.call_default_gateway.return_value = "你好"
        req = validate_translate_payload({"text": "Hello", "sourceLang": "en", "targetLang": "zh"})

        result = translate_text(req, client=mock_client)

        self.assertEqual(result, "你好")
        mock_client.call_default_gateway.assert_called_once_with("Hello", "en", "zh")

    @patch.dict(os.environ, NO_GATEWAY_ENV)
    def test_default_gateway_route(self):
        client, http = make_client(chat_response("你好"), raw={"api_keys": {"gateway": "gw-key"}})
        req = validate_translate_payload({"text": "Hello", "sourceLang": "en", "targetLang": "zh"})

        self.assertEqual(translate_text(req, client=client), "你好")

        args, kwargs = http.post.call_args
        self.assertEqual(args[0], "https://ai.gateway.lovable.dev/v1/chat/completions")
        self.assertEqual(kwargs["json"]["model"], "google/gemini-3-flash-preview")
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer gw-key")

    @patch.dict(os.environ, NO_GATEWAY_ENV)
    def test_default_gateway_without_key(self):
        client, http = make_client(chat_response("unused"))
        req = validate_translate_payload({"text": "Hello"})

        with self.assertRaises(DefaultServiceUnavailable) as ctx:
            translate_text(req, client=client)

        self.assertEqual(ctx.exception.status_code, 503)
        self.assertEqual(ctx.exception.code, "DEFAULT_SERVICE_UNAVAILABLE")
        http.post.assert_not_called()

    @patch.dict(os.environ, {"TRANSLATE_GATEWAY_API_KEY": "env-key", "LOVABLE_API_KEY": ""})
    def test_default_gateway_env_key(self):
        client, http = make_client(chat_response("ok"))
        translate_text(validate_translate_payload({"text": "Hello"}), client=client)
        _, kwargs = http.post.call_args
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer env-key")

    def test_microsoft_requires_key_before_any_call(self):
        client, http = make_client(FakeResponse())
        req = validate_translate_payload({"text": "Hello", "providerType": "microsoft"})

        with self.assertRaises(MissingCredentialError) as ctx:
            translate_text(req, client=client)

        self.assertEqual(str(ctx.exception), "Microsoft Translator requires an API Key")
        http.post.assert_not_called()

    def test_key_required_providers(self):
        for provider_type in ("google-translate", "gemini", "anthropic", "azure"):
            with self.subTest(provider_type=provider_type):
                client, http = make_client(FakeResponse())
                req = validate_translate_payload({
                    "text": "Hello",
                    "providerType": provider_type,
                    "customBaseUrl": "https://example.com",
                })
                with self.assertRaises(MissingCredentialError):
                    translate_text(req, client=client)
                http.post.assert_not_called()

    def test_rate_limited_message_and_status(self):
        client, _ = make_client(FakeResponse(429, text="Too Many Requests"))
        req = validate_translate_payload({"text": "Hello", "providerType": "openai", "customApiKey": "sk-1"})

        with self.assertRaises(ProviderHTTPError) as ctx:
            translate_text(req, client=client)

        status, body, headers = to_error_response(ctx.exception)
        self.assertEqual(body, {"error": RATE_LIMITED_MESSAGE})
        self.assertEqual(status, 500)
        self.assertEqual(headers, {"X-Upstream-Status": "429"})

    def test_key_without_provider_type_uses_openai(self):
        client, http = make_client(chat_response("Hola"))
        req = validate_translate_payload({"text": "Hello", "targetLang": "es", "customApiKey": "sk-1"})

        self.assertEqual(translate_text(req, client=client), "Hola")

        args, kwargs = http.post.call_args
        self.assertEqual(args[0], "https://api.openai.com/v1/chat/completions")
        self.assertEqual(kwargs["json"]["model"], "gpt-4o-mini")

    def test_base_url_only_skips_default_gateway(self):
        client, http = make_client(chat_response("ok"))
        req = validate_translate_payload({"text": "Hello", "customBaseUrl": "http://gateway.local:8080/v1"})

        translate_text(req, client=client)

        args, kwargs = http.post.call_args
        self.assertEqual(args[0], "http://gateway.local:8080/v1/chat/completions")
        self.assertNotIn("Authorization", kwargs["headers"])

    def test_ollama_without_key(self):
        client, http = make_client(chat_response("你好"))
        req = validate_translate_payload({
            "text": "hello",
            "sourceLang": "en",
            "targetLang": "zh",
            "providerType": "ollama",
            "customBaseUrl": "http://localhost:11434",
        })

        self.assertEqual(translate_text(req, client=client), "你好")

        args, kwargs = http.post.call_args
        self.assertEqual(args[0], "http://localhost:11434/v1/chat/completions")
        self.assertEqual(kwargs["json"]["model"], "llama3")

    def test_custom_requires_base_url(self):
        client, http = make_client(FakeResponse())
        req = validate_translate_payload({"text": "Hello", "providerType": "custom", "customApiKey": "k"})

        with self.assertRaises(MissingCredentialError) as ctx:
            translate_text(req, client=client)

        self.assertEqual(str(ctx.exception), "Custom OpenAI-compatible API requires a Base URL")
        http.post.assert_not_called()

    def test_azure_route(self):
        client, http = make_client(chat_response("Hallo"), raw={"parameters": {"azure_api_version": "2024-06-01"}})
        req = validate_translate_payload({
            "text": "Hello",
            "targetLang": "de",
            "providerType": "azure",
            "customApiKey": "az",
            "customBaseUrl": "https://res.openai.azure.com",
            "model": "prod-gpt",
        })

        self.assertEqual(translate_text(req, client=client), "Hallo")

        args, _ = http.post.call_args
        self.assertEqual(
            args[0], "https://res.openai.azure.com/openai/deployments/prod-gpt/chat/completions?api-version=2024-06-01"
        )

    def test_deeplx_route(self):
        client, http = make_client(FakeResponse(payload={"data": "Bonjour"}))
        req = validate_translate_payload({"text": "Hello", "targetLang": "fr", "providerType": "deeplx"})

        self.assertEqual(translate_text(req, client=client), "Bonjour")

        args, kwargs = http.post.call_args
        self.assertEqual(args[0], "https://api.deeplx.org/translate")
        self.assertEqual(kwargs["json"]["source_lang"], "auto")

    def test_every_family_has_a_caller(self):
        self.assertEqual(set(PROVIDER_CALLERS), set(ProviderFamily))


class TestErrorResponse(unittest.TestCase):
    def test_validation_error(self):
        status, body, headers = to_error_response(ValidationError("text_too_long", "Text is too long", 413))
        self.assertEqual((status, body, headers), (413, {"error": "Text is too long"}, {}))

    def test_default_service(self):
        status, body, _ = to_error_response(DefaultServiceUnavailable())
        self.assertEqual(status, 503)
        self.assertIn("custom translation provider", body["error"])

    def test_unknown_errors(self):
        self.assertEqual(to_error_response(RuntimeError("boom"))[:2], (500, {"error": "boom"}))
        self.assertEqual(to_error_response(RuntimeError())[:2], (500, {"error": "Unknown error"}))


if __name__ == "__main__":
    unittest.main()
