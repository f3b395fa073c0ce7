"""
/**
 * @file translate_backend/services/provider_client_service.py
 * @description 各翻译服务商调用封装：OpenAI 兼容 / Azure / Gemini / Anthropic / DeepLX / Microsoft / Google。
 */
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from translate_backend.config import Settings, load_settings
from translate_backend.errors import (
    QUOTA_EXHAUSTED_MESSAGE,
    RATE_LIMITED_MESSAGE,
    DefaultServiceUnavailable,
    ProviderHTTPError,
    ProviderResponseError,
    ProviderTransportError,
)
from translate_backend.services.prompt_service import get_system_prompt
from translate_backend.services.response_extractors import (
    extract_anthropic,
    extract_chat_completion,
    extract_deeplx,
    extract_gemini,
    extract_google_translate,
    extract_microsoft,
)
from translate_backend.utils.languages import to_deeplx_code, to_google_code, to_microsoft_code
from translate_backend.utils.text_utils import redact_secret, truncate
from translate_backend.utils.url_utils import gemini_generate_url

ANTHROPIC_VERSION = "2023-06-01"
MICROSOFT_API_VERSION = "3.0"
DEFAULT_GATEWAY_LABEL = "AI gateway"

logger = logging.getLogger("provider_client")


def _chat_messages(text: str, source_lang: str, target_lang: str) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": get_system_prompt(source_lang, target_lang)},
        {"role": "user", "content": text},
    ]


class ProviderClient:
    """
    One outbound call per translation. `http` is anything exposing
    `post(url, headers=, params=, json=, timeout=)`; defaults to `requests`.
    """

    def __init__(self, settings: Optional[Settings] = None, http: Any = None):
        self._initial_settings = settings
        self._http = http or requests

    @property
    def settings(self) -> Settings:
        return self._initial_settings or load_settings()

    def _headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if extra:
            headers.update(extra)
        return headers

    @staticmethod
    def _status_message(label: str, status: int, llm_statuses: bool) -> str:
        if llm_statuses and status == 429:
            return RATE_LIMITED_MESSAGE
        if llm_statuses and status == 402:
            return QUOTA_EXHAUSTED_MESSAGE
        return f"{label} request failed (status {status})"

    def _post(
        self,
        label: str,
        url: str,
        payload: Any,
        headers: Dict[str, str],
        params: Optional[Dict[str, str]] = None,
        llm_statuses: bool = False,
    ) -> Any:
        try:
            response = self._http.post(
                url,
                headers=headers,
                params=params,
                json=payload,
                timeout=self.settings.request_timeout,
            )
        except requests.RequestException as e:
            # The exception text may carry key-bearing query strings, only the type is logged.
            logger.warning("%s transport error: %s", label, type(e).__name__)
            raise ProviderTransportError(f"{label} is unreachable") from e

        status = response.status_code
        if not 200 <= status < 300:
            logger.warning("%s error: status=%s body=%s", label, status, truncate(response.text or ""))
            raise ProviderHTTPError(self._status_message(label, status, llm_statuses), upstream_status=status)

        try:
            return response.json()
        except ValueError as e:
            logger.warning("%s returned non-JSON body: %s", label, truncate(response.text or ""))
            raise ProviderResponseError(f"{label} returned an invalid response", upstream_status=status) from e

    def call_openai_compatible(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        api_key: Optional[str],
        model: str,
        url: str,
        label: str = "OpenAI",
    ) -> str:
        extra = {"Authorization": f"Bearer {api_key}"} if api_key else None
        payload = {"model": model, "messages": _chat_messages(text, source_lang, target_lang)}
        logger.info("[%s] POST %s model=%s key=%s", label, url, model, redact_secret(api_key))
        data = self._post(label, url, payload, self._headers(extra), llm_statuses=True)
        return extract_chat_completion(data)

    def call_azure(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        api_key: Optional[str],
        model: str,
        url: str,
        label: str = "Azure OpenAI",
    ) -> str:
        extra = {"api-key": api_key or "", "Authorization": f"Bearer {api_key}"}
        payload = {"model": model, "messages": _chat_messages(text, source_lang, target_lang)}
        logger.info("[%s] POST %s deployment=%s key=%s", label, url, model, redact_secret(api_key))
        data = self._post(label, url, payload, self._headers(extra), llm_statuses=True)
        return extract_chat_completion(data)

    def call_gemini(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        api_key: Optional[str],
        model: str,
        url: str,
        label: str = "Gemini",
    ) -> str:
        endpoint = gemini_generate_url(url, model)
        payload = {
            "systemInstruction": {"parts": [{"text": get_system_prompt(source_lang, target_lang)}]},
            "contents": [{"role": "user", "parts": [{"text": text}]}],
        }
        logger.info("[%s] POST %s key=%s", label, endpoint, redact_secret(api_key))
        data = self._post(label, endpoint, payload, self._headers(), params={"key": api_key or ""})
        return extract_gemini(data)

    def call_anthropic(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        api_key: Optional[str],
        model: str,
        url: str,
        label: str = "Anthropic",
    ) -> str:
        extra = {"x-api-key": api_key or "", "anthropic-version": ANTHROPIC_VERSION}
        payload = {
            "model": model,
            "max_tokens": self.settings.anthropic_max_tokens,
            "system": get_system_prompt(source_lang, target_lang),
            "messages": [{"role": "user", "content": text}],
        }
        logger.info("[%s] POST %s model=%s key=%s", label, url, model, redact_secret(api_key))
        data = self._post(label, url, payload, self._headers(extra))
        return extract_anthropic(data)

    def call_deeplx(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        api_key: Optional[str],
        model: str,
        url: str,
        label: str = "DeepL X",
    ) -> str:
        extra = {"Authorization": f"Bearer {api_key}"} if api_key else None
        payload = {
            "text": text,
            "source_lang": to_deeplx_code(source_lang),
            "target_lang": to_deeplx_code(target_lang),
        }
        logger.info("[%s] POST %s key=%s", label, url, redact_secret(api_key))
        data = self._post(label, url, payload, self._headers(extra))
        return extract_deeplx(data)

    def call_microsoft(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        api_key: Optional[str],
        model: str,
        url: str,
        label: str = "Microsoft Translator",
    ) -> str:
        extra = {"Ocp-Apim-Subscription-Key": api_key or ""}
        region = self.settings.microsoft_region
        if region:
            extra["Ocp-Apim-Subscription-Region"] = region
        params = {"api-version": MICROSOFT_API_VERSION, "to": to_microsoft_code(target_lang)}
        source = to_microsoft_code(source_lang)
        if source:
            params["from"] = source
        logger.info("[%s] POST %s to=%s key=%s", label, url, params["to"], redact_secret(api_key))
        data = self._post(label, url, [{"Text": text}], self._headers(extra), params=params)
        return extract_microsoft(data)

    def call_google_translate(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        api_key: Optional[str],
        model: str,
        url: str,
        label: str = "Google Cloud Translation",
    ) -> str:
        payload = {"q": text, "target": to_google_code(target_lang), "format": "text"}
        source = to_google_code(source_lang)
        if source:
            payload["source"] = source
        logger.info("[%s] POST %s target=%s key=%s", label, url, payload["target"], redact_secret(api_key))
        data = self._post(label, url, payload, self._headers(), params={"key": api_key or ""})
        return extract_google_translate(data)

    def call_default_gateway(self, text: str, source_lang: str, target_lang: str) -> str:
        settings = self.settings
        key = settings.resolve_gateway_key()
        if not key:
            logger.error("Default gateway key is not configured (TRANSLATE_GATEWAY_API_KEY / LOVABLE_API_KEY)")
            raise DefaultServiceUnavailable()
        return self.call_openai_compatible(
            text,
            source_lang,
            target_lang,
            api_key=key,
            model=settings.gateway_model,
            url=settings.gateway_endpoint,
            label=DEFAULT_GATEWAY_LABEL,
        )
