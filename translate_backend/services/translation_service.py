"""
/**
 * @file translate_backend/services/translation_service.py
 * @description 翻译请求分发：默认网关或按服务商类型路由到对应调用器，并统一错误响应。
 */
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional, Tuple

from translate_backend.errors import (
    UNKNOWN_ERROR_MESSAGE,
    MissingCredentialError,
    ProviderError,
    TranslateError,
)
from translate_backend.models.provider_model import ProviderFamily, ProviderType, get_profile
from translate_backend.models.translate_request_model import TranslateRequest
from translate_backend.services.provider_client_service import ProviderClient
from translate_backend.services.provider_resolver_service import resolve_endpoint, resolve_model

logger = logging.getLogger("translation_service")

ProviderCaller = Callable[..., str]

PROVIDER_CALLERS: Mapping[ProviderFamily, ProviderCaller] = MappingProxyType({
    ProviderFamily.OPENAI_COMPATIBLE: ProviderClient.call_openai_compatible,
    ProviderFamily.AZURE: ProviderClient.call_azure,
    ProviderFamily.GEMINI: ProviderClient.call_gemini,
    ProviderFamily.ANTHROPIC: ProviderClient.call_anthropic,
    ProviderFamily.DEEPLX: ProviderClient.call_deeplx,
    ProviderFamily.MICROSOFT: ProviderClient.call_microsoft,
    ProviderFamily.GOOGLE_TRANSLATE: ProviderClient.call_google_translate,
})

if set(PROVIDER_CALLERS) != set(ProviderFamily):
    raise RuntimeError("Provider callers must cover every provider family")


def translate_text(req: TranslateRequest, client: Optional[ProviderClient] = None) -> str:
    h = client or ProviderClient()
    if req.uses_default_gateway:
        logger.info("Routing to default gateway (%s -> %s, %d chars)", req.source_lang, req.target_lang, len(req.text))
        return h.call_default_gateway(req.text, req.source_lang, req.target_lang)

    provider_type = req.provider_type or ProviderType.OPENAI
    profile = get_profile(provider_type)
    api_key = req.api_key
    if profile.requires_api_key and not api_key:
        raise MissingCredentialError(profile.label)

    model = resolve_model(provider_type, req.model)
    url = resolve_endpoint(profile, req.custom_base_url, model, h.settings.azure_api_version)
    logger.info(
        "Routing to %s (%s -> %s, %d chars)",
        provider_type.value,
        req.source_lang,
        req.target_lang,
        len(req.text),
    )
    caller = PROVIDER_CALLERS[profile.family]
    return caller(h, req.text, req.source_lang, req.target_lang, api_key, model, url, label=profile.label)


def to_error_response(exc: Exception) -> Tuple[int, Dict[str, str], Dict[str, str]]:
    """Maps any exception to (status, `{error}` body, extra headers)."""
    headers: Dict[str, str] = {}
    if isinstance(exc, TranslateError):
        if isinstance(exc, ProviderError) and exc.upstream_status is not None:
            headers["X-Upstream-Status"] = str(exc.upstream_status)
        return exc.status_code, {"error": exc.message}, headers
    message = str(exc) or UNKNOWN_ERROR_MESSAGE
    return 500, {"error": message}, headers
