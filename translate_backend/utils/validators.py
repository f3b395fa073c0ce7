"""
/**
 * @file translate_backend/utils/validators.py
 * @description 翻译请求校验与归一化。
 */
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple
from urllib.parse import urlparse

from translate_backend.errors import ValidationError
from translate_backend.models.provider_model import ProviderType
from translate_backend.models.translate_request_model import TranslateRequest
from translate_backend.utils.languages import AUTO, SUPPORTED_SOURCE_LANGUAGES, SUPPORTED_TARGET_LANGUAGES

MAX_TEXT_LENGTH = 50000
PROVIDER_TYPES = {t.value for t in ProviderType}


def is_valid_url(value: str) -> bool:
    v = value.strip()
    try:
        parsed = urlparse(v)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def is_supported_source_lang(value: str) -> bool:
    return value in SUPPORTED_SOURCE_LANGUAGES


def is_supported_target_lang(value: str) -> bool:
    return value in SUPPORTED_TARGET_LANGUAGES


def _optional_str(payload: Dict[str, Any], key: str, reason: str) -> Optional[str]:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(reason, f"{key} must be a string")
    v = value.strip()
    return v or None


def _split_direction(direction: Any) -> Tuple[Optional[str], Optional[str]]:
    # Legacy clients send "zh-en" style directions instead of explicit languages.
    if not isinstance(direction, str) or direction.count("-") != 1:
        return None, None
    src, tgt = direction.split("-")
    return src.strip() or None, tgt.strip() or None


def validate_translate_payload(payload: Dict[str, Any], max_text_length: int = MAX_TEXT_LENGTH) -> TranslateRequest:
    text = payload.get("text")
    if not isinstance(text, str) or not text:
        raise ValidationError("missing_text", "Missing text")
    if len(text) > max_text_length:
        raise ValidationError(
            "text_too_long",
            f"Text is too long ({len(text)} characters, maximum is {max_text_length})",
            status_code=413,
        )

    source_lang = _optional_str(payload, "sourceLang", "invalid_source_lang")
    target_lang = _optional_str(payload, "targetLang", "invalid_target_lang")
    if source_lang is None and target_lang is None:
        source_lang, target_lang = _split_direction(payload.get("direction"))
    source_lang = source_lang or AUTO
    target_lang = target_lang or "en"

    if not is_supported_source_lang(source_lang):
        raise ValidationError("invalid_source_lang", f"Unsupported source language: {source_lang}")
    if not is_supported_target_lang(target_lang):
        raise ValidationError("invalid_target_lang", f"Unsupported target language: {target_lang}")

    provider_type = _optional_str(payload, "providerType", "invalid_provider_type")
    if provider_type is not None and provider_type not in PROVIDER_TYPES:
        raise ValidationError("invalid_provider_type", f"Unsupported provider type: {provider_type}")

    base_url = _optional_str(payload, "customBaseUrl", "invalid_base_url")
    if base_url is not None and not is_valid_url(base_url):
        raise ValidationError("invalid_base_url", "Custom Base URL must be an absolute http(s) URL")

    return TranslateRequest(
        text=text,
        source_lang=source_lang,
        target_lang=target_lang,
        provider_type=provider_type,
        custom_api_key=_optional_str(payload, "customApiKey", "invalid_api_key"),
        custom_base_url=base_url,
        model=_optional_str(payload, "model", "invalid_model"),
    )
