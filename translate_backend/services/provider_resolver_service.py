"""
/**
 * @file translate_backend/services/provider_resolver_service.py
 * @description 模型与请求地址解析：用户值优先，其次服务商默认值。
 */
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping, Optional

from translate_backend.errors import MissingCredentialError
from translate_backend.models.provider_model import FALLBACK_MODEL, ProviderFamily, ProviderProfile, ProviderType, get_profile
from translate_backend.utils.url_utils import (
    normalize_anthropic_url,
    normalize_azure_url,
    normalize_deeplx_url,
    normalize_gemini_url,
    normalize_google_translate_url,
    normalize_microsoft_url,
    normalize_openai_url,
)

# (base_url, model, azure_api_version) -> endpoint
Normalizer = Callable[[str, str, str], str]

URL_NORMALIZERS: Mapping[ProviderFamily, Normalizer] = MappingProxyType({
    ProviderFamily.OPENAI_COMPATIBLE: lambda base, model, version: normalize_openai_url(base),
    ProviderFamily.AZURE: normalize_azure_url,
    ProviderFamily.ANTHROPIC: lambda base, model, version: normalize_anthropic_url(base),
    ProviderFamily.GEMINI: lambda base, model, version: normalize_gemini_url(base),
    ProviderFamily.DEEPLX: lambda base, model, version: normalize_deeplx_url(base),
    ProviderFamily.MICROSOFT: lambda base, model, version: normalize_microsoft_url(base),
    ProviderFamily.GOOGLE_TRANSLATE: lambda base, model, version: normalize_google_translate_url(base),
})

if set(URL_NORMALIZERS) != set(ProviderFamily):
    raise RuntimeError("URL normalizers must cover every provider family")


def resolve_model(provider_type: ProviderType, requested: Optional[str] = None) -> str:
    if isinstance(requested, str) and requested.strip():
        return requested.strip()
    return get_profile(provider_type).default_model or FALLBACK_MODEL


def resolve_endpoint(
    profile: ProviderProfile,
    custom_base_url: Optional[str],
    model: str,
    azure_api_version: str,
) -> str:
    base = (custom_base_url or "").strip() or profile.default_base_url
    url = URL_NORMALIZERS[profile.family](base, model, azure_api_version)
    if not url:
        raise MissingCredentialError(profile.label, "a Base URL")
    return url
