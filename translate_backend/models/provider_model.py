"""
/**
 * @file translate_backend/models/provider_model.py
 * @description 翻译服务商类型与默认配置表（只读）。
 */
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple

FALLBACK_MODEL = "gpt-4o-mini"


class ProviderType(str, Enum):
    OPENAI = "openai"
    GEMINI = "gemini"
    ANTHROPIC = "anthropic"
    AZURE = "azure"
    OLLAMA = "ollama"
    DEEPSEEK = "deepseek"
    QWEN = "qwen"
    DEEPLX = "deeplx"
    MICROSOFT = "microsoft"
    GOOGLE_TRANSLATE = "google-translate"
    CUSTOM = "custom"


class ProviderFamily(str, Enum):
    OPENAI_COMPATIBLE = "openai_compatible"
    AZURE = "azure"
    GEMINI = "gemini"
    ANTHROPIC = "anthropic"
    DEEPLX = "deeplx"
    MICROSOFT = "microsoft"
    GOOGLE_TRANSLATE = "google_translate"


@dataclass(frozen=True)
class ProviderProfile:
    provider_type: ProviderType
    label: str
    family: ProviderFamily
    default_base_url: str
    default_model: str = ""
    models: Tuple[str, ...] = ()
    fields: Tuple[str, ...] = ("apiKey", "baseUrl", "model")
    requires_api_key: bool = False

    def to_dict(self) -> dict:
        return {
            "type": self.provider_type.value,
            "label": self.label,
            "family": self.family.value,
            "defaultBaseUrl": self.default_base_url,
            "defaultModel": self.default_model,
            "models": list(self.models),
            "fields": list(self.fields),
            "requiresApiKey": self.requires_api_key,
        }


PROVIDER_PROFILES: Mapping[ProviderType, ProviderProfile] = MappingProxyType({
    ProviderType.OPENAI: ProviderProfile(
        ProviderType.OPENAI,
        "OpenAI",
        ProviderFamily.OPENAI_COMPATIBLE,
        "https://api.openai.com/v1/chat/completions",
        "gpt-4o-mini",
        ("gpt-4o", "gpt-4o-mini", "gpt-4-turbo", "gpt-3.5-turbo"),
    ),
    ProviderType.GEMINI: ProviderProfile(
        ProviderType.GEMINI,
        "Gemini",
        ProviderFamily.GEMINI,
        "https://generativelanguage.googleapis.com/v1beta",
        "gemini-2.5-flash",
        ("gemini-2.5-flash", "gemini-2.5-pro", "gemini-2.0-flash"),
        ("apiKey", "model"),
        requires_api_key=True,
    ),
    ProviderType.ANTHROPIC: ProviderProfile(
        ProviderType.ANTHROPIC,
        "Anthropic",
        ProviderFamily.ANTHROPIC,
        "https://api.anthropic.com/v1/messages",
        "claude-sonnet-4-20250514",
        ("claude-sonnet-4-20250514", "claude-3-5-haiku-20241022"),
        requires_api_key=True,
    ),
    ProviderType.AZURE: ProviderProfile(
        ProviderType.AZURE,
        "Azure OpenAI",
        ProviderFamily.AZURE,
        "",
        "gpt-4o-mini",
        ("gpt-4o", "gpt-4o-mini"),
        requires_api_key=True,
    ),
    ProviderType.OLLAMA: ProviderProfile(
        ProviderType.OLLAMA,
        "Ollama",
        ProviderFamily.OPENAI_COMPATIBLE,
        "http://localhost:11434/v1/chat/completions",
        "llama3",
        ("llama3", "mistral", "qwen2"),
        ("baseUrl", "model"),
    ),
    ProviderType.DEEPSEEK: ProviderProfile(
        ProviderType.DEEPSEEK,
        "DeepSeek",
        ProviderFamily.OPENAI_COMPATIBLE,
        "https://api.deepseek.com/v1/chat/completions",
        "deepseek-chat",
        ("deepseek-chat", "deepseek-reasoner"),
    ),
    ProviderType.QWEN: ProviderProfile(
        ProviderType.QWEN,
        "Qwen",
        ProviderFamily.OPENAI_COMPATIBLE,
        "https://dashscope.aliyuncs.com/compatible-mode/v1/chat/completions",
        "qwen-turbo",
        ("qwen-turbo", "qwen-plus", "qwen-max"),
    ),
    ProviderType.DEEPLX: ProviderProfile(
        ProviderType.DEEPLX,
        "DeepL X",
        ProviderFamily.DEEPLX,
        "https://api.deeplx.org/translate",
        fields=("baseUrl",),
    ),
    ProviderType.MICROSOFT: ProviderProfile(
        ProviderType.MICROSOFT,
        "Microsoft Translator",
        ProviderFamily.MICROSOFT,
        "https://api.cognitive.microsofttranslator.com",
        fields=("apiKey", "baseUrl"),
        requires_api_key=True,
    ),
    ProviderType.GOOGLE_TRANSLATE: ProviderProfile(
        ProviderType.GOOGLE_TRANSLATE,
        "Google Cloud Translation",
        ProviderFamily.GOOGLE_TRANSLATE,
        "https://translation.googleapis.com",
        fields=("apiKey",),
        requires_api_key=True,
    ),
    ProviderType.CUSTOM: ProviderProfile(
        ProviderType.CUSTOM,
        "Custom OpenAI-compatible API",
        ProviderFamily.OPENAI_COMPATIBLE,
        "",
    ),
})

_missing = set(ProviderType) - set(PROVIDER_PROFILES)
if _missing:
    raise RuntimeError(f"Provider profiles missing for: {sorted(t.value for t in _missing)}")


def get_profile(provider_type: ProviderType) -> ProviderProfile:
    return PROVIDER_PROFILES[ProviderType(provider_type)]


def list_profiles() -> Tuple[ProviderProfile, ...]:
    return tuple(PROVIDER_PROFILES[t] for t in ProviderType)
