"""
/**
 * @file translate_backend/utils/languages.py
 * @description 语言代码表：通用名称、Microsoft / Google BCP-47 代码映射。
 */
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

AUTO = "auto"
AUTO_DETECT_NAME = "auto-detect the source language"

LANGUAGE_NAMES: Mapping[str, str] = MappingProxyType({
    "zh": "Chinese",
    "en": "English",
    "ja": "Japanese",
    "ko": "Korean",
    "fr": "French",
    "de": "German",
    "es": "Spanish",
    "pt": "Portuguese",
    "it": "Italian",
    "ru": "Russian",
    "ar": "Arabic",
    "th": "Thai",
    "vi": "Vietnamese",
    "id": "Indonesian",
    "ms": "Malay",
    "hi": "Hindi",
    "tr": "Turkish",
    "pl": "Polish",
    "nl": "Dutch",
    "sv": "Swedish",
    "da": "Danish",
    "fi": "Finnish",
    "no": "Norwegian",
    "uk": "Ukrainian",
    "cs": "Czech",
    "ro": "Romanian",
    "el": "Greek",
    "hu": "Hungarian",
    "bg": "Bulgarian",
})

# Microsoft Translator uses script subtags for Chinese and Bokmål for Norwegian.
MICROSOFT_LANGUAGE_CODES: Mapping[str, str] = MappingProxyType({
    **{code: code for code in LANGUAGE_NAMES},
    "zh": "zh-Hans",
    "no": "nb",
})

GOOGLE_LANGUAGE_CODES: Mapping[str, str] = MappingProxyType({
    **{code: code for code in LANGUAGE_NAMES},
    "zh": "zh-CN",
})

SUPPORTED_SOURCE_LANGUAGES = frozenset(LANGUAGE_NAMES) | {AUTO}
SUPPORTED_TARGET_LANGUAGES = frozenset(LANGUAGE_NAMES)


def is_auto(code: Optional[str]) -> bool:
    return not code or code == AUTO


def language_name(code: Optional[str]) -> str:
    if is_auto(code):
        return AUTO_DETECT_NAME
    return LANGUAGE_NAMES.get(code, code)


def to_microsoft_code(code: str) -> Optional[str]:
    """Returns None for auto-detect: Microsoft detects when `from` is omitted."""
    if is_auto(code):
        return None
    return MICROSOFT_LANGUAGE_CODES.get(code, code)


def to_google_code(code: str) -> Optional[str]:
    if is_auto(code):
        return None
    return GOOGLE_LANGUAGE_CODES.get(code, code)


def to_deeplx_code(code: str) -> str:
    if is_auto(code):
        return AUTO
    return code.upper()
