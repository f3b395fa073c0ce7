"""
/**
 * @file translate_backend/utils/__init__.py
 * @description 工具函数导出。
 */
"""

from .text_utils import redact_secret, strip_markdown, truncate
from .url_utils import (
    normalize_anthropic_url,
    normalize_azure_url,
    normalize_deeplx_url,
    normalize_gemini_url,
    normalize_google_translate_url,
    normalize_microsoft_url,
    normalize_openai_url,
)

__all__ = [
    "redact_secret",
    "strip_markdown",
    "truncate",
    "normalize_anthropic_url",
    "normalize_azure_url",
    "normalize_deeplx_url",
    "normalize_gemini_url",
    "normalize_google_translate_url",
    "normalize_microsoft_url",
    "normalize_openai_url",
]
