"""
/**
 * @file translate_backend/utils/url_utils.py
 * @description 各服务商 Base URL 规范化（幂等）。
 */
"""

from __future__ import annotations

import re
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

VERSION_SUFFIX_RE = re.compile(r"/v\d+$")


def _clean(url: str) -> str:
    return (url or "").strip().rstrip("/")


def normalize_openai_url(url: str) -> str:
    base = _clean(url)
    if not base:
        return ""
    if base.endswith("/chat/completions"):
        return base
    if VERSION_SUFFIX_RE.search(base):
        return f"{base}/chat/completions"
    return f"{base}/v1/chat/completions"


def normalize_anthropic_url(url: str) -> str:
    base = _clean(url)
    if not base:
        return ""
    if base.endswith("/v1/messages"):
        return base
    if base.endswith("/v1"):
        return f"{base}/messages"
    return f"{base}/v1/messages"


def normalize_deeplx_url(url: str) -> str:
    base = _clean(url)
    if not base:
        return ""
    if base.endswith("/translate"):
        return base
    return f"{base}/translate"


def normalize_azure_url(url: str, model: str, api_version: str) -> str:
    base = _clean(url)
    if not base:
        return ""
    if "/chat/completions" in base:
        parts = urlsplit(base)
        query = parse_qsl(parts.query, keep_blank_values=True)
        if any(key == "api-version" for key, _ in query):
            return base
        query.append(("api-version", api_version))
        return urlunsplit(parts._replace(query=urlencode(query)))
    deployment = quote(model, safe="")
    return f"{base}/openai/deployments/{deployment}/chat/completions?api-version={quote(api_version, safe='')}"


def normalize_gemini_url(url: str) -> str:
    base = _clean(url)
    while base.endswith("/models"):
        base = base[: -len("/models")].rstrip("/")
    return base


def gemini_generate_url(base_url: str, model: str) -> str:
    name = model[len("models/"):] if model.startswith("models/") else model
    return f"{normalize_gemini_url(base_url)}/models/{quote(name, safe='')}:generateContent"


def normalize_microsoft_url(url: str) -> str:
    base = _clean(url)
    if not base:
        return ""
    if base.endswith("/translate"):
        return base
    return f"{base}/translate"


def normalize_google_translate_url(url: str) -> str:
    base = _clean(url)
    if not base:
        return ""
    if base.endswith("/language/translate/v2"):
        return base
    return f"{base}/language/translate/v2"
