"""
/**
 * @file translate_backend/services/response_extractors.py
 * @description 从各服务商的响应 JSON 中提取译文。缺失字段时返回空字符串。
 */
"""

from __future__ import annotations

from typing import Any

from translate_backend.utils.text_utils import strip_markdown

DEEPLX_TEXT_FIELDS = ("translatedText", "data", "translation", "text")


def _first(value: Any) -> Any:
    if isinstance(value, list) and value:
        return value[0]
    return None


def extract_chat_completion(data: Any) -> str:
    """`choices[0].message.content`, trimmed and stripped of residual markdown."""
    if not isinstance(data, dict):
        return ""
    choice = _first(data.get("choices"))
    if not isinstance(choice, dict):
        return ""
    message = choice.get("message")
    if not isinstance(message, dict):
        return ""
    content = message.get("content")
    if not isinstance(content, str):
        return ""
    return strip_markdown(content.strip())


def extract_gemini(data: Any) -> str:
    if not isinstance(data, dict):
        return ""
    candidate = _first(data.get("candidates"))
    if not isinstance(candidate, dict):
        return ""
    content = candidate.get("content")
    if not isinstance(content, dict):
        return ""
    parts = content.get("parts")
    if not isinstance(parts, list):
        return ""
    texts = [part.get("text") for part in parts if isinstance(part, dict) and isinstance(part.get("text"), str)]
    return "".join(texts).strip()


def extract_anthropic(data: Any) -> str:
    if not isinstance(data, dict):
        return ""
    blocks = data.get("content")
    if not isinstance(blocks, list):
        return ""
    texts = [
        block.get("text")
        for block in blocks
        if isinstance(block, dict) and block.get("type") == "text" and isinstance(block.get("text"), str)
    ]
    return "".join(texts).strip()


def extract_deeplx(data: Any) -> str:
    if not isinstance(data, dict):
        return ""
    for key in DEEPLX_TEXT_FIELDS:
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return ""


def extract_microsoft(data: Any) -> str:
    item = _first(data)
    if not isinstance(item, dict):
        return ""
    translation = _first(item.get("translations"))
    if not isinstance(translation, dict):
        return ""
    text = translation.get("text")
    return text if isinstance(text, str) else ""


def extract_google_translate(data: Any) -> str:
    if not isinstance(data, dict):
        return ""
    inner = data.get("data")
    if not isinstance(inner, dict):
        return ""
    translation = _first(inner.get("translations"))
    if not isinstance(translation, dict):
        return ""
    text = translation.get("translatedText")
    return text if isinstance(text, str) else ""
