"""
/**
 * @file translate_backend/utils/text_utils.py
 * @description 文本工具：清除模型残留的 Markdown 标记、日志脱敏。
 */
"""

from __future__ import annotations

import re
from typing import Optional

BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
ITALIC_RE = re.compile(r"\*(.+?)\*")
HEADER_RE = re.compile(r"^#{1,6}\s+", re.MULTILINE)
BULLET_RE = re.compile(r"^[-*+]\s+", re.MULTILINE)
CODE_SPAN_RE = re.compile(r"`([^`]+)`")


def strip_markdown(text: str) -> str:
    # Order matters: bold before italic.
    value = BOLD_RE.sub(r"\1", text)
    value = ITALIC_RE.sub(r"\1", value)
    value = HEADER_RE.sub("", value)
    value = BULLET_RE.sub("", value)
    return CODE_SPAN_RE.sub(r"\1", value)


def redact_secret(value: Optional[str]) -> str:
    if not value:
        return "<none>"
    if len(value) <= 8:
        return "***"
    return f"{value[:3]}***{value[-2:]}"


def truncate(text: str, limit: int = 500) -> str:
    if len(text) <= limit:
        return text
    return f"{text[:limit]}...({len(text) - limit} more chars)"
