"""
/**
 * @file translate_backend/services/prompt_service.py
 * @description 大模型翻译系统提示词。
 */
"""

from __future__ import annotations

from typing import Optional

from translate_backend.utils.languages import is_auto, language_name

PLAIN_TEXT_INSTRUCTION = (
    "Only return the plain translated text, nothing else. "
    "Do NOT use any markdown formatting such as bold (**), italic (*), headers (#), bullet points, "
    "or any other markup. Preserve paragraph structure using plain newlines only."
)


def get_system_prompt(source_lang: Optional[str], target_lang: Optional[str]) -> str:
    target = language_name(target_lang or "en")
    if is_auto(source_lang):
        task = f"Auto-detect the source language and translate to {target}."
    else:
        task = f"Translate from {language_name(source_lang)} to {target}."
    return f"You are a professional translator. {task} {PLAIN_TEXT_INSTRUCTION}"
