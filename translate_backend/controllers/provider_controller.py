"""
/**
 * @file translate_backend/controllers/provider_controller.py
 * @description 服务商目录、语言列表与服务连通性测试。
 */
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from translate_backend.config import load_settings
from translate_backend.errors import TranslateError, ValidationError
from translate_backend.models.provider_model import list_profiles
from translate_backend.services import to_error_response, translate_text
from translate_backend.utils.languages import AUTO, LANGUAGE_NAMES
from translate_backend.utils.validators import validate_translate_payload


router = APIRouter()
logger = logging.getLogger("provider_controller")

TEST_TEXT = "Hello"


@router.get("/api/providers")
def list_providers():
    return {"providers": [p.to_dict() for p in list_profiles()]}


@router.get("/api/languages")
def list_languages():
    languages = [{"code": AUTO, "name": "Auto-detect"}]
    languages.extend({"code": code, "name": name} for code, name in LANGUAGE_NAMES.items())
    return {"languages": languages}


@router.post("/api/providers/test")
def probe_provider(payload: dict):
    body = {
        "text": TEST_TEXT,
        "sourceLang": "en",
        "targetLang": "zh",
        "providerType": payload.get("providerType"),
        "customApiKey": payload.get("customApiKey"),
        "customBaseUrl": payload.get("customBaseUrl"),
        "model": payload.get("model"),
    }
    try:
        req = validate_translate_payload(body, max_text_length=load_settings().max_text_length)
    except ValidationError as e:
        status_code, error_body, _ = to_error_response(e)
        return JSONResponse(status_code=status_code, content=error_body)

    try:
        translated = translate_text(req)
    except TranslateError as e:
        logger.info("Provider test failed: %s", e.message)
        return {"ok": False, "error": e.message}
    except Exception as e:
        logger.exception("Provider test error")
        _, error_body, _ = to_error_response(e)
        return {"ok": False, "error": error_body["error"]}

    if not translated:
        return {"ok": False, "error": "Empty response"}
    return {"ok": True, "translatedText": translated}
