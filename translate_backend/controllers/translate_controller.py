"""
/**
 * @file translate_backend/controllers/translate_controller.py
 * @description 翻译控制器：POST /api/translate。
 */
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from translate_backend.config import load_settings
from translate_backend.errors import TranslateError
from translate_backend.services import to_error_response, translate_text
from translate_backend.utils.validators import validate_translate_payload


router = APIRouter()
logger = logging.getLogger("translate_controller")


@router.post("/api/translate")
def translate(payload: dict):
    try:
        req = validate_translate_payload(payload, max_text_length=load_settings().max_text_length)
        translated = translate_text(req)
    except TranslateError as e:
        logger.warning("Translation failed: %s (%s)", e.message, e.code)
        status_code, body, headers = to_error_response(e)
        return JSONResponse(status_code=status_code, content=body, headers=headers)
    except Exception as e:
        logger.exception("translate error")
        status_code, body, headers = to_error_response(e)
        return JSONResponse(status_code=status_code, content=body, headers=headers)
    return {"translatedText": translated}
