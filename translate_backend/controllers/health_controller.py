"""
/**
 * @file translate_backend/controllers/health_controller.py
 * @description 健康检查控制器。
 */
"""

from fastapi import APIRouter


router = APIRouter()


@router.get("/health")
def health():
    from translate_backend.config import load_settings

    settings = load_settings()

    checks = {
        "default_gateway": bool(settings.resolve_gateway_key()),
    }

    return {
        "status": "ok" if all(checks.values()) else "degraded",
        "checks": checks,
    }
