"""
/**
 * @file translate_backend/controllers/__init__.py
 * @description 控制器（路由）导出。
 */
"""

from .health_controller import router as health_router
from .provider_controller import router as provider_router
from .translate_controller import router as translate_router

__all__ = [
    "health_router",
    "provider_router",
    "translate_router",
]
