"""
/**
 * @file translate_backend/models/__init__.py
 * @description 数据模型导出。
 */
"""

from .provider_model import FALLBACK_MODEL, PROVIDER_PROFILES, ProviderFamily, ProviderProfile, ProviderType, get_profile
from .translate_request_model import TranslateRequest

__all__ = [
    "FALLBACK_MODEL",
    "PROVIDER_PROFILES",
    "ProviderFamily",
    "ProviderProfile",
    "ProviderType",
    "get_profile",
    "TranslateRequest",
]
