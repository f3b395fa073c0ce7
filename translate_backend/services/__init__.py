"""
/**
 * @file translate_backend/services/__init__.py
 * @description 业务服务层导出。
 */
"""

from .prompt_service import get_system_prompt
from .provider_client_service import ProviderClient
from .provider_resolver_service import resolve_endpoint, resolve_model
from .translation_service import PROVIDER_CALLERS, to_error_response, translate_text

__all__ = [
    "PROVIDER_CALLERS",
    "ProviderClient",
    "get_system_prompt",
    "resolve_endpoint",
    "resolve_model",
    "to_error_response",
    "translate_text",
]
