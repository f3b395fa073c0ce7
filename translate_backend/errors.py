"""
/**
 * @file translate_backend/errors.py
 * @description 翻译请求错误分类：校验、缺少凭据、上游服务失败、默认服务不可用。
 */
"""

from __future__ import annotations

from typing import Optional

RATE_LIMITED_MESSAGE = "Too many requests, please try again later."
QUOTA_EXHAUSTED_MESSAGE = "AI quota exhausted, please top up and try again."
DEFAULT_SERVICE_UNAVAILABLE_MESSAGE = (
    "The default translation service is not configured. "
    "Please configure a custom translation provider in the API settings."
)
UNKNOWN_ERROR_MESSAGE = "Unknown error"


class TranslateError(Exception):
    """Base class for failures that map to an `{error}` response."""

    status_code = 500
    code = "TRANSLATE_ERROR"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(TranslateError):
    """Malformed, missing or oversized input. Never retried."""

    code = "VALIDATION_ERROR"

    def __init__(self, reason: str, message: str, status_code: int = 400):
        super().__init__(message, status_code=status_code)
        self.reason = reason


class MissingCredentialError(TranslateError):
    code = "MISSING_CREDENTIAL"

    def __init__(self, provider_label: str, field: str = "an API Key"):
        super().__init__(f"{provider_label} requires {field}")
        self.provider_label = provider_label


class ProviderError(TranslateError):
    """Upstream provider failure. The response status stays 500; the upstream one is kept for headers and logs."""

    code = "PROVIDER_ERROR"

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        super().__init__(message)
        self.upstream_status = upstream_status


class ProviderHTTPError(ProviderError):
    code = "PROVIDER_HTTP_ERROR"


class ProviderResponseError(ProviderError):
    code = "PROVIDER_RESPONSE_ERROR"


class ProviderTransportError(ProviderError):
    code = "PROVIDER_TRANSPORT_ERROR"


class DefaultServiceUnavailable(TranslateError):
    status_code = 503
    code = "DEFAULT_SERVICE_UNAVAILABLE"

    def __init__(self, message: str = DEFAULT_SERVICE_UNAVAILABLE_MESSAGE):
        super().__init__(message)
