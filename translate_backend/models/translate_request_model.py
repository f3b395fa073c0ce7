"""
/**
 * @file translate_backend/models/translate_request_model.py
 * @description 翻译请求模型（Pydantic）。
 */
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from translate_backend.models.provider_model import ProviderType
from translate_backend.utils.languages import AUTO


class TranslateRequest(BaseModel):
    """Validated, fully-populated translation request."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, protected_namespaces=())

    text: str
    source_lang: str = Field(default=AUTO, alias="sourceLang")
    target_lang: str = Field(default="en", alias="targetLang")
    provider_type: Optional[ProviderType] = Field(default=None, alias="providerType")
    custom_api_key: Optional[SecretStr] = Field(default=None, alias="customApiKey")
    custom_base_url: Optional[str] = Field(default=None, alias="customBaseUrl")
    model: Optional[str] = None

    @property
    def api_key(self) -> Optional[str]:
        return self.custom_api_key.get_secret_value() if self.custom_api_key else None

    @property
    def uses_default_gateway(self) -> bool:
        return self.provider_type is None and not self.api_key and not self.custom_base_url
