"""
/**
 * @file translate_backend/config/settings.py
 * @description 后端配置加载与合并（config.json + config.local.json + 环境变量）。
 */
"""

from __future__ import annotations

import hashlib
import json
import logging
import os
import threading
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional


REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CONFIG_PATH = os.path.join(REPO_ROOT, "config.json")
CONFIG_LOCAL_PATH = os.path.join(REPO_ROOT, "config.local.json")
CONFIG_EXAMPLE_PATH = os.path.join(REPO_ROOT, "config.example.json")

DEFAULT_GATEWAY_ENDPOINT = "https://ai.gateway.lovable.dev/v1/chat/completions"
DEFAULT_GATEWAY_MODEL = "google/gemini-3-flash-preview"
DEFAULT_MAX_TEXT_LENGTH = 50000
DEFAULT_REQUEST_TIMEOUT = 120.0
DEFAULT_AZURE_API_VERSION = "2024-10-21"
DEFAULT_ANTHROPIC_MAX_TOKENS = 4096

logger = logging.getLogger("config_loader")


def _load_json(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            value = json.load(f)
            return value if isinstance(value, dict) else {}
    except FileNotFoundError:
        return {}


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _merge_dicts(base[key], value)
        else:
            base[key] = value
    return base


def _positive_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int) and value > 0:
        return value
    return default


@dataclass(frozen=True)
class Settings:
    raw: Dict[str, Any]

    @property
    def endpoints(self) -> Dict[str, str]:
        value = self.raw.get("endpoints", {})
        return value if isinstance(value, dict) else {}

    @property
    def models(self) -> Dict[str, str]:
        value = self.raw.get("models", {})
        return value if isinstance(value, dict) else {}

    @property
    def api_keys(self) -> Dict[str, str]:
        value = self.raw.get("api_keys", {})
        return value if isinstance(value, dict) else {}

    @property
    def parameters(self) -> Dict[str, Any]:
        value = self.raw.get("parameters", {})
        return value if isinstance(value, dict) else {}

    @property
    def gateway_endpoint(self) -> str:
        value = self.endpoints.get("gateway")
        return value if isinstance(value, str) and value.strip() else DEFAULT_GATEWAY_ENDPOINT

    @property
    def gateway_model(self) -> str:
        value = self.models.get("gateway")
        return value if isinstance(value, str) and value.strip() else DEFAULT_GATEWAY_MODEL

    @property
    def max_text_length(self) -> int:
        return _positive_int(self.parameters.get("max_text_length"), DEFAULT_MAX_TEXT_LENGTH)

    @property
    def request_timeout(self) -> float:
        value = self.parameters.get("request_timeout")
        if isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0:
            return float(value)
        return DEFAULT_REQUEST_TIMEOUT

    @property
    def azure_api_version(self) -> str:
        value = self.parameters.get("azure_api_version")
        return value if isinstance(value, str) and value.strip() else DEFAULT_AZURE_API_VERSION

    @property
    def anthropic_max_tokens(self) -> int:
        return _positive_int(self.parameters.get("anthropic_max_tokens"), DEFAULT_ANTHROPIC_MAX_TOKENS)

    @property
    def microsoft_region(self) -> Optional[str]:
        value = self.parameters.get("microsoft_region")
        return value.strip() if isinstance(value, str) and value.strip() else None

    def resolve_gateway_key(self) -> Optional[str]:
        return (
            os.getenv("TRANSLATE_GATEWAY_API_KEY")
            or os.getenv("LOVABLE_API_KEY")
            or (self.api_keys.get("gateway") if isinstance(self.api_keys.get("gateway"), str) else None)
        )


_CACHED_SETTINGS: Optional[Settings] = None
_LAST_LOAD_TIME = 0.0
_CONFIG_HASH = ""
_SETTINGS_LOCK = threading.Lock()


def _deep_diff(d1: Dict[str, Any], d2: Dict[str, Any], path="") -> list:
    diffs = []
    for k in set(d1.keys()) | set(d2.keys()):
        p = f"{path}.{k}" if path else k
        if k not in d1:
            diffs.append(f"Added: {p}")
        elif k not in d2:
            diffs.append(f"Removed: {p}")
        elif isinstance(d1[k], dict) and isinstance(d2[k], dict):
            diffs.extend(_deep_diff(d1[k], d2[k], p))
        elif d1[k] != d2[k]:
            # api_keys values must never reach the log
            if p.startswith("api_keys"):
                diffs.append(f"Changed: {p}")
            else:
                diffs.append(f"Changed: {p} ({d1[k]} -> {d2[k]})")
    return diffs


def read_settings(
    base_path: str = CONFIG_PATH,
    local_path: str = CONFIG_LOCAL_PATH,
    example_path: str = CONFIG_EXAMPLE_PATH,
) -> Settings:
    base_cfg = _load_json(base_path)
    if not base_cfg and not os.path.exists(base_path):
        base_cfg = _load_json(example_path)
    local_cfg = _load_json(local_path)
    return Settings(raw=_merge_dicts(base_cfg, local_cfg))


def reload_settings(
    base_path: str = CONFIG_PATH,
    local_path: str = CONFIG_LOCAL_PATH,
    example_path: str = CONFIG_EXAMPLE_PATH,
) -> Settings:
    global _CACHED_SETTINGS, _LAST_LOAD_TIME, _CONFIG_HASH

    with _SETTINGS_LOCK:
        now = time.time()
        # Debounce: 500ms
        if _CACHED_SETTINGS and (now - _LAST_LOAD_TIME < 0.5):
            return _CACHED_SETTINGS

        try:
            merged = read_settings(base_path, local_path, example_path).raw

            # Sort keys to ensure consistent hash for same content
            new_hash = hashlib.md5(json.dumps(merged, sort_keys=True).encode("utf-8")).hexdigest()

            if _CACHED_SETTINGS and new_hash == _CONFIG_HASH:
                _LAST_LOAD_TIME = now
                return _CACHED_SETTINGS

            is_reload = _CACHED_SETTINGS is not None
            if is_reload:
                diffs = _deep_diff(_CACHED_SETTINGS.raw, merged)
                if diffs:
                    logger.info("Config changes detected: %s", "; ".join(diffs))

            _CACHED_SETTINGS = Settings(raw=merged)
            _CONFIG_HASH = new_hash
            _LAST_LOAD_TIME = now

            if is_reload:
                logger.info("Configuration reloaded successfully.")

        except (OSError, ValueError) as e:
            logger.error("Failed to reload config: %s. Keeping old config.", e)
            if not _CACHED_SETTINGS:
                logger.warning("Initializing with empty settings due to load failure.")
                _CACHED_SETTINGS = Settings(raw={})

    return _CACHED_SETTINGS


def load_settings() -> Settings:
    """
    Get current settings. Lazy loads on first call.
    Subsequent reloads are handled by the file watcher calling reload_settings().
    """
    if _CACHED_SETTINGS is None:
        return reload_settings()
    return _CACHED_SETTINGS
