"""
/**
 * @file translate_backend/config/__init__.py
 * @description 配置模块导出。
 */
"""

from .settings import CONFIG_LOCAL_PATH, CONFIG_PATH, Settings, load_settings, read_settings, reload_settings

__all__ = ["Settings", "load_settings", "read_settings", "reload_settings", "CONFIG_PATH", "CONFIG_LOCAL_PATH"]
