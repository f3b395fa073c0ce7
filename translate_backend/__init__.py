"""
/**
 * @file translate_backend/__init__.py
 * @description 多服务商翻译请求路由后端。启动：uvicorn translate_backend.main:app
 */
"""
