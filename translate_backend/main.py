"""
/**
 * @file translate_backend/main.py
 * @description FastAPI 应用入口（MVC：仅装配路由与中间件）。
 */
"""

import logging
import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from translate_backend.config import CONFIG_LOCAL_PATH, CONFIG_PATH, load_settings, reload_settings
from translate_backend.controllers import health_router, provider_router, translate_router

app = FastAPI()
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("translate_backend")


class ConfigEventHandler(FileSystemEventHandler):
    """Handler for config file changes"""
    def on_modified(self, event):
        if event.is_directory:
            return

        # Watchdog returns absolute paths usually
        if event.src_path in (CONFIG_PATH, CONFIG_LOCAL_PATH):
            reload_settings()


_observer = None


@app.on_event("startup")
async def startup_event():
    global _observer
    try:
        event_handler = ConfigEventHandler()
        _observer = Observer()
        config_dir = os.path.dirname(CONFIG_PATH)
        _observer.schedule(event_handler, config_dir, recursive=False)
        _observer.start()
        logger.info("Config watcher started on %s", config_dir)
    except OSError as e:
        logger.error("Failed to start config watcher: %s", e)
        _observer = None
    # Initial load
    settings = load_settings()
    if not settings.resolve_gateway_key():
        logger.warning("Default gateway key missing: requests without a custom provider will get 503")


@app.on_event("shutdown")
async def shutdown_event():
    global _observer

    if _observer:
        _observer.stop()
        _observer.join()
        _observer = None


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Upstream-Status"],
)


PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Max-Age": "600",
}


# Outermost middleware: CORSMiddleware would answer browser preflights with an "OK" body.
@app.middleware("http")
async def translate_preflight(request: Request, call_next):
    if request.method == "OPTIONS" and request.url.path == "/api/translate":
        headers = dict(PREFLIGHT_HEADERS)
        requested = request.headers.get("access-control-request-headers")
        if requested:
            headers["Access-Control-Allow-Headers"] = requested
        return Response(status_code=200, headers=headers)
    return await call_next(request)


app.include_router(health_router)
app.include_router(translate_router)
app.include_router(provider_router)
