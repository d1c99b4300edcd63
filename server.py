"""Run the KeuzeKompas API with uvicorn.

Usage:
  python server.py              # ENV=dev: loopback with auto-reload
  ENV=prod PORT=8080 python server.py
"""
from __future__ import annotations

import os
from typing import Any, Dict

import uvicorn

from keuzekompas.core.config import get_settings

APP_PATH = "keuzekompas.main:app"
DEFAULT_PORT = 3000


def uvicorn_options(env: str | None = None, port: str | None = None) -> Dict[str, Any]:
    """Build uvicorn.run kwargs; dev reloads on loopback, anything else binds all interfaces."""
    settings = get_settings()
    env = (env or settings.env).strip().lower()
    dev = env == "dev"
    return {
        "host": "127.0.0.1" if dev else "0.0.0.0",
        "port": int(port or DEFAULT_PORT),
        "reload": dev,
        "log_level": settings.log_level.lower(),
        # request logs come from the app's own middleware
        "access_log": dev,
    }


if __name__ == "__main__":
    uvicorn.run(APP_PATH, **uvicorn_options(port=os.environ.get("PORT")))
