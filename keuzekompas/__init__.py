"""keuzekompas package initializer.

Expose the FastAPI application as ``app`` lazily so the client and scripts
can import without pulling in the server stack."""

from __future__ import annotations

__all__ = ["app"]

__version__ = "0.1.0"


def __getattr__(name: str):
    if name == "app":
        from .main import app as fastapi_app
        return fastapi_app
    raise AttributeError(f"module {__name__} has no attribute {name!r}")
