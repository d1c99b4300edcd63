from __future__ import annotations

import os
from functools import lru_cache
from dotenv import load_dotenv, find_dotenv

_env_path = find_dotenv(".env") or ".env"
load_dotenv(_env_path, override=False)


def _split_csv(raw: str) -> list[str]:
    return [o.strip().rstrip("/") for o in raw.split(",") if o.strip()]


class Settings:
    """Central configuration (env driven)."""

    def __init__(self) -> None:
        # Document store
        self.mongo_uri: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_db: str = os.getenv("MONGO_DB", "keuzekompas")
        self.mongo_timeout_ms: int = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))
        # Tokens
        self.jwt_secret: str = os.getenv("JWT_SECRET", "")
        self.jwt_algorithm: str = os.getenv("JWT_ALGORITHM", "HS256")
        self.jwt_expires_in: int = int(os.getenv("JWT_EXPIRES_IN", str(60 * 60 * 24)))
        self.bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", "10"))
        # CORS
        self.allow_origins: list[str] = _split_csv(
            os.getenv(
                "ALLOW_ORIGINS",
                "http://localhost:4200,https://lu1keuzekompas.netlify.app",
            )
        )
        # App meta
        self.app_name: str = "KeuzeKompas API"
        self.env: str = os.getenv("ENV", "dev").strip().lower()
        self.debug: bool = os.getenv("DEBUG", "False").lower() == "true"
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.app_version: str = os.getenv("APP_VERSION", "dev")

    @property
    def is_production(self) -> bool:
        return self.env in ("prod", "production")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
