"""Process configuration read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    mongodb_uri: str = "mongodb://localhost:27017"
    db_name: str = "lessonshop"
    host: str = "0.0.0.0"
    port: int = 3000
    image_dir: str = "image"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    mongo_timeout_ms: int = 5000

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            mongodb_uri=os.getenv("MONGODB_URI", cls.mongodb_uri),
            db_name=os.getenv("DB_NAME", cls.db_name),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", cls.port)),
            image_dir=os.getenv("IMAGE_DIR", cls.image_dir),
            cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            mongo_timeout_ms=int(os.getenv("MONGO_TIMEOUT_MS", cls.mongo_timeout_ms)),
        )
